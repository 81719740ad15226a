from setuptools import setup, find_packages

setup(name='cdprkit',
      version='1.0.0',
      description='Orientation kinematics for cable-driven parallel robots',
      packages=find_packages(include=['cdprkit', 'cdprkit.*']),
      python_requires='>=3.10',
      install_requires=['numpy'],
      extras_require={'test': ['pytest', 'scipy']})
