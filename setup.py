from setuptools import setup, find_packages

setup(
      name        = 'folds',
      version     = '1.0.0',
      description = 'Stack-safe left and right folds, and the algorithms derived from them.',
      author      = 'Jesse',
      license     = 'MIT',
      packages    = find_packages(exclude=["*.tests", "*.tests.*", "tests.*", "tests"]),
      python_requires = '>=3.8',
      install_requires = [
          'toolz >= 0.12',
          'marshmallow >= 3.19',
          'configargparse >= 1.5',
          'pystache >= 0.6'
      ],
      extras_require = {
          'test': ['pytest >= 7'],
          'typecheck': ['mypy >= 1.0']
      },
      entry_points = {
          'console_scripts': ['folds = folds.app:main']
      }
)
