from setuptools import setup

version = '1.0.0'
long_description = 'A restricted preprocessor for PMNS namespace files'

setup(
  name='pmcpp',
  version=version,
  description=long_description,
  packages=['pmcpp'],
  package_dir={'pmcpp': 'pmcpp'},
  python_requires='>=3.6',
  install_requires=[
    'xtermcolor>=1.0.1'
  ],
  extras_require={
    'test': ['pytest']
  },
  entry_points={
  'console_scripts': [
      'pmcpp = pmcpp.Main:Cli'
    ]
  },
  license = "GPLv2+",
  keywords = "PMNS, preprocessor, macro, include",
  classifiers=[
    "License :: OSI Approved :: GNU General Public License v2 or later (GPLv2+)",
    "Programming Language :: Python :: 3",
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Natural Language :: English",
    "Topic :: Text Processing :: Filters"
  ]
)
