"""This is the setup file"""

from setuptools import setup, find_packages

with open('README.md', 'r') as r:
    long_description = r.read()

setup(name='opendrive',
      version='0.1.0',
      install_requires=[
          'attrs>=20.1',
          'numpy',
      ],
      extras_require={
        'test': ['pytest'],
      },
      python_requires='>=3.9',
      packages=find_packages('src'),
      package_dir={'': 'src'},

      description='Reading and writing ASAM OpenDRIVE 1.7 road networks.',
      long_description=long_description,
      long_description_content_type='text/markdown',

      classifiers=[
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Operating System :: OS Independent',
        'Development Status :: 3 - Alpha',
      ]
)
