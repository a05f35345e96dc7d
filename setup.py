#!/usr/bin/env python

from setuptools import setup

setup(name='chordfinder',
      version='1.0',
      description='Music theory inference for a chord sample browser: chord recognition from notes, and chord symbols, filenames and folders from taxonomy selections',
      install_requires=['numpy'],
      extras_require={
        'test': [ 'pytest' ]
      },
      packages=['chordfinder', 'chordfinder.config'],
      package_dir = {'chordfinder': 'src',
                     'chordfinder.config': 'src/config'}
     )
