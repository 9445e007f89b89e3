#!/usr/bin/env python
# -*- coding: utf-8 -*-
#------------------------------------------------------------------------------
# file: $Id$
# date: 2026/10/18
# copy: (C) Copyright 2026 Cadit Inc., see LICENSE.txt
#------------------------------------------------------------------------------

import os, sys
from setuptools import setup, find_packages

# require python 3.8+
if sys.hexversion < 0x03080000:
  raise RuntimeError('This package requires python 3.8 or better')

heredir = os.path.abspath(os.path.dirname(__file__))
def read(*parts):
  try:
    with open(os.path.join(heredir, *parts)) as fp:
      return fp.read()
  except IOError:
    return ''

test_dependencies = [
  'pytest               >= 7.0',
  'coverage             >= 5.0',
  'WebTest              >= 3.0.0',
  ]

dependencies = [
  'pyramid              >= 2.0',
  ]

entrypoints = {
  }

classifiers = [
  'Development Status :: 4 - Beta',
  'Intended Audience :: Developers',
  'Programming Language :: Python',
  'Programming Language :: Python :: 3',
  'Framework :: Pyramid',
  'Environment :: Web Environment',
  'Operating System :: OS Independent',
  'Topic :: Internet',
  'Topic :: Software Development',
  'Topic :: Internet :: WWW/HTTP',
  'Topic :: Internet :: WWW/HTTP :: WSGI',
  'Topic :: Software Development :: Libraries :: Application Frameworks',
  'Natural Language :: English',
  'License :: OSI Approved :: MIT License',
  ]

setup(
  name                  = 'pyramid_actions',
  version               = '0.1.0',
  description           = 'A pyramid plugin that turns methods of request-scoped controllers into views.',
  long_description      = read('README.rst'),
  classifiers           = classifiers,
  author                = 'Cadit Health Inc',
  author_email          = 'oss@cadit.com',
  keywords              = 'web wsgi pyramid controller action handler request-scoped',
  packages              = find_packages(),
  platforms             = ['any'],
  include_package_data  = True,
  zip_safe              = True,
  python_requires       = '>=3.8',
  install_requires      = dependencies,
  extras_require        = {'test': test_dependencies},
  entry_points          = entrypoints,
  license               = 'MIT (http://opensource.org/licenses/MIT)',
  )

#------------------------------------------------------------------------------
# end of $Id$
#------------------------------------------------------------------------------
