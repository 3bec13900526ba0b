# coding=utf-8
#

"""
 Copyright (c) 2019 Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import sys
from mg import utils

APPNAME = 'makegen'
CAP_APPNAME = 'MakeGen'
AUTHOR = 'Alexander Magola'

PYTHON_EXE = sys.executable if sys.executable else 'python3'

PROJECTCONF_NAME = 'mgconf'
PROJECTCONF_EXTS = ['.py', '.yaml', '.yml']
PROJECTCONF_FILENAMES = ['%s%s' % (PROJECTCONF_NAME, x) for x in PROJECTCONF_EXTS]

WORKSPACE_MAKEFILE = 'Makefile'
PACKAGE_MAKEFILE_EXT = '.make'

DEFAULT_CONFIGS = ('Debug', 'Release')
DEBUG_LIB_CONFIGS = frozenset(('Debug', 'Testing'))

DEFAULT_LIBRARIES_DIR = '../../../libraries/'

CWD = os.getcwd()
PLATFORM = utils.platform()
