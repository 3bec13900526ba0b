# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

__all__ = [
    'findConfFile',
    'load',
]

import os
import sys

from mg import log
from mg.constants import PROJECTCONF_FILENAMES
from mg.error import MakeGenPathNotFoundError
from mg.utils import loadPyModule
from mg.project import yaml as yamlconf

isfile = os.path.isfile
joinpath = os.path.join

def findConfFile(dpath, fname = None):
    """
    Try to find project file.
    Returns filename if found or None
    """
    if fname:
        if isfile(joinpath(dpath, fname)):
            return fname
        return None

    for name in PROJECTCONF_FILENAMES:
        if isfile(joinpath(dpath, name)):
            return name
    return None

def load(dirpath, filename = None):
    """
    Load project file as a module object.
    Param 'filename' is optional, the file is searched in 'dirpath'
    by known names if it's not set.
    """

    found = findConfFile(dirpath, filename)
    if not found:
        path = joinpath(dirpath, filename) if filename else dirpath
        msg = "Project file not found in %r" % path
        if filename:
            msg = "Project file %r not found" % path
        raise MakeGenPathNotFoundError(path, msg)

    filepath = joinpath(dirpath, found)
    log.debug("Loading project file %r", filepath)

    if found.endswith('.py'):
        # Avoid writing .pyc files
        dontWriteBytecode = sys.dont_write_bytecode
        sys.dont_write_bytecode = True
        try:
            module = loadPyModule(found[:-3], dirpath = dirpath, withImport = False)
        finally:
            sys.dont_write_bytecode = dontWriteBytecode
    else:
        module = yamlconf.load(filepath)

    return module
