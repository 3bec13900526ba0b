# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import sys
import re
from importlib import import_module as importModule
from types import ModuleType

from mg.pyutils import stringtype
from mg.error import MakeGenError

_RE_TOLIST = re.compile(r"""((?:[^\s"']|"[^"]*"|'[^']*')+)""", re.ASCII)
_RE_UNVERSIONED = re.compile(r'\d+$')

def platform():
    """
    Return current system platform. It is always 'windows' for MS Windows.
    """

    result = sys.platform
    if result == 'java':
        result = os.name # pragma: no cover
    if result.startswith('win32') or result == 'nt':
        return 'windows' # pragma: no cover
    if result.startswith('linux'):
        return 'linux'
    return _RE_UNVERSIONED.sub('', result)

def stripQuotes(val):
    """
    Strip quotes ' or " from the begin and the end of a string but do it only
    if they are the same on both sides.
    """

    if not val:
        return val

    if len(val) < 2:
        return val

    first = val[0]
    last = val[-1]
    if first == last and first in ("'", '"'):
        return val[1:-1]

    return val

def toList(val):
    """
    Converts a string argument to a list by splitting it by spaces.
    Quoted substrings with spaces are preserved.
    Returns the object if not a string
    """
    if not isinstance(val, stringtype):
        return val

    if not ('"' in val or "'" in val): # optimization
        return val.split()

    return [stripQuotes(x) for x in _RE_TOLIST.split(val)[1::2]]

def envValToBool(rawVal):
    """
    Return env val as native bool value.
    Returns False if not recognized.
    """

    result = False
    if rawVal:
        try:
            # value from os.environ is a string but it may be a digit
            result = bool(int(rawVal))
        except ValueError:
            result = rawVal in ('true', 'True', 'yes')

    return result

def _loadPyModuleWithoutImport(name, dirpath):

    # The module is compiled manually to keep it out of sys.modules

    filename = name.replace('.', os.path.sep) + '.py'
    searchPaths = [dirpath] if dirpath else sys.path
    for path in searchPaths:
        modulePath = os.path.join(path, filename)
        if os.path.isfile(modulePath):
            break
    else:
        raise ImportError('File %r not found' % filename)

    try:
        with open(modulePath, 'r', encoding = 'utf-8') as file:
            code = file.read()
    except EnvironmentError as pex:
        raise MakeGenError('Could not read the file %r' % modulePath) from pex

    module = ModuleType(name)
    module.__file__ = modulePath
    lastdotpos = name.rfind('.')
    module.__package__ = '' if lastdotpos < 0 else name[0:lastdotpos]

    # pylint: disable = exec-used
    exec(compile(code, modulePath, 'exec'), module.__dict__)
    return module

def loadPyModule(name, dirpath = None, withImport = True):
    """
    Load python module by name.
    Param 'dirpath' is optional param that is used to add/remove path into sys.path.
    Module is not imported (doesn't exist in sys.modules) if withImport is False.
    With withImport = False you should control where to store returned module object.
    """

    if not withImport:
        return _loadPyModuleWithoutImport(name, dirpath)

    if dirpath:
        sys.path.insert(0, dirpath)
        try:
            module = importModule(name)
        finally:
            sys.path.pop(0)
    else:
        module = importModule(name)
    return module
