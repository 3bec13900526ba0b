# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import itertools

from mg.error import MakeGenError
from mg.autodict import AutoDict as _AutoDict
from mg.pyutils import maptype, struct
from mg.constants import PLATFORM
from mg import platforms

# 'family'   - 'gnu' for gcc compatible drivers
# 'depgen'   - compiler can generate dependency files with -MD
# 'shared'   - driver needs -shared to link shared libraries
Toolchain = struct('Toolchain', 'name, family, depgen, shared')

_toolchains = {
    'gcc'   : Toolchain('gcc', family = 'gnu', depgen = True, shared = True),
    'clang' : Toolchain('clang', family = 'gnu', depgen = True, shared = True),
    'dmc'   : Toolchain('dmc', family = 'dmc', depgen = False, shared = False),
}

# Table with language toolchains
_langTable = {}

# private cache
_cache = _AutoDict()

def reset():
    """
    Reset all cached values
    """

    _cache.clear()

def regToolchains(lang, table):
    """
    Register table of toolchains for selected lang.
    """

    _langTable[lang] = table
    reset()

def knownLangs():
    """
    Return all langs of registered toolchains.
    """

    return _langTable.keys()

def getNames(lang, platform = PLATFORM):
    """
    Return toolchains tuple for selected language for selected platform.
    The first one is the default toolchain.
    """

    if not lang or lang not in _langTable:
        raise MakeGenError("Toolchain for language '%s' is not supported" % lang)

    cache = _cache[platform][lang]
    toolchains = cache.get('toolchains')
    if toolchains:
        return toolchains

    table = _langTable[lang]
    if table is None or not isinstance(table, maptype):
        raise NotImplementedError()

    if platform == 'all':
        toolchains = tuple(set(itertools.chain(*table.values())))
    else:
        _platform = platforms.normalize(platform)
        toolchains = tuple(table.get(_platform, table['default']))

    cache['toolchains'] = toolchains
    return toolchains

def getAllNames(platform = PLATFORM):
    """
    Return tuple of unique names of toolchains supported on the platform
    """

    cache = _cache[platform]
    toolchains = cache.get('all-toolchains')
    if toolchains:
        return toolchains

    toolchains = [ t for l in _langTable for t in getNames(l, platform) ]
    toolchains = tuple(sorted(set(toolchains)))
    cache['all-toolchains'] = toolchains
    return toolchains

def defaultName(platform = PLATFORM):
    """
    Return name of default toolchain for C/C++ on the platform
    """

    return getNames('c++', platform)[0]

def get(name):
    """
    Get Toolchain object by name. Raises MakeGenError for unknown toolchain.
    """

    try:
        return _toolchains[name]
    except KeyError:
        raise MakeGenError("Toolchain %r is not supported" % name) from None

_CC_TABLE = {
    'windows' : ['gcc', 'clang', 'dmc'],
    'darwin'  : ['clang', 'gcc'],
    'default' : ['gcc', 'clang'],
}

regToolchains('c', _CC_TABLE)
regToolchains('c++', _CC_TABLE)
