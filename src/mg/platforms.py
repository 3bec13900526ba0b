# coding=utf-8
#

"""
 Copyright (c) 2020, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Traits of target platforms which have effect on generated makefiles.
"""

from mg.pyutils import struct
from mg.error import MakeGenError
from mg.constants import PLATFORM

# 'windows'     - PE binaries, resources (.rc) and DLL naming
# 'delayload'   - linker supports /DELAYLOAD directives
# 'debuglibs'   - debug and release libraries are not binary compatible
# 'linkgroups'  - linker needs --start-group/--end-group for unordered libs
# 'appbundle'   - windowed executables are laid out as application bundles
# 'dylib'       - shared libraries can be built as '.dylib'
Platform = struct('Platform',
                  'name, windows, delayload, debuglibs, linkgroups, appbundle, dylib')

def _unix(name):
    return Platform(name, windows = False, delayload = False, debuglibs = False,
                    linkgroups = True, appbundle = False, dylib = False)

_platforms = {
    'windows' : Platform('windows', windows = True, delayload = True,
                         debuglibs = True, linkgroups = True,
                         appbundle = False, dylib = False),
    'darwin'  : Platform('darwin', windows = False, delayload = False,
                         debuglibs = False, linkgroups = False,
                         appbundle = True, dylib = True),
}
for _name in ('linux', 'freebsd', 'openbsd', 'netbsd', 'sunos', 'cygwin', 'msys'):
    _platforms[_name] = _unix(_name)

_aliases = {
    'win32'  : 'windows',
    'macosx' : 'darwin',
    'macos'  : 'darwin',
    'bsd'    : 'freebsd',
}

def knownNames():
    """
    Return names of all known platforms.
    """

    return tuple(sorted(_platforms.keys()))

def normalize(name):
    """
    Return canonical platform name for alias or name.
    """

    return _aliases.get(name, name)

def get(name = PLATFORM):
    """
    Get Platform object by name. Raises MakeGenError for unknown platform.
    """

    name = normalize(name)
    try:
        return _platforms[name]
    except KeyError:
        raise MakeGenError("Platform %r is not supported" % name) from None
