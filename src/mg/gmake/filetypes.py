# coding=utf-8
#

"""
 Copyright (c) 2020, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import posixpath

from mg.pathutils import toPosixPath

ROLE_C       = 'c'
ROLE_CXX     = 'c++'
ROLE_ASM     = 'asm'      # assembly with C preprocessor
ROLE_NASM    = 'nasm'
ROLE_RC      = 'rc'
ROLE_HEADER  = 'header'
ROLE_UNKNOWN = None

_EXT_ROLES = {
    '.c'   : ROLE_C,
    '.cpp' : ROLE_CXX,
    '.cc'  : ROLE_CXX,
    '.cxx' : ROLE_CXX,
    '.c++' : ROLE_CXX,
    '.s'   : ROLE_ASM,
    '.S'   : ROLE_ASM,
    '.asm' : ROLE_NASM,
    '.rc'  : ROLE_RC,
    '.h'   : ROLE_HEADER,
}

COMPILED_ROLES = frozenset((ROLE_C, ROLE_CXX, ROLE_ASM, ROLE_NASM))

def getExt(path):
    """ Return extension of the file path including the dot """
    return posixpath.splitext(toPosixPath(path))[1]

def getBaseName(path):
    """ Return file name without directory and extension """
    return posixpath.splitext(posixpath.basename(toPosixPath(path)))[0]

def classify(path):
    """
    Return role of the file by its extension. Returns ROLE_UNKNOWN
    for files which are not used in generated makefiles.
    """

    return _EXT_ROLES.get(getExt(path), ROLE_UNKNOWN)

def isCompiled(path):
    """ Return True if the file is compiled into an object file """
    return classify(path) in COMPILED_ROLES

def objectName(path):
    """ Object file name for a compiled source """
    return getBaseName(path) + '.o'

def resourceName(path):
    """ Compiled resource file name for a windows resource """
    return getBaseName(path) + '.res'

def generatedSourceName(path):
    """ Path of the source file generated from a header by cxxtestgen """
    path = toPosixPath(path)
    return posixpath.splitext(path)[0] + '.cpp'
