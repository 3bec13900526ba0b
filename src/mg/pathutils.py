# coding=utf-8
#

"""
 Copyright (c) 2020, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Paths in generated makefiles are always POSIX paths relative to
 some directory, so here are helpers which never touch the file system.
"""

import os
import posixpath

from mg.constants import CWD

_joinpath = os.path.join
_realpath = os.path.realpath
_isabs = os.path.isabs
_expanduser = os.path.expanduser

def unfoldPath(path, cwd = CWD):
    """
    Unfold path applying os.path.expanduser and joining 'path' with 'cwd' in
    the beginning if the 'path' is not absolute path.
    Returns real path.
    """

    if not path:
        return path

    path = _expanduser(path)
    if not _isabs(path):
        path = _joinpath(cwd, path)

    return _realpath(path)

def toPosixPath(path):
    """
    Convert native path to normalized POSIX path. Empty path is '.'
    """

    if not path:
        return '.'
    return posixpath.normpath(path.replace('\\', '/'))

def joinPosixPath(*paths):
    """
    Join and normalize POSIX paths
    """

    return toPosixPath(posixpath.join(*[toPosixPath(x) for x in paths]))

def relPosixPath(path, start = '.'):
    """
    Return POSIX 'path' relative to 'start'. Both paths must be relative to
    the same directory or both absolute. Result doesn't depend on the
    current working directory.
    """

    path = toPosixPath(path)
    start = toPosixPath(start)

    if posixpath.isabs(path) != posixpath.isabs(start):
        return path

    def _split(p):
        return [x for x in p.split('/') if x and x != '.']

    pathParts = _split(path)
    startParts = _split(start)

    common = 0
    for left, right in zip(pathParts, startParts):
        if left != right or left == '..':
            break
        common += 1

    # '..' in the rest of 'start' cannot be resolved without real paths
    if '..' in startParts[common:]:
        return path

    parts = ['..'] * (len(startParts) - common) + pathParts[common:]
    return '/'.join(parts) if parts else '.'

def getDirName(path):
    """
    Return directory of POSIX path with a trailing slash, './' for plain names
    """

    dirname = posixpath.dirname(toPosixPath(path))
    return (dirname or '.') + '/'
