# coding=utf-8
#

# pylint: disable = missing-docstring, invalid-name

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
from mg.constants import CWD
from mg import pathutils

def testUnfoldPath():

    # it should be always absolute path
    cwd = os.getcwd()

    abspath = os.path.realpath(os.path.abspath('something'))
    relpath = os.path.join('a', 'b', 'c')
    assert pathutils.unfoldPath(relpath, cwd) == os.path.realpath(os.path.join(cwd, relpath))
    assert pathutils.unfoldPath(abspath, cwd) == abspath
    assert pathutils.unfoldPath('') == ''
    assert pathutils.unfoldPath('x') == os.path.realpath(os.path.join(CWD, 'x'))

def testToPosixPath():

    assert pathutils.toPosixPath('') == '.'
    assert pathutils.toPosixPath(None) == '.'
    assert pathutils.toPosixPath('a\\b\\c') == 'a/b/c'
    assert pathutils.toPosixPath('a/./b/../c/') == 'a/c'

def testJoinPosixPath():

    assert pathutils.joinPosixPath('a', 'b') == 'a/b'
    assert pathutils.joinPosixPath('.', 'b') == 'b'
    assert pathutils.joinPosixPath('a', '../b') == 'b'
    assert pathutils.joinPosixPath('../../libs/', 'zlib', 'include') == \
                                                    '../../libs/zlib/include'

def testRelPosixPath():

    assert pathutils.relPosixPath('a/b', 'a') == 'b'
    assert pathutils.relPosixPath('lib/libengine.a', 'game') == '../lib/libengine.a'
    assert pathutils.relPosixPath('engine/lib/x.a', 'game/sub') == '../../engine/lib/x.a'
    assert pathutils.relPosixPath('a', 'a') == '.'
    assert pathutils.relPosixPath('a', '.') == 'a'
    assert pathutils.relPosixPath('../out/x', '.') == '../out/x'
    assert pathutils.relPosixPath('/abs/x', 'rel') == '/abs/x'
    assert pathutils.relPosixPath('/abs/x', '/abs/y') == '../x'

def testGetDirName():

    assert pathutils.getDirName('a.asm') == './'
    assert pathutils.getDirName('x86/a.asm') == 'x86/'
    assert pathutils.getDirName('x86\\sse\\a.asm') == 'x86/sse/'
