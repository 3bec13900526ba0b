# coding=utf-8
#

# pylint: disable = missing-docstring, invalid-name

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import sys
import pytest
from mg import utils

def testPlatform(monkeypatch):

    monkeypatch.setattr(sys, 'platform', 'linux2')
    assert utils.platform() == 'linux'
    monkeypatch.setattr(sys, 'platform', 'freebsd12')
    assert utils.platform() == 'freebsd'
    monkeypatch.setattr(sys, 'platform', 'darwin')
    assert utils.platform() == 'darwin'

def testStripQuotes():

    assert utils.stripQuotes('') == ''
    assert utils.stripQuotes('"') == '"'
    assert utils.stripQuotes('"abc"') == 'abc'
    assert utils.stripQuotes("'abc'") == 'abc'
    assert utils.stripQuotes('"abc\'') == '"abc\''
    assert utils.stripQuotes('abc') == 'abc'

def testToList():

    assert utils.toList('') == list()
    assert utils.toList('abc') == ['abc']
    assert utils.toList('a1 a2   b1 b2') == ['a1', 'a2', 'b1', 'b2']
    assert utils.toList(['a1', 'a2', 'b1']) == ['a1', 'a2', 'b1']

    assert utils.toList('a1 "a2"   b1 b2') == ['a1', 'a2', 'b1', 'b2']

    src = """   aa bb 'cc 111 ccc ' " aaa 'bb'"  dd   val1=" A1 " val2='A2'"""
    assert utils.toList(src) == \
        ['aa', 'bb', 'cc 111 ccc ', " aaa 'bb'", 'dd', 'val1=" A1 "', "val2='A2'"]

def testEnvValToBool():

    for val in ('true', 'True', 'yes', '1', '12'):
        assert utils.envValToBool(val), val
    for val in ('', None, 'false', 'no', '0', 'on', 'qwerty'):
        assert not utils.envValToBool(val), val

def testLoadPyModule(tmpdir):

    dirpath = str(tmpdir.realpath())
    tmpdir.join('mgtestmod.py').write('value = 42\n')

    module = utils.loadPyModule('mgtestmod', dirpath, withImport = False)
    assert module.value == 42
    assert module.__file__ == os.path.join(dirpath, 'mgtestmod.py')
    assert 'mgtestmod' not in sys.modules

    with pytest.raises(ImportError):
        utils.loadPyModule('mgtestnomod', dirpath, withImport = False)

    module = utils.loadPyModule('mg.constants')
    assert module.APPNAME == 'makegen'
