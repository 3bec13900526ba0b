# coding=utf-8
#

# pylint: disable = missing-docstring, invalid-name

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import pytest
from mg import log

@pytest.fixture
def colorsOff(monkeypatch):
    monkeypatch.setitem(log.colorSettings, 'USE', 0)
    yield
    log.setVerbose(0)

def testColors(monkeypatch):

    monkeypatch.setitem(log.colorSettings, 'USE', 1)
    assert log.colors('RED') == log.colorSettings['RED']
    assert log.colors.CYAN == log.colorSettings['CYAN']
    assert log.colors('UNKNOWN') == ''

    monkeypatch.setitem(log.colorSettings, 'USE', 0)
    assert log.colors('RED') == ''
    assert log.colors.CYAN == ''
    assert not log.colorSettings['USE']

def testEnableColorsByCli(monkeypatch):

    monkeypatch.setitem(log.colorSettings, 'USE', 1)

    log.enableColorsByCli('no')
    assert not log.colorSettings['USE']
    log.enableColorsByCli('yes')
    assert log.colorSettings['USE']

    monkeypatch.setenv('MAKEGEN_ON_TTY', 'no')
    log.enableColorsByCli('auto')
    assert not log.colorSettings['USE']

    monkeypatch.setenv('MAKEGEN_ON_TTY', 'yes')
    monkeypatch.setenv('TERM', 'xterm')
    log.enableColorsByCli('auto')
    assert log.colorSettings['USE']

    monkeypatch.setenv('TERM', 'dumb')
    log.enableColorsByCli('auto')
    assert not log.colorSettings['USE']

def testStreams(colorsOff, capsys):

    log.info('info message')
    log.warn('warn message')
    log.error('error message')
    out, err = capsys.readouterr()
    assert out == 'info message\n'
    assert err == 'warn message\nerror message\n'

def testVerbose(colorsOff, capsys):

    log.setVerbose(0)
    assert log.verbose() == 0
    log.debug('hidden')
    assert capsys.readouterr().out == ''

    log.setVerbose(1)
    assert log.verbose() == 1
    log.debug('value is %d', 12)
    assert capsys.readouterr().out == 'debug: value is 12\n'

def testPrintStep(monkeypatch, capsys):

    monkeypatch.setitem(log.colorSettings, 'USE', 1)
    log.printStep('Generating %s', 'Makefile')
    out = capsys.readouterr().out
    expected = '%sGenerating Makefile%s\n' % (log.colorSettings['CYAN'],
                                              log.colorSettings['NORMAL'])
    assert out == expected

    log.pprint('RED', 'alarm')
    out = capsys.readouterr().out
    assert out.startswith(log.colorSettings['RED'] + 'alarm')
