# coding=utf-8
#

# pylint: disable = missing-docstring, invalid-name, unused-argument

"""
 Copyright (c) 2020, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import pytest
from mg.autodict import AutoDict
from mg.error import MakeGenError, MakeGenExternLibError
from mg import log
from mg.gmake import command, generator

PROJECT_CONF = """
project:
  name: cmdtest
  configs: [Debug, Release]
packages:
  - name: tool
    files: [main.c]
    lang: c
    extern-libs: [zlib]
"""

@pytest.fixture
def projectDir(tmpdir, monkeypatch):
    monkeypatch.setitem(log.colorSettings, 'USE', 0)
    dirpath = str(tmpdir.realpath())
    tmpdir.join('mgconf.yaml').write(PROJECT_CONF)
    monkeypatch.setattr(command, 'CWD', dirpath)
    return dirpath

def _args(**kwargs):
    args = AutoDict(color = 'no', verbose = 0)
    args.update(kwargs)
    return args

def testLoadProject(projectDir):

    project = command.loadProject(_args(), 'linux')
    assert project.name == 'cmdtest'
    assert project.rootdir == projectDir
    assert project.librariesDir == '../../../libraries/'

    project = command.loadProject(_args(librariesDir = '/opt/libs'), 'linux')
    assert project.librariesDir == '/opt/libs'

    project = command.loadProject(_args(file = 'mgconf.yaml'), 'linux')
    assert project.name == 'cmdtest'

def testGenerate(projectDir, capsys):

    cmd = command.GenerateCommand()
    assert cmd.run(_args(platform = 'linux', librariesDir = '/opt/libs')) == 0

    with open(os.path.join(projectDir, 'tool.make')) as file:
        text = file.read()
    assert '-I "/opt/libs/zlib/include"' in text
    assert '-lz' in text
    assert os.path.isfile(os.path.join(projectDir, 'Makefile'))

    out = capsys.readouterr().out
    assert "2 makefile(s) generated for project 'cmdtest'" in out

def testGenerateArgs(projectDir, mocker):

    spy = mocker.spy(generator, 'generate')
    cmd = command.GenerateCommand()
    cmd.run(_args(platform = 'windows', toolchain = 'dmc', verboseMake = True))

    assert spy.call_count == 1
    args, kwargs = spy.call_args
    assert args[1:] == ('windows', 'dmc')
    assert kwargs == { 'verbose' : True }

def testGenerateUnsupportedToolchain(projectDir):

    cmd = command.GenerateCommand()
    with pytest.raises(MakeGenError):
        cmd.run(_args(platform = 'darwin', toolchain = 'dmc'))
    assert not os.path.exists(os.path.join(projectDir, 'Makefile'))

def testGenerateUndefinedLibrary(tmpdir, projectDir):

    tmpdir.join('mgconf.yaml').write(PROJECT_CONF.replace('[zlib]', '[zlib, zzz]'))
    cmd = command.GenerateCommand()
    with pytest.raises(MakeGenExternLibError):
        cmd.run(_args(platform = 'linux'))
    assert not os.path.exists(os.path.join(projectDir, 'tool.make'))

def testLibs(capsys, monkeypatch):

    monkeypatch.setitem(log.colorSettings, 'USE', 0)
    cmd = command.LibsCommand()
    assert cmd.run(_args(platform = 'linux')) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "External libraries for platform 'linux':"
    entries = dict(line.split(None, 1) for line in lines[1:])
    assert entries['zlib'] == 'z'
    assert entries['vorbis'] == 'vorbisfile'
    assert entries['cxxtest'] == '-'
    assert entries['wxwidgets'] == '(custom)'
