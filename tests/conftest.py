# coding=utf-8
#

# pylint: skip-file

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import pytest

from mg.project import model

def makeConfigs(names = ('Debug', 'Release'), **kwargs):
    return [model.Configuration(x, **kwargs) for x in names]

def makePackage(name, kind = 'exe', configNames = ('Debug', 'Release'),
                cfgParams = None, **kwargs):
    configs = makeConfigs(configNames, **(cfgParams or {}))
    return model.Package(name, kind, configs = configs, **kwargs)

@pytest.fixture
def unsetEnviron(monkeypatch):
    for name in ('NOCOLOR', 'MAKEGEN_ON_TTY', 'MAKEGEN_LIBRARIES_DIR'):
        monkeypatch.delenv(name, raising = False)

@pytest.fixture
def pkgFactory():
    return makePackage
