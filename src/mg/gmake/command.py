# coding=utf-8
#

"""
 Copyright (c) 2020, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Implementation of commands 'generate' and 'libs'.
"""

import os

from mg import log, platforms, toolchains
from mg.constants import CWD, PLATFORM, DEFAULT_LIBRARIES_DIR
from mg.cmd import Command
from mg.error import MakeGenError
from mg.extlibs import ExternLibResolver, CustomLibDef
from mg.pathutils import unfoldPath
from mg.project import loader
from mg.project.builder import makeProject
from mg.gmake import generator

def _selectPlatform(cliArgs):
    name = cliArgs.get('platform') or PLATFORM
    return platforms.get(name).name

def loadProject(cliArgs, platform):
    """
    Load project file selected in CLI args and make Project object
    """

    filepath = cliArgs.get('file')
    if filepath:
        filepath = unfoldPath(filepath, CWD)
        dirpath, filename = os.path.split(filepath)
    else:
        dirpath, filename = CWD, None

    conf = loader.load(dirpath, filename)
    project = makeProject(conf, platform)

    librariesDir = cliArgs.get('librariesDir')
    if librariesDir:
        project.librariesDir = librariesDir
    return project

class GenerateCommand(Command):
    """
    Generate makefiles of the project.
    It's implementation of command 'generate'.
    """

    def _run(self, cliArgs):

        platform = _selectPlatform(cliArgs)
        toolchain = cliArgs.get('toolchain')
        if toolchain and toolchain not in toolchains.getAllNames(platform):
            msg = "Toolchain %r is not supported on platform %r" % (toolchain, platform)
            raise MakeGenError(msg)

        project = loadProject(cliArgs, platform)
        log.debug("Target platform: %r, toolchain: %r", platform,
                  toolchain or toolchains.defaultName(platform))

        written = generator.generate(project, platform, toolchain,
                                     verbose = bool(cliArgs.get('verboseMake')))
        self._info("%d makefile(s) generated for project %r" % (len(written), project.name))
        return 0

class LibsCommand(Command):
    """
    Print known external libraries.
    It's implementation of command 'libs'.
    """

    def _run(self, cliArgs):

        platform = _selectPlatform(cliArgs)
        librariesDir = cliArgs.get('librariesDir') or DEFAULT_LIBRARIES_DIR
        resolver = ExternLibResolver(platform = platform, librariesDir = librariesDir)

        lines = ['External libraries for platform %r:' % platform]
        for name in resolver.names():
            libdef = resolver.find(name)
            if isinstance(libdef, CustomLibDef):
                desc = '(custom)'
            else:
                desc = ' '.join(libdef.linkNames(resolver.platform)) or '-'
            lines.append('  %-14s %s' % (name, desc))

        self._info('\n'.join(lines))
        return 0
