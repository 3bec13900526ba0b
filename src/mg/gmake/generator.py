# coding=utf-8
#

"""
 Copyright (c) 2020, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import io

from mg import log
from mg.constants import PLATFORM, WORKSPACE_MAKEFILE
from mg.extlibs import ExternLibResolver
from mg.gmake import makefile, workspace

def _writeFile(path, text):
    dirname = os.path.dirname(path)
    if dirname and not os.path.isdir(dirname):
        os.makedirs(dirname)
    with io.open(path, 'w', encoding = 'utf-8', newline = '\n') as file:
        file.write(text)

def resolveExternLibs(project, platform = PLATFORM, resolver = None):
    """
    Apply external libraries to all packages of the project.
    Nothing is written here so any undefined library stops generation
    before the first file is opened.
    """

    if resolver is None:
        resolver = ExternLibResolver(project.libdefs, platform, project.librariesDir)
    for package in project.packages:
        resolver.resolve(package, package.externLibs)

def generate(project, platform = PLATFORM, toolchain = None,
             verbose = False, resolver = None):
    """
    Generate makefiles of all packages and the workspace makefile.
    Returns list of written paths.
    """

    resolveExternLibs(project, platform, resolver)

    written = []
    for package in project.packages:
        relpath = makefile.makefilePath(project, package)
        path = os.path.join(project.rootdir, *relpath.split('/'))
        log.printStep("Generating %s", relpath)
        text = makefile.generate(project, package, platform, toolchain, verbose)
        _writeFile(path, text)
        written.append(path)

    path = os.path.join(project.rootdir, WORKSPACE_MAKEFILE)
    log.printStep("Generating %s", WORKSPACE_MAKEFILE)
    _writeFile(path, workspace.generate(project))
    written.append(path)

    log.debug("Written files: %r", written)
    return written
