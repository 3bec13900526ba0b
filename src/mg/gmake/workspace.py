# coding=utf-8
#

"""
 Copyright (c) 2020, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Top-level GNU make file which calls makefiles of all packages.
"""

import posixpath

from mg.constants import APPNAME
from mg.gmake.makefile import makefilePath
from mg.gmake.writer import MakefileWriter

def _siblingDeps(project, package):
    # links to siblings of any kind including harness generators
    deps = []
    for cfg in package.configs:
        for name in cfg.links:
            if name in deps or name == package.name:
                continue
            if project.findPackage(name) is not None:
                deps.append(name)
    return deps

def _makeCommand(project, package, target = None):
    mkpath = makefilePath(project, package)
    dirname, filename = posixpath.split(mkpath)
    cmd = '$(MAKE) --no-print-directory -C %s' % (dirname or '.')
    if filename != 'Makefile':
        cmd += ' -f %s' % filename
    if target:
        cmd += ' ' + target
    return cmd

def generate(project):
    """
    Return text of the workspace makefile
    """

    writer = MakefileWriter()
    names = [x.name for x in project.packages]
    configNames = project.configNames

    writer.comment(
        'GNU Make workspace makefile autogenerated by %s' % APPNAME,
        "Don't edit this file! Instead edit `%s` then rerun `%s`" % \
            (project.sourceName, APPNAME),
        '',
        'Options:',
        '  CONFIG=[%s]' % '|'.join(configNames),
    )
    writer.blank()

    if configNames:
        with writer.ifndef('CONFIG'):
            writer.line('CONFIG=%s' % configNames[0])
        writer.blank()
    writer.line('export CONFIG').blank()

    writer.rule('.PHONY', ['all', 'clean'] + names).blank()
    writer.rule('all', names).blank()

    for package in project.packages:
        recipe = [
            '@echo ==== Building %s ====' % package.name,
            '@' + _makeCommand(project, package),
        ]
        writer.rule(package.name, _siblingDeps(project, package), recipe).blank()

    recipe = ['@' + _makeCommand(project, x, 'clean') for x in project.packages]
    writer.rule('clean', recipe = recipe)

    return writer.render()
