# coding=utf-8
#

# pylint: disable = missing-docstring, invalid-name

"""
 Copyright (c) 2020, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import pytest
from mg.error import MakeGenLogicError
from mg.gmake.writer import MakefileWriter

def testVariables():

    writer = MakefileWriter()
    writer.variable('CFLAGS', '$(CPPFLAGS)', '', '-g', op = '+=')
    writer.variable('LDDEPS')
    writer.listVariable('OBJECTS', ['$(OBJDIR)/a.o', '$(OBJDIR)/b.o'])

    assert writer.render() == (
        'CFLAGS += $(CPPFLAGS) -g\n'
        'LDDEPS :=\n'
        'OBJECTS := \\\n'
        '\t$(OBJDIR)/a.o \\\n'
        '\t$(OBJDIR)/b.o \\\n'
        '\n'
    )

def testConditionals():

    writer = MakefileWriter()
    with writer.ifndef('CONFIG'):
        writer.line('CONFIG=Debug')
    with writer.ifeq('', '$(CMD)'):
        writer.variable('A', '1')
        with writer.ifeq('$(X)', 'y'):
            writer.variable('B', '2')
        writer.orElse()
        writer.variable('A', '2')

    assert writer.render() == (
        'ifndef CONFIG\n'
        '  CONFIG=Debug\n'
        'endif\n'
        'ifeq (,$(CMD))\n'
        '  A := 1\n'
        '  ifeq ($(X),y)\n'
        '    B := 2\n'
        '  endif\n'
        'else\n'
        '  A := 2\n'
        'endif\n'
    )

def testRules():

    writer = MakefileWriter()
    writer.comment('Header', '', 'Options:').blank()
    writer.rule('.PHONY', ['clean'])
    writer.rule('clean', recipe = ['@echo Cleaning', '-@rm -rf obj'])
    writer.rule(['a', 'b'], ['c'])

    assert writer.render() == (
        '# Header\n'
        '#\n'
        '# Options:\n'
        '\n'
        '.PHONY: clean\n'
        'clean:\n'
        '\t@echo Cleaning\n'
        '\t-@rm -rf obj\n'
        'a b: c\n'
    )

def testRenderIsRepeatable():

    writer = MakefileWriter()
    writer.variable('A', 'x')
    assert writer.render() == writer.render()

def testErrors():

    writer = MakefileWriter()
    with pytest.raises(MakeGenLogicError):
        writer.orElse()

    with writer.ifeq('a', 'b'):
        writer.orElse()
        with pytest.raises(MakeGenLogicError):
            writer.orElse()
