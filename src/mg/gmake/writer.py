# coding=utf-8
#

"""
 Copyright (c) 2020, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Builder of GNU make files. Sections are accumulated and rendered once,
 so the same sections always give the same text.
"""

from contextlib import contextmanager

from mg.error import MakeGenLogicError

INDENT = '  '

class _Lines(object):
    __slots__ = ('items',)

    def __init__(self, items):
        self.items = items

    def lines(self, indent):
        return [indent + x if x else x for x in self.items]

class _Variable(object):
    __slots__ = ('name', 'op', 'words')

    def __init__(self, name, op, words):
        self.name = name
        self.op = op
        self.words = words

    def lines(self, indent):
        words = [x for x in self.words if x]
        text = '%s%s %s' % (indent, self.name, self.op)
        if words:
            text += ' ' + ' '.join(words)
        return [text]

class _ListVariable(object):
    __slots__ = ('name', 'items')

    def __init__(self, name, items):
        self.name = name
        self.items = items

    def lines(self, indent):
        result = ['%s%s := \\' % (indent, self.name)]
        result.extend('\t%s \\' % x for x in self.items)
        # empty line closes the continuation of the last item
        result.append('')
        return result

class _Conditional(object):
    __slots__ = ('header', 'body', 'elseBody')

    def __init__(self, header):
        self.header = header
        self.body = []
        self.elseBody = None

    def lines(self, indent):
        result = [indent + self.header]
        subindent = indent + INDENT
        for section in self.body:
            result.extend(section.lines(subindent))
        if self.elseBody is not None:
            result.append(indent + 'else')
            for section in self.elseBody:
                result.extend(section.lines(subindent))
        result.append(indent + 'endif')
        return result

class _Rule(object):
    __slots__ = ('targets', 'prereqs', 'recipe')

    def __init__(self, targets, prereqs, recipe):
        self.targets = targets
        self.prereqs = prereqs
        self.recipe = recipe

    def lines(self, indent):
        head = '%s%s:' % (indent, ' '.join(self.targets))
        if self.prereqs:
            head += ' ' + ' '.join(self.prereqs)
        return [head] + ['\t' + x for x in self.recipe]

class MakefileWriter(object):
    """
    Accumulates sections of a makefile
    """

    def __init__(self):
        self._sections = []
        self._target = self._sections
        self._openConds = []

    def _add(self, section):
        self._target.append(section)
        return self

    def comment(self, *lines):
        """ Add comment lines """
        return self._add(_Lines(['# ' + x if x else '#' for x in lines]))

    def blank(self):
        """ Add empty line """
        return self._add(_Lines(['']))

    def line(self, *lines):
        """ Add raw lines """
        return self._add(_Lines(list(lines)))

    def variable(self, name, *words, op = ':='):
        """ Add variable assignment. Empty words are skipped """
        return self._add(_Variable(name, op, list(words)))

    def listVariable(self, name, items):
        """ Add variable with one item per line """
        return self._add(_ListVariable(name, list(items)))

    def rule(self, targets, prereqs = None, recipe = None):
        """ Add explicit rule. Param 'targets' can be a string or a list """
        if isinstance(targets, str):
            targets = [targets]
        return self._add(_Rule(list(targets), list(prereqs or []), list(recipe or [])))

    @contextmanager
    def conditional(self, header):
        """
        Add conditional block. Sections added inside the 'with' statement
        go into the block.
        """

        cond = _Conditional(header)
        self._add(cond)
        self._openConds.append((cond, self._target))
        self._target = cond.body
        try:
            yield cond
        finally:
            cond, self._target = self._openConds.pop()

    def ifeq(self, left, right):
        """ Shortcut for conditional('ifeq (left,right)') """
        return self.conditional('ifeq (%s,%s)' % (left, right))

    def ifndef(self, name):
        """ Shortcut for conditional('ifndef name') """
        return self.conditional('ifndef %s' % name)

    def orElse(self):
        """ Switch current conditional block to its 'else' branch """

        if not self._openConds:
            raise MakeGenLogicError("'else' outside of conditional block")
        cond = self._openConds[-1][0]
        if cond.elseBody is not None:
            raise MakeGenLogicError("Conditional block already has 'else'")
        cond.elseBody = []
        self._target = cond.elseBody
        return self

    def render(self):
        """ Return text of the makefile """

        if self._openConds:
            raise MakeGenLogicError("Conditional block is not closed")

        lines = []
        for section in self._sections:
            lines.extend(section.lines(''))
        return '\n'.join(lines) + '\n'
