# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import sys
import logging
from mg.constants import APPNAME, PLATFORM
from mg.utils import envValToBool

colorSettings = {
    'USE'    : 1,
    'BOLD'   : '\x1b[01;1m',
    'RED'    : '\x1b[01;31m',
    'GREEN'  : '\x1b[32m',
    'YELLOW' : '\x1b[33m',
    'PINK'   : '\x1b[35m',
    'BLUE'   : '\x1b[01;34m',
    'CYAN'   : '\x1b[36m',
    'GREY'   : '\x1b[37m',
    'NORMAL' : '\x1b[0m',
}

class _Colors(object):
    """
    Access to terminal color codes: colors('RED') or colors.RED.
    Returns empty strings when colors are disabled.
    """

    def __call__(self, name):
        if not colorSettings['USE']:
            return ''
        return colorSettings.get(name, '')

    def __getattr__(self, name):
        return self(name)

colors = _Colors()

class _Formatter(logging.Formatter):

    def format(self, record):
        msg = record.getMessage()
        if record.levelno == logging.DEBUG:
            msg = 'debug: %s' % msg

        c1 = getattr(record, 'c1', None)
        if c1 is None:
            if record.levelno >= logging.ERROR:
                c1 = colors.RED
            elif record.levelno >= logging.WARNING:
                c1 = colors.YELLOW
            elif record.levelno >= logging.INFO:
                c1 = colors.GREEN
            else:
                c1 = colors.PINK
        c2 = getattr(record, 'c2', colors.NORMAL)
        return '%s%s%s' % (c1, msg, c2)

class _Handler(logging.StreamHandler):
    """ Sends info and debug to stdout, everything else to stderr """

    def __init__(self):
        super().__init__(sys.stdout)

    def emit(self, record):
        # streams are looked up on each call because they can be replaced
        self.stream = sys.stdout if record.levelno <= logging.INFO else sys.stderr
        super().emit(record)

_logger = logging.getLogger(APPNAME)
if not _logger.handlers:
    _handler = _Handler()
    _handler.setFormatter(_Formatter())
    _logger.addHandler(_handler)
_logger.setLevel(logging.INFO)
_logger.propagate = False

_verbose = 0

def debug(*args, **kwargs):
    """ Log debug message, only shown with verbose mode """
    if _verbose:
        _logger.debug(*args, **kwargs)

error = _logger.error
warn  = _logger.warning
info  = _logger.info

def pprint(color, msg, **kwargs):
    """
    Print message with selected color
    """

    extra = { 'c1': colors(color) }
    extra.update(kwargs.pop('extra', {}))
    info(msg, extra = extra, **kwargs)

def enableColorsByCli(colorArg):
    """
    Set up log colors by arg from CLI
    """

    setting = {'yes' : 2, 'auto' : 1, 'no' : 0}[colorArg]
    if setting == 1:
        onTTY = os.environ.get('MAKEGEN_ON_TTY')
        if onTTY:
            onTTY = envValToBool(onTTY)
        else:
            onTTY = sys.stderr.isatty() or sys.stdout.isatty()
        if not onTTY:
            setting = 0

    if setting == 1:
        defaultTerm = 'dumb'
        if PLATFORM == 'windows' and os.name != 'java':
            defaultTerm = ''
        if os.environ.get('TERM', defaultTerm) in ('dumb', 'emacs'):
            setting = 0

    colorSettings['USE'] = setting

def verbose():
    """ Get current verbose level """
    return _verbose

def setVerbose(value):
    """ Set verbose level """

    # pylint: disable = global-statement
    global _verbose
    _verbose = value or 0
    _logger.setLevel(logging.DEBUG if _verbose else logging.INFO)

def printStep(*args, **kwargs):
    """
    Log some step in makegen command
    """

    extra = kwargs.get('extra', {})
    if 'c1' not in extra:
        extra.update({ 'c1': colors.CYAN })
        kwargs.update({'extra' : extra})
    info(*args, **kwargs)
