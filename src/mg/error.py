# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import traceback

verbose = 0

class MakeGenError(Exception):
    """Base class for all MakeGen errors"""

    def __init__(self, msg = None, ex = None):
        if msg is None:
            msg = ''
        if ex and not msg:
            msg = str(ex)
        super(MakeGenError, self).__init__(msg)

        self.msg = msg
        self.ex = ex

        fullmsg = msg
        if ex is not None:
            stack = traceback.format_exception(type(ex), ex, ex.__traceback__)
            fullmsg += '\n' + ''.join(stack)
        self.fullmsg = self.verbose_msg = fullmsg

    def __str__(self):
        return str(self.msg)

class MakeGenLogicError(MakeGenError):
    """Some logic/programming error"""

class MakeGenConfError(MakeGenError):
    """Invalid project file error"""

    def __init__(self, msg = None, ex = None, confpath = None):
        if msg is None:
            msg = ''
        if confpath and msg:
            _msg = "Error in the file %r:" % confpath
            for line in msg.splitlines():
                _msg += "\n  %s" % line
            msg = _msg
        self.confpath = confpath
        super(MakeGenConfError, self).__init__(msg, ex)

class MakeGenConfTypeError(MakeGenConfError):
    """Invalid project file param type error"""

class MakeGenConfValueError(MakeGenConfError):
    """Invalid project file param value error"""

class MakeGenPathNotFoundError(MakeGenError):
    """ Path doesn't exist """

    def __init__(self, path, msg = None):
        self.path = path
        if not msg:
            msg = "Path %r doesn't exist." % path
        super(MakeGenPathNotFoundError, self).__init__(msg)

class MakeGenExternLibError(MakeGenError):
    """ External library has no definition """

    def __init__(self, libname, msg = None):
        self.libname = libname
        if not msg:
            msg = "External library not defined: %r" % libname
        super(MakeGenExternLibError, self).__init__(msg)
