# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import sys
if sys.hexversion < 0x3050000:
    raise ImportError('Python >= 3.5 is required')

#pylint: disable=wrong-import-position
from mg.constants import CWD
from mg import utils

_commands = {
    'generate' : 'mg.gmake.command:GenerateCommand',
    'libs'     : 'mg.gmake.command:LibsCommand',
    'version'  : 'mg.version:Command',
}

def handleCLI(args, noProjectConf, options):
    """
    Handle CLI and return command object
    """
    from mg import cli

    defaults = options if options else {}
    cmd = cli.parseAll(args, noProjectConf, defaults)
    cli.selected = cmd
    return cmd

def runCmd(cmd):
    """
    Run selected command
    """

    if cmd.name not in _commands:
        raise NotImplementedError('Unknown command')

    moduleName, className = _commands[cmd.name].split(':')
    module = utils.loadPyModule(moduleName, withImport = True)
    return getattr(module, className)().run(cmd.args)

def run(args = None):
    """
    Run MakeGen with command line args. Returns exit code.
    """

    from mg import log, error
    from mg.project.loader import findConfFile

    if args is None:
        args = sys.argv

    cmd = None
    try:
        noProjectConf = findConfFile(CWD) is None
        cmd = handleCLI(args, noProjectConf, None)

        verbose = cmd.args.get('verbose') or 0
        error.verbose = verbose
        log.setVerbose(verbose)

        return runCmd(cmd)

    except error.MakeGenError as ex:
        verbose = 0
        if cmd:
            verbose = cmd.args.get('verbose') or 0
        if verbose > 1:
            log.pprint('RED', ex.fullmsg)
        log.error(ex.msg)
        sys.exit(1)
    except KeyboardInterrupt:
        log.pprint('RED', 'Interrupted')
        sys.exit(68)

def main():
    """ Entry point of the console script """
    sys.exit(run())
