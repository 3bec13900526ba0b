# coding=utf-8
#

"""
 Copyright (c) 2020, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Project model: packages, their build configurations and files.
 Every per-configuration value is taken from an explicit Configuration
 object, there is no 'selected configuration' state.
"""

from mg.pyutils import struct, cachedprop
from mg.pathutils import toPosixPath, joinPosixPath
from mg.constants import DEBUG_LIB_CONFIGS, DEFAULT_LIBRARIES_DIR
from mg.error import MakeGenConfValueError

KIND_EXE        = 'exe'
KIND_WINEXE     = 'winexe'
KIND_DLL        = 'dll'
KIND_LIB        = 'lib'
KIND_CXXTESTGEN = 'cxxtestgen'
KIND_RUN        = 'run'

KINDS = (KIND_EXE, KIND_WINEXE, KIND_DLL, KIND_LIB, KIND_CXXTESTGEN, KIND_RUN)

KIND_ALIASES = {
    'console-executable'     : KIND_EXE,
    'windowed-executable'    : KIND_WINEXE,
    'shared-library'         : KIND_DLL,
    'static-library'         : KIND_LIB,
    'test-harness-generator' : KIND_CXXTESTGEN,
    'run-target'             : KIND_RUN,
}

KIND_TITLES = {
    KIND_EXE        : 'Console Executable',
    KIND_WINEXE     : 'Windowed Executable',
    KIND_DLL        : 'Shared Library',
    KIND_LIB        : 'Static Library',
    KIND_CXXTESTGEN : 'CxxTest Generator',
    KIND_RUN        : 'Run Target',
}

LANG_C   = 'c'
LANG_CXX = 'c++'
LANGS = (LANG_C, LANG_CXX)

FLAGS = frozenset((
    'no-symbols', 'optimize', 'optimize-size', 'optimize-speed',
    'extra-warnings', 'fatal-warnings', 'no-frame-pointer', 'no-exceptions',
    'no-rtti', 'position-independent', 'dylib', 'strip-symbols',
))

FLAG_ALIASES = {
    'optimize-balanced' : 'optimize',
    'dynamic-library'   : 'dylib',
}

CxxTestSettings = struct('CxxTestSettings', 'path, options, rootoptions, rootfile')

def defaultCxxTest():
    """ Return CxxTestSettings with default values """
    return CxxTestSettings(path = 'cxxtestgen', options = '', rootoptions = '',
                           rootfile = 'root.cpp')

def normalizeKind(kind):
    """
    Return short kind name for kind name or its alias
    """

    kind = KIND_ALIASES.get(kind, kind)
    if kind not in KINDS:
        raise MakeGenConfValueError("Unknown package kind %r" % kind)
    return kind

def normalizeFlag(flag):
    """ Return canonical name of a configuration flag """
    return FLAG_ALIASES.get(flag, flag)

class Configuration(object):
    """
    One build configuration of a package
    """

    # pylint: disable = too-many-instance-attributes

    def __init__(self, name, **kwargs):

        self.name = name
        self.bindir = toPosixPath(kwargs.get('bindir', '.'))
        self.libdir = toPosixPath(kwargs.get('libdir', '.'))
        self.objdir = toPosixPath(kwargs.get('objdir', 'obj/%s' % name))
        self.outdir = toPosixPath(kwargs.get('outdir', self.bindir))
        self.target = kwargs.get('target', '')

        self.defines = list(kwargs.get('defines', []))
        self.incpaths = list(kwargs.get('incpaths', []))
        self.libpaths = list(kwargs.get('libpaths', []))
        self.links = list(kwargs.get('links', []))
        self.buildoptions = list(kwargs.get('buildoptions', []))
        self.linkoptions = list(kwargs.get('linkoptions', []))
        self.flags = set(normalizeFlag(x) for x in kwargs.get('flags', []))

        debugLibs = kwargs.get('debugLibs')
        if debugLibs is None:
            debugLibs = name in DEBUG_LIB_CONFIGS
        self.debugLibs = debugLibs

    def hasFlag(self, flag):
        """ Return True if the flag is set """
        return normalizeFlag(flag) in self.flags

    @property
    def targetPath(self):
        """ Path of the produced artifact relative to the package dir """
        return joinPosixPath(self.outdir, self.target)

    def __repr__(self):
        return 'Configuration(%r)' % self.name

class Package(object):
    """
    Package: one makefile, one artifact per configuration
    """

    def __init__(self, name, kind, lang = LANG_CXX, path = '.', files = None,
                 configs = None, externLibs = None, cxxtest = None):

        if lang not in LANGS:
            raise MakeGenConfValueError("Package %r: unknown language %r" % (name, lang))

        self.name = name
        self.kind = normalizeKind(kind)
        self.lang = lang
        self.path = toPosixPath(path)
        self.files = list(files or [])
        self.configs = list(configs or [])
        self.externLibs = list(externLibs or [])
        self.cxxtest = cxxtest

        # identifiers of external libraries already applied to configs
        self.resolvedLibs = set()

        if not self.configs:
            raise MakeGenConfValueError("Package %r has no configurations" % name)

    def isKind(self, *kinds):
        """ Return True if package has one of the kinds """
        return self.kind in kinds

    @property
    def configNames(self):
        """ Names of all configurations in declaration order """
        return [x.name for x in self.configs]

    def getConfig(self, name):
        """
        Get configuration by name. Returns None if it's not found.
        """

        for cfg in self.configs:
            if cfg.name == name:
                return cfg
        return None

    def __repr__(self):
        return 'Package(%r, %r)' % (self.name, self.kind)

class Project(object):
    """
    All packages generated in one run
    """

    def __init__(self, name, rootdir, packages = None, sourceName = None,
                 libdefs = None, librariesDir = DEFAULT_LIBRARIES_DIR):
        self.name = name
        self.rootdir = rootdir
        self.packages = list(packages or [])
        self.sourceName = sourceName or 'mgconf.yaml'

        # project specific definitions of external libraries
        self.libdefs = dict(libdefs or {})
        self.librariesDir = librariesDir

    @cachedprop
    def _packagesByName(self):
        return { x.name: x for x in self.packages }

    def findPackage(self, name):
        """
        Find sibling package by name. Returns None if it's not found.
        """

        return self._packagesByName.get(name)

    @property
    def configNames(self):
        """ Names of configurations of the first package """
        if not self.packages:
            return []
        return self.packages[0].configNames

    def ownsPath(self, package):
        """
        Return True if the package is the only one in its directory and
        this directory is not the project root.
        """

        if package.path == '.':
            return False
        return all(x is package or x.path != package.path for x in self.packages)
