# coding=utf-8
#

"""
 Copyright (c) 2020, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 External libraries: adding of include/lib paths, link names and
 delay-load directives of third-party libraries to packages.

 The default assumptions for a library with identifier 'name' are:
 * '<libraries dir>/name' contains 'include' and 'lib' subdirectories;
 * debug import libraries and DLLs are distinguished with a 'd' suffix;
 * the library should be marked for delay-loading.
 DefaultLibDef can change some of these assumptions, CustomLibDef replaces
 all of them with a hook.
"""

from mg import log
from mg.constants import PLATFORM, DEFAULT_LIBRARIES_DIR
from mg.pyutils import maptype
from mg.utils import toList
from mg.pathutils import joinPosixPath
from mg.error import MakeGenExternLibError, MakeGenConfValueError
from mg import platforms

DEFAULT_DBG_SUFFIX = 'd'
DELAYLOAD_TEMPL = '/DELAYLOAD:%s.dll'

class ExternLibDef(object):
    """ Base class for definitions of external libraries """

class DefaultLibDef(ExternLibDef):
    """
    Library that follows the common installation template.

    'winNames'/'unixNames' are names of import libraries/DLLs or shared
    objects without extension. No names for the platform means nothing to
    link (header-only libraries).
    'dbgSuffix' overrides the default debug suffix. It can be '' to indicate
    the library has no debug build.
    'noDelayLoad' marks the library as not to be delay-loaded.
    """

    def __init__(self, winNames = None, unixNames = None, dbgSuffix = None,
                 noDelayLoad = False):
        self.winNames = list(winNames or [])
        self.unixNames = list(unixNames or [])
        self.dbgSuffix = dbgSuffix
        self.noDelayLoad = noDelayLoad

    def linkNames(self, platform):
        """ Return link names for the Platform object """
        return self.winNames if platform.windows else self.unixNames

    def debugSuffix(self, platform):
        """ Return debug suffix for the Platform object """

        # debug and release builds are binary compatible on non-windows
        # platforms, usually only one of them is installed
        if not platform.debuglibs:
            return ''
        if self.dbgSuffix is not None:
            return self.dbgSuffix
        return DEFAULT_DBG_SUFFIX

    def __repr__(self):
        return 'DefaultLibDef(win=%r, unix=%r, dbgSuffix=%r, noDelayLoad=%r)' % \
            (self.winNames, self.unixNames, self.dbgSuffix, self.noDelayLoad)

class CustomLibDef(ExternLibDef):
    """
    Library with a hook that is responsible for everything: include and
    library paths, link names and delay-loading.
    The hook is called with a BuildContext object.
    """

    def __init__(self, hook):
        self.hook = hook

    def __repr__(self):
        return 'CustomLibDef(%r)' % getattr(self.hook, '__name__', self.hook)

class BuildContext(object):
    """
    Mutable access to build settings of one package. It's given to
    hooks of custom external libraries.
    """

    def __init__(self, package, platform, librariesDir):
        self.package = package
        self.platform = platform
        self.librariesDir = librariesDir

    @property
    def windows(self):
        """ True if target platform is MS Windows """
        return self.platform.windows

    def libPath(self, libname, *parts):
        """ Return path inside the directory of the library """
        return joinPosixPath(self.librariesDir, libname, *parts)

    def configs(self, names = None):
        """
        Return package configurations with selected names or all
        configurations. Names without configurations are skipped.
        """

        if names is None:
            return list(self.package.configs)
        names = toList(names)
        return [x for x in self.package.configs if x.name in names]

    @property
    def debugConfigs(self):
        """ Configurations that use debug builds of libraries """
        return [x for x in self.package.configs if x.debugLibs]

    @property
    def releaseConfigs(self):
        """ Configurations that use release builds of libraries """
        return [x for x in self.package.configs if not x.debugLibs]

    def addIncludePaths(self, *paths):
        """ Add include paths to all configurations """
        for cfg in self.package.configs:
            cfg.incpaths.extend(paths)

    def addLibPaths(self, *paths):
        """ Add library search paths to all configurations """
        for cfg in self.package.configs:
            cfg.libpaths.extend(paths)

    def addBuildOptions(self, *options):
        """ Add compiler options to all configurations """
        for cfg in self.package.configs:
            cfg.buildoptions.extend(options)

    def addLinkOptions(self, *options, configs = None):
        """ Add linker options to selected configurations """
        if configs is None:
            configs = self.package.configs
        for cfg in configs:
            cfg.linkoptions.extend(options)

    def addLinks(self, *names, configs = None):
        """ Add link names to selected configurations """
        if configs is None:
            configs = self.package.configs
        for cfg in configs:
            cfg.links.extend(names)

    def addDelayLoad(self, dllName, configs = None):
        """
        Register delay-load directive for the DLL name (without extension)
        in selected configurations. Does nothing if the platform has no
        support for it.
        """

        if not self.platform.delayload:
            return
        self.addLinkOptions(DELAYLOAD_TEMPL % dllName, configs = configs)

def _addWxWidgets(ctx):
    # wxWidgets is incompatible with our library installation rules
    if ctx.windows:
        ctx.addIncludePaths(ctx.libPath('wxwidgets', 'include', 'msvc'),
                            ctx.libPath('wxwidgets', 'include'))
        ctx.addLibPaths(ctx.libPath('wxwidgets', 'lib', 'vc_lib'))
        ctx.addLinks('wxmsw26ud_gl', configs = ctx.debugConfigs)
        ctx.addLinks('wxmsw26u_gl', configs = ctx.releaseConfigs)
    else:
        ctx.addBuildOptions('`wx-config --cxxflags`')
        ctx.addLinkOptions('`wx-config --libs std,gl,ogl,media`')

DEFAULT_DEFS = {
    'boost'        : DefaultLibDef(unixNames = ['boost_signals']),
    'cxxtest'      : DefaultLibDef(),
    'misc'         : DefaultLibDef(),
    'dbghelp'      : DefaultLibDef(winNames = ['dbghelp'], dbgSuffix = ''),
    'devil'        : DefaultLibDef(unixNames = ['IL', 'ILU']),
    'directx'      : DefaultLibDef(winNames = ['ddraw', 'dsound'], dbgSuffix = ''),
    'libjpg'       : DefaultLibDef(winNames = ['jpeg-6b'], unixNames = ['jpeg']),
    'libpng'       : DefaultLibDef(winNames = ['libpng13'], unixNames = ['png']),
    'openal'       : DefaultLibDef(winNames = ['openal32'], unixNames = ['openal'],
                                   dbgSuffix = ''),
    'opengl'       : DefaultLibDef(winNames = ['opengl32', 'glu32', 'gdi32'],
                                   unixNames = ['GL', 'GLU', 'X11'], dbgSuffix = ''),
    'spidermonkey' : DefaultLibDef(winNames = ['js32'], unixNames = ['js']),
    'vorbis'       : DefaultLibDef(winNames = ['vorbisfile'], unixNames = ['vorbisfile'],
                                   dbgSuffix = '_d'),
    'wxwidgets'    : CustomLibDef(_addWxWidgets),
    # xerces exports variables and cannot be delay-loaded
    'xerces'       : DefaultLibDef(winNames = ['xerces-c_2'], unixNames = ['xerces-c'],
                                   noDelayLoad = True),
    'zlib'         : DefaultLibDef(winNames = ['zlib1'], unixNames = ['z']),
    'sdl'          : DefaultLibDef(unixNames = ['SDL']),
}

_LIBDEF_PARAMS = {
    'win-names'    : 'winNames',
    'unix-names'   : 'unixNames',
    'dbg-suffix'   : 'dbgSuffix',
    'no-delayload' : 'noDelayLoad',
}

def makeLibDef(libname, value):
    """
    Make ExternLibDef object from a value of project file: ExternLibDef,
    callable (custom hook) or dict with params of DefaultLibDef.
    """

    if isinstance(value, ExternLibDef):
        return value
    if callable(value):
        return CustomLibDef(value)
    if value is None:
        return DefaultLibDef()
    if not isinstance(value, maptype):
        msg = "Definition of external library %r has invalid type" % libname
        raise MakeGenConfValueError(msg)

    kwargs = {}
    for key, val in value.items():
        param = _LIBDEF_PARAMS.get(key.replace('_', '-'))
        if param is None:
            msg = "Unknown param %r in definition of external library %r" % (key, libname)
            raise MakeGenConfValueError(msg)
        if param in ('winNames', 'unixNames'):
            val = toList(val)
        elif param == 'noDelayLoad':
            val = bool(val)
        elif val is not None:
            val = str(val)
        kwargs[param] = val

    return DefaultLibDef(**kwargs)

class ExternLibResolver(object):
    """
    Applies definitions of external libraries to packages
    """

    def __init__(self, defs = None, platform = PLATFORM,
                 librariesDir = DEFAULT_LIBRARIES_DIR):

        self.defs = dict(DEFAULT_DEFS)
        if defs:
            self.defs.update(defs)
        self.platform = platforms.get(platform)
        self.librariesDir = librariesDir

    def find(self, libname):
        """ Return definition of the library or None """
        return self.defs.get(libname)

    def names(self):
        """ Return sorted identifiers of all known libraries """
        return sorted(self.defs.keys())

    def resolve(self, package, libnames):
        """
        Add external libraries to the package configurations.
        All identifiers are checked before anything is changed.
        """

        libnames = toList(libnames)
        for libname in libnames:
            if libname not in self.defs:
                raise MakeGenExternLibError(libname)

        ctx = BuildContext(package, self.platform, self.librariesDir)
        for libname in libnames:
            if libname in package.resolvedLibs:
                continue

            log.debug("Adding external library %r to package %r", libname, package.name)
            libdef = self.defs[libname]
            if isinstance(libdef, CustomLibDef):
                libdef.hook(ctx)
            else:
                self._applyDefault(ctx, libname, libdef)
            package.resolvedLibs.add(libname)

    def _applyDefault(self, ctx, libname, libdef):

        ctx.addIncludePaths(ctx.libPath(libname, 'include'))
        ctx.addLibPaths(ctx.libPath(libname, 'lib'))

        suffix = libdef.debugSuffix(self.platform)
        debugConfigs = ctx.debugConfigs
        releaseConfigs = ctx.releaseConfigs

        for name in libdef.linkNames(self.platform):
            ctx.addLinks(name + suffix, configs = debugConfigs)
            ctx.addLinks(name, configs = releaseConfigs)

            if libdef.noDelayLoad:
                continue

            if suffix:
                ctx.addDelayLoad(name + suffix, configs = debugConfigs)
                ctx.addDelayLoad(name, configs = releaseConfigs)
            else:
                # the same DLL in all configurations
                ctx.addDelayLoad(name)

def resolve(package, libnames, platform = PLATFORM, defs = None,
            librariesDir = DEFAULT_LIBRARIES_DIR):
    """
    Shortcut for ExternLibResolver(...).resolve(package, libnames)
    """

    resolver = ExternLibResolver(defs, platform, librariesDir)
    resolver.resolve(package, libnames)
