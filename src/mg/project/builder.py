# coding=utf-8
#

"""
 Copyright (c) 2020, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Making of the project model from loaded project file.
"""

import os

from mg import log, platforms
from mg.autodict import AutoDict
from mg.constants import PLATFORM, DEFAULT_CONFIGS, DEFAULT_LIBRARIES_DIR
from mg.pyutils import maptype, stringtype
from mg.utils import toList
from mg.pathutils import toPosixPath
from mg.error import MakeGenConfError, MakeGenConfTypeError, MakeGenConfValueError
from mg.extlibs import makeLibDef
from mg.project import model

# project file param -> Configuration param
_LIST_PARAMS = {
    'defines'      : 'defines',
    'includes'     : 'incpaths',
    'libpaths'     : 'libpaths',
    'links'        : 'links',
    'buildoptions' : 'buildoptions',
    'linkoptions'  : 'linkoptions',
    'flags'        : 'flags',
}

_SCALAR_PARAMS = ('bindir', 'libdir', 'objdir', 'outdir', 'target', 'debug-libs')

def targetFileName(kind, basename, platform, flags = ()):
    """
    Return file name of the artifact of the package kind for
    the Platform object.
    """

    if kind in (model.KIND_EXE, model.KIND_WINEXE):
        return basename + ('.exe' if platform.windows else '')
    if kind == model.KIND_DLL:
        if platform.windows:
            return basename + '.dll'
        if platform.dylib and 'dylib' in flags:
            return 'lib%s.dylib' % basename
        return 'lib%s.so' % basename
    if kind == model.KIND_LIB:
        return 'lib%s.a' % basename
    return basename

def _defaultOutdirParam(kind, platform):
    if kind == model.KIND_LIB:
        return 'libdir'
    if kind == model.KIND_DLL and not platform.windows:
        return 'libdir'
    return 'bindir'

def _sharedDirs(rawPackages):
    """
    Return set of package dirs that are not owned by one package.
    The project root is never owned.
    """

    counts = {}
    for settings in rawPackages:
        if isinstance(settings, maptype):
            path = toPosixPath(str(settings.get('path') or '.'))
            counts[path] = counts.get(path, 0) + 1
    result = set(x for x, count in counts.items() if count > 1)
    result.add('.')
    return result

class ProjectBuilder(object):
    """
    Makes Project object from loaded project file for selected platform
    """

    def __init__(self, conf, platform = PLATFORM):
        self._conf = conf
        self._confpath = getattr(conf, '__file__', None)
        self._platform = platforms.get(platform)

    def _error(self, msg, errcls = MakeGenConfValueError):
        return errcls(msg, confpath = self._confpath)

    def _getMap(self, holder, name, where):
        value = holder.get(name)
        if value is None:
            return AutoDict()
        if not isinstance(value, maptype):
            msg = "Param %r in %s must be a dict" % (name, where)
            raise self._error(msg, MakeGenConfTypeError)
        return AutoDict(value)

    def _mergeSettings(self, result, settings, where):
        """
        Merge settings into result: lists are concatenated,
        scalars are replaced.
        """

        for name, value in settings.items():
            if name in _LIST_PARAMS:
                if value is None:
                    continue
                value = toList(value)
                if not isinstance(value, (list, tuple)):
                    msg = "Param %r in %s must be a string or a list" % (name, where)
                    raise self._error(msg, MakeGenConfTypeError)
                result.setdefault(name, []).extend(str(x) for x in value)
            elif name in _SCALAR_PARAMS:
                result[name] = value

        platformSettings = self._getMap(settings, 'platforms', where)
        for platname, values in platformSettings.items():
            if platforms.normalize(platname) != self._platform.name:
                continue
            if not isinstance(values, maptype):
                msg = "Platform %r in %s must be a dict" % (platname, where)
                raise self._error(msg, MakeGenConfTypeError)
            self._mergeSettings(result, values, '%s, platform %r' % (where, platname))

    def _makeConfig(self, name, kind, pkgName, pkgSettings, cfgSettings,
                    sharedDir = False):

        where = 'package %r' % pkgName
        settings = {}
        self._mergeSettings(settings, pkgSettings, where)
        where = 'package %r, config %r' % (pkgName, name)
        self._mergeSettings(settings, cfgSettings, where)

        kwargs = {}
        for param, attr in _LIST_PARAMS.items():
            kwargs[attr] = settings.get(param, [])
        for param in ('bindir', 'libdir', 'objdir', 'outdir'):
            if settings.get(param):
                kwargs[param] = str(settings[param])
        if 'objdir' not in kwargs and sharedDir:
            # objects of packages from one directory must not collide
            kwargs['objdir'] = 'obj/%s/%s' % (pkgName, name)
        if 'debug-libs' in settings:
            kwargs['debugLibs'] = bool(settings['debug-libs'])

        flags = set(model.normalizeFlag(x) for x in kwargs['flags'])
        basename = str(settings.get('target') or pkgName)
        kwargs['target'] = targetFileName(kind, basename, self._platform, flags)

        if 'outdir' not in kwargs:
            outdirParam = _defaultOutdirParam(kind, self._platform)
            kwargs['outdir'] = kwargs.get(outdirParam, '.')

        return model.Configuration(name, **kwargs)

    def _makeCxxTest(self, pkgName, settings):
        if not settings:
            return None

        where = 'package %r' % pkgName
        if not isinstance(settings, maptype):
            msg = "Param 'cxxtest' in %s must be a dict" % where
            raise self._error(msg, MakeGenConfTypeError)

        result = model.defaultCxxTest()
        for name in ('path', 'options', 'rootoptions', 'rootfile'):
            value = settings.get(name)
            if value is None:
                continue
            if isinstance(value, (list, tuple)):
                value = ' '.join(str(x) for x in value)
            setattr(result, name, str(value))
        return result

    def _makePackage(self, index, settings, configNames, sharedDirs = ()):

        if not isinstance(settings, maptype):
            msg = "Package #%d must be a dict" % index
            raise self._error(msg, MakeGenConfTypeError)
        settings = AutoDict(settings)

        name = settings.get('name')
        if not name or not isinstance(name, stringtype):
            raise self._error("Package #%d has no valid name" % index)

        try:
            kind = model.normalizeKind(settings.get('kind', model.KIND_EXE))
        except MakeGenConfValueError as ex:
            raise self._error("Package %r: %s" % (name, ex.msg)) from ex

        cfgSettings = self._getMap(settings, 'configs', 'package %r' % name)
        path = toPosixPath(str(settings.get('path') or '.'))
        sharedDir = path in sharedDirs
        configs = []
        for cfgName in configNames:
            configs.append(self._makeConfig(cfgName, kind, name, settings,
                                            AutoDict(cfgSettings.get(cfgName) or {}),
                                            sharedDir))

        try:
            return model.Package(
                name, kind,
                lang = settings.get('lang', model.LANG_CXX),
                path = settings.get('path', '.'),
                files = [str(x) for x in toList(settings.get('files', []))],
                configs = configs,
                externLibs = toList(settings.get('extern-libs', [])),
                cxxtest = self._makeCxxTest(name, settings.get('cxxtest')),
            )
        except MakeGenConfError as ex:
            raise self._error(ex.msg) from ex

    def build(self):
        """
        Make and return Project object
        """

        conf = AutoDict(vars(self._conf))
        rootdir = os.path.dirname(self._confpath) if self._confpath else os.getcwd()

        projectSettings = self._getMap(conf, 'project', 'project file')
        name = projectSettings.get('name') or os.path.basename(rootdir)
        configNames = projectSettings.get('configs')
        if configNames is None:
            configNames = list(DEFAULT_CONFIGS)
        configNames = toList(configNames)
        if not configNames:
            raise self._error("Project has no configurations")

        libdefs = {}
        for libname, value in self._getMap(conf, 'externlibs', 'project file').items():
            try:
                libdefs[libname] = makeLibDef(libname, value)
            except MakeGenConfError as ex:
                raise self._error(ex.msg) from ex

        rawPackages = conf.get('packages') or []
        if not isinstance(rawPackages, (list, tuple)):
            raise self._error("Param 'packages' must be a list", MakeGenConfTypeError)

        sharedDirs = _sharedDirs(rawPackages)
        packages = [self._makePackage(i, x, configNames, sharedDirs) \
                        for i, x in enumerate(rawPackages)]
        log.debug("Project %r: %d package(s), configs %r",
                  name, len(packages), configNames)

        sourceName = os.path.basename(self._confpath) if self._confpath else None
        return model.Project(
            name, rootdir, packages,
            sourceName = sourceName,
            libdefs = libdefs,
            librariesDir = conf.get('libraries-dir') or DEFAULT_LIBRARIES_DIR,
        )

def makeProject(conf, platform = PLATFORM):
    """
    Make Project object from loaded project file
    """

    return ProjectBuilder(conf, platform).build()
