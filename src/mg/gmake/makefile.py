# coding=utf-8
#

"""
 Copyright (c) 2020, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 GNU make file of one package.

 Rules are written for each source file explicitly instead of pattern
 rules. It doesn't need VPATH, it's easier to test and it allows
 per-file settings.
"""

import posixpath

from mg import platforms, toolchains
from mg.constants import APPNAME, PLATFORM, PACKAGE_MAKEFILE_EXT
from mg.pathutils import getDirName
from mg.project import model
from mg.project.model import (
    KIND_DLL, KIND_LIB, KIND_WINEXE, KIND_CXXTESTGEN, KIND_RUN, LANG_C
)
from mg.gmake import filetypes as ft
from mg.gmake.siblings import SiblingResolver
from mg.gmake.writer import MakefileWriter

OUTDIRS = ('BINDIR', 'LIBDIR', 'OUTDIR', 'OBJDIR')

_NASM_FORMATS = {
    'windows' : 'win32',
    'darwin'  : 'macho',
}

def makefilePath(project, package):
    """
    Return path of package makefile relative to the project root.
    Package owning its directory gets 'Makefile', other packages get
    '<name>.make'.
    """

    if project.ownsPath(package):
        filename = 'Makefile'
    else:
        filename = package.name + PACKAGE_MAKEFILE_EXT
    return posixpath.join(package.path, filename) if package.path != '.' else filename

class PackageMakefile(object):
    """
    Generator of makefile for one package
    """

    def __init__(self, project, package, platform = PLATFORM,
                 toolchain = None, verbose = False):

        self._project = project
        self._package = package
        self._platform = platforms.get(platform)
        if toolchain is None:
            toolchain = toolchains.defaultName(self._platform.name)
        self._toolchain = toolchains.get(toolchain)
        self._verbose = verbose
        self._prefix = '' if verbose else '@'

        # windowed executable as an application bundle
        self._bundle = self._platform.appbundle and package.kind == KIND_WINEXE

    @property
    def _gnu(self):
        return self._toolchain.family == 'gnu'

    def generate(self):
        """
        Return text of the makefile
        """

        pkg = self._package
        writer = MakefileWriter()

        self._writeHeader(writer)
        for cfg in pkg.configs:
            self._writeConfig(writer, cfg)
        self._writeObjects(writer)
        self._writeDirHelpers(writer)
        writer.line('.PHONY: clean').blank()
        self._writeMainTarget(writer)
        self._writeCleanTarget(writer)
        self._writeFileRules(writer)

        if not pkg.isKind(KIND_CXXTESTGEN):
            # automatically generated dependencies
            writer.line('-include $(OBJECTS:%.o=%.d)').blank()

        return writer.render()

    def _writeHeader(self, writer):
        pkg = self._package
        lang = 'C' if pkg.lang == LANG_C else 'C++'
        writer.comment(
            '%s %s Makefile autogenerated by %s' % (lang, model.KIND_TITLES[pkg.kind], APPNAME),
            "Don't edit this file! Instead edit `%s` then rerun `%s`" % \
                (self._project.sourceName, APPNAME),
        )
        writer.blank()

        with writer.ifndef('CONFIG'):
            writer.line('CONFIG=%s' % pkg.configs[0].name)
        writer.blank()

    def _cppflags(self, cfg):
        flags = []
        if self._toolchain.depgen:
            flags.append('-MD')
        flags.extend('-D "%s"' % x for x in cfg.defines)
        flags.extend('-I "%s"' % x for x in cfg.incpaths)
        return flags

    def _cflags(self, cfg):
        pkg = self._package
        flags = []

        shared = pkg.isKind(KIND_DLL) and not self._platform.windows
        if shared or cfg.hasFlag('position-independent'):
            flags.append('-fPIC')
        if not cfg.hasFlag('no-symbols'):
            flags.append('-g')

        if cfg.hasFlag('optimize-size'):
            flags.append('-Os')
        elif cfg.hasFlag('optimize-speed'):
            flags.append('-O3')
        elif cfg.hasFlag('optimize'):
            flags.append('-O2')

        if cfg.hasFlag('extra-warnings'):
            flags.append('-Wall')
        if cfg.hasFlag('fatal-warnings'):
            flags.append('-Werror')
        if cfg.hasFlag('no-frame-pointer'):
            flags.append('-fomit-frame-pointer')

        flags.extend(cfg.buildoptions)
        return flags

    @staticmethod
    def _cxxflags(cfg):
        flags = []
        if cfg.hasFlag('no-exceptions'):
            flags.append('-fno-exceptions')
        if cfg.hasFlag('no-rtti'):
            flags.append('-fno-rtti')
        return flags

    def _ldflags(self, cfg, siblings):
        pkg = self._package
        flags = ['-L$(BINDIR)', '-L$(LIBDIR)']

        if pkg.isKind(KIND_DLL) and self._toolchain.shared:
            flags.append('-shared')
        if cfg.hasFlag('no-symbols') or cfg.hasFlag('strip-symbols'):
            flags.append('-s')
        if self._platform.dylib and cfg.hasFlag('dylib'):
            flags.extend(['-dynamiclib', '-flat_namespace'])

        flags.extend(cfg.linkoptions)
        flags.extend('-L"%s"' % x for x in cfg.libpaths)

        links = siblings.filterLinks(cfg.links)
        if self._platform.linkgroups:
            # link order of libraries doesn't matter inside of a group
            links = ['-Xlinker --start-group'] + links + ['-Xlinker --end-group']
        flags.extend(links)
        return flags

    def _linkOutput(self):
        if self._bundle:
            return '$(OUTDIR)/$(MACAPP)/MacOS/$(TARGET)'
        return '$(OUTDIR)/$(TARGET)'

    def _buildCommand(self):
        pkg = self._package
        if pkg.isKind(KIND_LIB):
            return 'ar -cr $(OUTDIR)/$(TARGET) $(OBJECTS); ranlib $(OUTDIR)/$(TARGET)'
        if pkg.isKind(KIND_CXXTESTGEN):
            return 'true'
        if pkg.isKind(KIND_RUN):
            return 'for a in $(LDDEPS); do echo Running $$a; $$a; done'

        driver = '$(CC)' if pkg.lang == LANG_C else '$(CXX)'
        return '%s -o %s $(OBJECTS) $(LDFLAGS) $(RESOURCES)' % (driver, self._linkOutput())

    def _writeConfig(self, writer, cfg):
        pkg = self._package
        siblings = SiblingResolver(self._project, pkg, cfg.name)

        with writer.ifeq('$(CONFIG)', cfg.name):
            writer.variable('BINDIR', cfg.bindir)
            writer.variable('LIBDIR', cfg.libdir)
            writer.variable('OBJDIR', cfg.objdir)
            writer.variable('OUTDIR', cfg.outdir)
            writer.variable('CPPFLAGS', *self._cppflags(cfg))
            writer.variable('CFLAGS', '$(CPPFLAGS)', *self._cflags(cfg), op = '+=')
            writer.variable('CXXFLAGS', '$(CFLAGS)', *self._cxxflags(cfg))
            writer.variable('LDFLAGS', *self._ldflags(cfg, siblings), op = '+=')
            writer.variable('LDDEPS', *siblings.linkerDependencies(cfg.links))

            if pkg.isKind(KIND_CXXTESTGEN):
                writer.variable('TARGET', '$(OBJECTS)')
            else:
                writer.variable('TARGET', cfg.target)
            if self._bundle:
                writer.variable('MACAPP', '%s.app/Contents' % cfg.target)

            writer.variable('BLDCMD', self._buildCommand(), op = '=')
        writer.blank()

    def _writeObjects(self, writer):
        files = self._package.files

        if self._package.isKind(KIND_CXXTESTGEN):
            objects = [ft.generatedSourceName(x) for x in files \
                            if ft.classify(x) == ft.ROLE_HEADER]
        else:
            objects = ['$(OBJDIR)/' + ft.objectName(x) for x in files if ft.isCompiled(x)]
        writer.listVariable('OBJECTS', objects)

        if self._platform.windows:
            resources = ['$(OBJDIR)/' + ft.resourceName(x) for x in files \
                            if ft.classify(x) == ft.ROLE_RC]
            writer.listVariable('RESOURCES', resources)

    @staticmethod
    def _writeDirHelpers(writer):
        writer.line('CMD := $(subst \\,\\\\,$(ComSpec)$(COMSPEC))')
        with writer.ifeq('', '$(CMD)'):
            for var in OUTDIRS:
                writer.variable('CMD_MK' + var, 'mkdir -p $(%s)' % var)
            writer.orElse()
            for var in OUTDIRS:
                native = '$(subst /,\\\\,$(%s))' % var
                cmd = '$(CMD) /c if not exist %s mkdir %s' % (native, native)
                writer.variable('CMD_MK' + var, cmd)
        writer.blank()

    def _mkdirRecipe(self, var):
        return '-%s$(CMD_MK%s)' % (self._prefix, var)

    def _writeMainTarget(self, writer):
        pkg = self._package
        prefix = self._prefix
        prereqs = ['$(OBJECTS)', '$(LDDEPS)', '$(RESOURCES)']

        if pkg.isKind(KIND_CXXTESTGEN):
            cxxtest = pkg.cxxtest or model.defaultCxxTest()
            words = [cxxtest.path, '--root', cxxtest.rootoptions, '-o', cxxtest.rootfile]
            cmd = prefix + ' '.join(x for x in words if x)
            writer.rule('all', prereqs, [cmd]).blank()
            return

        if pkg.isKind(KIND_RUN):
            writer.rule(self._linkOutput(), prereqs, [prefix + '$(BLDCMD)']).blank()
            return

        if self._bundle:
            bundleFiles = ['$(OUTDIR)/$(MACAPP)/PkgInfo', '$(OUTDIR)/$(MACAPP)/Info.plist']
            writer.rule('all', bundleFiles + [self._linkOutput()]).blank()

        recipe = []
        if not self._verbose:
            recipe.append('@echo Linking %s' % pkg.name)
        recipe.extend(self._mkdirRecipe(x) for x in ('BINDIR', 'LIBDIR', 'OUTDIR'))
        if self._bundle:
            macosDir = '$(OUTDIR)/$(MACAPP)/MacOS'
            recipe.append('-%sif [ ! -d %s ]; then mkdir -p %s; fi' % (prefix, macosDir, macosDir))
        recipe.append(prefix + '$(BLDCMD)')
        writer.rule(self._linkOutput(), prereqs, recipe).blank()

        if self._bundle:
            writer.rule('$(OUTDIR)/$(MACAPP)/PkgInfo').blank()
            writer.rule('$(OUTDIR)/$(MACAPP)/Info.plist').blank()

    def _writeCleanTarget(self, writer):
        pkg = self._package
        recipe = ['@echo Cleaning %s' % pkg.name]
        if self._bundle:
            recipe.append('-%srm -rf $(OUTDIR)/$(TARGET).app $(OBJDIR)' % self._prefix)
        elif pkg.isKind(KIND_CXXTESTGEN):
            recipe.append('-%srm -f $(OBJECTS)' % self._prefix)
        else:
            recipe.append('-%srm -rf $(OUTDIR)/$(TARGET) $(OBJDIR)' % self._prefix)
        writer.rule('clean', recipe = recipe).blank()

    def _compileRecipe(self, path, role):
        prefix = self._prefix
        base = ft.getBaseName(path)

        if not self._gnu:
            # Digital Mars compiler
            if role == ft.ROLE_CXX:
                return [prefix + 'dmc -cpp -Ae -Ar -mn $(CXXFLAGS) -o $@ -c $<']
            return [prefix + 'dmc $(CFLAGS) -o $@ -c $<']

        if role == ft.ROLE_ASM:
            # -MD from CPPFLAGS writes dependencies next to the object
            return [prefix + '$(CC) -x assembler-with-cpp $(CPPFLAGS) -o $@ -c $<']
        if role == ft.ROLE_C:
            return [prefix + '$(CC) $(CFLAGS) -MF $(OBJDIR)/%s.d -o $@ -c $<' % base]
        if role == ft.ROLE_NASM:
            return self._nasmRecipe(path, base)
        return [prefix + '$(CXX) $(CXXFLAGS) -MF $(OBJDIR)/%s.d -o $@ -c $<' % base]

    def _nasmRecipe(self, path, base):
        # nasm can't write dependencies while assembling, so the second
        # invocation only scans dependencies
        opts = ''
        if not self._platform.windows:
            opts = '-dDONT_USE_UNDERLINE=1 '
        opts += '-i' + getDirName(path)
        objformat = _NASM_FORMATS.get(self._platform.name, 'elf')
        return [
            '%snasm %s -f %s -o $@ $<' % (self._prefix, opts, objformat),
            '%snasm %s -M -o $@ $< >$(OBJDIR)/%s.d' % (self._prefix, opts, base),
        ]

    def _progressRecipe(self):
        if self._verbose:
            return []
        return ['@echo $(notdir $<)']

    def _writeFileRules(self, writer):
        pkg = self._package
        prefix = self._prefix
        isTestGen = pkg.isKind(KIND_CXXTESTGEN)

        for path in pkg.files:
            role = ft.classify(path)
            if role in ft.COMPILED_ROLES and not isTestGen:
                recipe = [self._mkdirRecipe('OBJDIR')]
                recipe.extend(self._progressRecipe())
                recipe.extend(self._compileRecipe(path, role))
                target = '$(OBJDIR)/' + ft.objectName(path)
                writer.rule(target, [path], recipe).blank()
            elif isTestGen and role == ft.ROLE_HEADER:
                cxxtest = pkg.cxxtest or model.defaultCxxTest()
                target = ft.generatedSourceName(path)
                words = [cxxtest.path, '--part', cxxtest.options, '-o', target, path]
                recipe = self._progressRecipe()
                recipe.append(prefix + ' '.join(x for x in words if x))
                writer.rule(target, [path], recipe).blank()

        if not self._platform.windows:
            return

        for path in pkg.files:
            if ft.classify(path) != ft.ROLE_RC:
                continue
            recipe = [self._mkdirRecipe('OBJDIR')]
            recipe.extend(self._progressRecipe())
            recipe.append(prefix + 'windres $< -O coff -o $@')
            writer.rule('$(OBJDIR)/' + ft.resourceName(path), [path], recipe).blank()

def generate(project, package, platform = PLATFORM, toolchain = None, verbose = False):
    """
    Return text of the makefile for the package
    """

    return PackageMakefile(project, package, platform, toolchain, verbose).generate()
