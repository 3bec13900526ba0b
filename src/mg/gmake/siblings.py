# coding=utf-8
#

"""
 Copyright (c) 2020, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Link names that refer to other packages of the same project.
"""

from mg.pathutils import joinPosixPath, relPosixPath
from mg.project.model import KIND_CXXTESTGEN, LANGS

class SiblingResolver(object):
    """
    Resolves link names of one package configuration against
    the packages of the project.
    """

    def __init__(self, project, package, cfgName):
        self._project = project
        self._package = package
        self._cfgName = cfgName

    def artifactPath(self, sibling):
        """
        Return path of the sibling artifact relative to the directory of
        current package. The sibling configuration with the same name is
        used, or the first one.
        """

        cfg = sibling.getConfig(self._cfgName) or sibling.configs[0]
        path = joinPosixPath(sibling.path, cfg.targetPath)
        return relPosixPath(path, self._package.path)

    def filterLink(self, name):
        """
        Return linker input for the link name: path of sibling artifact,
        '-l<name>' for non-sibling names or None if nothing to link.
        """

        sibling = self._project.findPackage(name)
        if sibling is None:
            return '-l' + name
        if sibling.kind == KIND_CXXTESTGEN:
            return None
        if sibling.lang in LANGS:
            return self.artifactPath(sibling)
        return None

    def linkerDependency(self, name):
        """
        Return path of sibling artifact which must be built before linking
        or None if the link name is not a sibling package.
        """

        sibling = self._project.findPackage(name)
        if sibling is None or sibling.kind == KIND_CXXTESTGEN:
            return None
        return self.artifactPath(sibling)

    def filterLinks(self, names):
        """ Apply filterLink to the names and drop empty results """
        return [x for x in (self.filterLink(n) for n in names) if x]

    def linkerDependencies(self, names):
        """ Apply linkerDependency to the names and drop empty results """
        return [x for x in (self.linkerDependency(n) for n in names) if x]
