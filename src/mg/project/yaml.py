# coding=utf-8
#

"""
 Copyright (c) 2021, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

__all__ = [
    'load',
]

import os
import io
import types

import yaml as pyyaml

from mg.error import MakeGenConfError
from mg.pyutils import maptype, stringtype

try:
    YamlLoader = pyyaml.CSafeLoader
except AttributeError:
    YamlLoader = pyyaml.SafeLoader

class StringIO(io.StringIO):
    """
    Customized StringIO
    """

    def __init__(self, data, name = '<file>'):
        super().__init__(data)
        # it's used in pyyaml for error reports
        self.name = name

def load(filepath):
    """
    Load YAML project file
    """

    conf = types.ModuleType('mgconf')
    conf.__file__ = os.path.abspath(filepath)
    data = {}

    # project file should not be very big so it's loaded completely in memory
    with io.open(filepath, 'rt', encoding = 'utf-8') as fstream:
        stream = StringIO(fstream.read(), fstream.name)

    try:
        loader = YamlLoader(stream)
        try:
            data = loader.get_single_data()
        finally:
            loader.dispose()
    except pyyaml.YAMLError as ex:
        raise MakeGenConfError(ex = ex, confpath = filepath) from ex

    if data is None:
        raise MakeGenConfError("File %r has no config data" % filepath)

    if not isinstance(data, maptype):
        raise MakeGenConfError("File %r has invalid structure" % filepath)

    for k, v in data.items():
        if not isinstance(k, stringtype):
            msg = "File %r:\n" % filepath
            msg += "  The variable %r is not string" % k
            raise MakeGenConfError(msg)
        setattr(conf, k, v)

    return conf
