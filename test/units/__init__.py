from __future__ import annotations

from typing import Type

import importlib

from .. import bytecase, TestBase, NameUnknownException
from bytecase.units import Entry, LogLevel

__all__ = ['bytecase', 'TestUnitBase', 'NameUnknownException']


class TestUnitBase(TestBase):

    @staticmethod
    def _relative_module_path(path: str, strip_test=True):
        path = path.split('.')
        path = path[1:]
        if strip_test:
            path = [x[4:].lstrip('_-.') if x.startswith('test') else x for x in path]
        return '.'.join(path)

    @classmethod
    def unit(cls) -> Type[bytecase.Unit]:
        name = cls._relative_module_path(cls.__module__)
        path = F'bytecase.{name}'
        try:
            module = importlib.import_module(path)
        except ImportError:
            pass
        else:
            for object in vars(module).values():
                if isinstance(object, type) and issubclass(object, Entry) and object.__module__ == path:
                    return object
        try:
            basename = name.rsplit('.', 1)[-1]
            entry = getattr(bytecase, basename)
        except AttributeError:
            raise NameUnknownException(name)
        return entry

    @classmethod
    def load(cls, *args, **kwargs) -> bytecase.Unit:
        unit = cls.unit().assemble(*args, **kwargs)
        unit.log_level = LogLevel.DETACHED
        return unit
