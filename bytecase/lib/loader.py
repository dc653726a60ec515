"""
Discovery of the bytecase units and loading of units by their command name. Every module below
`bytecase.units` is imported and searched for the classes it defines.
"""
from __future__ import annotations

import functools
import importlib
import pkgutil
import shlex

from typing import TYPE_CHECKING, Dict, Iterator, Type

from bytecase.lib.environment import logger

if TYPE_CHECKING:
    from bytecase.units import Unit

log = logger(__name__)


class EntryNotFound(NameError):
    pass


def get_all_entry_points() -> Iterator[Type[Unit]]:
    """
    Yields every class that is defined in a module below `bytecase.units` and is available as a
    command. Modules that fail to import are logged and skipped.
    """
    from bytecase import units
    prefix = F'{units.__name__}.'
    for info in pkgutil.walk_packages(units.__path__, prefix, onerror=log.error):
        try:
            module = importlib.import_module(info.name)
        except ImportError as error:
            log.error(F'could not load {info.name}: {error!s}')
            continue
        for item in vars(module).values():
            if isinstance(item, type) and issubclass(item, units.Entry) and item.__module__ == info.name:
                yield item


@functools.lru_cache(maxsize=1)
def get_entry_point_map() -> Dict[str, Type[Unit]]:
    """
    Maps the command name of every unit to its class; it is computed once.
    """
    return {unit.name: unit for unit in get_all_entry_points()}


def get_entry_point(name: str) -> Type[Unit]:
    try:
        return get_entry_point_map()[name]
    except KeyError:
        raise EntryNotFound(F'no unit named "{name}" was found.') from None


def load(name: str, *args, **kwargs) -> Unit:
    """
    Assemble the unit `name` from the given command line arguments and keywords.
    """
    return get_entry_point(name).assemble(*args, **kwargs)


def load_detached(command: str) -> Unit:
    """
    Assemble a unit from a command line like `ctitle ascii` and detach it from its logger, so it
    raises exceptions like a unit that was created in code.
    """
    name, *arguments = shlex.split(command)
    return load(name, *arguments).log_detach()
