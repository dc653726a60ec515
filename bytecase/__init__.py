"""
Unicode case mapping over conventionally UTF-8 encoded byte strings. The input may contain invalid
UTF-8; such bytes are never case mapped but passed through unchanged, while every valid sequence is
replaced by its lowercase, uppercase, or titlecase form. The result is produced lazily, one byte at
a time:

    >>> from bytecase import lowercase, uppercase, titlecase
    >>> bytes(uppercase('straße'))
    b'STRASSE'
    >>> lowercase(B'ABC\\xFF\\xFEXYZ').collect()
    bytearray(b'abc\\xff\\xfexyz')
    >>> titlecase(B'aBC, 123, ABC', 'ascii').collect()
    bytearray(b'Abc, 123, abc')

The package also exports the command line units `clower`, `cupper`, and `ctitle`; see
`bytecase.units` for how they can be used in Python code. The most relevant library modules are:

1. `bytecase.lib.dispatch`: the functions above and the iterator types they return
2. `bytecase.lib.options`: the mode tokens that select between full Unicode and ASCII mapping
3. `bytecase.lib.full`: the streaming iterators that implement the full Unicode mapping
4. `bytecase.lib.mapping`: the case mapping of a single codepoint
"""
from __future__ import annotations

__version__ = '0.3.0'
__distribution__ = 'bytecase'

from bytecase.lib.ascii import (
    make_ascii_lowercase,
    make_ascii_titlecase,
    make_ascii_uppercase,
    to_ascii_lowercase,
    to_ascii_titlecase,
    to_ascii_uppercase,
)
from bytecase.lib.dispatch import Lowercase, Titlecase, Uppercase, lowercase, titlecase, uppercase
from bytecase.lib.exceptions import BytecaseException, InvalidCaseMappingOption, UnimplementedCaseMapping
from bytecase.lib.mapping import CaseKind, CaseMapping, case_mapping, to_titlecase
from bytecase.lib.options import LowercaseMode, TitlecaseMode, UppercaseMode
from bytecase.units import Arg, Unit

__all__ = [
    'Arg',
    'BytecaseException',
    'CaseKind',
    'CaseMapping',
    'case_mapping',
    'InvalidCaseMappingOption',
    'Lowercase',
    'lowercase',
    'LowercaseMode',
    'make_ascii_lowercase',
    'make_ascii_titlecase',
    'make_ascii_uppercase',
    'Titlecase',
    'titlecase',
    'TitlecaseMode',
    'to_ascii_lowercase',
    'to_ascii_titlecase',
    'to_ascii_uppercase',
    'to_titlecase',
    'UnimplementedCaseMapping',
    'Unit',
    'Uppercase',
    'uppercase',
    'UppercaseMode',
]


def load(name: str) -> type[Unit] | None:
    """
    The unit class with the given command name, or `None` if there is no such unit. Units are
    discovered on first use.
    """
    from bytecase.lib.loader import get_entry_point_map
    return get_entry_point_map().get(name)


def __getattr__(name):
    unit = None if name.startswith('__') else load(name)
    if unit is None:
        raise AttributeError(name)
    return unit


def __dir__():
    from bytecase.lib.loader import get_entry_point_map
    return sorted([*__all__, *get_entry_point_map()], key=str.lower)
