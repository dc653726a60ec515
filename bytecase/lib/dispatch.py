"""
The public entry points for case mapping. The functions `bytecase.lib.dispatch.lowercase`,
`bytecase.lib.dispatch.uppercase`, and `bytecase.lib.dispatch.titlecase` accept any bytes-like
input or a string, and an optional mode token. They return lazy iterators over the output bytes:

    >>> lowercase(B'ABC\\xFF\\xFEXYZ').collect()
    bytearray(b'abc\\xff\\xfexyz')
    >>> titlecase('aBC, 123, ABC').collect()
    bytearray(b'Abc, 123, abc')
    >>> bytes(reversed(uppercase(B'abc', 'ascii')))
    b'CBA'

The mode is validated before the iterator is returned, so an invalid or unimplemented mode never
results in partial output.
"""
from __future__ import annotations

import copy

from typing import Iterator, Optional, Union

from bytecase.lib.ascii import AsciiCaseMappingIterator, AsciiLowercase, AsciiTitlecase, AsciiUppercase
from bytecase.lib.full import CaseMappingIterator, FullLowercase, FullTitlecase, FullUppercase
from bytecase.lib.options import LowercaseMode, TitlecaseMode, Token, UppercaseMode
from bytecase.lib.types import SizeHint, text

Inner = Optional[Union[CaseMappingIterator, AsciiCaseMappingIterator]]


class CaseMappingFacade:
    """
    Wraps one of the concrete case mapping iterators, or nothing, in which case it is empty. Every
    operation is delegated to the wrapped iterator. Consumption from the back is only available if
    the wrapped iterator is an ASCII iterator.
    """
    _full: type[CaseMappingIterator]
    _ascii: type[AsciiCaseMappingIterator]

    def __init__(self, inner: Inner = None):
        self.inner = inner

    @classmethod
    def with_slice(cls, data: text):
        """
        Case mapping of the input with full Unicode support.
        """
        return cls(cls._full(data))

    @classmethod
    def with_ascii_slice(cls, data: text):
        """
        Case mapping of the input that only affects ASCII letters.
        """
        return cls(cls._ascii(data))

    @property
    def is_ascii(self) -> bool:
        return isinstance(self.inner, AsciiCaseMappingIterator)

    def __iter__(self):
        return self

    def __next__(self) -> int:
        inner = self.inner
        if inner is None:
            raise StopIteration
        return next(inner)

    def _reversible(self) -> Optional[AsciiCaseMappingIterator]:
        inner = self.inner
        if inner is None or isinstance(inner, AsciiCaseMappingIterator):
            return inner
        raise TypeError(F'{self.__class__.__name__} in full Unicode mode cannot be consumed from the back')

    def next_back(self) -> Optional[int]:
        inner = self._reversible()
        if inner is None:
            return None
        return inner.next_back()

    def __reversed__(self) -> Iterator[int]:
        inner = self._reversible()
        if inner is None:
            return iter(())
        return reversed(inner)

    def size_hint(self) -> SizeHint:
        inner = self.inner
        if inner is None:
            return 0, 0
        return inner.size_hint()

    def __length_hint__(self):
        return self.size_hint()[0]

    def count(self) -> int:
        inner = self.inner
        if inner is None:
            return 0
        return inner.count()

    def collect(self) -> bytearray:
        inner = self.inner
        if inner is None:
            return bytearray()
        return inner.collect()

    def __copy__(self):
        return self.__class__(copy.copy(self.inner))

    def __repr__(self):
        return F'{self.__class__.__name__}({self.inner!r})'


class Lowercase(CaseMappingFacade):
    _full = FullLowercase
    _ascii = AsciiLowercase


class Uppercase(CaseMappingFacade):
    _full = FullUppercase
    _ascii = AsciiUppercase


class Titlecase(CaseMappingFacade):
    _full = FullTitlecase
    _ascii = AsciiTitlecase


def lowercase(data: text, mode: Token | LowercaseMode = None) -> Lowercase:
    """
    Returns an iterator over the bytes of the lowercase form of the input.
    """
    mode = LowercaseMode.parse(mode).ensure_implemented()
    if mode is LowercaseMode.ASCII:
        return Lowercase.with_ascii_slice(data)
    return Lowercase.with_slice(data)


def uppercase(data: text, mode: Token | UppercaseMode = None) -> Uppercase:
    """
    Returns an iterator over the bytes of the uppercase form of the input.
    """
    mode = UppercaseMode.parse(mode).ensure_implemented()
    if mode is UppercaseMode.ASCII:
        return Uppercase.with_ascii_slice(data)
    return Uppercase.with_slice(data)


def titlecase(data: text, mode: Token | TitlecaseMode = None) -> Titlecase:
    """
    Returns an iterator over the bytes of the titlecase form of the input: The first codepoint is
    mapped to titlecase and all others are mapped to lowercase.
    """
    mode = TitlecaseMode.parse(mode).ensure_implemented()
    if mode is TitlecaseMode.ASCII:
        return Titlecase.with_ascii_slice(data)
    return Titlecase.with_slice(data)


__all__ = [
    'CaseMappingFacade',
    'Lowercase',
    'lowercase',
    'Titlecase',
    'titlecase',
    'Uppercase',
    'uppercase',
]
