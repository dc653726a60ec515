"""
The case mapping of a single codepoint. Lowercase and uppercase mappings are taken from the string
methods of the interpreter, titlecase mappings from the table in `bytecase.lib.ucd`. Each mapping is
a sequence of one to three codepoints and it is exposed as a `bytecase.lib.mapping.CaseMapping`,
an iterator that can be consumed from either end.
"""
from __future__ import annotations

import enum
import functools

from typing import Iterator, Optional, Tuple

from bytecase.lib.types import SizeHint
from bytecase.lib.ucd import MAX_EXPANSION, Triple, titlecase_table
from bytecase.lib.utf8 import utf8_length


class CaseKind(str, enum.Enum):
    LOWER = 'lower'
    UPPER = 'upper'
    TITLE = 'title'


def to_titlecase(codepoint: int) -> Triple:
    """
    Returns the titlecase mapping of the given codepoint as a triple whose unused trailing slots
    are `None`. Codepoints that have no titlecase form map to themselves.
    """
    mapped = titlecase_table().lookup(codepoint)
    if mapped is None:
        return codepoint, None, None
    return mapped


@functools.lru_cache(maxsize=0x1000)
def _mapped_codepoints(codepoint: int, kind: CaseKind) -> Tuple[int, ...]:
    if kind is CaseKind.TITLE:
        return tuple(c for c in to_titlecase(codepoint) if c is not None)
    convert = str.lower if kind is CaseKind.LOWER else str.upper
    return tuple(ord(c) for c in convert(chr(codepoint)))


class CaseMapping:
    """
    An iterator over the codepoints that a single codepoint maps to under one of the case kinds.
    It knows its exact length and can be consumed from both ends; converting it to a string yields
    the codepoints that have not yet been consumed.
    """
    __slots__ = '_codepoints', '_front', '_back'

    def __init__(self, codepoints: Tuple[int, ...]):
        if not 0 < len(codepoints) <= MAX_EXPANSION:
            raise ValueError(F'a case mapping consists of 1 to {MAX_EXPANSION} codepoints, got {len(codepoints)}')
        self._codepoints = codepoints
        self._front = 0
        self._back = len(codepoints)

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        front = self._front
        if front >= self._back:
            raise StopIteration
        self._front = front + 1
        return self._codepoints[front]

    def next_back(self) -> Optional[int]:
        """
        Remove and return the last remaining codepoint, or `None` if the mapping is exhausted.
        """
        if self._front >= self._back:
            return None
        self._back -= 1
        return self._codepoints[self._back]

    def __reversed__(self) -> Iterator[int]:
        while True:
            codepoint = self.next_back()
            if codepoint is None:
                return
            yield codepoint

    def remaining(self) -> Tuple[int, ...]:
        return self._codepoints[self._front:self._back]

    def encoded_length(self) -> int:
        """
        The number of bytes in the UTF-8 encoding of all remaining codepoints.
        """
        return sum(utf8_length(c) for c in self.remaining())

    def __len__(self):
        return self._back - self._front

    def __length_hint__(self):
        return len(self)

    def size_hint(self) -> SizeHint:
        n = len(self)
        return n, n

    def __copy__(self):
        clone = object.__new__(self.__class__)
        clone._codepoints = self._codepoints
        clone._front = self._front
        clone._back = self._back
        return clone

    def __eq__(self, other):
        if isinstance(other, CaseMapping):
            return self.remaining() == other.remaining()
        return NotImplemented

    def __hash__(self):
        return hash(self.remaining())

    def __str__(self):
        return ''.join(chr(c) for c in self.remaining())

    def __repr__(self):
        return F'{self.__class__.__name__}({str(self)!r})'


def case_mapping(codepoint: int, kind: CaseKind) -> CaseMapping:
    """
    Returns a `bytecase.lib.mapping.CaseMapping` over the codepoints that the given codepoint maps
    to under the given case kind.
    """
    return CaseMapping(_mapped_codepoints(codepoint, CaseKind(kind)))


__all__ = [
    'CaseKind',
    'CaseMapping',
    'case_mapping',
    'to_titlecase',
]
