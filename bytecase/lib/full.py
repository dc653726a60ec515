"""
Streaming case mapping over conventionally UTF-8 encoded bytes. The iterators in this module decode
one unit of the input at a time, which is either a valid codepoint or a maximal invalid subpart as
produced by `bytecase.lib.utf8.decode_utf8`. A codepoint is replaced by its case mapping, which can
consist of up to three codepoints; an invalid subpart is passed through unchanged. The output is
produced one byte at a time:

    >>> bytes(FullUppercase('straße'))
    b'STRASSE'
    >>> bytes(FullLowercase(B'ABC\\xFF\\xFEXYZ'))
    b'abc\\xff\\xfexyz'

Each iterator owns a four byte staging buffer that holds the UTF-8 encoding of the codepoint that is
currently being emitted, or the bytes of the current invalid subpart. When a case mapping expands to
more than one codepoint, the remaining codepoints are kept as a pending
`bytecase.lib.mapping.CaseMapping` and encoded into the staging buffer one after another. No memory
is allocated per output byte.
"""
from __future__ import annotations

import copy

from typing import Optional

from bytecase.lib.mapping import CaseKind, CaseMapping, case_mapping
from bytecase.lib.types import SizeHint, asview, text
from bytecase.lib.ucd import MAX_EXPANSION
from bytecase.lib.utf8 import UTF8_CHAR_MAX_BYTES, decode_utf8, encode_utf8, is_ascii


class CaseMappingIterator:
    """
    The base class of all full Unicode case mapping iterators. Subclasses specify the
    `bytecase.lib.mapping.CaseKind` that is applied to each decoded codepoint by overriding
    `bytecase.lib.full.CaseMappingIterator.next_kind`.
    """
    kind: CaseKind

    _view: memoryview
    _cursor: int
    _staging: bytearray
    _start: int
    _stop: int
    _pending: Optional[CaseMapping]

    def __init__(self, data: text = B''):
        self._view = asview(data)
        self._cursor = 0
        self._staging = bytearray(UTF8_CHAR_MAX_BYTES)
        self._start = 0
        self._stop = 0
        self._pending = None

    def next_kind(self) -> CaseKind:
        return self.kind

    def _stage(self, codepoint: int) -> int:
        size = encode_utf8(codepoint, self._staging)
        self._start = 1
        self._stop = size
        return self._staging[0]

    def __iter__(self):
        return self

    def __next__(self) -> int:
        start = self._start
        if start < self._stop:
            self._start = start + 1
            return self._staging[start]
        pending = self._pending
        if pending is not None:
            for codepoint in pending:
                return self._stage(codepoint)
            self._pending = None
        view = self._view
        cursor = self._cursor
        codepoint, size = decode_utf8(view, cursor)
        if size == 0:
            raise StopIteration
        self._cursor = cursor + size
        if codepoint is None:
            self._staging[:size] = view[cursor:cursor + size]
            self._start = 1
            self._stop = size
            return self._staging[0]
        mapping = case_mapping(codepoint, self.next_kind())
        first = next(mapping)
        if len(mapping):
            self._pending = mapping
        return self._stage(first)

    def _buffered(self) -> int:
        buffered = self._stop - self._start
        if self._pending is not None:
            buffered += self._pending.encoded_length()
        return buffered

    def remaining(self) -> memoryview:
        """
        The part of the input that has not yet been decoded.
        """
        return self._view[self._cursor:]

    def size_hint(self) -> SizeHint:
        """
        Returns bounds on the number of bytes that remain to be produced. Bytes that have already
        been decoded and are waiting to be emitted are counted exactly. A pure ASCII remainder maps
        to exactly as many bytes as it has. Otherwise, a single byte can expand to at most three
        codepoints of four bytes each, and four bytes map to at least one output byte.
        """
        buffered = self._buffered()
        view = self._view
        cursor = self._cursor
        rest = len(view) - cursor
        if rest <= 0:
            return buffered, buffered
        if is_ascii(view, cursor):
            return buffered + rest, buffered + rest
        lower = buffered + (rest + UTF8_CHAR_MAX_BYTES - 1) // UTF8_CHAR_MAX_BYTES
        upper = buffered + rest * MAX_EXPANSION * UTF8_CHAR_MAX_BYTES
        return lower, upper

    def __length_hint__(self):
        return self.size_hint()[0]

    def count(self) -> int:
        """
        Consume the iterator and return the number of bytes that it would have produced.
        """
        view = self._view
        cursor = self._cursor
        if is_ascii(view, cursor):
            total = self._buffered() + len(view) - cursor
            self._start = self._stop
            self._pending = None
            self._cursor = len(view)
            return total
        total = 0
        for _ in self:
            total += 1
        return total

    def collect(self) -> bytearray:
        """
        Consume the iterator into a new buffer.
        """
        return bytearray(self)

    def __copy__(self):
        cls = self.__class__
        clone = cls.__new__(cls)
        clone.__dict__.update(self.__dict__)
        clone._staging = bytearray(self._staging)
        if self._pending is not None:
            clone._pending = copy.copy(self._pending)
        return clone

    def _repr_fields(self):
        yield 'slice', bytes(self.remaining())
        yield 'next_bytes', list(self._staging)
        yield 'next_range', range(self._start, self._stop)
        yield 'pending', self._pending

    def __repr__(self):
        fields = ', '.join(F'{name}={value!r}' for name, value in self._repr_fields())
        return F'{self.__class__.__name__}({fields})'


class FullLowercase(CaseMappingIterator):
    """
    Maps every codepoint to its full Unicode lowercase form.
    """
    kind = CaseKind.LOWER


class FullUppercase(CaseMappingIterator):
    """
    Maps every codepoint to its full Unicode uppercase form.
    """
    kind = CaseKind.UPPER


class FullTitlecase(CaseMappingIterator):
    """
    Maps the first valid codepoint of the input to its titlecase form and every codepoint after it
    to its lowercase form. Invalid subparts in front of the first valid codepoint do not count.
    """
    kind = CaseKind.LOWER

    def __init__(self, data: text = B''):
        super().__init__(data)
        self._beginning = True

    def next_kind(self) -> CaseKind:
        if self._beginning:
            self._beginning = False
            return CaseKind.TITLE
        return CaseKind.LOWER

    def _repr_fields(self):
        yield from super()._repr_fields()
        yield 'beginning', self._beginning


__all__ = [
    'CaseMappingIterator',
    'FullLowercase',
    'FullTitlecase',
    'FullUppercase',
]
