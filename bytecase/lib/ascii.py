"""
Case mapping restricted to the ASCII letters. Every other byte, including all bytes that belong to
multibyte UTF-8 sequences or to invalid sequences, is left unchanged. Since the number of bytes
never changes, the iterators in this module know their exact length and can be consumed from
either end.

The module also provides functions that map an entire buffer in one go, either in place or into a
copy:

    >>> to_ascii_titlecase(B'ABC, XYZ')
    bytearray(b'Abc, xyz')
"""
from __future__ import annotations

from typing import Iterator, Optional

from bytecase.lib.types import SizeHint, asview, text

_IDENTITY = bytes(range(0x100))
_LOWER = _IDENTITY.lower()
_UPPER = _IDENTITY.upper()


def make_ascii_lowercase(data: bytearray) -> None:
    """
    Maps the ASCII letters `A` to `Z` in the given mutable buffer to `a` to `z` in place.
    """
    data[:] = bytes(data).translate(_LOWER)


def make_ascii_uppercase(data: bytearray) -> None:
    """
    Maps the ASCII letters `a` to `z` in the given mutable buffer to `A` to `Z` in place.
    """
    data[:] = bytes(data).translate(_UPPER)


def make_ascii_titlecase(data: bytearray) -> None:
    """
    Uppercases the first byte of the given mutable buffer and lowercases all other bytes in place,
    where only ASCII letters are affected.
    """
    if len(data):
        data[:] = bytes(data).capitalize()


def to_ascii_lowercase(data: text) -> bytearray:
    result = bytearray(asview(data))
    make_ascii_lowercase(result)
    return result


def to_ascii_uppercase(data: text) -> bytearray:
    result = bytearray(asview(data))
    make_ascii_uppercase(result)
    return result


def to_ascii_titlecase(data: text) -> bytearray:
    result = bytearray(asview(data))
    make_ascii_titlecase(result)
    return result


class AsciiCaseMappingIterator:
    """
    Base class of the ASCII iterators. The iterator holds the index range of the input that has not
    been consumed yet; bytes are taken from its front by `next` and from its back by
    `bytecase.lib.ascii.AsciiCaseMappingIterator.next_back`.
    """
    _view: memoryview
    _start: int
    _stop: int

    def __init__(self, data: text = B''):
        self._view = view = asview(data)
        self._start = 0
        self._stop = len(view)

    def _map(self, index: int, byte: int) -> int:
        raise NotImplementedError

    def __iter__(self):
        return self

    def __next__(self) -> int:
        start = self._start
        if start >= self._stop:
            raise StopIteration
        self._start = start + 1
        return self._map(start, self._view[start])

    def next_back(self) -> Optional[int]:
        """
        Remove and return the last remaining byte, or `None` if the iterator is exhausted.
        """
        stop = self._stop
        if stop <= self._start:
            return None
        self._stop = stop = stop - 1
        return self._map(stop, self._view[stop])

    def __reversed__(self) -> Iterator[int]:
        while True:
            byte = self.next_back()
            if byte is None:
                return
            yield byte

    def remaining(self) -> memoryview:
        return self._view[self._start:self._stop]

    def __len__(self):
        return self._stop - self._start

    def __length_hint__(self):
        return len(self)

    def size_hint(self) -> SizeHint:
        n = len(self)
        return n, n

    def count(self) -> int:
        """
        Consume the iterator and return the number of bytes that it would have produced.
        """
        n = len(self)
        self._start = self._stop
        return n

    def collect(self) -> bytearray:
        return bytearray(self)

    def __copy__(self):
        cls = self.__class__
        clone = cls.__new__(cls)
        clone.__dict__.update(self.__dict__)
        return clone

    def __repr__(self):
        return F'{self.__class__.__name__}(slice={bytes(self.remaining())!r})'


class AsciiLowercase(AsciiCaseMappingIterator):

    def _map(self, index: int, byte: int) -> int:
        return _LOWER[byte]


class AsciiUppercase(AsciiCaseMappingIterator):

    def _map(self, index: int, byte: int) -> int:
        return _UPPER[byte]


class AsciiTitlecase(AsciiCaseMappingIterator):
    """
    Uppercases the byte at offset zero of the input and lowercases every other byte. The mapping
    depends only on the position of a byte in the input, so that the output is the same no matter
    from which end the iterator is consumed.
    """

    def _map(self, index: int, byte: int) -> int:
        if index == 0:
            return _UPPER[byte]
        return _LOWER[byte]

    def __repr__(self):
        return F'{self.__class__.__name__}(slice={bytes(self.remaining())!r}, beginning={self._start == 0})'


__all__ = [
    'AsciiCaseMappingIterator',
    'AsciiLowercase',
    'AsciiTitlecase',
    'AsciiUppercase',
    'make_ascii_lowercase',
    'make_ascii_titlecase',
    'make_ascii_uppercase',
    'to_ascii_lowercase',
    'to_ascii_titlecase',
    'to_ascii_uppercase',
]
