"""
A unified resource for types that are primarily used for type hints.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Tuple

if TYPE_CHECKING:
    from typing import Union

    buf = Union[bytes, bytearray, memoryview]
    text = Union[str, bytes, bytearray, memoryview]
else:
    buf = Any
    text = Any

SizeHint = Tuple[int, Optional[int]]
"""
The lower and upper bound on the number of remaining items of an iterator, where an upper bound of
`None` means that no bound is known.
"""


def isbuffer(obj) -> bool:
    """
    Test whether `obj` is an object that supports the buffer API, like a bytes or bytearray object.
    """
    try:
        with memoryview(obj):
            return True
    except TypeError:
        return False


def asview(obj: text) -> memoryview:
    """
    Returns a read-only byte view of the input without copying it. Strings are encoded as UTF-8
    first, which is the only case where a copy is made.
    """
    if isinstance(obj, str):
        obj = obj.encode('utf8')
    view = memoryview(obj)
    if view.format != 'B' or view.ndim != 1:
        view = view.cast('B')
    return view.toreadonly()


__all__ = [
    'asview',
    'buf',
    'isbuffer',
    'SizeHint',
    'text',
]
