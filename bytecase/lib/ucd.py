"""
The sorted table of titlecase mappings. Python exposes the full titlecase mapping of a codepoint only
through `str.title`, so the table is computed once from the Unicode database that ships with the
interpreter. It contains every codepoint whose titlecase differs from the codepoint itself, mapped to
a triple of codepoints where unused trailing slots are `None`.

The computation visits every codepoint and is therefore slow; its result is pickled to the package
data directory as `titlecase.pkl` together with the Unicode database version it was generated from.
A stale or unreadable cache is regenerated on the next load. Caching can be disabled by setting the
environment variable `BYTECASE_DISABLE_TABLE_CACHE`.
"""
from __future__ import annotations

import bisect
import functools
import pickle
import unicodedata

from typing import TYPE_CHECKING, NamedTuple, Optional, Sequence, Tuple

from bytecase.lib import resources
from bytecase.lib.environment import environment, logger
from bytecase.lib.exceptions import BytecaseCriticalException

if TYPE_CHECKING:
    from pathlib import Path

Triple = Tuple[int, Optional[int], Optional[int]]

MAX_CODEPOINT = 0x10FFFF
MAX_EXPANSION = 3
"""
No codepoint has a case mapping that consists of more than this number of codepoints.
"""

_CACHE_NAME = 'titlecase.pkl'
_CACHE_FORMAT = 1

log = logger(__name__)


class TitlecaseTable(NamedTuple):
    """
    Two parallel sequences: The keys are codepoints in strictly ascending order, the values are
    their titlecase mappings.
    """
    version: str
    keys: Sequence[int]
    values: Sequence[Triple]

    def lookup(self, codepoint: int) -> Triple | None:
        keys = self.keys
        index = bisect.bisect_left(keys, codepoint)
        if index < len(keys) and keys[index] == codepoint:
            return self.values[index]
        return None

    def __len__(self):
        return len(self.keys)


def check_sorted(keys: Sequence[int]):
    """
    Raise a `bytecase.lib.exceptions.BytecaseCriticalException` unless the keys are strictly
    ascending; the binary search in `bytecase.lib.ucd.TitlecaseTable.lookup` depends on this.
    """
    it = iter(keys)
    try:
        previous = next(it)
    except StopIteration:
        return
    for current in it:
        if current <= previous:
            raise BytecaseCriticalException(
                F'titlecase table is not sorted: U+{current:04X} follows U+{previous:04X}')
        previous = current


def pad(mapped: str) -> Triple:
    codepoints = [ord(c) for c in mapped]
    if not 0 < len(codepoints) <= MAX_EXPANSION:
        raise BytecaseCriticalException(
            F'titlecase mapping {mapped!r} has {len(codepoints)} codepoints; expected at most {MAX_EXPANSION}')
    codepoints.extend([None] * (MAX_EXPANSION - len(codepoints)))
    return tuple(codepoints)


def build_titlecase_table() -> TitlecaseTable:
    """
    Compute the table from the Unicode database of the running interpreter.
    """
    keys = []
    values = []
    for codepoint in range(MAX_CODEPOINT + 1):
        if 0xD800 <= codepoint <= 0xDFFF:
            continue
        char = chr(codepoint)
        title = char.title()
        if title == char:
            continue
        keys.append(codepoint)
        values.append(pad(title))
    log.debug(F'computed {len(keys)} titlecase mappings for Unicode {unicodedata.unidata_version}')
    return TitlecaseTable(unicodedata.unidata_version, tuple(keys), tuple(values))


def _load_cached_table() -> TitlecaseTable | None:
    """
    Unpickle the cached table from the package data directory. The cache file is trusted like the
    package code next to it: anyone who can write to that directory can also execute code through
    it. Set `BYTECASE_DISABLE_TABLE_CACHE` where the installation directory is shared with
    untrusted users.
    """
    from bytecase import __version__
    path: Path = resources.datapath(_CACHE_NAME)
    try:
        with path.open('rb') as stream:
            cache = pickle.load(stream)
    except (FileNotFoundError, EOFError):
        return None
    except Exception as E:
        log.debug(F'ignoring unreadable titlecase table cache: {E!s}')
        return None
    try:
        if cache['format'] != _CACHE_FORMAT:
            return None
        if cache['bytecase'] != __version__:
            return None
        if cache['unicode'] != unicodedata.unidata_version:
            return None
        return TitlecaseTable(cache['unicode'], cache['keys'], cache['values'])
    except (KeyError, TypeError):
        return None


def _save_cached_table(table: TitlecaseTable):
    from bytecase import __version__
    path: Path = resources.datapath(_CACHE_NAME)
    try:
        with path.open('wb') as stream:
            pickle.dump({
                'format': _CACHE_FORMAT,
                'bytecase': __version__,
                'unicode': table.version,
                'keys': table.keys,
                'values': table.values,
            }, stream)
    except Exception as E:
        log.debug(F'unable to cache titlecase table: {E!s}')


@functools.lru_cache(maxsize=1)
def titlecase_table() -> TitlecaseTable:
    """
    Returns the process-wide titlecase table, loading it from the cache when possible. The table is
    checked for sortedness before it is handed out.
    """
    cached = not environment.disable_table_cache.value
    table = cached and _load_cached_table() or None
    if table is None:
        log.debug('titlecase table cache miss, generating table')
        table = build_titlecase_table()
        if cached:
            _save_cached_table(table)
    check_sorted(table.keys)
    if len(table.keys) != len(table.values):
        raise BytecaseCriticalException('titlecase table has mismatching key and value counts')
    return table
