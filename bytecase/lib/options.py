"""
Mode selectors for the three case mapping operations. Each mode is parsed from a case-sensitive
token: The empty token selects the full Unicode mapping, and the tokens `ascii`, `turkic`,
`lithuanian`, and `fold` select the other modes. Case folding is not available for uppercasing.

    >>> LowercaseMode.parse('ascii')
    <LowercaseMode.ASCII: 'ascii'>
    >>> LowercaseMode.parse(None)
    <LowercaseMode.FULL: ''>

The Turkic and folding modes are recognized but not implemented; the function
`bytecase.lib.options.CaseMode.ensure_implemented` raises an
`bytecase.lib.exceptions.UnimplementedCaseMapping` for them. The Lithuanian mode currently maps
exactly like the full mode.
"""
from __future__ import annotations

import enum

from typing import Optional, TypeVar, Union

from bytecase.lib.exceptions import InvalidCaseMappingOption, UnimplementedCaseMapping

_M = TypeVar('_M', bound='CaseMode')

Token = Optional[Union[str, bytes, bytearray, memoryview]]


class CaseMode(str, enum.Enum):
    """
    Common base for all mode selectors.
    """

    @classmethod
    def parse(cls: type[_M], token: Token | _M = None, strict: bool = True) -> _M:
        """
        Convert a token to a member of this enumeration. `None` and the empty token map to the full
        mode. An unknown token raises `bytecase.lib.exceptions.InvalidCaseMappingOption` unless
        `strict` is disabled, in which case the full mode is returned.
        """
        if isinstance(token, cls):
            return token
        if token is None:
            return cls('')
        if not isinstance(token, str):
            try:
                token = bytes(token).decode('utf8')
            except (TypeError, UnicodeDecodeError):
                if strict:
                    raise InvalidCaseMappingOption(repr(token), cls)
                return cls('')
        try:
            return cls(token)
        except ValueError:
            if strict:
                raise InvalidCaseMappingOption(token, cls)
            return cls('')

    @classmethod
    def tokens(cls):
        return [m.value for m in cls if m.value]

    @property
    def implemented(self) -> bool:
        return self.name not in ('TURKIC', 'FOLD')

    @property
    def ascii(self) -> bool:
        return self.name == 'ASCII'

    def ensure_implemented(self: _M) -> _M:
        if not self.implemented:
            raise UnimplementedCaseMapping(self)
        return self

    def __str__(self):
        return self.value or 'full'

    def __format__(self, spec):
        return format(str(self), spec)


class LowercaseMode(CaseMode):
    FULL = ''
    ASCII = 'ascii'
    TURKIC = 'turkic'
    LITHUANIAN = 'lithuanian'
    FOLD = 'fold'


class UppercaseMode(CaseMode):
    FULL = ''
    ASCII = 'ascii'
    TURKIC = 'turkic'
    LITHUANIAN = 'lithuanian'


class TitlecaseMode(CaseMode):
    FULL = ''
    ASCII = 'ascii'
    TURKIC = 'turkic'
    LITHUANIAN = 'lithuanian'
    FOLD = 'fold'


__all__ = [
    'CaseMode',
    'LowercaseMode',
    'TitlecaseMode',
    'UppercaseMode',
]
