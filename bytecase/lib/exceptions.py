"""
Exceptions used throughout bytecase. Malformed UTF-8 in the input is deliberately absent from this
list: It is not an error condition, invalid byte sequences are passed through unchanged.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from enum import Enum


class BytecaseException(Exception):
    """
    The base class of all custom exceptions raised by bytecase.
    """


class BytecaseCriticalException(BytecaseException):
    """
    An internal invariant was violated. Units terminate when this exception is raised, it is never
    swallowed by the unit exception handler.
    """


class BytecasePotentialUserError(BytecaseException):
    """
    A condition that is most likely caused by a mistake on the side of the user. It is reported as
    a warning rather than a failure when a unit runs on the command line.
    """


class InvalidCaseMappingOption(BytecaseException, ValueError):
    """
    Raised when a case mapping mode is requested by a token that does not correspond to any of the
    known options. The exception is recoverable; the caller may decide to fall back to a default.
    """
    def __init__(self, token: str, mode: type[Enum] | None = None):
        self.token = token
        self.mode = mode
        message = F'invalid option: {token!r}'
        if mode is not None:
            choices = ', '.join(repr(m.value) for m in mode if m.value)
            message = F'{message}; valid options for {mode.__name__} are: {choices}'
        super().__init__(message)


class UnimplementedCaseMapping(BytecaseException, NotImplementedError):
    """
    Raised when an iterator is constructed for a mode that is recognized, but whose mapping has not
    been implemented. This happens before any output is produced.
    """
    def __init__(self, mode: Enum):
        self.mode = mode
        super().__init__(F'case mapping mode {mode.name} is not implemented')


__all__ = [
    'BytecaseCriticalException',
    'BytecaseException',
    'BytecasePotentialUserError',
    'InvalidCaseMappingOption',
    'UnimplementedCaseMapping',
]
