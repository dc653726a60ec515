"""
Configuration through environment variables and the logging setup of bytecase. All variables have
the prefix `BYTECASE_`:

- `BYTECASE_VERBOSITY`: log level for units on the command line, a number or a level name
- `BYTECASE_TERM_SIZE`: terminal width for the command line help
- `BYTECASE_COLORLESS`: disables colored log output
- `BYTECASE_DISABLE_TABLE_CACHE`: never read or write the cached titlecase table
"""
from __future__ import annotations

import logging
import os
import sys

from enum import IntEnum
from typing import Callable, Generic, Optional, TypeVar

_T = TypeVar('_T')

Logger = logging.Logger


class LogLevel(IntEnum):
    """
    The standard log levels extended by two levels above `CRITICAL`. At `NONE`, a unit produces no
    log output; a `DETACHED` unit raises its exceptions instead of logging them.
    """
    NOTSET = logging.NOTSET
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL
    NONE = logging.CRITICAL + 50
    DETACHED = logging.CRITICAL + 100

    @classmethod
    def from_verbosity(cls, verbosity: int) -> LogLevel:
        """
        Translate the number of `-v` flags into a level; a negative count means detached.
        """
        if verbosity < 0:
            return cls.DETACHED
        levels = (cls.WARNING, cls.INFO)
        return levels[verbosity] if verbosity < len(levels) else cls.DEBUG

    @property
    def verbosity(self) -> int:
        if self >= LogLevel.DETACHED or self < LogLevel.DEBUG:
            return -1
        if self >= LogLevel.WARNING:
            return 0
        return 1 if self >= LogLevel.INFO else 2


class LogFormatter(logging.Formatter):
    """
    Prints a descriptive word for the level of each record, colored with colorama if requested.
    """
    LEVELS = {
        logging.CRITICAL: ('failure', 'LIGHTRED_EX'),
        logging.ERROR: ('failure', 'LIGHTRED_EX'),
        logging.WARNING: ('warning', 'LIGHTYELLOW_EX'),
        logging.INFO: ('comment', 'LIGHTBLUE_EX'),
        logging.DEBUG: ('verbose', 'LIGHTBLACK_EX'),
    }

    def __init__(self, fmt: str, colorize: bool = False, **kwargs):
        super().__init__(fmt, **kwargs)
        self.colorize = colorize

    def level_name(self, levelno: int) -> str:
        name, color = self.LEVELS.get(levelno, ('message', None))
        if not self.colorize or color is None:
            return name
        from colorama import Fore, Style
        return F'{getattr(Fore, color)}{name}{Style.RESET_ALL}'

    def formatMessage(self, record: logging.LogRecord) -> str:
        record.level_word = self.level_name(record.levelno)
        return super().formatMessage(record)


def logger(name: str) -> Logger:
    """
    A logger that writes to stderr in the bytecase format. It does not propagate its records, so
    it is unaffected by the configuration of the root logger.
    """
    log = logging.getLogger(name)
    if not log.hasHandlers():
        colorize = sys.stderr is not None and sys.stderr.isatty() and not environment.colorless.value
        handler = logging.StreamHandler()
        handler.setFormatter(LogFormatter(
            '({asctime}) {level_word} in {name}: {message}', colorize=colorize, style='{', datefmt='%H:%M:%S'))
        log.addHandler(handler)
    log.propagate = False
    return log


def _parse_flag(value: Optional[str]) -> bool:
    value = (value or '').strip().lower()
    if value.isdigit():
        return int(value) != 0
    return bool(value) and value not in {'no', 'off', 'false'}


def _parse_number(value: Optional[str]) -> int:
    try:
        return int(value, 0)
    except (TypeError, ValueError):
        return 0


def _parse_level(value: Optional[str]) -> Optional[LogLevel]:
    if value is None:
        return None
    if value.isdigit():
        return LogLevel.from_verbosity(int(value))
    try:
        return LogLevel[value.upper()]
    except KeyError:
        options = ', '.join(level.name for level in LogLevel)
        logger(__name__).warning(F'ignoring unknown verbosity {value!r}; pick from: {options}')
        return None


class Setting(Generic[_T]):
    """
    The value of the environment variable `BYTECASE_<name>`, converted by the `parse` function. It
    is read once on creation and again when `reload` is called.
    """
    def __init__(self, name: str, parse: Callable[[Optional[str]], _T]):
        self.key = F'BYTECASE_{name}'
        self.parse = parse
        self.reload()

    def reload(self) -> _T:
        self.value = value = self.parse(os.environ.get(self.key))
        return value


def Flag(name: str) -> Setting[bool]:
    return Setting(name, _parse_flag)


def Number(name: str) -> Setting[int]:
    return Setting(name, _parse_number)


def Level(name: str) -> Setting[Optional[LogLevel]]:
    return Setting(name, _parse_level)


class environment:
    term_size = Number('TERM_SIZE')
    colorless = Flag('COLORLESS')
    disable_table_cache = Flag('DISABLE_TABLE_CACHE')
    verbosity: Setting[Optional[LogLevel]]


# parsing the verbosity can log a warning, which requires the colorless setting
environment.verbosity = Level('VERBOSITY')
