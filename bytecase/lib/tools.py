"""
Helper functions for the command line interface of units.
"""
from __future__ import annotations

import inspect
import os
import re
import sys


def get_terminal_size(default: int = 0) -> int:
    """
    The width of the terminal that stderr or stdout is attached to, minus one column. A positive
    value of the environment variable `BYTECASE_TERM_SIZE` overrides it; the default is returned
    when neither stream is a terminal.
    """
    from bytecase.lib.environment import environment
    configured = environment.term_size.value
    if configured > 0:
        return configured
    for stream in (sys.stderr, sys.stdout):
        try:
            if not stream.isatty():
                continue
            columns = os.get_terminal_size(stream.fileno()).columns
        except (AttributeError, OSError, ValueError):
            continue
        if columns > 1:
            return columns - 1
    return default


def documentation(unit) -> str:
    """
    The docstring of a unit as it is shown in the command line help: References like
    `bytecase.lib.dispatch.lowercase` are shortened to their last component and backticks are
    removed.
    """
    text = inspect.getdoc(unit) or ''
    text = re.sub(R'`bytecase\.(?:\w+\.)*(\w+)`', R'\1', text)
    return text.replace('`', '')


def exception_to_string(exception: BaseException) -> str:
    """
    A short description of the exception for log output: its longest string argument, or the name
    of its type when it has no arguments.
    """
    if not exception.args:
        return exception.__class__.__name__
    messages = [a for a in exception.args if isinstance(a, str)]
    if not messages:
        return str(exception)
    return max(messages, key=len).strip()
