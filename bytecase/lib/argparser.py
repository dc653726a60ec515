"""
The argument parser that is used by every `bytecase.units.Unit`. Parsing errors are raised as
exceptions so that units can also be assembled from arguments in Python code.
"""
from __future__ import annotations

import argparse
import sys

from bytecase.lib.tools import get_terminal_size


class ArgparseError(ValueError):
    """
    Raised by `bytecase.lib.argparser.ArgumentParser` for invalid arguments. The `parser` member
    refers to the parser that rejected them.
    """
    def __init__(self, parser: ArgumentParser, message: str):
        super().__init__(message)
        self.parser = parser


class HelpFormatter(argparse.RawDescriptionHelpFormatter):
    """
    Keeps the line breaks of the unit documentation and uses the full width of the terminal.
    """
    def __init__(self, prog, indent_increment=2, max_help_position=30, width=None):
        super().__init__(prog, indent_increment, max_help_position, width=width or get_terminal_size(80))


class ArgumentParser(argparse.ArgumentParser):

    def __init__(self, prog=None, description=None, add_help=True):
        super().__init__(prog=prog, description=description, add_help=add_help, formatter_class=HelpFormatter)
        if sys.version_info >= (3, 14):
            self.color = False

    def error(self, message):
        raise ArgparseError(self, message)

    def exit_with_error(self, message):
        """
        Print the usage and the message to stderr, then exit; this is what the command line sees
        of an `bytecase.lib.argparser.ArgparseError`.
        """
        super().error(message)
