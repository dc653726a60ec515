from __future__ import annotations

from bytecase.lib.dispatch import titlecase
from bytecase.lib.options import TitlecaseMode
from bytecase.units import Arg, Unit


class ctitle(Unit):
    """
    Stands for "Convert to TITLE case"; The first character of the input is converted to its
    titlecase form and all remaining characters are converted to lowercase. This is how a
    programming language would capitalize a string, it does not titlecase individual words.
    """
    def __init__(
        self,
        mode: Arg.Choice(metavar='mode', type=str, choices=TitlecaseMode.tokens(), help=(
            'Optionally choose the mapping from: {choices}. By default, the full Unicode mapping is used.')) = None,
    ):
        super().__init__(mode=TitlecaseMode.parse(mode).ensure_implemented())

    def process(self, data):
        return titlecase(data, self.args.mode).collect()
