from __future__ import annotations

from bytecase.lib.dispatch import lowercase
from bytecase.lib.options import LowercaseMode
from bytecase.units import Arg, Unit


class clower(Unit):
    """
    Stands for "Convert to LOWER case"; The unit converts all characters in the input to their
    lowercase form according to the full Unicode case mapping. A single character can expand to
    more than one character. Bytes that are not part of a valid UTF-8 sequence are not changed.
    """
    def __init__(
        self,
        mode: Arg.Choice(metavar='mode', type=str, choices=LowercaseMode.tokens(), help=(
            'Optionally choose the mapping from: {choices}. By default, the full Unicode mapping is used.')) = None,
    ):
        super().__init__(mode=LowercaseMode.parse(mode).ensure_implemented())

    def process(self, data):
        self.log_debug(F'lowercasing {len(data)} bytes with {self.args.mode} mapping')
        return lowercase(data, self.args.mode).collect()
