from __future__ import annotations

from bytecase.lib.dispatch import uppercase
from bytecase.lib.options import UppercaseMode
from bytecase.units import Arg, Unit


class cupper(Unit):
    """
    Stands for "Convert to UPPER case"; The unit converts all characters in the input to their
    uppercase form according to the full Unicode case mapping. For example, the German sharp s
    becomes the two letters SS. Bytes that are not part of a valid UTF-8 sequence are not changed.
    """
    def __init__(
        self,
        mode: Arg.Choice(metavar='mode', type=str, choices=UppercaseMode.tokens(), help=(
            'Optionally choose the mapping from: {choices}. By default, the full Unicode mapping is used.')) = None,
    ):
        super().__init__(mode=UppercaseMode.parse(mode).ensure_implemented())

    def process(self, data):
        self.log_debug(F'uppercasing {len(data)} bytes with {self.args.mode} mapping')
        return uppercase(data, self.args.mode).collect()
