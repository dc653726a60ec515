"""
The library modules of bytecase. The case mapping machinery is importable without any of the command
line units; see `bytecase.lib.dispatch` for the entry points.
"""
