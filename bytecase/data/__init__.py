"""
Data directory for cached tables; see `bytecase.lib.resources`.
"""
