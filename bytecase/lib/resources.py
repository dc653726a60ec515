"""
A wrapper module to read and write local data resources.
"""
from __future__ import annotations

import sys

from importlib import resources


def datapath(name: str):
    """
    Returns the path of the resource with the given name in the package data directory.
    """
    if sys.version_info >= (3, 9):
        return resources.files('bytecase.data').joinpath(name)
    with resources.path('bytecase', 'data') as data:
        return data / name
