"""Character-level access functions and copy algorithms."""

from .access import at, back, empty, front, is_empty, length
from .algorithms import copy, copy_from, copy_if, copy_n, copy_until, copy_while

__all__ = [
    "at",
    "back",
    "empty",
    "front",
    "is_empty",
    "length",
    "copy",
    "copy_from",
    "copy_if",
    "copy_n",
    "copy_until",
    "copy_while",
]
