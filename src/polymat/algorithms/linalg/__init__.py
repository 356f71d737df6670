"""Dense square matrices over an arbitrary coefficient ring."""

from .matrix import SquareMatrix

__all__ = [
    "SquareMatrix",
]
