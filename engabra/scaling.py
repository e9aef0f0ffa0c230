"""Multiplication of algebra entities by a real number."""

from __future__ import annotations

from dataclasses import fields
from numbers import Real

from .types import ComPlex, DirPlex, ImSpin, MultiVector, Spinor, is_blade

__all__ = ["scale"]

_COMPOSITES = (Spinor, ImSpin, ComPlex, DirPlex, MultiVector)


def scale(factor, item):
    """Product of a real number `factor` with a number, blade or composite.

    The result has the same type as `item` (a float for a number item).
    """
    if isinstance(factor, bool) or not isinstance(factor, Real):
        raise TypeError(f"scale factor must be a real number, got {factor!r}")
    factor = float(factor)
    if isinstance(item, Real):
        return factor * float(item)
    if is_blade(item):
        return type(item)(*(factor * value for value in item))
    if isinstance(item, _COMPOSITES):
        return type(item)(
            *(scale(factor, getattr(item, part.name)) for part in fields(item))
        )
    raise TypeError(f"cannot scale {type(item).__name__}")