"""Validity tests for numbers and algebra entities (NaN marks a null value)."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from dataclasses import fields, is_dataclass
from numbers import Real

from .types import ComPlex, DirPlex, ImSpin, MultiVector, Spinor, is_blade

__all__ = ["is_valid"]

_COMPOSITES = (Spinor, ImSpin, ComPlex, DirPlex, MultiVector)


def _valid_number(value: float) -> bool:
    """Zero or a normal floating point value (not subnormal, inf or NaN)."""
    if value == 0.0:
        return True
    return math.isfinite(value) and abs(value) >= sys.float_info.min


def is_valid(value) -> bool:
    """True if `value` carries a useful numeric value, i.e. is not null.

    Numbers must be zero or normal. Blades are judged by their first
    component only. Composite types are valid when each of their blades
    is valid. Plain sequences of numbers need every component valid.
    """
    if isinstance(value, Real):
        return _valid_number(float(value))
    if is_blade(value):
        return _valid_number(value[0])
    if isinstance(value, _COMPOSITES) and is_dataclass(value):
        return all(is_valid(getattr(value, part.name)) for part in fields(value))
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        if not value:
            raise ValueError("cannot judge validity of an empty sequence")
        return all(_valid_number(float(element)) for element in value)
    raise TypeError(f"cannot judge validity of {type(value).__name__}")