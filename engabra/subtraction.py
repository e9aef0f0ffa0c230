"""Subtraction and negation of algebra entities.

Subtraction is anti-commutative: (A - B) == -(B - A). Results are
promoted to the composite type that holds the grades involved.
"""

from __future__ import annotations

import operator
from dataclasses import fields
from numbers import Real

from .types import (
    BiVector,
    ComPlex,
    DirPlex,
    ImSpin,
    MultiVector,
    Scalar,
    Spinor,
    TriVector,
    Vector,
    binary_element_by_element,
    is_blade,
)

__all__ = ["subtract", "negate"]

_COMPOSITES = (Spinor, ImSpin, ComPlex, DirPlex, MultiVector)


def negate(item):
    """Additive inverse of a number, blade or composite entity."""
    if isinstance(item, Real):
        return -float(item)
    if is_blade(item):
        return type(item)(*(-value for value in item))
    if isinstance(item, _COMPOSITES):
        return type(item)(
            *(negate(getattr(item, part.name)) for part in fields(item))
        )
    raise TypeError(f"cannot negate {type(item).__name__}")


def _same_composite(item_a, item_b):
    return type(item_a)(
        *(
            subtract(getattr(item_a, part.name), getattr(item_b, part.name))
            for part in fields(item_a)
        )
    )


# "Forward" order rules; the reversed order is the negated forward result.
_RULES = {
    (Scalar, BiVector): lambda sca, biv: Spinor(sca, negate(biv)),
    (Scalar, Spinor): lambda sca, spin: Spinor(
        subtract(sca, spin.sca), negate(spin.biv)
    ),
    (Vector, BiVector): lambda vec, biv: DirPlex(vec, negate(biv)),
    (Vector, ImSpin): lambda vec, imsp: ImSpin(
        subtract(vec, imsp.vec), negate(imsp.tri)
    ),
    (TriVector, ImSpin): lambda tri, imsp: ImSpin(
        negate(imsp.vec), subtract(tri, imsp.tri)
    ),
    (BiVector, Spinor): lambda biv, spin: Spinor(
        negate(spin.sca), subtract(biv, spin.biv)
    ),
    (BiVector, DirPlex): lambda biv, dplx: DirPlex(
        negate(dplx.vec), subtract(biv, dplx.biv)
    ),
    (BiVector, MultiVector): lambda biv, mv: MultiVector(
        negate(mv.sca), negate(mv.vec), subtract(biv, mv.biv), negate(mv.tri)
    ),
    (Spinor, ImSpin): lambda spin, imsp: MultiVector(
        spin.sca, negate(imsp.vec), spin.biv, negate(imsp.tri)
    ),
    (Spinor, MultiVector): lambda spin, mv: MultiVector(
        subtract(spin.sca, mv.sca),
        negate(mv.vec),
        subtract(spin.biv, mv.biv),
        negate(mv.tri),
    ),
    (ImSpin, MultiVector): lambda imsp, mv: MultiVector(
        negate(mv.sca),
        subtract(imsp.vec, mv.vec),
        negate(mv.biv),
        subtract(imsp.tri, mv.tri),
    ),
}


def subtract(item_a, item_b):
    """Difference item_a - item_b.

    Raises TypeError for combinations whose result type is not supported.
    """
    kind_a, kind_b = type(item_a), type(item_b)
    if kind_a is kind_b:
        if is_blade(item_a):
            return binary_element_by_element(item_a, item_b, operator.sub)
        if isinstance(item_a, _COMPOSITES):
            return _same_composite(item_a, item_b)
    rule = _RULES.get((kind_a, kind_b))
    if rule is not None:
        return rule(item_a, item_b)
    rule = _RULES.get((kind_b, kind_a))
    if rule is not None:
        return negate(rule(item_b, item_a))
    raise TypeError(
        f"subtraction of {kind_b.__name__} from {kind_a.__name__} "
        "is not supported"
    )