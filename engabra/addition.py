"""Addition of algebra entities, promoting the result where grades combine."""

from __future__ import annotations

import operator
from dataclasses import fields

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

__all__ = ["add"]

_COMPOSITES = (Spinor, ImSpin, ComPlex, DirPlex, MultiVector)


def _same_composite(item_a, item_b):
    return type(item_a)(
        *(
            add(getattr(item_a, part.name), getattr(item_b, part.name))
            for part in fields(item_a)
        )
    )


_RULES = {
    (Scalar, BiVector): lambda sca, biv: Spinor(sca, biv),
    (Scalar, TriVector): lambda sca, tri: ComPlex(sca, tri),
    (Scalar, Spinor): lambda sca, spin: Spinor(add(sca, spin.sca), spin.biv),
    (Scalar, ComPlex): lambda sca, cplx: ComPlex(add(sca, cplx.sca), cplx.tri),
    (Scalar, MultiVector): lambda sca, mv: MultiVector(
        add(sca, mv.sca), mv.vec, mv.biv, mv.tri
    ),
    (BiVector, Spinor): lambda biv, spin: Spinor(spin.sca, add(biv, spin.biv)),
    (Vector, ImSpin): lambda vec, imsp: ImSpin(add(vec, imsp.vec), imsp.tri),
    (TriVector, ImSpin): lambda tri, imsp: ImSpin(imsp.vec, add(tri, imsp.tri)),
    (Spinor, ImSpin): lambda spin, imsp: MultiVector(
        spin.sca, imsp.vec, spin.biv, imsp.tri
    ),
    (Spinor, MultiVector): lambda spin, mv: MultiVector(
        add(spin.sca, mv.sca), mv.vec, add(spin.biv, mv.biv), mv.tri
    ),
    (ImSpin, MultiVector): lambda imsp, mv: MultiVector(
        mv.sca, add(imsp.vec, mv.vec), mv.biv, add(imsp.tri, mv.tri)
    ),
}


def add(item_a, item_b):
    """Sum of two entities; addition is commutative, so order only affects
    which argument is named first.

    Raises TypeError for combinations whose result type is not supported.
    """
    kind_a, kind_b = type(item_a), type(item_b)
    if kind_a is kind_b:
        if is_blade(item_a):
            return binary_element_by_element(item_a, item_b, operator.add)
        if isinstance(item_a, _COMPOSITES):
            return _same_composite(item_a, item_b)
    rule = _RULES.get((kind_a, kind_b))
    if rule is not None:
        return rule(item_a, item_b)
    rule = _RULES.get((kind_b, kind_a))
    if rule is not None:
        return rule(item_b, item_a)
    raise TypeError(
        f"addition of {kind_a.__name__} and {kind_b.__name__} is not supported"
    )