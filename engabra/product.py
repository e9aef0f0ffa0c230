"""Geometric product of algebra entities.

Every combination of number, blade and composite type is supported.
The result type is the smallest entity type that holds every grade the
product can produce, e.g. Vector * Vector gives a Spinor and
Spinor * ComPlex gives a MultiVector. A product of two plain numbers is
a plain float.
"""

from __future__ import annotations

from dataclasses import fields
from functools import lru_cache
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
    prod_anti,
    prod_comm,
    to_multivector,
)

__all__ = ["multiply"]

_GRADES = {
    float: frozenset({0}),
    Scalar: frozenset({0}),
    Vector: frozenset({1}),
    BiVector: frozenset({2}),
    TriVector: frozenset({3}),
    Spinor: frozenset({0, 2}),
    ImSpin: frozenset({1, 3}),
    ComPlex: frozenset({0, 3}),
    DirPlex: frozenset({1, 2}),
    MultiVector: frozenset({0, 1, 2, 3}),
}

# Candidate result types, smallest first.
_RESULT_KINDS = (
    Scalar,
    Vector,
    BiVector,
    TriVector,
    Spinor,
    ImSpin,
    ComPlex,
    DirPlex,
    MultiVector,
)

_BLADE_PART = {Scalar: "sca", Vector: "vec", BiVector: "biv", TriVector: "tri"}


def _kind(item) -> type:
    if isinstance(item, bool):
        raise TypeError("booleans are not algebra entities")
    if isinstance(item, Real):
        return float
    kind = type(item)
    if kind not in _GRADES:
        raise TypeError(f"cannot multiply {kind.__name__}")
    return kind


def _grade_product(grade_a: int, grade_b: int) -> range:
    """Grades present in the product of two blades in 3D space."""
    top = min(grade_a + grade_b, 6 - grade_a - grade_b)
    return range(abs(grade_a - grade_b), top + 1, 2)


@lru_cache(maxsize=None)
def _result_kind(kind_a: type, kind_b: type) -> type:
    if kind_a is float:
        return kind_b
    if kind_b is float:
        return kind_a
    grades = {
        grade
        for grade_a in _GRADES[kind_a]
        for grade_b in _GRADES[kind_b]
        for grade in _grade_product(grade_a, grade_b)
    }
    return next(kind for kind in _RESULT_KINDS if grades <= _GRADES[kind])


def _as_complex_parts(item) -> tuple[complex, list[complex]]:
    """Split into (scalar + I*trivector, vector + I*dual-of-bivector).

    The pseudo-scalar I commutes with everything and squares to -1, so it
    is represented by the imaginary unit of Python complex numbers.
    """
    mv = to_multivector(item)
    alpha = complex(mv.sca[0], mv.tri[0])
    vec = [complex(v, b) for v, b in zip(mv.vec, mv.biv)]
    return alpha, vec


def _full_product(item_a, item_b) -> MultiVector:
    alpha, vec_a = _as_complex_parts(item_a)
    beta, vec_b = _as_complex_parts(item_b)
    scalar_part = alpha * beta + prod_comm(vec_a, vec_b)
    cross = prod_anti(vec_a, vec_b)
    vector_part = [
        alpha * b + beta * a + 1j * c for a, b, c in zip(vec_a, vec_b, cross)
    ]
    return MultiVector(
        Scalar(scalar_part.real),
        Vector(*(c.real for c in vector_part)),
        BiVector(*(c.imag for c in vector_part)),
        TriVector(scalar_part.imag),
    )


def _project(mv: MultiVector, kind: type):
    if kind is MultiVector:
        return mv
    if kind in _BLADE_PART:
        return getattr(mv, _BLADE_PART[kind])
    return kind(*(getattr(mv, part.name) for part in fields(kind)))


def multiply(item_a, item_b):
    """Geometric product item_a * item_b (not commutative in general).

    Raises TypeError for arguments that are not numbers or algebra entities.
    """
    kind_a, kind_b = _kind(item_a), _kind(item_b)
    if kind_a is float and kind_b is float:
        return float(item_a) * float(item_b)
    return _project(_full_product(item_a, item_b), _result_kind(kind_a, kind_b))