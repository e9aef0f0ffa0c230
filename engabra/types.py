"""Entity types of the 3D geometric algebra and low-level helpers on them.

The algebra is built from four blades (Scalar, Vector, BiVector,
TriVector) and composite types that group blades of several grades
(Spinor, ImSpin, ComPlex, DirPlex, MultiVector).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Callable, Iterator, Sequence

__all__ = [
    "Scalar",
    "Vector",
    "BiVector",
    "TriVector",
    "Spinor",
    "ImSpin",
    "ComPlex",
    "DirPlex",
    "MultiVector",
    "is_blade",
    "null",
    "zero",
    "one",
    "to_multivector",
    "binary_element_by_element",
    "prod_comm",
    "prod_anti",
    "nan",
    "pi",
    "pi_half",
    "pi_qtr",
    "turn_full",
    "turn_half",
    "turn_qtr",
    "e1",
    "e2",
    "e3",
    "e23",
    "e31",
    "e12",
    "e123",
]

nan = math.nan

pi_qtr = math.atan(1.0)
pi_half = 2.0 * pi_qtr
pi = 2.0 * pi_half

turn_full = 2.0 * pi
turn_half = pi
turn_qtr = pi_half


def _format_values(values: Sequence[float]) -> str:
    """Fixed-point display: each value as ' ' + width 9, 6 decimals."""
    return "".join(f" {value:9.6f}" for value in values)


class _Blade:
    """Common behaviour of single-grade entities holding a tuple of floats."""

    __slots__ = ("data",)
    size: int = 0

    def __init__(self, *values: float) -> None:
        if len(values) != self.size:
            raise ValueError(
                f"{type(self).__name__} needs {self.size} value(s), "
                f"got {len(values)}"
            )
        object.__setattr__(self, "data", tuple(float(v) for v in values))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __iter__(self) -> Iterator[float]:
        return iter(self.data)

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, index: int) -> float:
        return self.data[index]

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.data == other.data

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.data))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(v) for v in self.data)})"

    def __str__(self) -> str:
        return _format_values(self.data)


class Scalar(_Blade):
    """Grade-0 blade: a real number that does not depend on space."""

    __slots__ = ()
    size = 1


class Vector(_Blade):
    """Grade-1 blade: a directed line segment (components e1, e2, e3)."""

    __slots__ = ()
    size = 3


class BiVector(_Blade):
    """Grade-2 blade: a directed plane segment (components e23, e31, e12)."""

    __slots__ = ()
    size = 3


class TriVector(_Blade):
    """Grade-3 blade: a directed volume, the pseudo-scalar of 3D space."""

    __slots__ = ()
    size = 1


def _coerce(kind: type, value: object) -> _Blade:
    """Accept a blade of the right kind, a number (1-element) or a sequence."""
    if isinstance(value, kind):
        return value
    if isinstance(value, _Blade):
        raise TypeError(
            f"expected {kind.__name__}, got {type(value).__name__}"
        )
    if isinstance(value, Real):
        return kind(value)
    try:
        return kind(*value)
    except TypeError:
        raise TypeError(
            f"cannot make {kind.__name__} from {value!r}"
        ) from None


class _Composite:
    """Shared iteration, indexing and display for multi-grade types."""

    _parts: tuple[type, ...] = ()

    def _blades(self) -> tuple[_Blade, ...]:
        raise NotImplementedError

    def __iter__(self) -> Iterator[float]:
        for blade in self._blades():
            yield from blade

    def __len__(self) -> int:
        return sum(kind.size for kind in self._parts)

    def __getitem__(self, index: int) -> float:
        return tuple(self)[index]

    def __str__(self) -> str:
        return " ".join(str(blade) for blade in self._blades())


@dataclass(frozen=True)
class Spinor(_Composite):
    """Scalar plus bivector: the even sub-algebra (rotations)."""

    sca: Scalar
    biv: BiVector

    def __post_init__(self) -> None:
        object.__setattr__(self, "sca", _coerce(Scalar, self.sca))
        object.__setattr__(self, "biv", _coerce(BiVector, self.biv))

    def _blades(self) -> tuple[_Blade, ...]:
        return (self.sca, self.biv)


@dataclass(frozen=True)
class ImSpin(_Composite):
    """Vector plus trivector: the dual of a spinor."""

    vec: Vector
    tri: TriVector

    def __post_init__(self) -> None:
        object.__setattr__(self, "vec", _coerce(Vector, self.vec))
        object.__setattr__(self, "tri", _coerce(TriVector, self.tri))

    def _blades(self) -> tuple[_Blade, ...]:
        return (self.vec, self.tri)


@dataclass(frozen=True)
class ComPlex(_Composite):
    """Scalar plus trivector: behaves like an ordinary complex number."""

    sca: Scalar
    tri: TriVector

    def __post_init__(self) -> None:
        object.__setattr__(self, "sca", _coerce(Scalar, self.sca))
        object.__setattr__(self, "tri", _coerce(TriVector, self.tri))

    def _blades(self) -> tuple[_Blade, ...]:
        return (self.sca, self.tri)

    def __complex__(self) -> complex:
        return complex(self.sca[0], self.tri[0])

    @classmethod
    def from_complex(cls, value: complex) -> "ComPlex":
        """Build from a Python complex: real to scalar, imaginary to trivector."""
        z = complex(value)
        return cls(z.real, z.imag)


@dataclass(frozen=True)
class DirPlex(_Composite):
    """Vector plus bivector."""

    vec: Vector
    biv: BiVector

    def __post_init__(self) -> None:
        object.__setattr__(self, "vec", _coerce(Vector, self.vec))
        object.__setattr__(self, "biv", _coerce(BiVector, self.biv))

    def _blades(self) -> tuple[_Blade, ...]:
        return (self.vec, self.biv)


@dataclass(frozen=True)
class MultiVector(_Composite):
    """General element with all four grades.

    Component order when iterated or indexed:
    scalar, e1, e2, e3, e23, e31, e12, e123.
    """

    sca: Scalar
    vec: Vector
    biv: BiVector
    tri: TriVector

    def __post_init__(self) -> None:
        object.__setattr__(self, "sca", _coerce(Scalar, self.sca))
        object.__setattr__(self, "vec", _coerce(Vector, self.vec))
        object.__setattr__(self, "biv", _coerce(BiVector, self.biv))
        object.__setattr__(self, "tri", _coerce(TriVector, self.tri))

    def _blades(self) -> tuple[_Blade, ...]:
        return (self.sca, self.vec, self.biv, self.tri)


Spinor._parts = (Scalar, BiVector)
ImSpin._parts = (Vector, TriVector)
ComPlex._parts = (Scalar, TriVector)
DirPlex._parts = (Vector, BiVector)
MultiVector._parts = (Scalar, Vector, BiVector, TriVector)

_BLADES = (Scalar, Vector, BiVector, TriVector)


def is_blade(value: object) -> bool:
    """True for Scalar, Vector, BiVector and TriVector (types or instances)."""
    if isinstance(value, type):
        return issubclass(value, _BLADES)
    return isinstance(value, _BLADES)


def _filled(kind: type, value: float):
    if kind is float:
        return float(value)
    if isinstance(kind, type) and issubclass(kind, _Blade):
        return kind(*([value] * kind.size))
    if isinstance(kind, type) and issubclass(kind, _Composite):
        return kind(*(_filled(part, value) for part in kind._parts))
    raise TypeError(f"unsupported kind: {kind!r}")


def null(kind: type):
    """Instance of `kind` with every component NaN (the invalid value)."""
    return _filled(kind, nan)


def zero(kind: type):
    """Instance of `kind` with every component zero."""
    return _filled(kind, 0.0)


def one(kind: type):
    """Multiplicative identity for kinds that hold a scalar grade."""
    if kind is float:
        return 1.0
    if kind is Scalar:
        return Scalar(1.0)
    if kind is Spinor:
        return Spinor(1.0, zero(BiVector))
    if kind is ComPlex:
        return ComPlex(1.0, 0.0)
    if kind is MultiVector:
        return MultiVector(1.0, zero(Vector), zero(BiVector), 0.0)
    raise TypeError(f"no unit value for kind: {kind!r}")


def to_multivector(item) -> MultiVector:
    """Promote a number, blade or composite to a MultiVector."""
    if isinstance(item, MultiVector):
        return item
    sca, vec, biv, tri = (
        zero(Scalar), zero(Vector), zero(BiVector), zero(TriVector)
    )
    if isinstance(item, Real):
        sca = Scalar(item)
    elif isinstance(item, Scalar):
        sca = item
    elif isinstance(item, Vector):
        vec = item
    elif isinstance(item, BiVector):
        biv = item
    elif isinstance(item, TriVector):
        tri = item
    elif isinstance(item, Spinor):
        sca, biv = item.sca, item.biv
    elif isinstance(item, ImSpin):
        vec, tri = item.vec, item.tri
    elif isinstance(item, ComPlex):
        sca, tri = item.sca, item.tri
    elif isinstance(item, DirPlex):
        vec, biv = item.vec, item.biv
    else:
        raise TypeError(f"cannot promote {type(item).__name__} to MultiVector")
    return MultiVector(sca, vec, biv, tri)


def binary_element_by_element(
    blade_a: _Blade,
    blade_b: _Blade,
    op: Callable[[float, float], float],
) -> _Blade:
    """Apply `op` to matching components of two blades of the same type."""
    if type(blade_a) is not type(blade_b) or not is_blade(blade_a):
        raise TypeError(
            "element-by-element operation needs two blades of the same type"
        )
    return type(blade_a)(*map(op, blade_a, blade_b))


def prod_comm(arg_a: Sequence[float], arg_b: Sequence[float]) -> float:
    """Commutative (contraction) product: sum of component products."""
    if len(arg_a) != len(arg_b) or len(arg_a) not in (1, 3):
        raise ValueError("arguments must both have 1 or 3 components")
    return sum(a * b for a, b in zip(arg_a, arg_b))


def prod_anti(
    arg_a: Sequence[float], arg_b: Sequence[float]
) -> tuple[float, float, float]:
    """Anti-commutative (extension) product of two 3-component arguments."""
    if len(arg_a) != 3 or len(arg_b) != 3:
        raise ValueError("arguments must both have 3 components")
    a0, a1, a2 = arg_a
    b0, b1, b2 = arg_b
    return (a1 * b2 - a2 * b1, a2 * b0 - a0 * b2, a0 * b1 - a1 * b0)


e1 = Vector(1.0, 0.0, 0.0)
e2 = Vector(0.0, 1.0, 0.0)
e3 = Vector(0.0, 0.0, 1.0)
e23 = BiVector(1.0, 0.0, 0.0)
e31 = BiVector(0.0, 1.0, 0.0)
e12 = BiVector(0.0, 0.0, 1.0)
e123 = TriVector(1.0)