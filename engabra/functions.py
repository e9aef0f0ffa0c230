"""Mathematical functions on algebra entities.

Covers squares and cubes, magnitudes and directions, amplitudes,
reversion, inverses, exponentials and the logarithm and square root of
spinors (the G2 sub-algebra). Functions that cannot produce a
meaningful value return the null (all NaN) instance of their result type.
"""

from __future__ import annotations

import cmath
import math
import sys
from dataclasses import fields
from numbers import Real

from .product import multiply
from .scaling import scale
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
    e23,
    is_blade,
    null,
    prod_comm,
    turn_half,
    zero,
)
from .validity import is_valid

__all__ = [
    "sq",
    "cube",
    "mag_sq",
    "magnitude",
    "pair_mag_dir",
    "amp_sq",
    "amplitude",
    "direction",
    "reverse",
    "dirverse",
    "inverse",
    "exp",
    "log_g2",
    "sqrt_g2",
]

_EPS = sys.float_info.epsilon
_TINY = sys.float_info.min
_DENORM_MIN = 5e-324

_COMPOSITES = (Spinor, ImSpin, ComPlex, DirPlex, MultiVector)


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


#
# Utilities
#


def sq(value):
    """Value multiplied by itself (closed sub-algebras keep their type)."""
    return multiply(value, value)


def cube(value):
    """Value multiplied by itself three times."""
    return multiply(multiply(value, value), value)


#
# Magnitudes and directions
#


def mag_sq(item) -> float:
    """Squared magnitude: the sum of squares of all components."""
    if _is_number(item):
        return float(item) * float(item)
    if is_blade(item) or isinstance(item, _COMPOSITES):
        return sum(value * value for value in item)
    raise TypeError(f"no magnitude for {type(item).__name__}")


def magnitude(item) -> float:
    """Euclidean magnitude of a number or entity."""
    return math.sqrt(mag_sq(item))


def pair_mag_dir(item):
    """Split into (magnitude, unit direction).

    The direction is null when the magnitude is too small to divide by.
    """
    mag = magnitude(item)
    kind = float if _is_number(item) else type(item)
    direc = null(kind)
    if _DENORM_MIN < mag:
        direc = scale(1.0 / mag, item)
    return mag, direc


def direction(item):
    """Unit direction of an item (null for a zero item)."""
    return pair_mag_dir(item)[1]


#
# Reversion
#


def _regrade(item, signs: dict):
    if _is_number(item):
        return float(item) * signs[Scalar]
    if is_blade(item):
        return scale(signs[type(item)], item)
    if isinstance(item, _COMPOSITES):
        return type(item)(
            *(_regrade(getattr(item, part.name), signs) for part in fields(item))
        )
    raise TypeError(f"cannot regrade {type(item).__name__}")


_REVERSE_SIGNS = {Scalar: 1.0, Vector: 1.0, BiVector: -1.0, TriVector: -1.0}
_DIRVERSE_SIGNS = {Scalar: 1.0, Vector: -1.0, BiVector: -1.0, TriVector: 1.0}


def reverse(item):
    """Reversion: negates the bivector and trivector grades."""
    return _regrade(item, _REVERSE_SIGNS)


def dirverse(item):
    """Negates the vector and bivector grades (s + v + B + T -> s - v - B + T)."""
    return _regrade(item, _DIRVERSE_SIGNS)


#
# Amplitudes
#


def _amp_sq_complex(cplx: ComPlex) -> ComPlex:
    s, t = cplx.sca[0], cplx.tri[0]
    return ComPlex(s * s - t * t, 2.0 * s * t)


def _amp_sq_dirplex(dplx: DirPlex) -> ComPlex:
    sca_part = mag_sq(dplx.vec) - mag_sq(dplx.biv)
    tri_part = 2.0 * prod_comm(dplx.vec, dplx.biv)
    return ComPlex(-sca_part, -tri_part)


def _amp_sq_multivector(mv: MultiVector) -> ComPlex:
    sq_sca = mag_sq(mv.sca)
    sq_vec = mag_sq(mv.vec)
    sq_biv = -mag_sq(mv.biv)
    sq_tri = -mag_sq(mv.tri)
    sca_part = sq_sca - sq_vec - sq_biv + sq_tri
    tri_sca_tri = mv.sca[0] * mv.tri[0]
    tri_vec_biv = prod_comm(mv.vec, mv.biv)
    return ComPlex(sca_part, 2.0 * (tri_sca_tri - tri_vec_biv))


_AMP_SQ = {
    Scalar: lambda sca: ComPlex(mag_sq(sca), 0.0),
    Vector: lambda vec: ComPlex(-mag_sq(vec), 0.0),
    BiVector: lambda biv: ComPlex(mag_sq(biv), 0.0),
    TriVector: lambda tri: ComPlex(-mag_sq(tri), 0.0),
    Spinor: lambda spin: ComPlex(mag_sq(spin.sca) + mag_sq(spin.biv), 0.0),
    ImSpin: lambda imsp: ComPlex(-(mag_sq(imsp.vec) + mag_sq(imsp.tri)), 0.0),
    ComPlex: _amp_sq_complex,
    DirPlex: _amp_sq_dirplex,
    MultiVector: _amp_sq_multivector,
}


def amp_sq(item) -> ComPlex:
    """Squared amplitude: item * dirverse(item), always a ComPlex."""
    if _is_number(item):
        item = Scalar(item)
    rule = _AMP_SQ.get(type(item))
    if rule is None:
        raise TypeError(f"no amplitude for {type(item).__name__}")
    return rule(item)


def amplitude(item) -> ComPlex:
    """Principal square root of the squared amplitude."""
    return ComPlex.from_complex(cmath.sqrt(complex(amp_sq(item))))


#
# Inverses
#


def _inverse_complex(cplx: ComPlex) -> ComPlex:
    z = complex(cplx)
    z_amp_sq = z * z.conjugate()
    if not _TINY < abs(z_amp_sq):
        return null(ComPlex)
    return ComPlex.from_complex(z.conjugate() * (1.0 / z_amp_sq))


def inverse(item):
    """Algebraic inverse of a blade, ComPlex or MultiVector.

    Returns the null instance when no inverse exists.
    """
    if is_blade(item):
        mag2 = mag_sq(item)
        if mag2 == 0.0:
            return null(type(item))
        return scale(1.0 / mag2, reverse(item))
    if isinstance(item, ComPlex):
        return _inverse_complex(item)
    if isinstance(item, MultiVector):
        inv_amp = _inverse_complex(amp_sq(item))
        return multiply(inv_amp, dirverse(item))
    raise TypeError(f"no inverse for {type(item).__name__}")


#
# Exponentials
#


def _sync(angle: float) -> float:
    """sin(x)/x, with a series expansion near zero."""
    if angle < 1.0e-4:
        angle_sq = angle * angle
        return angle_sq * angle_sq / 120.0 - angle_sq / 6.0 + 1.0
    return math.sin(angle) / angle


def _exp_bivector(angle: BiVector) -> Spinor:
    if not is_valid(angle):
        return null(Spinor)
    mag, direc = pair_mag_dir(angle)
    if not is_valid(direc):
        return Spinor(1.0, zero(BiVector))
    return Spinor(math.cos(mag), scale(math.sin(mag), direc))


def _exp_multivector(item: MultiVector) -> MultiVector:
    if not is_valid(item):
        return null(MultiVector)
    # Formula works with bivector basis E12, E23, E13; ours is e23, e31, e12.
    a0 = item[0]
    a1, a2, a3 = item[1], item[2], item[3]
    a12 = item[6]
    a13 = -item[5]
    a23 = item[4]
    a123 = item[7]

    a3m12, a3p12 = a3 - a12, a3 + a12
    a2m13, a2p13 = a2 - a13, a2 + a13
    a1m23, a1p23 = a1 - a23, a1 + a23

    apos = math.sqrt(a3m12 * a3m12 + a2p13 * a2p13 + a1m23 * a1m23)
    aneg = math.sqrt(a3p12 * a3p12 + a2m13 * a2m13 + a1p23 * a1p23)

    cospos, cosneg = math.cos(apos), math.cos(aneg)
    syncpos, syncneg = _sync(apos), _sync(aneg)

    hea0 = 0.5 * math.exp(a0)
    epa = math.exp(a123)
    ena = math.exp(-a123)

    b0 = epa * cospos + ena * cosneg
    b1 = epa * a1m23 * syncpos + ena * a1p23 * syncneg
    b2 = epa * a2p13 * syncpos + ena * a2m13 * syncneg
    b3 = epa * a3m12 * syncpos + ena * a3p12 * syncneg
    b12 = -epa * a3m12 * syncpos + ena * a3p12 * syncneg
    b13 = epa * a2p13 * syncpos - ena * a2m13 * syncneg
    b23 = -epa * a1m23 * syncpos + ena * a1p23 * syncneg
    b123 = epa * cospos - ena * cosneg

    result = MultiVector(
        Scalar(b0),
        Vector(b1, b2, b3),
        BiVector(b23, -b13, b12),
        TriVector(b123),
    )
    return scale(hea0, result)


def exp(item):
    """Exponential of a BiVector or Spinor (giving a Spinor) or a MultiVector."""
    if isinstance(item, BiVector):
        return _exp_bivector(item)
    if isinstance(item, Spinor):
        return scale(math.exp(item.sca[0]), _exp_bivector(item.biv))
    if isinstance(item, MultiVector):
        return _exp_multivector(item)
    raise TypeError(f"no exponential for {type(item).__name__}")


#
# Logarithm and square root of spinors
#


def log_g2(spin: Spinor, biv_dir_for_imaginary: BiVector = e23) -> Spinor:
    """Principal logarithm of a spinor: log-magnitude plus bivector angle.

    For a spinor on the negative scalar axis the rotation plane is
    undefined; `biv_dir_for_imaginary` supplies it. Returns null for an
    invalid or (near) zero spinor.
    """
    if not isinstance(spin, Spinor):
        raise TypeError(f"log_g2 needs a Spinor, got {type(spin).__name__}")
    if not is_valid(spin):
        return null(Spinor)
    spin_mag = magnitude(spin)
    if not _EPS < spin_mag:
        return null(Spinor)
    log_mag = math.log(spin_mag)
    spin_dir = scale(1.0 / spin_mag, spin)
    dir_cos = spin_dir.sca[0]
    almost_one = 1.0 - _EPS
    if almost_one < dir_cos:
        return Spinor(log_mag, zero(BiVector))
    if dir_cos < -almost_one:
        biv_dir = direction(biv_dir_for_imaginary)
        return Spinor(log_mag, scale(turn_half, biv_dir))
    sin_mag, biv_dir = pair_mag_dir(spin_dir.biv)
    angle = math.atan2(sin_mag, dir_cos)
    return Spinor(log_mag, scale(angle, biv_dir))


def sqrt_g2(spin: Spinor, biv_dir_for_imaginary: BiVector = e23) -> Spinor:
    """Principal square root of a spinor (zero for a (near) zero spinor)."""
    if not isinstance(spin, Spinor):
        raise TypeError(f"sqrt_g2 needs a Spinor, got {type(spin).__name__}")
    if not is_valid(spin):
        return null(Spinor)
    if magnitude(spin) < 4.0 * _EPS:
        return zero(Spinor)
    gangle = log_g2(spin, biv_dir_for_imaginary)
    return exp(scale(0.5, gangle))