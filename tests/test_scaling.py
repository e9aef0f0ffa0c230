import pytest

from engabra.addition import add
from engabra.scaling import scale
from engabra.types import (
    BiVector,
    ComPlex,
    DirPlex,
    ImSpin,
    MultiVector,
    Scalar,
    Spinor,
    TriVector,
    Vector,
    to_multivector,
    zero,
)

A_DUB = 101.0
B_DUB = 103.0
A_SCA = Scalar(2.0)
A_VEC = Vector(5.0, 7.0, 11.0)
A_BIV = BiVector(23.0, 29.0, 31.0)
A_TRI = TriVector(47.0)
A_SPIN = Spinor(A_SCA, A_BIV)
A_IMSP = ImSpin(A_VEC, A_TRI)
A_CPLX = ComPlex(A_SCA, A_TRI)
A_DPLX = DirPlex(A_VEC, A_BIV)
A_MVEC = MultiVector(A_SCA, A_VEC, A_BIV, A_TRI)

ALL_ITEMS = [A_SCA, A_VEC, A_BIV, A_TRI, A_SPIN, A_IMSP, A_CPLX, A_DPLX, A_MVEC]


def test_scale_vector_value():
    assert scale(B_DUB, A_VEC) == Vector(5.0 * 103.0, 7.0 * 103.0, 11.0 * 103.0)


def test_scale_number():
    assert scale(A_DUB, B_DUB) == A_DUB * B_DUB


def test_scale_multivector_blades():
    got = scale(B_DUB, A_MVEC)
    assert got == MultiVector(
        scale(B_DUB, A_SCA),
        scale(B_DUB, A_VEC),
        scale(B_DUB, A_BIV),
        scale(B_DUB, A_TRI),
    )


@pytest.mark.parametrize("item", ALL_ITEMS)
def test_scale_by_one_is_identity(item):
    assert scale(1.0, item) == item


@pytest.mark.parametrize("item", ALL_ITEMS)
def test_scale_by_zero_is_zero(item):
    assert scale(0.0, item) == zero(type(item))


@pytest.mark.parametrize("item", ALL_ITEMS)
def test_scale_by_two_is_doubling(item):
    assert scale(2.0, item) == add(item, item)


@pytest.mark.parametrize("item", ALL_ITEMS)
def test_scale_keeps_type(item):
    assert type(scale(A_DUB, item)) is type(item)


@pytest.mark.parametrize("item", ALL_ITEMS)
def test_scale_commutes_with_promotion(item):
    assert to_multivector(scale(A_DUB, item)) == scale(A_DUB, to_multivector(item))


def test_integer_factor_accepted():
    assert scale(3, A_TRI) == scale(3.0, A_TRI)


def test_non_real_factor_raises():
    with pytest.raises(TypeError):
        scale("two", A_VEC)


def test_unsupported_item_raises():
    with pytest.raises(TypeError):
        scale(2.0, "vector")