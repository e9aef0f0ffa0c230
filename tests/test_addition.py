import pytest

from engabra.addition import add
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

SCA = Scalar(0.5)
VEC = Vector(1.0, 2.0, 3.0)
BIV = BiVector(4.0, 5.0, 6.0)
TRI = TriVector(7.0)
SPIN = Spinor(2.0, BiVector(0.25, 0.75, 1.5))
IMSP = ImSpin(Vector(8.0, 9.0, 10.0), 11.0)
CPLX = ComPlex(3.0, 0.125)
DPLX = DirPlex(Vector(0.5, 1.5, 2.5), BiVector(3.5, 4.5, 5.5))
MV = MultiVector(1.0, Vector(2.0, 3.0, 4.0), BiVector(5.0, 6.0, 7.0), 8.0)

SUPPORTED_PAIRS = [
    (SCA, Scalar(1.25)),
    (VEC, Vector(0.5, 0.25, 0.125)),
    (BIV, BiVector(1.0, 1.0, 1.0)),
    (TRI, TriVector(2.0)),
    (SPIN, Spinor(1.0, BIV)),
    (IMSP, ImSpin(VEC, TRI)),
    (CPLX, ComPlex(1.0, 2.0)),
    (DPLX, DirPlex(VEC, BIV)),
    (MV, MultiVector(SCA, VEC, BIV, TRI)),
    (SCA, BIV),
    (SCA, TRI),
    (SCA, SPIN),
    (SCA, CPLX),
    (SCA, MV),
    (BIV, SPIN),
    (VEC, IMSP),
    (TRI, IMSP),
    (SPIN, IMSP),
    (SPIN, MV),
    (IMSP, MV),
]


def test_vector_addition_source_example():
    got = add(Vector(21.11, 21.22, 21.33), Vector(11.10, 11.20, 11.30))
    assert isinstance(got, Vector)
    assert tuple(got) == pytest.approx((32.21, 32.42, 32.63))


@pytest.mark.parametrize("item_a, item_b", SUPPORTED_PAIRS)
def test_commutative(item_a, item_b):
    assert add(item_a, item_b) == add(item_b, item_a)


@pytest.mark.parametrize("item_a, item_b", SUPPORTED_PAIRS)
def test_agrees_with_multivector_sum(item_a, item_b):
    got = to_multivector(add(item_a, item_b))
    exp = add(to_multivector(item_a), to_multivector(item_b))
    assert got == exp


@pytest.mark.parametrize("item", [SCA, VEC, BIV, TRI, SPIN, IMSP, CPLX, DPLX, MV])
def test_zero_is_identity(item):
    assert add(item, zero(type(item))) == item


def test_result_types():
    assert add(SCA, BIV) == Spinor(SCA, BIV)
    assert add(SCA, TRI) == ComPlex(SCA, TRI)
    assert isinstance(add(SPIN, SCA), Spinor)
    assert isinstance(add(CPLX, SCA), ComPlex)
    assert isinstance(add(IMSP, VEC), ImSpin)
    assert isinstance(add(IMSP, TRI), ImSpin)
    assert isinstance(add(SPIN, BIV), Spinor)
    assert isinstance(add(IMSP, SPIN), MultiVector)
    assert isinstance(add(MV, SCA), MultiVector)


def test_grades_kept_separate():
    assert add(SPIN, IMSP) == MultiVector(SPIN.sca, IMSP.vec, SPIN.biv, IMSP.tri)
    assert add(Scalar(0.0), Spinor(0.0, BIV)) == Spinor(0.0, BIV)
    assert add(BIV, Spinor(SCA, zero(BiVector))) == Spinor(SCA, BIV)
    assert add(VEC, ImSpin(zero(Vector), TRI)) == ImSpin(VEC, TRI)


@pytest.mark.parametrize(
    "item_a, item_b",
    [(SCA, VEC), (VEC, BIV), (BIV, TRI), (SPIN, CPLX), (IMSP, DPLX), (1.0, SCA), (SCA, 1.0)],
)
def test_unsupported_combinations_raise(item_a, item_b):
    with pytest.raises(TypeError):
        add(item_a, item_b)