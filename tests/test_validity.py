import math
import sys

import pytest

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
    null,
    zero,
)
from engabra.validity import is_valid


@pytest.mark.parametrize("value", [0.0, -0.0, 1.0, -3.5, 7, sys.float_info.min])
def test_valid_numbers(value):
    assert is_valid(value) is True


@pytest.mark.parametrize(
    "value", [math.nan, math.inf, -math.inf, 5e-324, sys.float_info.min / 2.0]
)
def test_invalid_numbers(value):
    assert is_valid(value) is False


@pytest.mark.parametrize(
    "kind", [Scalar, Vector, BiVector, TriVector, Spinor, ImSpin, ComPlex, DirPlex, MultiVector]
)
def test_null_is_invalid_and_zero_is_valid(kind):
    assert is_valid(null(kind)) is False
    assert is_valid(zero(kind)) is True


def test_blade_checks_first_component_only():
    assert is_valid(Vector(math.nan, 1.0, 1.0)) is False
    assert is_valid(Vector(1.0, math.nan, 1.0)) is True


def test_composite_requires_every_blade():
    assert is_valid(Spinor(1.0, BiVector(math.nan, 0.0, 0.0))) is False
    assert is_valid(ImSpin(Vector(1.0, 2.0, 3.0), math.nan)) is False
    good = MultiVector(1.0, Vector(1.0, 2.0, 3.0), BiVector(4.0, 5.0, 6.0), 7.0)
    assert is_valid(good) is True
    bad = MultiVector(1.0, Vector(1.0, 2.0, 3.0), BiVector(4.0, 5.0, 6.0), math.inf)
    assert is_valid(bad) is False


def test_sequence_requires_all_components():
    assert is_valid((1.0, 2.0, 3.0)) is True
    assert is_valid([1.0, math.nan]) is False
    assert is_valid((0.0, 5e-324)) is False


def test_unsupported_values_raise():
    with pytest.raises(TypeError):
        is_valid("1.0")
    with pytest.raises(TypeError):
        is_valid(object())
    with pytest.raises(ValueError):
        is_valid(())