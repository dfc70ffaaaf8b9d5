import math

import pytest

from pathring.algebra import (
    BOOLEAN_SEMIRING,
    MAX_MIN_SEMIRING,
    MIN_PLUS_SEMIRING,
    BooleanSemiring,
    MaxMinSemiring,
    MinPlusSemiring,
    Semiring,
)

CASES = [
    (BOOLEAN_SEMIRING, [False, True]),
    (MIN_PLUS_SEMIRING, [0.0, 1.5, 7.0, math.inf]),
    (MAX_MIN_SEMIRING, [0.0, 1.5, 7.0, math.inf]),
]


@pytest.mark.parametrize("semiring, values", CASES)
def test_identity_laws(semiring, values):
    zero = semiring.zero()
    one = semiring.identity_at(1)
    for x in values:
        assert semiring.combine(x, zero) == x
        assert semiring.combine(zero, x) == x
        assert semiring.extend(x, one) == x
        assert semiring.extend(one, x) == x
        assert semiring.extend(x, zero) == zero
        assert semiring.extend(zero, x) == zero


@pytest.mark.parametrize("semiring, values", CASES)
def test_extend_distributes_over_combine(semiring, values):
    for a in values:
        for b in values:
            for c in values:
                lhs = semiring.extend(a, semiring.combine(b, c))
                rhs = semiring.combine(semiring.extend(a, b), semiring.extend(a, c))
                assert lhs == rhs


def test_boolean_semiring():
    s = BooleanSemiring()
    assert s.edge(1, 2, 10.0) is True
    assert s.combine(False, True) is True
    assert s.extend(True, False) is False
    assert s.is_zero(False)


def test_min_plus_semiring():
    s = MinPlusSemiring()
    assert s.edge(1, 2, 3) == 3.0
    assert s.combine(4.0, 2.0) == 2.0
    assert s.extend(4.0, 2.0) == 6.0
    assert s.is_zero(math.inf)


def test_max_min_semiring():
    s = MaxMinSemiring()
    assert s.edge(1, 2, 3) == 3.0
    assert s.combine(4.0, 2.0) == 4.0
    assert s.extend(4.0, 2.0) == 2.0
    assert s.identity_at(5) == math.inf


def test_semiring_is_abstract():
    with pytest.raises(TypeError):
        Semiring()  # type: ignore[abstract]


def test_repr_and_names():
    assert repr(MIN_PLUS_SEMIRING) == "MinPlusSemiring()"
    assert {BOOLEAN_SEMIRING.name, MIN_PLUS_SEMIRING.name, MAX_MIN_SEMIRING.name} == {
        "boolean",
        "min-plus",
        "max-min",
    }
