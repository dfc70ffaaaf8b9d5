import pytest

from pathring.algebra import (
    BOOLEAN_SEMIRING,
    MIN_PLUS_SEMIRING,
    NO_ROUTE,
    PATH_SEMIRING,
    Route,
)
from pathring.graph import build_adjacency_matrix
from pathring.matrix import identity_matrix, multiply, shape, transpose, zero_matrix

INF = float("inf")


def _naive_multiply(a, b, semiring):
    m, n = len(a), len(b)
    p = len(b[0])
    out = []
    for i in range(m):
        row = []
        for j in range(p):
            acc = semiring.zero()
            for k in range(n):
                acc = semiring.combine(acc, semiring.extend(a[i][k], b[k][j]))
            row.append(acc)
        out.append(tuple(row))
    return tuple(out)


def test_shape_and_transpose():
    m = ((1, 2, 3), (4, 5, 6))
    assert shape(m) == (2, 3)
    assert transpose(m) == ((1, 4), (2, 5), (3, 6))
    assert shape(()) == (0, 0)


def test_shape_rejects_ragged():
    with pytest.raises(ValueError, match="not rectangular"):
        shape(((1, 2), (3,)))


def test_zero_and_identity_matrix():
    assert zero_matrix(2, 3, MIN_PLUS_SEMIRING) == ((INF, INF, INF), (INF, INF, INF))
    ident = identity_matrix(2, PATH_SEMIRING)
    assert ident == ((Route((1,), 0.0), NO_ROUTE), (NO_ROUTE, Route((2,), 0.0)))
    shifted = identity_matrix(2, PATH_SEMIRING, first_node=0)
    assert shifted[0][0] == Route((0,), 0.0)


def test_multiply_min_plus_rectangular():
    a = ((0.0, 1.0, INF), (INF, 0.0, 2.0))
    b = ((0.0, 5.0), (1.0, INF), (3.0, 0.0))
    assert multiply(a, b, MIN_PLUS_SEMIRING) == ((0.0, 5.0), (1.0, 2.0))


def test_multiply_dimension_mismatch():
    a = ((0.0, 1.0),)
    with pytest.raises(ValueError, match="inner dimensions differ"):
        multiply(a, a, MIN_PLUS_SEMIRING)


def test_multiply_rejects_bad_parallelism():
    a = ((0.0,),)
    with pytest.raises(ValueError, match="parallelism"):
        multiply(a, a, MIN_PLUS_SEMIRING, parallelism=0)


def test_multiply_empty():
    assert multiply((), (), PATH_SEMIRING) == ()


def test_identity_is_multiplicative_identity(line_abcd, square_tie, two_components):
    for graph in (line_abcd, square_tie, two_components):
        a = build_adjacency_matrix(graph)
        ident = identity_matrix(graph.node_count, PATH_SEMIRING)
        assert multiply(ident, a, PATH_SEMIRING) == a
        assert multiply(a, ident, PATH_SEMIRING) == a


def test_identity_is_multiplicative_identity_boolean(line_abcd):
    a = build_adjacency_matrix(line_abcd, BOOLEAN_SEMIRING)
    ident = identity_matrix(4, BOOLEAN_SEMIRING)
    assert multiply(ident, a, BOOLEAN_SEMIRING) == a
    assert multiply(a, ident, BOOLEAN_SEMIRING) == a


def test_multiply_does_not_mutate_operands(line_abcd):
    a = build_adjacency_matrix(line_abcd)
    before = tuple(tuple(row) for row in a)
    multiply(a, a, PATH_SEMIRING)
    assert a == before


def test_square_matches_naive_fold(square_tie, line_abcd, shortcut_triangle):
    for graph in (square_tie, line_abcd, shortcut_triangle):
        a = build_adjacency_matrix(graph)
        once = multiply(a, a, PATH_SEMIRING)
        assert once == _naive_multiply(a, a, PATH_SEMIRING)
        twice = multiply(once, once, PATH_SEMIRING)
        assert twice == _naive_multiply(once, once, PATH_SEMIRING)


def test_square_of_line(line_abcd):
    a = build_adjacency_matrix(line_abcd)
    sq = multiply(a, a, PATH_SEMIRING)
    assert sq[0][2] == Route((1, 2, 3), 5.0)
    assert sq[0][3] == NO_ROUTE
    assert sq[1][3] == Route((2, 3, 4), 4.0)


def test_square_keeps_tie_rule(square_tie):
    a = build_adjacency_matrix(square_tie)
    sq = multiply(a, a, PATH_SEMIRING)
    # k=2 gives X-B-Y first, k=3 gives X-C-Y at equal distance and wins.
    assert sq[0][3] == Route((1, 3, 4), 4.0)


@pytest.mark.parametrize("parallelism", [2, 3, 8])
def test_parallel_multiply_is_identical(square_tie, two_components, parallelism):
    for graph in (square_tie, two_components):
        a = build_adjacency_matrix(graph)
        serial = multiply(a, a, PATH_SEMIRING)
        parallel = multiply(a, a, PATH_SEMIRING, parallelism=parallelism)
        assert parallel == serial
