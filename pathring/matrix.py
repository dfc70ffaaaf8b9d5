"""Immutable matrices over an arbitrary semiring.

A matrix is a tuple of row tuples. Nothing here mutates its inputs, so a
product can be compared against its operands after the fact.

``multiply`` is the generalized product

    C[i][j] = combine over k of extend(A[i][k], B[k][j])

folded left to right in ascending ``k`` from ``semiring.zero()``. Cells whose
left operand is zero are skipped; by the identity laws that does not change
the result. With ``parallelism > 1`` rows are computed on a thread pool and
reassembled in order, giving the same matrix as the serial fold.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import List, Sequence, Tuple, TypeVar

from pathring.algebra.base import Semiring
from pathring.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

Matrix = Tuple[Tuple[T, ...], ...]


def shape(matrix: Sequence[Sequence[T]]) -> Tuple[int, int]:
    """Return ``(rows, cols)`` of a rectangular matrix.

    Raises:
        ValueError: If rows have different lengths.
    """
    rows = len(matrix)
    if rows == 0:
        return 0, 0
    cols = len(matrix[0])
    for idx, row in enumerate(matrix):
        if len(row) != cols:
            raise ValueError(
                f"Matrix is not rectangular: row {idx} has {len(row)} "
                f"columns, expected {cols}"
            )
    return rows, cols


def transpose(matrix: Sequence[Sequence[T]]) -> Matrix:
    """Return the transpose of ``matrix``."""
    _, cols = shape(matrix)
    return tuple(tuple(row[j] for row in matrix) for j in range(cols))


def zero_matrix(rows: int, cols: int, semiring: Semiring[T]) -> Matrix:
    """Return a ``rows x cols`` matrix filled with ``semiring.zero()``."""
    zero = semiring.zero()
    return tuple(tuple(zero for _ in range(cols)) for _ in range(rows))


def identity_matrix(n: int, semiring: Semiring[T], first_node: int = 1) -> Matrix:
    """Return the ``n x n`` multiplicative identity.

    The diagonal cell of row ``i`` holds ``identity_at(first_node + i)``; every
    other cell holds ``zero()``.
    """
    zero = semiring.zero()
    return tuple(
        tuple(
            semiring.identity_at(first_node + i) if i == j else zero for j in range(n)
        )
        for i in range(n)
    )


def _multiply_row(
    row: Sequence[T], columns: Matrix, semiring: Semiring[T]
) -> Tuple[T, ...]:
    live: List[Tuple[int, T]] = [
        (k, value) for k, value in enumerate(row) if not semiring.is_zero(value)
    ]
    zero = semiring.zero()
    out: List[T] = []
    for column in columns:
        acc = zero
        for k, left in live:
            acc = semiring.combine(acc, semiring.extend(left, column[k]))
        out.append(acc)
    return tuple(out)


def multiply(
    a: Sequence[Sequence[T]],
    b: Sequence[Sequence[T]],
    semiring: Semiring[T],
    parallelism: int = 1,
) -> Matrix:
    """Multiply ``a`` (m x n) by ``b`` (n x p) over ``semiring``.

    Args:
        a: Left operand.
        b: Right operand.
        semiring: Algebra supplying ``zero``, ``combine`` and ``extend``.
        parallelism: Number of worker threads evaluating rows. ``1`` runs
            serially in the calling thread.

    Returns:
        The m x p product.

    Raises:
        ValueError: If an operand is not rectangular, the inner dimensions
            differ, or ``parallelism`` is less than 1.
    """
    if parallelism < 1:
        raise ValueError(f"parallelism must be >= 1, got {parallelism}")
    m, n = shape(a)
    n_b, p = shape(b)
    if n != n_b:
        raise ValueError(
            f"Cannot multiply {m}x{n} matrix by {n_b}x{p} matrix: "
            "inner dimensions differ"
        )
    if m == 0 or p == 0:
        return tuple(() for _ in range(m))

    columns = transpose(b)

    if parallelism > 1 and m > 1:
        workers = min(parallelism, m)
        logger.debug(f"Multiplying {m}x{n} by {n}x{p} on {workers} threads")
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return tuple(pool.map(lambda row: _multiply_row(row, columns, semiring), a))

    return tuple(_multiply_row(row, columns, semiring) for row in a)
