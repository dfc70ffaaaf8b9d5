"""Build the initial adjacency matrix from dense node indices and undirected edges.

The diagonal holds each node's identity (a zero-length self path for the
default path semiring), every edge ``(a, b, d)`` fills both ``[a][b]`` and
``[b][a]``, and all other cells hold the semiring's zero.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Dict, FrozenSet, List, NamedTuple, Sequence, TypeVar

from pathring.algebra.base import Semiring
from pathring.algebra.path_value import PATH_SEMIRING
from pathring.exceptions import GraphValidationError
from pathring.logging import get_logger
from pathring.matrix import Matrix
from pathring.types.base import Distance, NodeIndex

logger = get_logger(__name__)

T = TypeVar("T")


class Edge(NamedTuple):
    """Undirected weighted edge between two dense node indices."""

    a: NodeIndex
    b: NodeIndex
    distance: Distance


@dataclass
class GraphInput:
    """Core input contract: node count plus undirected edges over ``1..node_count``."""

    node_count: int
    edges: List[Edge] = field(default_factory=list)

    @classmethod
    def from_tuples(
        cls, node_count: int, edges: Sequence[Sequence[float]]
    ) -> "GraphInput":
        """Create from plain ``(a, b, distance)`` triples."""
        return cls(node_count, [Edge(a, b, d) for a, b, d in edges])


def validate_graph_input(graph_input: GraphInput) -> Dict[FrozenSet[int], Distance]:
    """Check ``graph_input`` and return one distance per undirected pair.

    Raises:
        GraphValidationError: On a bad node count, an endpoint outside
            ``1..n``, a self-loop, a non-positive or non-finite distance, or
            the same pair listed with two different distances.
    """
    n = graph_input.node_count
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise GraphValidationError(f"node_count must be a positive integer, got {n!r}")

    pairs: Dict[FrozenSet[int], Distance] = {}
    for position, edge in enumerate(graph_input.edges):
        a, b, distance = edge
        for endpoint in (a, b):
            if isinstance(endpoint, bool) or not isinstance(endpoint, int):
                raise GraphValidationError(
                    f"Edge #{position} {tuple(edge)}: node {endpoint!r} is not an integer index"
                )
            if not 1 <= endpoint <= n:
                raise GraphValidationError(
                    f"Edge #{position} {tuple(edge)}: node {endpoint} is outside 1..{n}"
                )
        if a == b:
            raise GraphValidationError(
                f"Edge #{position} {tuple(edge)}: self-loops are not allowed"
            )
        if (
            isinstance(distance, bool)
            or not isinstance(distance, Real)
            or not math.isfinite(distance)
            or distance <= 0
        ):
            raise GraphValidationError(
                f"Edge #{position} {tuple(edge)}: distance must be a finite number > 0"
            )

        key = frozenset((a, b))
        known = pairs.get(key)
        if known is None:
            pairs[key] = distance
        elif known != distance:
            raise GraphValidationError(
                f"Edge #{position} {tuple(edge)}: conflicts with earlier distance "
                f"{known} for the same pair"
            )
        else:
            logger.debug(f"Ignoring duplicate edge {a}-{b} ({distance})")
    return pairs


def build_adjacency_matrix(
    graph_input: GraphInput, semiring: Semiring[T] = PATH_SEMIRING
) -> Matrix:
    """Return the initial ``n x n`` adjacency matrix for ``graph_input``.

    Row and column ``i - 1`` belong to node ``i``.

    Args:
        graph_input: Node count and undirected edges.
        semiring: Algebra providing ``zero``, ``identity_at`` and ``edge``.

    Returns:
        Immutable adjacency matrix.

    Raises:
        GraphValidationError: If ``graph_input`` is malformed.
    """
    pairs = validate_graph_input(graph_input)
    n = graph_input.node_count

    zero = semiring.zero()
    rows: List[List[T]] = [[zero] * n for _ in range(n)]
    for i in range(n):
        rows[i][i] = semiring.identity_at(i + 1)
    for a, b, _ in graph_input.edges:
        distance = pairs[frozenset((a, b))]
        rows[a - 1][b - 1] = semiring.edge(a, b, distance)
        rows[b - 1][a - 1] = semiring.edge(b, a, distance)

    logger.debug(
        f"Built {n}x{n} {semiring.name} adjacency matrix with {len(pairs)} undirected edges"
    )
    return tuple(tuple(row) for row in rows)
