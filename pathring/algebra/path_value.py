"""Path-valued semiring: best known route plus its total distance.

A ``PathValue`` is either a :class:`Route` (an ordered node sequence with a
finite distance) or :class:`NoRoute` (no known route, infinite distance). The
two variants make "route present" and "distance finite" one fact instead of
two fields kept consistent by convention.

``combine`` keeps the shorter of two alternatives and, on an exact tie, the
second operand. ``extend`` concatenates two fragments that meet at a shared
junction node.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, Union

from pathring.algebra.base import Semiring
from pathring.exceptions import StructuralViolation
from pathring.types.base import Distance, NodeIndex

UNREACHABLE = "unreachable"


@dataclass(frozen=True)
class Route:
    """A concrete route between two nodes.

    Attributes:
        nodes: Visited nodes in order; first is the origin, last the destination.
        distance: Total distance, finite and non-negative.
        legs: Distances of the pieces the route was assembled from, one per
            hop for routes built by :func:`extend`. ``distance`` is their
            ``math.fsum``, so it does not depend on how the route was split.
            Defaults to ``(distance,)`` for a hand-built route.
    """

    nodes: Tuple[NodeIndex, ...]
    distance: Distance
    legs: Tuple[Distance, ...] = field(default=(), compare=False, repr=False)

    def __post_init__(self) -> None:
        nodes = tuple(self.nodes)
        if not nodes:
            raise ValueError("Route requires at least one node")
        if not math.isfinite(self.distance) or self.distance < 0:
            raise ValueError(
                f"Route distance must be finite and non-negative, got {self.distance}"
            )
        legs = tuple(self.legs)
        if not legs and self.distance:
            legs = (self.distance,)
        object.__setattr__(self, "nodes", nodes)
        object.__setattr__(self, "legs", legs)

    @property
    def route(self) -> Tuple[NodeIndex, ...]:
        return self.nodes

    @property
    def reachable(self) -> bool:
        return True

    @property
    def src_node(self) -> NodeIndex:
        """Return the first node of the route."""
        return self.nodes[0]

    @property
    def dst_node(self) -> NodeIndex:
        """Return the last node of the route."""
        return self.nodes[-1]

    @property
    def hops(self) -> int:
        """Return the number of edges traversed."""
        return len(self.nodes) - 1

    def to_dict(self) -> Dict[str, Any]:
        return {"route": list(self.nodes), "distance": self.distance}

    def __repr__(self) -> str:
        return f"Route({list(self.nodes)}, distance={self.distance})"


@dataclass(frozen=True)
class NoRoute:
    """Absence of any known route (the zero element ``Ø``)."""

    @property
    def route(self) -> None:
        return None

    @property
    def distance(self) -> float:
        return math.inf

    @property
    def reachable(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {"route": None, "distance": UNREACHABLE}

    def __repr__(self) -> str:
        return "NoRoute()"


PathValue = Union[Route, NoRoute]

#: Shared "no route" value.
NO_ROUTE = NoRoute()


def identity_at(node: NodeIndex) -> Route:
    """Return the zero-length self path at ``node``."""
    return Route((node,), 0.0)


def combine(left: PathValue, right: PathValue) -> PathValue:
    """Return the shorter of two alternatives.

    A missing route yields to the other operand. On equal distance the right
    operand is returned.
    """
    if isinstance(left, NoRoute):
        return right
    if isinstance(right, NoRoute):
        return left
    if left.distance < right.distance:
        return left
    return right


def extend(left: PathValue, right: PathValue) -> PathValue:
    """Concatenate ``left`` and ``right`` at their shared junction node.

    Raises:
        StructuralViolation: If both operands are routes and ``left`` does not
            end where ``right`` starts.
    """
    if isinstance(left, NoRoute) or isinstance(right, NoRoute):
        return NO_ROUTE
    if left.nodes[-1] != right.nodes[0]:
        raise StructuralViolation(
            f"Cannot extend route ending at {left.nodes[-1]} "
            f"with route starting at {right.nodes[0]}"
        )
    legs = left.legs + right.legs
    return Route(left.nodes + right.nodes[1:], math.fsum(legs), legs)


class PathSemiring(Semiring[PathValue]):
    """Semiring whose values are routes; the engine behind shortest-route queries."""

    name = "path"

    def zero(self) -> PathValue:
        return NO_ROUTE

    def identity_at(self, node: NodeIndex) -> PathValue:
        return identity_at(node)

    def edge(self, src: NodeIndex, dst: NodeIndex, weight: Distance) -> PathValue:
        return Route((src, dst), float(weight))

    def combine(self, left: PathValue, right: PathValue) -> PathValue:
        return combine(left, right)

    def extend(self, left: PathValue, right: PathValue) -> PathValue:
        return extend(left, right)

    def is_zero(self, value: PathValue) -> bool:
        return isinstance(value, NoRoute)


PATH_SEMIRING = PathSemiring()

