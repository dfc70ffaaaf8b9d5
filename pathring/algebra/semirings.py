"""Scalar semirings that plug into the same matrix multiply and closure loop.

These carry no route, only a summary of the best relationship between two
nodes:

- ``BooleanSemiring``: whether any route exists (reachability).
- ``MinPlusSemiring``: length of the shortest route.
- ``MaxMinSemiring``: bottleneck weight of the widest route.
"""

from __future__ import annotations

import math

from pathring.algebra.base import Semiring
from pathring.types.base import Distance, NodeIndex


class BooleanSemiring(Semiring[bool]):
    """Reachability: combine is ``or``, extend is ``and``."""

    name = "boolean"

    def zero(self) -> bool:
        return False

    def identity_at(self, node: NodeIndex) -> bool:
        return True

    def edge(self, src: NodeIndex, dst: NodeIndex, weight: Distance) -> bool:
        return True

    def combine(self, left: bool, right: bool) -> bool:
        return left or right

    def extend(self, left: bool, right: bool) -> bool:
        return left and right


class MinPlusSemiring(Semiring[float]):
    """Shortest distance without the route: combine is ``min``, extend is ``+``."""

    name = "min-plus"

    def zero(self) -> float:
        return math.inf

    def identity_at(self, node: NodeIndex) -> float:
        return 0.0

    def edge(self, src: NodeIndex, dst: NodeIndex, weight: Distance) -> float:
        return float(weight)

    def combine(self, left: float, right: float) -> float:
        return min(left, right)

    def extend(self, left: float, right: float) -> float:
        return left + right


class MaxMinSemiring(Semiring[float]):
    """Widest route: combine is ``max``, extend is ``min``.

    A route is as wide as its narrowest edge; between two nodes the widest
    route wins. A node reaches itself with unlimited width.
    """

    name = "max-min"

    def zero(self) -> float:
        return 0.0

    def identity_at(self, node: NodeIndex) -> float:
        return math.inf

    def edge(self, src: NodeIndex, dst: NodeIndex, weight: Distance) -> float:
        return float(weight)

    def combine(self, left: float, right: float) -> float:
        return max(left, right)

    def extend(self, left: float, right: float) -> float:
        return min(left, right)


BOOLEAN_SEMIRING = BooleanSemiring()
MIN_PLUS_SEMIRING = MinPlusSemiring()
MAX_MIN_SEMIRING = MaxMinSemiring()
