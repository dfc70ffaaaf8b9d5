"""Configuration classes for pathring components."""

from dataclasses import dataclass
from math import ceil, log2
from typing import Optional


@dataclass
class ClosureConfig:
    """Configuration for the fixed-point closure loop."""

    # Consecutive unchanged squarings required before the matrix counts as closed
    stable_checks: int = 2

    # Slack added on top of the log2 bound
    extra_iterations: int = 2

    # Hard override of the computed bound
    max_iterations: Optional[int] = None

    # Worker threads used for row evaluation during a squaring
    parallelism: int = 1

    def __post_init__(self) -> None:
        if self.stable_checks < 1:
            raise ValueError(f"stable_checks must be >= 1, got {self.stable_checks}")
        if self.extra_iterations < 0:
            raise ValueError(
                f"extra_iterations must be >= 0, got {self.extra_iterations}"
            )
        if self.max_iterations is not None and self.max_iterations < 1:
            raise ValueError(
                f"max_iterations must be >= 1 when set, got {self.max_iterations}"
            )
        if self.parallelism < 1:
            raise ValueError(f"parallelism must be >= 1, got {self.parallelism}")

    def bound_for(self, node_count: int) -> int:
        """Return the number of squarings allowed for a graph of ``node_count`` nodes."""
        if self.max_iterations is not None:
            return self.max_iterations
        return iteration_bound(node_count, self.extra_iterations, self.stable_checks)


def iteration_bound(node_count: int, extra: int = 2, stable_checks: int = 2) -> int:
    """Upper bound on squarings needed to close a graph of ``node_count`` nodes.

    A shortest route with positive weights visits each node at most once, so it
    has at most ``n - 1`` hops. Squaring ``k`` times covers ``2**k`` hops, and
    the loop then needs ``stable_checks`` more squarings to observe stability.
    """
    longest = max(node_count - 1, 1)
    return ceil(log2(longest)) + stable_checks + extra


# Global configuration instance
CLOSURE_CONFIG = ClosureConfig()
