"""Exceptions raised by pathring."""

from __future__ import annotations


class StructuralViolation(ValueError):
    """Two path fragments were joined at nodes that do not match.

    Raised by ``extend`` when the last node of the left fragment differs from
    the first node of the right fragment. Indicates a defect in the caller.
    """


class GraphValidationError(ValueError):
    """Graph input rejected at construction time."""


class NonConvergence(RuntimeError):
    """The closure loop hit its iteration bound without stabilizing.

    Attributes:
        iterations: Number of squarings performed before giving up.
        bound: The iteration bound that was in effect.
    """

    def __init__(self, iterations: int, bound: int) -> None:
        super().__init__(
            f"Closure did not converge within {bound} iterations "
            f"(performed {iterations})"
        )
        self.iterations = iterations
        self.bound = bound
