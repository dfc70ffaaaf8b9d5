"""Fixed-point closure of an adjacency matrix by repeated squaring.

Each step replaces the current matrix ``M`` with ``M x M``. After ``k`` steps
the matrix holds the best routes of up to ``2**k`` edges, so a graph of ``n``
nodes closes in ``O(log n)`` steps. The loop stops once ``stable_checks``
consecutive squarings leave the matrix unchanged (exact structural equality,
no tolerance), and fails with :class:`NonConvergence` if that does not happen
within the iteration bound.

States:
    ``Iterating(stable_count)`` while squaring; ``Converged()`` once closed.
    A converged engine answers point queries from its retained matrix.
"""

from __future__ import annotations

from dataclasses import dataclass
from time import perf_counter
from typing import Generic, Optional, Sequence, TypeVar, Union

from pathring.algebra.base import Semiring
from pathring.algebra.path_value import PATH_SEMIRING
from pathring.config import CLOSURE_CONFIG, ClosureConfig
from pathring.exceptions import NonConvergence
from pathring.logging import get_logger
from pathring.matrix import Matrix, multiply, shape
from pathring.types.base import NodeIndex

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Iterating:
    """Still squaring; ``stable_count`` unchanged squarings seen in a row."""

    stable_count: int = 0


@dataclass(frozen=True)
class Converged:
    """The matrix is closed and holds the all-pairs result."""


ClosureState = Union[Iterating, Converged]


class ClosureEngine(Generic[T]):
    """Close a square matrix over ``semiring`` and answer pair queries.

    Args:
        matrix: Initial square matrix, usually from ``build_adjacency_matrix``.
        semiring: Algebra used for squaring. Defaults to the path semiring.
        config: Loop settings. Defaults to ``CLOSURE_CONFIG``.

    Raises:
        ValueError: If ``matrix`` is not square.
    """

    def __init__(
        self,
        matrix: Sequence[Sequence[T]],
        semiring: Semiring[T] = PATH_SEMIRING,
        config: Optional[ClosureConfig] = None,
    ) -> None:
        rows, cols = shape(matrix)
        if rows != cols:
            raise ValueError(f"Closure requires a square matrix, got {rows}x{cols}")
        self.semiring = semiring
        self.config = config or CLOSURE_CONFIG
        self.size = rows
        self.bound = self.config.bound_for(rows)
        self._matrix: Matrix = tuple(tuple(row) for row in matrix)
        self._state: ClosureState = Iterating(0)
        self._iterations = 0

    @property
    def state(self) -> ClosureState:
        return self._state

    @property
    def converged(self) -> bool:
        return isinstance(self._state, Converged)

    @property
    def iterations(self) -> int:
        """Number of squarings performed so far."""
        return self._iterations

    @property
    def matrix(self) -> Matrix:
        """The current matrix (the closed one once converged)."""
        return self._matrix

    def step(self) -> ClosureState:
        """Perform one squaring and return the new state.

        Raises:
            RuntimeError: If the engine has already converged.
        """
        state = self._state
        if isinstance(state, Converged):
            raise RuntimeError("Closure already converged; no further steps")

        current = self._matrix
        nxt = multiply(current, current, self.semiring, self.config.parallelism)
        self._iterations += 1

        if nxt == current:
            stable = state.stable_count + 1
        else:
            stable = 0
        self._matrix = nxt

        if stable >= self.config.stable_checks:
            self._state = Converged()
        else:
            self._state = Iterating(stable)
        logger.debug(
            f"Squaring {self._iterations}/{self.bound} over {self.semiring.name}: "
            f"{'unchanged' if stable else 'changed'} -> {self._state}"
        )
        return self._state

    def run(self) -> Matrix:
        """Square until converged and return the closed matrix.

        Raises:
            NonConvergence: If the iteration bound is reached first.
        """
        if self.converged:
            return self._matrix

        started = perf_counter()
        while not self.converged:
            if self._iterations >= self.bound:
                logger.error(
                    f"Closure of {self.size}x{self.size} matrix did not converge "
                    f"after {self._iterations} squarings"
                )
                raise NonConvergence(self._iterations, self.bound)
            self.step()

        logger.info(
            f"Closed {self.size}x{self.size} {self.semiring.name} matrix in "
            f"{self._iterations} squarings ({perf_counter() - started:.3f} s)"
        )
        return self._matrix

    def all_pairs(self) -> Matrix:
        """Return the closed matrix, running the loop if needed."""
        return self.run()

    def query(self, origin: NodeIndex, destination: NodeIndex) -> T:
        """Return the closed value from ``origin`` to ``destination``.

        For the path semiring this is the shortest ``Route`` or ``NO_ROUTE``
        when the nodes lie in different components.

        Raises:
            KeyError: If either node is outside ``1..n``.
            NonConvergence: If the matrix has to be closed first and fails to.
        """
        for node in (origin, destination):
            if not 1 <= node <= self.size:
                raise KeyError(f"Node {node} is not in the graph (1..{self.size})")
        closed = self.run()
        return closed[origin - 1][destination - 1]


def closure(
    matrix: Sequence[Sequence[T]],
    semiring: Semiring[T] = PATH_SEMIRING,
    config: Optional[ClosureConfig] = None,
) -> Matrix:
    """Return the closed form of ``matrix`` in one call."""
    return ClosureEngine(matrix, semiring, config).run()
