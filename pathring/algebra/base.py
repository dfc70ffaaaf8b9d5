"""Abstract semiring interface consumed by matrix multiply and the closure loop."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pathring.types.base import Distance, NodeIndex

T = TypeVar("T")


class Semiring(ABC, Generic[T]):
    """Two binary operations over values of type ``T`` plus their identities.

    ``combine`` chooses between alternatives and has ``zero()`` as its neutral
    element. ``extend`` joins two consecutive fragments and has
    ``identity_at(node)`` as its neutral element on the matrix diagonal.
    Implementations must be stateless; every method is a pure function of its
    arguments.
    """

    #: Short label used in log messages.
    name: str = "semiring"

    @abstractmethod
    def zero(self) -> T:
        """Return the neutral element of ``combine`` (no relationship)."""

    @abstractmethod
    def identity_at(self, node: NodeIndex) -> T:
        """Return the neutral element of ``extend`` for the diagonal cell of ``node``."""

    @abstractmethod
    def edge(self, src: NodeIndex, dst: NodeIndex, weight: Distance) -> T:
        """Return the matrix value for a direct edge ``src -> dst`` of ``weight``."""

    @abstractmethod
    def combine(self, left: T, right: T) -> T:
        """Choose between two alternatives for the same cell."""

    @abstractmethod
    def extend(self, left: T, right: T) -> T:
        """Join a fragment ending at some node with one starting there."""

    def is_zero(self, value: T) -> bool:
        """Return True if ``value`` equals ``zero()``."""
        return value == self.zero()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
