"""Semiring algebras: the path-valued one plus scalar companions."""

from pathring.algebra.base import Semiring
from pathring.algebra.path_value import (
    NO_ROUTE,
    PATH_SEMIRING,
    UNREACHABLE,
    NoRoute,
    PathSemiring,
    PathValue,
    Route,
    combine,
    extend,
    identity_at,
)
from pathring.algebra.semirings import (
    BOOLEAN_SEMIRING,
    MAX_MIN_SEMIRING,
    MIN_PLUS_SEMIRING,
    BooleanSemiring,
    MaxMinSemiring,
    MinPlusSemiring,
)

__all__ = [
    "Semiring",
    "PathValue",
    "Route",
    "NoRoute",
    "NO_ROUTE",
    "UNREACHABLE",
    "combine",
    "extend",
    "identity_at",
    "PathSemiring",
    "PATH_SEMIRING",
    "BooleanSemiring",
    "MinPlusSemiring",
    "MaxMinSemiring",
    "BOOLEAN_SEMIRING",
    "MIN_PLUS_SEMIRING",
    "MAX_MIN_SEMIRING",
]
