"""pathring: shortest routes by closure of a path-valued semiring matrix.

Instead of running a graph traversal, pathring builds the adjacency matrix of
an undirected weighted graph over a semiring whose values are routes, then
squares it until it stops changing. The closed matrix holds the shortest route
between every pair of nodes.

Primary API:
    GraphInput, Edge - Core input contract (dense node indices 1..n)
    build_adjacency_matrix() - Initial matrix from a GraphInput
    ClosureEngine - Fixed-point squaring loop and pair queries
    multiply() - Matrix product over any Semiring
    load_dataset() - YAML dataset of cities, distances and borders

Example:
    from pathring import ClosureEngine, GraphInput, build_adjacency_matrix

    graph = GraphInput.from_tuples(4, [(1, 2, 2), (2, 3, 3), (3, 4, 1)])
    engine = ClosureEngine(build_adjacency_matrix(graph))
    engine.query(1, 4)  # Route([1, 2, 3, 4], distance=6.0)
"""

from __future__ import annotations

from pathring import logging
from pathring._version import __version__
from pathring.algebra import (
    NO_ROUTE,
    PATH_SEMIRING,
    BooleanSemiring,
    MaxMinSemiring,
    MinPlusSemiring,
    NoRoute,
    PathSemiring,
    PathValue,
    Route,
    Semiring,
    combine,
    extend,
    identity_at,
)
from pathring.closure import ClosureEngine, Converged, Iterating, closure
from pathring.config import CLOSURE_CONFIG, ClosureConfig
from pathring.dataset import Dataset, IndexMapper, load_dataset, load_dataset_yaml
from pathring.exceptions import GraphValidationError, NonConvergence, StructuralViolation
from pathring.graph import Edge, GraphInput, build_adjacency_matrix
from pathring.matrix import identity_matrix, multiply

__all__ = [
    # Version
    "__version__",
    # Algebra
    "Semiring",
    "PathValue",
    "Route",
    "NoRoute",
    "NO_ROUTE",
    "combine",
    "extend",
    "identity_at",
    "PathSemiring",
    "PATH_SEMIRING",
    "BooleanSemiring",
    "MinPlusSemiring",
    "MaxMinSemiring",
    # Matrix
    "multiply",
    "identity_matrix",
    # Graph
    "Edge",
    "GraphInput",
    "build_adjacency_matrix",
    # Closure
    "ClosureEngine",
    "Iterating",
    "Converged",
    "closure",
    "ClosureConfig",
    "CLOSURE_CONFIG",
    # Datasets
    "Dataset",
    "IndexMapper",
    "load_dataset",
    "load_dataset_yaml",
    # Errors
    "StructuralViolation",
    "NonConvergence",
    "GraphValidationError",
    # Utilities
    "logging",
]
