"""Graph input contract and adjacency matrix construction."""

from pathring.graph.builder import (
    Edge,
    GraphInput,
    build_adjacency_matrix,
    validate_graph_input,
)

__all__ = ["Edge", "GraphInput", "build_adjacency_matrix", "validate_graph_input"]
