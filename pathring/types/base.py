"""Base type aliases used across the algebra, matrix and closure modules."""

from __future__ import annotations

#: Dense node identifier. Nodes are numbered ``1..n``.
NodeIndex = int

#: Non-negative route length (e.g. road kilometres).
Distance = float
