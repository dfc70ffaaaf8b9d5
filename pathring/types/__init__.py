"""Shared type aliases for pathring."""

from pathring.types.base import Distance, NodeIndex

__all__ = ["Distance", "NodeIndex"]
