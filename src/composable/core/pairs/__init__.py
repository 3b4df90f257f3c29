"""Pair functionality: slot setters for two-tuples."""

from composable.core.pairs.operations import map_first, map_second

__all__ = [
    "map_first",
    "map_second",
]
