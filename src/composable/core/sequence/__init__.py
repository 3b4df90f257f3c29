"""Sequence functionality: lifting element transforms over collections."""

from composable.core.sequence.operations import filter_over, map_over, map_with

__all__ = [
    "map_over",
    "filter_over",
    "map_with",
]
