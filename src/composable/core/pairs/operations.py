"""Slot setters over pairs.

Each setter lifts a transform on one slot into a transform on the whole
pair. The untouched slot is passed through as the same object.

Usage:
    (42, "Hello") | fn(map_first(incr))                  # (43, "Hello")
    ("Hello", (42, "World")) | fn(map_second(map_first(incr)))
    # ("Hello", (43, "World"))
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from composable.core.types import Fn, Pair


def map_first[A, B, C](f: Callable[[A], B]) -> Fn[Sequence[Any], Pair[B, C]]:
    """Setter for slot 0: `(a, c) -> (f(a), c)`.

    Args:
        f: Transform applied to the first slot.

    Returns:
        Function from a pair to a new pair.
    """

    def setter(pair: Sequence[Any]) -> Pair[B, C]:
        first, second = pair
        return (f(first), second)

    return setter


def map_second[A, B, C](f: Callable[[A], B]) -> Fn[Sequence[Any], Pair[C, B]]:
    """Setter for slot 1: `(c, a) -> (c, f(a))`.

    Args:
        f: Transform applied to the second slot.

    Returns:
        Function from a pair to a new pair.
    """

    def setter(pair: Sequence[Any]) -> Pair[C, B]:
        first, second = pair
        return (first, f(second))

    return setter
