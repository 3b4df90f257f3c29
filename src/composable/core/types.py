"""Core type definitions for composable."""

from collections.abc import Callable

type Fn[A, B] = Callable[[A], B]
"""A single-argument function from A to B."""

type Transform[T] = Callable[[T], T]
"""A function that maps a value to a value of the same type."""

type Setter[Part, Whole] = Callable[[Transform[Part]], Transform[Whole]]
"""Lifts a transform on a part into a transform on the whole.

`map_first`, `map_second` and `property_setter(key_path)` are all setters.
"""

type Pair[A, B] = tuple[A, B]
"""An immutable two-slot structure."""
