"""Composed function model: a flat, immutable chain of single-argument functions.

Usage:
    incr_then_square = fn(incr) >> square      # square(incr(x))
    square_then_incr = fn(incr) << square      # incr(square(x))
    3 | fn(incr) >> square                      # 16, pipe binds loosest
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Composed:
    """Functions applied left to right, each exactly once per call.

    Immutable - every operator returns a new Composed instance. Nested
    chains are flattened on construction, so grouping never changes the
    resulting chain.
    """

    funcs: tuple[Callable[[Any], Any], ...] = ()

    @classmethod
    def of(cls, *funcs: Callable[[Any], Any]) -> Composed:
        """Build a chain from functions in application order.

        Args:
            *funcs: Callables to apply first-to-last. Composed arguments are
                spliced in place.

        Returns:
            Flattened Composed chain.

        Raises:
            TypeError: If any argument is not callable.
        """
        flat: list[Callable[[Any], Any]] = []
        for func in funcs:
            if isinstance(func, Composed):
                flat.extend(func.funcs)
            elif callable(func):
                flat.append(func)
            else:
                raise TypeError(f"Cannot compose non-callable {type(func).__name__}")
        return cls(tuple(flat))

    def __call__(self, value: Any) -> Any:
        for func in self.funcs:
            value = func(value)
        return value

    def __rshift__(self, other: Any) -> Composed:
        """self >> other: run self, then other."""
        if not callable(other):
            return NotImplemented
        return Composed.of(self, other)

    def __rrshift__(self, other: Any) -> Composed:
        """other >> self, where other is a plain callable."""
        if not callable(other):
            return NotImplemented
        return Composed.of(other, self)

    def __lshift__(self, other: Any) -> Composed:
        """self << other: run other, then self."""
        if not callable(other):
            return NotImplemented
        return Composed.of(other, self)

    def __rlshift__(self, other: Any) -> Composed:
        """other << self, where other is a plain callable."""
        if not callable(other):
            return NotImplemented
        return Composed.of(self, other)

    def __ror__(self, value: Any) -> Any:
        """value | self: apply self to value."""
        return self(value)

    def __repr__(self) -> str:
        names = ", ".join(getattr(f, "__name__", None) or repr(f) for f in self.funcs)
        return f"Composed({names})"
