"""Collection lifting: reuse element transforms across a batch of values."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from composable.core.types import Fn


def map_over[A, B](f: Callable[[A], B]) -> Fn[Iterable[A], list[B]]:
    """Lift an element transform to sequences: `[A] -> [B]`.

    The result has one element per input element, in input order, each
    computed by exactly one call to `f`.
    """

    def mapper(xs: Iterable[A]) -> list[B]:
        return [f(x) for x in xs]

    return mapper


def filter_over[A](predicate: Callable[[A], bool]) -> Fn[Iterable[A], list[A]]:
    """Lift a predicate to sequences, keeping matching elements in order."""

    def keep(xs: Iterable[A]) -> list[A]:
        return [x for x in xs if predicate(x)]

    return keep


def map_with[A, B](xs: Iterable[A]) -> Callable[[Callable[[A], B]], list[B]]:
    """Curried map taking the sequence first: `map_with(xs)(f)`.

    The sequence is materialized once, so the returned function can be
    called with several transforms.
    """
    items = list(xs)

    def apply(f: Callable[[A], B]) -> list[B]:
        return [f(x) for x in items]

    return apply
