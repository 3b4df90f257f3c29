"""Pure application and composition functions.

These are stateless building blocks: nothing here stores state or catches
exceptions raised by the functions it is given.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

from composable.core.compose.models import Composed

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def identity[T](x: T) -> T:
    """Return the argument unchanged."""
    return x


def const[T](value: T) -> Callable[[Any], T]:
    """Build a function that ignores its input and returns `value`."""

    def constant(_: Any) -> T:
        return value

    return constant


def pipe(value: Any, *funcs: Callable[[Any], Any]) -> Any:
    """Apply functions to a value, left to right.

    `pipe(a, f)` is `f(a)`; `pipe(a, f, g)` is `g(f(a))`; `pipe(a)` is `a`.

    Args:
        value: Starting value.
        *funcs: Functions to apply in order.

    Returns:
        Result of the last function, or `value` if none were given.
    """
    for func in funcs:
        value = func(value)
    return value


def compose(*funcs: Callable[[Any], Any]) -> Composed:
    """Forward composition: `compose(f, g)(x) == g(f(x))`.

    Args:
        *funcs: Functions in application order. No functions yields identity.

    Returns:
        Composed chain invoking each function exactly once per call.
    """
    return Composed.of(*funcs)


def compose_backward(*funcs: Callable[[Any], Any]) -> Composed:
    """Backward composition: `compose_backward(f, g)(x) == f(g(x))`.

    Lets nested setters read outside-in:
    `compose_backward(map_second, map_first)(incr)` targets the first slot
    inside the second slot.

    Args:
        *funcs: Functions in reading order; the last one runs first.

    Returns:
        Composed chain.
    """
    return Composed.of(*reversed(funcs))


def fn(func: Callable[[Any], Any]) -> Composed:
    """Lift a callable so it supports `>>`, `<<` and `value | func`."""
    return Composed.of(func)


def curry(func: Callable[..., Any], arity: int | None = None) -> Callable[..., Any]:
    """Turn an n-argument function into a chain of single-argument functions.

    `curry(f)(a)(b)(c) == f(a, b, c)`. Partial chains are independent
    values and can be reused.

    Args:
        func: Function to curry.
        arity: Number of arguments to collect. Defaults to the number of
            required positional parameters of `func`.

    Returns:
        `func` itself when arity is 0 or 1, otherwise the first link of the chain.

    Raises:
        TypeError: If arity is not given and cannot be read from the signature.
        ValueError: If arity is negative.
    """
    if arity is None:
        arity = _positional_arity(func)
    if arity < 0:
        raise ValueError(f"arity must be non-negative, got {arity}")
    if arity <= 1:
        return func

    def collect(collected: tuple[Any, ...]) -> Callable[[Any], Any]:
        def step(arg: Any) -> Any:
            args = (*collected, arg)
            if len(args) == arity:
                return func(*args)
            return collect(args)

        step.__name__ = f"{getattr(func, '__name__', 'curried')}_{len(collected)}"
        return step

    return collect(())


def _positional_arity(func: Callable[..., Any]) -> int:
    """Count required positional parameters of func."""
    try:
        params = inspect.signature(func).parameters.values()
    except (TypeError, ValueError) as e:
        raise TypeError(f"Cannot determine arity of {func!r}; pass arity explicitly") from e

    required = [p for p in params if p.kind in _POSITIONAL and p.default is p.empty]
    if not required and any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params):
        raise TypeError(f"Cannot determine arity of variadic {func!r}; pass arity explicitly")
    return len(required)
