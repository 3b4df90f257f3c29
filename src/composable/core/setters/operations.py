"""Property setters: lift a transform on a field into a transform on the record.

Usage:
    user | fn(prop(User, "age")(incr))                      # age + 1
    user | fn(over(age, incr)) >> set_value(name, "Blob Jr.")
    [user, user] | fn(map_over(set_value(location, "LA")))
"""

from __future__ import annotations

from typing import Any

from composable.config import KeyPathSettings
from composable.core.compose import const
from composable.core.keypath import KeyPath, key_path
from composable.core.types import Fn, Setter, Transform


def property_setter[R, V](path: KeyPath[R, V]) -> Setter[V, R]:
    """Curried key path update: `property_setter(path)(transform)(root)`.

    The returned record equals the input except at the focused field, which
    holds `transform(path.get(root))`. The input record is never mutated.
    Exceptions raised by `transform` propagate unchanged.

    Args:
        path: Key path to the field.

    Returns:
        Function taking a field transform and returning a record transform.
    """

    def with_transform(transform: Transform[V]) -> Transform[R]:
        def setter(root: R) -> R:
            return path.copy_with(root, transform(path.get(root)))

        return setter

    return with_transform


def over[R, V](path: KeyPath[R, V], transform: Transform[V]) -> Transform[R]:
    """Uncurried shorthand for `property_setter(path)(transform)`."""
    return property_setter(path)(transform)


def set_value[R, V](path: KeyPath[R, V], value: V) -> Transform[R]:
    """Constant setter: assign a fixed value to the field, ignoring the old one.

    Applying the result twice gives the same record as applying it once.
    """
    return property_setter(path)(const(value))


def view[R, V](path: KeyPath[R, V]) -> Fn[R, V]:
    """The read side of a key path as a plain function."""

    def getter(root: R) -> V:
        return path.get(root)

    return getter


def prop(
    root_type: type, *names: str, settings: KeyPathSettings | None = None
) -> Setter[Any, Any]:
    """Shorthand for `property_setter(key_path(root_type, *names))`."""
    return property_setter(key_path(root_type, *names, settings=settings))
