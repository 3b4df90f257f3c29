"""Key path models: reified, comparable references to a field of a record.

A key path pairs a pure getter with a pure copy-updater. It never mutates
the root it is applied to.

Usage:
    age = KeyPath(
        path=(PathSegment(SegmentKind.ATTR, "age"),),
        get=lambda user: user.age,
        copy_with=lambda user, age: replace(user, age=age),
        root=User,
    )
    age(user)                      # read
    age.copy_with(user, 43)        # new User, original untouched
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from enum import Enum, auto


class KeyPathError(AttributeError):
    """Raised when a key path cannot be built or cannot copy-update its root."""


class SegmentKind(Enum):
    """How a path segment addresses its part of the root."""

    ATTR = auto()  # Named attribute / record field
    ITEM = auto()  # Mapping key or sequence index
    CUSTOM = auto()  # Hand-written getter and copy-updater


@dataclass(frozen=True, slots=True)
class PathSegment:
    """One step of a key path."""

    kind: SegmentKind
    key: Hashable

    def __str__(self) -> str:
        if self.kind is SegmentKind.ITEM:
            return f"[{self.key!r}]"
        return str(self.key)


@dataclass(frozen=True)
class KeyPath[R, V]:
    """Reference to one field of a record type, usable as a value.

    Equality and hashing use the root type and path only, so key paths
    built separately for the same field compare equal and can be used as
    dict keys. The getter and copy-updater do not take part in comparison.
    """

    path: tuple[PathSegment, ...]
    get: Callable[[R], V] = field(compare=False, repr=False)
    copy_with: Callable[[R, V], R] = field(compare=False, repr=False)
    root: type | None = None

    @property
    def name(self) -> str:
        """Dotted rendering of the path, e.g. `address.city` or `tags[0]`."""
        rendered = ""
        for segment in self.path:
            text = str(segment)
            if rendered and segment.kind is not SegmentKind.ITEM:
                rendered += "."
            rendered += text
        return rendered

    def appending[W](self, other: KeyPath[V, W]) -> KeyPath[R, W]:
        """Extend this path with a path into the value it focuses.

        Args:
            other: Key path rooted at this path's value type.

        Returns:
            Key path from this root through both paths. Updates rebuild
            every level between the root and the focused field.
        """
        outer_get, outer_copy = self.get, self.copy_with
        inner_get, inner_copy = other.get, other.copy_with

        def get(root: R) -> W:
            return inner_get(outer_get(root))

        def copy_with(root: R, value: W) -> R:
            return outer_copy(root, inner_copy(outer_get(root), value))

        return KeyPath(self.path + other.path, get, copy_with, self.root)

    def __call__(self, root: R) -> V:
        return self.get(root)

    def __repr__(self) -> str:
        owner = self.root.__name__ if self.root is not None else ""
        return f"KeyPath(\\{owner}.{self.name})"


def custom_segment(name: str) -> PathSegment:
    """Segment label for a hand-written key path."""
    return PathSegment(SegmentKind.CUSTOM, name)
