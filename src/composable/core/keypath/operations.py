"""Key path construction and copy-update strategies.

Records are updated by building a new value with one field replaced:
- dataclasses via `dataclasses.replace`
- NamedTuples via `_replace`
- pydantic models via `model_copy(update=...)`
- any other object via a shallow copy plus attribute assignment, or a deep
  copy when the attribute writes through to storage the shallow copy shares
"""

from __future__ import annotations

import copy
import dataclasses
import os
import typing
import warnings
from collections import defaultdict
from collections.abc import Callable, Hashable, Mapping
from operator import attrgetter, itemgetter
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from composable.config import KeyPathSettings
from composable.core.keypath.models import KeyPath, KeyPathError, PathSegment, SegmentKind

# Warnings are attributed to the first frame outside the package
_PACKAGE_DIR = f"{Path(__file__).parents[2]}{os.sep}"

_MISSING = object()


def key_path(
    root_type: type, *names: str, settings: KeyPathSettings | None = None
) -> KeyPath[Any, Any]:
    """Build a typed key path through one or more attribute names.

    In strict mode each name is checked against the declared fields of the
    type at that level (dataclass, NamedTuple or pydantic model), following
    the field annotation to the next level. Plain classes and annotations
    that are not classes end validation for the rest of the path.

    Args:
        root_type: Record type the path starts from.
        *names: Attribute names, outermost first.
        settings: Key path settings. Defaults to environment-derived settings.

    Returns:
        Key path rooted at `root_type`.

    Raises:
        ValueError: If no names are given.
        KeyPathError: In strict mode, if a name is not a declared field.
    """
    if not names:
        raise ValueError("key_path requires at least one attribute name")
    settings = settings or KeyPathSettings()

    strict = settings.strict_fields
    warn = settings.warn_on_shallow_copy

    first, *rest = names
    result = _attr_key_path(first, root_type, warn)
    current = _field_type(root_type, first) if strict else None
    for name in rest:
        result = result.appending(_attr_key_path(name, current, warn))
        current = _field_type(current, name) if strict and current is not None else None

    return dataclasses.replace(result, root=root_type)


def attr(name: str, settings: KeyPathSettings | None = None) -> KeyPath[Any, Any]:
    """Build an untyped key path to an attribute of whatever root it is given."""
    settings = settings or KeyPathSettings()
    return _attr_key_path(name, None, settings.warn_on_shallow_copy)


def item(key: Hashable) -> KeyPath[Any, Any]:
    """Build a key path to a mapping key or sequence index."""

    def copy_with(root: Any, value: Any) -> Any:
        return copy_with_item(root, key, value)

    return KeyPath((PathSegment(SegmentKind.ITEM, key),), itemgetter(key), copy_with)


def copy_with_attr(root: Any, name: str, value: Any, *, warn: bool = True) -> Any:
    """Return a copy of root with attribute `name` set to value.

    Plain objects are copied shallowly. When the attribute writes through to
    storage the copy shares with root (a property over an internal dict, for
    instance), the shallow attempt is undone and the update is redone on a
    deep copy.

    Args:
        root: Record to copy. Never mutated.
        name: Attribute to replace.
        value: New attribute value.
        warn: Emit RuntimeWarning when the result is a shallow copy.

    Returns:
        New record of the same type.

    Raises:
        KeyPathError: If the root cannot be copied, the attribute cannot be
            set, or no copy can be updated without changing root.
    """
    if dataclasses.is_dataclass(root) and not isinstance(root, type):
        declared = {f.name: f for f in dataclasses.fields(root)}
        if name in declared and declared[name].init:
            return dataclasses.replace(root, **{name: value})
        updated, shallow = _copy_update(root, name, value, object.__setattr__)
    elif _is_namedtuple(root):
        if name not in root._fields:
            raise KeyPathError(f"{type(root).__name__} has no field {name!r}")
        return root._replace(**{name: value})
    elif isinstance(root, BaseModel):
        if name not in type(root).model_fields:
            raise KeyPathError(f"{type(root).__name__} has no field {name!r}")
        return root.model_copy(update={name: value})
    else:
        updated, shallow = _copy_update(root, name, value, setattr)

    if shallow and warn:
        warnings.warn(
            f"{type(root).__name__}.{name} was updated on a shallow copy. "
            f"Nested mutable values are shared with the original.",
            RuntimeWarning,
            skip_file_prefixes=(_PACKAGE_DIR,),
        )
    return updated


def copy_with_item(root: Any, key: Hashable, value: Any) -> Any:
    """Return a copy of a tuple, list or mapping with one slot replaced.

    Tuples and lists keep their length; out-of-range indices raise IndexError.
    Mappings are rebuilt from a fresh dict and keep their type when it can be
    constructed from one; otherwise the result is a plain dict.

    Raises:
        KeyPathError: If root is not a tuple, list or mapping.
    """
    if isinstance(root, tuple):
        items = list(root)
        items[key] = value  # type: ignore[index]
        return type(root)(*items) if _is_namedtuple(root) else tuple(items)
    if isinstance(root, list):
        items = list(root)
        items[key] = value  # type: ignore[index]
        return items
    if isinstance(root, Mapping):
        updated = {**root, key: value}
        if type(root) is dict:
            return updated
        if isinstance(root, defaultdict):
            return type(root)(root.default_factory, updated)
        try:
            return type(root)(updated)
        except TypeError:
            # Constructor does not take a mapping
            return updated
    raise KeyPathError(f"{type(root).__name__} does not support item updates")


def _attr_key_path(name: str, root: type | None, warn: bool) -> KeyPath[Any, Any]:
    def copy_with(record: Any, value: Any) -> Any:
        return copy_with_attr(record, name, value, warn=warn)

    return KeyPath((PathSegment(SegmentKind.ATTR, name),), attrgetter(name), copy_with, root)


def _copy_update(
    root: Any, name: str, value: Any, assign: Callable[[Any, str, Any], None]
) -> tuple[Any, bool]:
    """Copy root and set one attribute, returning (copy, was_shallow)."""
    before = getattr(root, name, _MISSING)
    updated = _copy_and_assign(root, name, value, assign, copy.copy)
    if not _changed(before, getattr(root, name, _MISSING)):
        return updated, True

    # The shallow copy shares the attribute's backing storage with root
    _restore(updated, name, before, assign)
    updated = _copy_and_assign(root, name, value, assign, copy.deepcopy)
    if _changed(before, getattr(root, name, _MISSING)):
        _restore(updated, name, before, assign)
        raise KeyPathError(
            f"Setting {name!r} on a copy of {type(root).__name__} changes the original"
        )
    return updated, False


def _copy_and_assign(
    root: Any,
    name: str,
    value: Any,
    assign: Callable[[Any, str, Any], None],
    copier: Callable[[Any], Any],
) -> Any:
    try:
        updated = copier(root)
    except (TypeError, copy.Error) as e:
        raise KeyPathError(f"{type(root).__name__} cannot be copied for update of {name!r}") from e
    if updated is root:
        raise KeyPathError(f"{type(root).__name__} cannot be copied for update of {name!r}")
    try:
        assign(updated, name, value)
    except (AttributeError, TypeError) as e:
        raise KeyPathError(f"Cannot set {name!r} on a copy of {type(root).__name__}") from e
    return updated


def _restore(
    updated: Any, name: str, before: Any, assign: Callable[[Any, str, Any], None]
) -> None:
    if before is _MISSING:
        delattr(updated, name)
    else:
        assign(updated, name, before)


def _changed(before: Any, after: Any) -> bool:
    return after is not before and after != before


def _is_namedtuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def _declared_fields(cls: type) -> dict[str, Any] | None:
    """Map declared field names to annotations, or None for unvalidated types."""
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        return {name: info.annotation for name, info in cls.model_fields.items()}
    if dataclasses.is_dataclass(cls):
        names = [f.name for f in dataclasses.fields(cls)]
    elif isinstance(cls, type) and issubclass(cls, tuple) and hasattr(cls, "_fields"):
        names = list(cls._fields)
    else:
        return None
    try:
        hints = typing.get_type_hints(cls)
    except NameError:
        # Unresolvable forward reference: names are still checked
        hints = {}
    return {name: hints.get(name) for name in names}


def _field_type(cls: type, name: str) -> type | None:
    declared = _declared_fields(cls)
    if declared is None:
        return None
    if name not in declared:
        raise KeyPathError(f"{cls.__name__} has no field {name!r}")
    annotation = declared[name]
    return annotation if isinstance(annotation, type) else None
