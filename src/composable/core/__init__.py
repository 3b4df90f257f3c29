"""Core functionalities: stateless combinators and key path primitives.

Architecture Note:
    core/ contains pure, stateless functions only. Every combinator returns
    new values and never mutates its inputs; configuration lives in config/.
"""

from composable.core.compose import (
    Composed,
    compose,
    compose_backward,
    const,
    curry,
    fn,
    identity,
    pipe,
)
from composable.core.keypath import (
    KeyPath,
    KeyPathError,
    PathSegment,
    SegmentKind,
    attr,
    copy_with_attr,
    copy_with_item,
    custom_segment,
    item,
    key_path,
)
from composable.core.pairs import map_first, map_second
from composable.core.sequence import filter_over, map_over, map_with
from composable.core.setters import over, prop, property_setter, set_value, view
from composable.core.types import Fn, Pair, Setter, Transform

__all__ = [
    # Types
    "Fn",
    "Transform",
    "Setter",
    "Pair",
    # Compose
    "Composed",
    "identity",
    "const",
    "pipe",
    "compose",
    "compose_backward",
    "fn",
    "curry",
    # Pairs
    "map_first",
    "map_second",
    # Key paths
    "KeyPath",
    "KeyPathError",
    "PathSegment",
    "SegmentKind",
    "custom_segment",
    "key_path",
    "attr",
    "item",
    "copy_with_attr",
    "copy_with_item",
    # Setters
    "property_setter",
    "over",
    "set_value",
    "view",
    "prop",
    # Sequences
    "map_over",
    "filter_over",
    "map_with",
]
