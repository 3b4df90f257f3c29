"""Key path functionality: reified field references and copy-update strategies."""

from composable.core.keypath.models import (
    KeyPath,
    KeyPathError,
    PathSegment,
    SegmentKind,
    custom_segment,
)
from composable.core.keypath.operations import (
    attr,
    copy_with_attr,
    copy_with_item,
    item,
    key_path,
)

__all__ = [
    # Models
    "KeyPath",
    "KeyPathError",
    "PathSegment",
    "SegmentKind",
    "custom_segment",
    # Operations
    "key_path",
    "attr",
    "item",
    "copy_with_attr",
    "copy_with_item",
]
