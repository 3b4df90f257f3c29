"""composable: pure function composition and immutable setters.

Usage:
    from dataclasses import dataclass
    from composable import fn, key_path, map_first, map_over, over, set_value

    @dataclass(frozen=True)
    class User:
        name: str
        location: str
        age: int

    age = key_path(User, "age")
    name = key_path(User, "name")

    user = User("Blob", "NYC", 42)
    older = user | fn(over(age, lambda x: x + 1)) >> over(name, str.upper)
    # User(name='BLOB', location='NYC', age=43); user is unchanged

    (42, "Hello") | fn(map_first(lambda x: x + 1))  # (43, "Hello")
    [user, user] | fn(map_over(set_value(age, 0)))
"""

__version__ = "0.1.0"

# Composition
from composable.core import (
    Composed,
    compose,
    compose_backward,
    const,
    curry,
    fn,
    identity,
    pipe,
)

# Key paths
from composable.core import (
    KeyPath,
    KeyPathError,
    attr,
    item,
    key_path,
)

# Setters and lifting
from composable.core import (
    filter_over,
    map_first,
    map_over,
    map_second,
    map_with,
    over,
    prop,
    property_setter,
    set_value,
    view,
)

# Configuration
from composable.config import KeyPathSettings

__all__ = [
    # Version
    "__version__",
    # Composition
    "Composed",
    "identity",
    "const",
    "pipe",
    "compose",
    "compose_backward",
    "fn",
    "curry",
    # Key paths
    "KeyPath",
    "KeyPathError",
    "key_path",
    "attr",
    "item",
    # Setters
    "map_first",
    "map_second",
    "property_setter",
    "over",
    "set_value",
    "view",
    "prop",
    # Sequences
    "map_over",
    "filter_over",
    "map_with",
    # Config
    "KeyPathSettings",
]
