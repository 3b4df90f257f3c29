"""Setter functionality: property, constant and read-side key path functions."""

from composable.core.setters.operations import over, prop, property_setter, set_value, view

__all__ = [
    "property_setter",
    "over",
    "set_value",
    "view",
    "prop",
]
