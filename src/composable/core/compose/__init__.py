"""Composition functionality: pipe, forward/backward compose, and currying."""

from composable.core.compose.models import Composed
from composable.core.compose.operations import (
    compose,
    compose_backward,
    const,
    curry,
    fn,
    identity,
    pipe,
)

__all__ = [
    # Models
    "Composed",
    # Operations
    "identity",
    "const",
    "pipe",
    "compose",
    "compose_backward",
    "fn",
    "curry",
]
