"""Routers module."""

from . import health
from . import homepage

__all__ = [
    "health",
    "homepage",
]
