"""Core interfaces and dependency injection."""

from .protocols import PageSourcePort

__all__ = ["PageSourcePort"]
