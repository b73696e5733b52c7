"""API routers module."""

from . import github

__all__ = ["github"]
