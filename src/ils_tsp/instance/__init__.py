"""Problem instance generation."""

from .generator import Instance

__all__ = ["Instance"]
