"""Source file loading."""

from .line_loader import LineLoader

__all__ = ['LineLoader']
