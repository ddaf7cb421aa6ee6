"""Command line and interactive menu."""

from .menu import MenuSession

__all__ = ['MenuSession']
