"""
LineSearch - in-memory inverted index over the lines of a text file.
"""

from .index_base import SearchStrategy, CaseFolding, InvalidStrategyError
from .core import LineIndex, SynchronizedLineIndex, Matched, NotFound, SearchResult

__version__ = '0.1.0'

__all__ = [
    'SearchStrategy',
    'CaseFolding',
    'InvalidStrategyError',
    'LineIndex',
    'SynchronizedLineIndex',
    'Matched',
    'NotFound',
    'SearchResult',
]
