"""
Line index - inverted index over the lines of a text file.
"""

from .postings import PostingsList
from .boolean_ops import BooleanOperations
from .results import Matched, NotFound, SearchResult
from .line_index import LineIndex, SynchronizedLineIndex, create_index

__all__ = [
    'PostingsList',
    'BooleanOperations',

    'Matched',
    'NotFound',
    'SearchResult',
    'LineIndex',
    'SynchronizedLineIndex',
    'create_index',
]
