"""
Postings list data structure for the line index.
"""

from typing import FrozenSet, Iterable, List, Optional
import bisect


class PostingsList:
    """
    Postings list for a single term.
    Maintains a sorted, duplicate-free list of line positions containing the term.
    """

    def __init__(self, positions: Optional[Iterable[int]] = None):
        """
        Initialize postings list.

        Args:
            positions: Optional initial line positions (any order, duplicates allowed)
        """
        self.positions: List[int] = sorted(set(positions)) if positions else []
        self._position_set: Optional[FrozenSet[int]] = None  # Cache for fast lookup

    def add_position(self, position: int):
        """
        Add a line position.

        Lines are appended in order, so the common case is a position
        greater than or equal to the last one.

        Args:
            position: Line position
        """
        if self.positions and self.positions[-1] >= position:
            # Repeated term in the same line, or out-of-order insert
            idx = bisect.bisect_left(self.positions, position)
            if idx < len(self.positions) and self.positions[idx] == position:
                return
            self.positions.insert(idx, position)
        else:
            self.positions.append(position)

        # Invalidate cache
        self._position_set = None

    def get_position_set(self) -> FrozenSet[int]:
        """Get set of positions for fast membership testing."""
        if self._position_set is None:
            self._position_set = frozenset(self.positions)
        return self._position_set

    def document_frequency(self) -> int:
        """Get number of lines containing this term."""
        return len(self.positions)

    def __contains__(self, position: int) -> bool:
        return position in self.get_position_set()

    def __len__(self) -> int:
        """Number of lines containing this term."""
        return len(self.positions)

    def __iter__(self):
        """Iterate over positions in ascending order."""
        return iter(self.positions)

    def __repr__(self):
        return f"PostingsList({self.positions})"
