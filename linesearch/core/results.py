"""
Search outcomes: a line set was matched, or nothing was found.
"""

from dataclasses import dataclass
from typing import FrozenSet, Tuple, Union


@dataclass(frozen=True)
class Matched:
    """
    Non-empty search outcome.

    Attributes:
        ordered_lines: Distinct matching line texts, in order of first appearance
        positions: Ascending positions of every matching line
    """
    ordered_lines: Tuple[str, ...]
    positions: Tuple[int, ...]

    @property
    def lines(self) -> FrozenSet[str]:
        """Matching line texts as a set."""
        return frozenset(self.ordered_lines)

    def is_found(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self.ordered_lines)


@dataclass(frozen=True)
class NotFound:
    """Empty search outcome."""

    def is_found(self) -> bool:
        return False


SearchResult = Union[Matched, NotFound]
