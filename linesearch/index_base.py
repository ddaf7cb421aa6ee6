from abc import ABC, abstractmethod
from typing import Iterable, List
from enum import Enum

# Identifier enums for variants of the line index


class SearchStrategy(Enum):
    ALL = 'ALL'
    ANY = 'ANY'
    NONE = 'NONE'

    @classmethod
    def parse(cls, token: str) -> 'SearchStrategy':
        """
        Parse a strategy token.

        Tokens are case-sensitive and must match a member name exactly.

        Args:
            token: Strategy name (ALL, ANY or NONE)

        Returns:
            Matching SearchStrategy

        Raises:
            InvalidStrategyError: If token is not a strategy name
        """
        if isinstance(token, cls):
            return token
        try:
            return cls[token]
        except (KeyError, TypeError):
            raise InvalidStrategyError(token) from None


class CaseFolding(Enum):
    UNICODE = 'unicode'
    ASCII = 'ascii'


class InvalidStrategyError(ValueError):
    """Raised for a strategy token other than ALL, ANY or NONE."""

    def __init__(self, token):
        self.token = token
        names = ', '.join(s.name for s in SearchStrategy)
        super().__init__(f"Invalid strategy {token!r}, expected one of: {names}")


class IndexBase(ABC):
    """
    Base index class with abstract methods to inherit for specific implementations.
    """
    def __init__(self, core, folding):
        """
        Initialize index identifiers.

        Sample usage:
            idx = LineIndex()
            print(idx)  # LineIndex_funicode: core=LineIndex|folding=CaseFolding.UNICODE

        Args:
            core: Core index type ('LineIndex' or 'SynchronizedLineIndex')
            folding: Case folding rule (UNICODE, ASCII)
        """
        assert core in ('LineIndex', 'SynchronizedLineIndex'), f"Invalid core: {core}"

        if isinstance(folding, str):
            folding = CaseFolding(folding)

        self.identifier_long = "core={}|folding={}".format(core, folding)
        self.identifier_short = "{}_f{}".format(core, folding.value)

    def __repr__(self):
        return f"{self.identifier_short}: {self.identifier_long}"

    @abstractmethod
    def add(self, line: str) -> int:
        """
        Appends a line to the corpus and indexes its terms.

        Args:
            line: Raw line text, stored unmodified.

        Returns:
            Position assigned to the line.
        """
        pass

    @abstractmethod
    def search(self, query: str, strategy: SearchStrategy):
        """
        Resolves a query against the index.

        Args:
            query: Free text, tokenized like a line
            strategy: ALL, ANY or NONE

        Returns:
            Matched or NotFound
        """
        pass

    @abstractmethod
    def render(self) -> str:
        """Returns all lines in insertion order, newline-joined."""
        pass

    @abstractmethod
    def lines_at(self, positions: Iterable[int]) -> List[str]:
        """
        Lists the line texts stored at the given positions.

        Args:
            positions: An iterable of line positions.

        Returns:
            Line texts in corpus order.
        """
        pass
