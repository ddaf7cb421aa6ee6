"""
Core inverted index over an append-only corpus of lines.
"""

from typing import Dict, Iterable, List, Optional
import logging
import threading

from linesearch.index_base import IndexBase, SearchStrategy
from linesearch.preprocessing import LineTokenizer
from .boolean_ops import BooleanOperations
from .postings import PostingsList
from .results import Matched, NotFound, SearchResult

logger = logging.getLogger(__name__)


class LineIndex(IndexBase):
    """
    Inverted index over lines of text.
    Maps terms to postings lists of line positions.

    The corpus and the term dictionary are only written by add(), so every
    position in a postings list refers to a stored line.
    """

    def __init__(self, tokenizer: Optional[LineTokenizer] = None):
        """
        Initialize empty index.

        Args:
            tokenizer: Tokenizer used for lines and queries (default: unicode lower-casing, split on ' ')
        """
        self.tokenizer = tokenizer or LineTokenizer()

        super().__init__(
            core=self._core_name(),
            folding=self.tokenizer.case_folding
        )

        # Position -> raw line
        self.lines: List[str] = []

        # Term -> PostingsList mapping
        self.dictionary: Dict[str, PostingsList] = {}

        # Statistics
        self.total_tokens = 0

    def _core_name(self) -> str:
        return 'LineIndex'

    def add(self, line: str) -> int:
        """
        Append a line to the corpus and index its terms.

        Args:
            line: Raw line text

        Returns:
            Position assigned to the line
        """
        position = len(self.lines)
        tokens = self.tokenizer.tokenize(line)

        for term in tokens:
            postings = self.dictionary.get(term)
            if postings is None:
                postings = self.dictionary[term] = PostingsList()
            postings.add_position(position)

        self.lines.append(line)
        self.total_tokens += len(tokens)

        return position

    def get_postings(self, term: str) -> PostingsList:
        """
        Get postings list for a term.

        Args:
            term: The term to look up (already case-folded)

        Returns:
            PostingsList for the term, empty if the term is unknown
        """
        postings = self.dictionary.get(term)
        return postings if postings else PostingsList()

    def search(self, query: str, strategy: SearchStrategy) -> SearchResult:
        """
        Resolve a query into matching lines.

        ANY unions the per-term postings, ALL intersects them, NONE takes
        the complement of ANY over every stored position.

        Args:
            query: Query text, tokenized like a line
            strategy: SearchStrategy, or its name

        Returns:
            Matched with the matching lines, or NotFound
        """
        if isinstance(strategy, str):
            strategy = SearchStrategy.parse(strategy)

        terms = self.tokenizer.tokenize(query)
        matched = self._resolve(terms, strategy)

        logger.debug(f"Query {query!r} ({strategy.name}): {len(terms)} terms, "
                     f"{len(matched)} matching lines")

        if len(matched) == 0:
            return NotFound()

        return Matched(
            ordered_lines=tuple(dict.fromkeys(self.lines[pos] for pos in matched)),
            positions=tuple(matched.positions)
        )

    def _resolve(self, terms: List[str], strategy: SearchStrategy) -> PostingsList:
        """Apply the strategy's set algebra to the query terms."""
        if not terms:
            return PostingsList()

        postings_lists = [self.get_postings(term) for term in terms]

        if strategy is SearchStrategy.ANY:
            return BooleanOperations.union_many(postings_lists)

        if strategy is SearchStrategy.ALL:
            if len(postings_lists) > 1:
                return BooleanOperations.intersect_many(postings_lists)
            # A single term matches exactly like ANY
            return BooleanOperations.union_many(postings_lists)

        if strategy is SearchStrategy.NONE:
            any_matched = BooleanOperations.union_many(postings_lists)
            return BooleanOperations.negate(any_matched, len(self.lines))

        raise ValueError(f"Unsupported strategy: {strategy}")

    def lines_at(self, positions: Iterable[int]) -> List[str]:
        """Get line texts for positions, in corpus order."""
        return [self.lines[pos] for pos in sorted(positions)]

    def get_lines(self) -> List[str]:
        """Get a copy of all lines in insertion order."""
        return list(self.lines)

    def render(self) -> str:
        """All lines in insertion order, newline-joined."""
        return '\n'.join(self.lines)

    def contains_term(self, term: str) -> bool:
        """Check if term exists in vocabulary."""
        return term in self.dictionary

    def get_vocabulary_size(self) -> int:
        """Get size of vocabulary (number of unique terms)."""
        return len(self.dictionary)

    def get_statistics(self) -> Dict:
        """Get index statistics."""
        num_lines = len(self.lines)
        avg_postings_length = (
            sum(len(postings) for postings in self.dictionary.values()) / len(self.dictionary)
            if self.dictionary else 0
        )

        return {
            'num_lines': num_lines,
            'vocabulary_size': len(self.dictionary),
            'total_tokens': self.total_tokens,
            'avg_line_length': self.total_tokens / num_lines if num_lines > 0 else 0,
            'avg_postings_length': avg_postings_length
        }

    def __len__(self) -> int:
        """Number of stored lines."""
        return len(self.lines)

    def __str__(self) -> str:
        return self.render()


class SynchronizedLineIndex(LineIndex):
    """
    LineIndex safe for concurrent add() and search().

    One lock guards the corpus and the dictionary together, so a search
    never sees a line without its postings or the reverse.
    """

    def __init__(self, tokenizer: Optional[LineTokenizer] = None):
        self._lock = threading.RLock()
        super().__init__(tokenizer)

    def _core_name(self) -> str:
        return 'SynchronizedLineIndex'

    def add(self, line: str) -> int:
        with self._lock:
            return super().add(line)

    def search(self, query: str, strategy: SearchStrategy) -> SearchResult:
        with self._lock:
            return super().search(query, strategy)

    def lines_at(self, positions: Iterable[int]) -> List[str]:
        with self._lock:
            return super().lines_at(positions)

    def get_lines(self) -> List[str]:
        with self._lock:
            return super().get_lines()

    def get_postings(self, term: str) -> PostingsList:
        with self._lock:
            return super().get_postings(term)

    def contains_term(self, term: str) -> bool:
        with self._lock:
            return super().contains_term(term)

    def get_vocabulary_size(self) -> int:
        with self._lock:
            return super().get_vocabulary_size()

    def render(self) -> str:
        with self._lock:
            return super().render()

    def get_statistics(self) -> Dict:
        with self._lock:
            return super().get_statistics()

    def __len__(self) -> int:
        with self._lock:
            return super().__len__()


def create_index(config) -> LineIndex:
    """
    Create an empty index from configuration.

    Args:
        config: Hydra configuration object

    Returns:
        SynchronizedLineIndex if index.synchronized is set, LineIndex otherwise
    """
    tokenizer = LineTokenizer.from_config(config)

    if config.index.synchronized:
        index = SynchronizedLineIndex(tokenizer)
    else:
        index = LineIndex(tokenizer)

    logger.info(f"Initialized {index!r}")
    return index
