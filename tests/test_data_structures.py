"""
Unit tests for the postings list, boolean operations and tokenizer
Run with: pytest tests/test_data_structures.py -v
"""

import pytest
import sys
from pathlib import Path

# Add repository root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from linesearch.core import PostingsList, BooleanOperations
from linesearch.index_base import CaseFolding
from linesearch.preprocessing import LineTokenizer


class TestPostingsList:
    """Test PostingsList class."""

    def test_create_empty_postings_list(self):
        """Test creating an empty postings list."""
        pl = PostingsList()
        assert len(pl) == 0
        assert pl.document_frequency() == 0
        assert not pl

    def test_add_positions_in_order(self):
        """Test appending increasing positions."""
        pl = PostingsList()
        pl.add_position(0)
        pl.add_position(2)
        pl.add_position(5)

        assert pl.positions == [0, 2, 5]
        assert pl.document_frequency() == 3

    def test_repeated_position_is_stored_once(self):
        """Test that a term repeated within one line is counted once."""
        pl = PostingsList()
        pl.add_position(3)
        pl.add_position(3)
        pl.add_position(3)

        assert pl.positions == [3]

    def test_out_of_order_insert(self):
        """Test inserting a position smaller than the last one."""
        pl = PostingsList([1, 7])
        pl.add_position(4)
        pl.add_position(1)

        assert pl.positions == [1, 4, 7]

    def test_initial_positions_sorted_and_unique(self):
        """Test constructing from unsorted positions with duplicates."""
        pl = PostingsList([5, 1, 5, 3])
        assert list(pl) == [1, 3, 5]

    def test_membership_cache_invalidated(self):
        """Test that membership reflects positions added after a lookup."""
        pl = PostingsList([0])
        assert 0 in pl
        assert 1 not in pl

        pl.add_position(1)
        assert 1 in pl
        assert pl.get_position_set() == frozenset({0, 1})


class TestBooleanOperations:
    """Test boolean operations on postings lists."""

    def setup_method(self):
        """Setup test data before each test."""
        self.list1 = PostingsList([1, 3, 5])
        self.list2 = PostingsList([2, 3, 4])

    def test_intersect_empty_lists(self):
        """Test intersection with empty lists."""
        result = BooleanOperations.intersect(PostingsList(), self.list1)
        assert len(result) == 0

    def test_intersect_with_overlap(self):
        """Test intersection with overlapping positions."""
        result = BooleanOperations.intersect(self.list1, self.list2)
        assert result.positions == [3]

    def test_intersect_many(self):
        """Test intersection of multiple lists."""
        list3 = PostingsList([3, 5])
        result = BooleanOperations.intersect_many([self.list1, self.list2, list3])
        assert result.positions == [3]

    def test_intersect_many_is_not_pairwise_union(self):
        """Test that consecutive pairs are folded, not merged.

        x={0}, y={0,1}, z={1}: pairs (x,y) and (y,z) each overlap, but
        no position is in all three.
        """
        x = PostingsList([0])
        y = PostingsList([0, 1])
        z = PostingsList([1])

        result = BooleanOperations.intersect_many([x, y, z])
        assert len(result) == 0

    def test_intersect_many_empty_input(self):
        """Test intersection of no lists."""
        assert len(BooleanOperations.intersect_many([])) == 0

    def test_union(self):
        """Test union of two lists."""
        result = BooleanOperations.union(self.list1, self.list2)
        assert result.positions == [1, 2, 3, 4, 5]

    def test_union_with_empty(self):
        """Test union with an empty list."""
        result = BooleanOperations.union(PostingsList(), self.list2)
        assert result.positions == [2, 3, 4]

    def test_union_many(self):
        """Test union of multiple lists."""
        list3 = PostingsList([0, 9])
        result = BooleanOperations.union_many([self.list1, self.list2, list3])
        assert result.positions == [0, 1, 2, 3, 4, 5, 9]

    def test_union_does_not_modify_inputs(self):
        """Test that inputs are left untouched."""
        BooleanOperations.union_many([self.list1, self.list2])
        assert self.list1.positions == [1, 3, 5]
        assert self.list2.positions == [2, 3, 4]

    def test_negate(self):
        """Test complement over the corpus range."""
        result = BooleanOperations.negate(self.list1, 7)
        assert result.positions == [0, 2, 4, 6]

    def test_negate_empty_corpus(self):
        """Test complement over an empty corpus."""
        result = BooleanOperations.negate(PostingsList(), 0)
        assert len(result) == 0


class TestLineTokenizer:
    """Test LineTokenizer class."""

    def test_lowercase_and_split(self):
        """Test default tokenization."""
        tokenizer = LineTokenizer()
        assert tokenizer.tokenize("Alice Apple") == ["alice", "apple"]

    def test_punctuation_is_kept(self):
        """Test that only spaces separate terms."""
        tokenizer = LineTokenizer()
        assert tokenizer.tokenize("Doe, john@mail.com") == ["doe,", "john@mail.com"]

    def test_consecutive_spaces_yield_empty_terms(self):
        """Test that runs of spaces produce empty-string terms."""
        tokenizer = LineTokenizer()
        assert tokenizer.tokenize(" a  b ") == ["", "a", "", "b", ""]

    def test_tabs_are_not_separators(self):
        """Test that only the space character splits."""
        tokenizer = LineTokenizer()
        assert tokenizer.tokenize("a\tb") == ["a\tb"]

    def test_empty_text(self):
        """Test that empty text yields one empty term."""
        tokenizer = LineTokenizer()
        assert tokenizer.tokenize("") == [""]

    def test_unicode_folding(self):
        """Test default Unicode lower-casing."""
        tokenizer = LineTokenizer()
        assert tokenizer.tokenize("ÄPFEL Ωmega") == ["äpfel", "ωmega"]

    def test_ascii_folding(self):
        """Test ASCII-only lower-casing."""
        tokenizer = LineTokenizer(case_folding='ascii')
        assert tokenizer.case_folding is CaseFolding.ASCII
        assert tokenizer.tokenize("ÄPFEL Bob") == ["Äpfel", "bob"]

    def test_invalid_folding(self):
        """Test rejecting an unknown case folding rule."""
        with pytest.raises(ValueError):
            LineTokenizer(case_folding='turkish')

    def test_empty_separator(self):
        """Test rejecting an empty separator."""
        with pytest.raises(ValueError):
            LineTokenizer(separator='')

    def test_term_frequencies(self):
        """Test counting term occurrences."""
        tokenizer = LineTokenizer()
        frequencies = tokenizer.get_term_frequencies(["Alice apple", "alice ALICE"])
        assert frequencies == {"alice": 3, "apple": 1}
