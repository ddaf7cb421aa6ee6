import string
from collections import Counter
from typing import Dict, Iterable, List

from linesearch.index_base import CaseFolding

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class LineTokenizer:
    """Splits lines and queries into terms."""

    def __init__(self, case_folding='unicode', separator: str = ' '):
        """
        Initialize tokenizer.

        Args:
            case_folding: 'unicode' uses str.lower(), which never consults the
                process locale; 'ascii' lower-cases A-Z only
            separator: Exact string terms are split on
        """
        if isinstance(case_folding, str):
            case_folding = CaseFolding(case_folding)
        if not separator:
            raise ValueError("Separator must be a non-empty string")

        self.case_folding = case_folding
        self.separator = separator

    @classmethod
    def from_config(cls, config) -> 'LineTokenizer':
        """
        Create tokenizer from configuration.

        Args:
            config: Hydra config object with preprocessing settings
        """
        return cls(
            case_folding=config.preprocessing.case_folding,
            separator=config.preprocessing.separator
        )

    def fold(self, text: str) -> str:
        """Apply the configured case folding."""
        if self.case_folding is CaseFolding.ASCII:
            return text.translate(_ASCII_LOWER)
        return text.lower()

    def tokenize(self, text: str) -> List[str]:
        """
        Tokenize text.

        No trimming is done: runs of separators, and separators at either
        end, produce empty-string terms. An empty text yields [''].

        Args:
            text: Input text string

        Returns:
            List of terms, duplicates included
        """
        return self.fold(text).split(self.separator)

    def get_term_frequencies(self, texts: Iterable[str]) -> Dict[str, int]:
        """
        Count term occurrences across multiple texts.

        Args:
            texts: Iterable of text strings

        Returns:
            Dictionary mapping terms to frequencies
        """
        frequencies = Counter()
        for text in texts:
            frequencies.update(self.tokenize(text))
        return dict(frequencies)
