"""
Command line for line search.
Uses Fire for CLI and Hydra for configuration management.
"""

import os
import logging
from pathlib import Path
from typing import List
import fire
import hydra
from omegaconf import OmegaConf
from dotenv import load_dotenv

from linesearch.core import LineIndex
from linesearch.data import LineLoader
from linesearch.index_base import SearchStrategy
from linesearch.preprocessing import LineTokenizer
from linesearch.utils import Benchmarker
from .menu import MenuSession

# Load .env variables and register resolver
load_dotenv()
OmegaConf.register_new_resolver("env", os.getenv, replace=True)


def split_overrides(overrides) -> List[str]:
    """
    Normalize Hydra overrides given on the command line.

    Fire passes "[a=1,b=2]" through as a plain string, since it is not a
    Python literal. One enclosing pair of brackets is removed and the rest
    is split on commas outside brackets, braces, parentheses and quotes.

    Args:
        overrides: None, a list of overrides, or a single string

    Returns:
        List of override strings
    """
    if overrides is None:
        return []
    if not isinstance(overrides, str):
        return [str(override) for override in overrides]

    text = overrides.strip()
    if text.startswith('[') and text.endswith(']'):
        text = text[1:-1]

    parts = []
    current = []
    depth = 0
    quote = None

    for char in text:
        if quote:
            if char == quote:
                quote = None
        elif char in '\'"':
            quote = char
        elif char in '[{(':
            depth += 1
        elif char in ']})':
            depth -= 1
        elif char == ',' and depth == 0:
            parts.append(''.join(current).strip())
            current = []
            continue
        current.append(char)

    parts.append(''.join(current).strip())
    return [part for part in parts if part]


class LineSearchCLI:
    """CLI for searching the lines of a text file."""

    def __init__(self, config_path: str = "../conf", config_name: str = "config"):
        """
        Initialize CLI with configuration.

        Args:
            config_path: Path to config directory, relative to this module
            config_name: Name of main config file
        """
        self.config_path = config_path
        self.config_name = config_name
        self.config = None
        self.logger = None

    def _init_config(self, data=None, overrides=None):
        """Initialize Hydra configuration."""
        with hydra.initialize(version_base=None, config_path=self.config_path):
            self.config = hydra.compose(config_name=self.config_name, overrides=split_overrides(overrides))

        if data is not None:
            self.config.dataset.source_file = str(data)

        # Setup logging
        logging.basicConfig(
            level=getattr(logging, self.config.logging.level),
            format=self.config.logging.format
        )
        self.logger = logging.getLogger(__name__)

    def _load_index(self) -> LineIndex:
        """Build the index from the configured source file."""
        loader = LineLoader(self.config)
        try:
            return loader.build_index()
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error(f"Cannot load lines: {e}")
            raise

    def interactive(self, data: str = None, overrides=None):
        """
        Load a file and run the find / print-all menu.

        Args:
            data: Path to the source text file
            overrides: Hydra overrides, e.g. "[preprocessing.case_folding=ascii]"
        """
        self._init_config(data, overrides)
        index = self._load_index()
        MenuSession(index, self.config.menu).run()

    def search(self, query: str, data: str = None, strategy: str = None, overrides=None):
        """
        Run a single query and print the matching lines.

        Args:
            query: Query string
            data: Path to the source text file
            strategy: ALL, ANY or NONE (default: index.default_strategy)
            overrides: Hydra overrides
        """
        self._init_config(data, overrides)
        strategy = SearchStrategy.parse(strategy or self.config.index.default_strategy)

        index = self._load_index()
        self.logger.info(f"Searching {len(index)} lines for {query!r} ({strategy.name})")

        result = index.search(str(query), strategy)
        if result.is_found():
            for line in result.ordered_lines:
                print(line)
        else:
            print(self.config.menu.not_found)

    def show(self, data: str = None, overrides=None):
        """
        Print all lines in the order they were loaded.

        Args:
            data: Path to the source text file
            overrides: Hydra overrides
        """
        self._init_config(data, overrides)
        index = self._load_index()
        print(self.config.menu.list_header)
        print(index.render())

    def stats(self, data: str = None, top: int = 10, overrides=None):
        """
        Log index statistics and the most frequent terms.

        Args:
            data: Path to the source text file
            top: Number of most frequent terms to show
            overrides: Hydra overrides
        """
        self._init_config(data, overrides)
        index = self._load_index()

        statistics = index.get_statistics()
        self.logger.info("=" * 60)
        self.logger.info("INDEX STATISTICS")
        self.logger.info("=" * 60)
        self.logger.info(f"Index: {index!r}")
        self.logger.info(f"Lines: {statistics['num_lines']:,}")
        self.logger.info(f"Unique terms: {statistics['vocabulary_size']:,}")
        self.logger.info(f"Total tokens: {statistics['total_tokens']:,}")
        self.logger.info(f"Avg line length: {statistics['avg_line_length']:.2f} tokens")
        self.logger.info(f"Avg postings length: {statistics['avg_postings_length']:.2f} lines")

        frequencies = LineTokenizer.from_config(self.config).get_term_frequencies(index.get_lines())
        most_common = sorted(frequencies.items(), key=lambda item: (-item[1], item[0]))[:top]
        self.logger.info(f"\nTop {len(most_common)} terms:")
        for i, (term, count) in enumerate(most_common, 1):
            self.logger.info(f"  {i:2d}. {term!r}: {count}")

        return statistics

    def benchmark(self, queries: str, data: str = None, experiment_name: str = None,
                  overrides=None):
        """
        Measure search latency of every query in a file under every strategy.

        Args:
            queries: Path to a file with one query per line
            data: Path to the source text file
            experiment_name: Name for the benchmark experiment
            overrides: Hydra overrides
        """
        self._init_config(data, overrides)
        index = self._load_index()

        queries_path = Path(queries)
        with open(queries_path, 'r', encoding=self.config.dataset.encoding) as f:
            query_list = [line.rstrip('\n') for line in f]

        if experiment_name is None:
            experiment_name = f"benchmark_{queries_path.stem}"

        benchmarker = Benchmarker(self.config)
        results = benchmarker.benchmark_queries(index, query_list, experiment_name=experiment_name)

        if self.config.benchmark.save_results:
            results.save(Path(self.config.paths.results_dir))

        return results.get_statistics()

    def show_config(self, overrides=None):
        """
        Display current configuration.

        Args:
            overrides: Hydra overrides
        """
        self._init_config(overrides=overrides)

        self.logger.info("=" * 60)
        self.logger.info("CURRENT CONFIGURATION")
        self.logger.info("=" * 60)
        print(OmegaConf.to_yaml(self.config))


def main():
    """Main entry point."""
    fire.Fire(LineSearchCLI)


if __name__ == "__main__":
    main()
