import logging
from pathlib import Path
from typing import Iterator, Optional
from tqdm import tqdm

from linesearch.core import LineIndex, create_index

logger = logging.getLogger(__name__)


class LineLoader:
    """Reads a text file line by line into a LineIndex."""

    def __init__(self, config):
        """
        Initialize line loader.

        Args:
            config: Hydra configuration object
        """
        self.config = config

    def _source_path(self) -> Path:
        source_file = self.config.dataset.source_file
        if not source_file:
            raise FileNotFoundError("No source file configured (dataset.source_file)")

        path = Path(source_file)
        if not path.is_file():
            raise FileNotFoundError(f"Source file not found: {path}")
        return path

    def load_lines(self) -> Iterator[str]:
        """
        Load lines based on configuration.

        Line terminators are removed; everything else is kept as-is.

        Yields:
            Lines of the source file, in order
        """
        path = self._source_path()
        encoding = self.config.dataset.encoding

        logger.info(f"Loading lines from: {path}")

        total_lines = self._count_lines(path, encoding)

        # Apply sample size if specified
        max_lines = self.config.dataset.sample_size
        if max_lines is not None:
            total_lines = min(total_lines, max_lines)

        with open(path, 'r', encoding=encoding) as f:
            with tqdm(
                total=total_lines,
                desc="Loading lines",
                disable=not self.config.indexing.show_progress
            ) as pbar:
                for i, line in enumerate(f):
                    if max_lines is not None and i >= max_lines:
                        break

                    yield line[:-1] if line.endswith('\n') else line
                    pbar.update(1)

    def build_index(self, index: Optional[LineIndex] = None) -> LineIndex:
        """
        Populate an index with every loaded line.

        Args:
            index: Index to add lines to (default: a new index from configuration)

        Returns:
            The populated index
        """
        if index is None:
            index = create_index(self.config)

        for line in self.load_lines():
            index.add(line)

        logger.info(f"Indexed {len(index)} lines, "
                    f"{index.get_vocabulary_size()} unique terms")
        return index

    def _count_lines(self, filepath: Path, encoding: str) -> int:
        """
        Count lines in a file.

        Args:
            filepath: Path to the file
            encoding: Text encoding of the file

        Returns:
            Number of lines in the file
        """
        count = 0
        with open(filepath, 'r', encoding=encoding) as f:
            for _ in f:
                count += 1
        logger.debug(f"Found {count:,} lines in {filepath}")
        return count
