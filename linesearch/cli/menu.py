"""
Interactive find / print-all menu over a populated index.
"""

import logging
from typing import Callable, Optional

from linesearch.core import LineIndex
from linesearch.index_base import InvalidStrategyError, SearchStrategy

logger = logging.getLogger(__name__)

FIND = 1
PRINT_ALL = 2
EXIT = 0


class MenuSession:
    """Reads menu choices until exit or end of input."""

    def __init__(self, index: LineIndex, menu_config,
                 input_func: Callable[[], str] = input,
                 output_func: Callable[[str], None] = print):
        """
        Initialize menu session.

        Args:
            index: Populated index to query
            menu_config: The `menu` section of the configuration (prompts and labels)
            input_func: Returns the next input line, raises EOFError at end of input
            output_func: Writes one line of output
        """
        self.index = index
        self.menu = menu_config
        self._input = input_func
        self._output = output_func

    def _read(self) -> Optional[str]:
        try:
            return self._input()
        except EOFError:
            return None

    def run(self):
        """Run the menu loop."""
        while True:
            self._output(self.menu.header)

            action = self._read()
            if action is None:
                logger.debug("End of input, leaving menu")
                return

            self._output("")

            try:
                choice = int(action.strip())
            except ValueError:
                choice = None

            if choice == EXIT:
                self._output(self.menu.goodbye)
                return

            if choice == FIND:
                if not self.find():
                    return
            elif choice == PRINT_ALL:
                self.print_all()
            else:
                self._output(self.menu.incorrect_option)

            self._output("")

    def find(self) -> bool:
        """
        Ask for a strategy and a query, then print the matches.

        Returns:
            False if input ended before the query was read
        """
        self._output(self.menu.strategy_prompt)
        token = self._read()
        if token is None:
            return False

        try:
            strategy = SearchStrategy.parse(token)
        except InvalidStrategyError as e:
            logger.debug(str(e))
            self._output(self.menu.incorrect_option)
            return True

        self._output(self.menu.query_prompt)
        query = self._read()
        if query is None:
            return False

        result = self.index.search(query, strategy)
        if result.is_found():
            for line in result.ordered_lines:
                self._output(line)
        else:
            self._output(self.menu.not_found)
        return True

    def print_all(self):
        """Print every line in insertion order."""
        self._output(self.menu.list_header)
        self._output(self.index.render())
