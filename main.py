#!/usr/bin/env python
"""
Main entry point for line search.
Uses Fire for CLI and Hydra for configuration management.

Examples:
    python main.py interactive --data people.txt
    python main.py search "alice banana" --data people.txt --strategy ALL
    python main.py show --data people.txt
"""

from linesearch.cli.app import main


if __name__ == "__main__":
    main()
