"""Command-line interface."""
import sys

from aoc2020.main import main

if __name__ == "__main__":
    sys.exit(main())
