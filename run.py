"""
Entry Point Script (Bootstrap)
==============================
Runs the puzzle CLI straight from a source checkout.

It sits outside the 'src' package and puts 'src' on 'sys.path' so that
'from aoc2020...' imports resolve without installing the project.

Usage:
    $ python run.py 11
"""
import os
import sys

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from aoc2020.main import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
