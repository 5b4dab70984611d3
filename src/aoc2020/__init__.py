"""Solutions to the Advent of Code 2020 puzzles, days 1 to 17."""
