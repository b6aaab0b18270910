"""
Puzzle output.

Every accepted puzzle becomes <letters>.txt in the output directory: one
answer per line in dictionary order, then the maximum score on the last
line. Only one writer ever runs, so files are never written concurrently.
"""

from __future__ import annotations
import os
from typing import Iterable

from tqdm import tqdm

from matcher import Puzzle


class PuzzleWriteError(Exception):
    """A puzzle file could not be written."""


def puzzle_path(output_dir: str, letters: str) -> str:
    return os.path.join(output_dir, f"{letters}.txt")


def check_output_dir(output_dir: str) -> None:
    if not os.path.isdir(output_dir):
        raise PuzzleWriteError(f"Output directory {output_dir!r} does not exist")


def write_puzzle(puzzle: Puzzle, output_dir: str) -> str:
    """Create (or overwrite) the file for one puzzle and return its path."""
    path = puzzle_path(output_dir, puzzle.letters)
    try:
        with open(path, "w", encoding="utf-8") as f:
            for word in puzzle.words:
                f.write(f"{word}\n")
            f.write(f"{puzzle.max_points}\n")
    except OSError as e:
        raise PuzzleWriteError(f"Could not create {path!r}: {e}") from e
    return path


def write_puzzles(puzzles: Iterable[Puzzle], output_dir: str, verbose: bool = False) -> int:
    """Write puzzles until the source is exhausted; returns the number written."""
    written = 0
    for puzzle in puzzles:
        write_puzzle(puzzle, output_dir)
        written += 1
        if verbose:
            tqdm.write(f"wrote {puzzle.letters} ({len(puzzle.words)} words, {puzzle.max_points} pts)")
    return written
