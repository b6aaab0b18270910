"""
Letter set generation.

iter_combinations() walks the alphabet recursively and only ever extends a
combination with letters that sort after its last one, so every letter set
comes out exactly once, in increasing letter order. expand_rotations() then
turns each set into one variant per possible center letter.
"""

from __future__ import annotations
from math import comb
from typing import Iterable, Iterator

from settings import ALPHABET


def iter_combinations(n: int, alphabet: str = ALPHABET) -> Iterator[str]:
    """Yield every combination of n distinct letters of alphabet, in order."""
    if n < 1:
        raise ValueError(f"Combination length must be positive, got {n}")
    return _combine(n, alphabet)


def _combine(n: int, letters: str) -> Iterator[str]:
    if n > len(letters):
        return
    for i, c in enumerate(letters):
        if n == 1:
            yield c
            continue
        # Suffixes are drawn from letters after c only
        for rest in _combine(n - 1, letters[i + 1:]):
            yield c + rest


def combination_count(n: int, alphabet: str = ALPHABET) -> int:
    if n < 1:
        return 0
    return comb(len(alphabet), n)


def rotations(s: str) -> Iterator[str]:
    """
    Yield every cyclic rotation of s, starting with s itself.

    If s is "abcdefg":
      abcdefg, bcdefga, cdefgab, defgabc, efgabcd, fgabcde, gabcdef
    """
    for i in range(len(s)):
        yield s[i:] + s[:i]


def expand_rotations(combos: Iterable[str]) -> Iterator[str]:
    for s in combos:
        yield from rotations(s)
