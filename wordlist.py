"""
Dictionary loading.

The word list is read once, filtered down to words that could ever be a
puzzle answer, and then shared read-only by every matcher thread. Each word
is stored next to its letter mask (bit i set => letter i of a-z is used) so
matching a variant is a couple of integer operations per word.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Tuple

from wordfreq import zipf_frequency

from settings import MIN_WORD_LENGTH, MIN_ZIPF

_WORD_RE = re.compile(r"[a-z]+")


class DictionaryError(Exception):
    """The word list could not be read."""


@dataclass(frozen=True)
class WordList:
    words: Tuple[str, ...]
    masks: Tuple[int, ...]
    total_lines: int = 0

    def __len__(self) -> int:
        return len(self.words)

    @classmethod
    def from_words(cls, words: List[str]) -> "WordList":
        """Build a word list from already filtered words, without file I/O."""
        words = tuple(words)
        return cls(words=words, masks=tuple(letter_mask(w) for w in words), total_lines=len(words))


def letter_mask(word: str) -> int:
    mask = 0
    for ch in word:
        mask |= 1 << (ord(ch) - 97)
    return mask


def is_valid_word(word: str, num_letters: int, min_length: int = MIN_WORD_LENGTH) -> bool:
    """True if word is long enough, plain a-z, and uses at most num_letters letters."""
    if len(word) < min_length:
        return False
    if not _WORD_RE.fullmatch(word):
        return False
    return len(set(word)) <= num_letters


@lru_cache(maxsize=None)
def get_zipf(word: str) -> float:
    return zipf_frequency(word, 'en')


def load_words(
    path: str,
    num_letters: int,
    min_length: int = MIN_WORD_LENGTH,
    min_zipf: float = MIN_ZIPF,
) -> WordList:
    """
    Read a one-word-per-line UTF-8 file and keep the usable words in file order.

    Raises DictionaryError if the file cannot be opened or read. Bytes that are
    not UTF-8 only spoil their own line, which then fails the a-z filter.
    """
    words: List[str] = []
    total_lines = 0
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for line in f:
                total_lines += 1
                word = line.strip()
                if not is_valid_word(word, num_letters, min_length):
                    continue
                if min_zipf > 0 and get_zipf(word) < min_zipf:
                    continue
                words.append(word)
    except OSError as e:
        raise DictionaryError(f"Could not read word list {path!r}: {e}") from e

    words = tuple(words)
    return WordList(words=words, masks=tuple(letter_mask(w) for w in words), total_lines=total_lines)
