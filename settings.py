"""
Configuration for the spelling-bee puzzle generator.

The defaults below are the values the generator has always used; the
dataclasses carry them into each pipeline stage so nothing reads globals.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from string import ascii_lowercase

# ============================================================================ #
#                              CONFIGURATION                                   #
# ============================================================================ #

ALPHABET = ascii_lowercase

WORDS_FILE = "./dict.txt"
OUTPUT_DIR = "./puzzles"
NUM_LETTERS = 7
PARALLEL = 100
CHANNEL_SIZE = 1000

# Acceptance policy
MIN_WORDS = 10          # Fewer qualifying words than this is not a puzzle
MIN_WORD_LENGTH = 5     # Shorter dictionary words are never answers
PANGRAM_POINTS = 3
WORD_POINTS = 1

MIN_ZIPF = 0.0          # 0 disables the word frequency floor


@dataclass(frozen=True)
class PuzzlePolicy:
    """Acceptance and scoring rules applied to every rotation variant."""
    min_words: int = MIN_WORDS
    min_word_length: int = MIN_WORD_LENGTH
    pangram_points: int = PANGRAM_POINTS
    word_points: int = WORD_POINTS

    def __post_init__(self):
        if self.min_words < 1:
            raise ValueError(f"min_words must be positive, got {self.min_words}")
        if self.min_word_length < 1:
            raise ValueError(f"min_word_length must be positive, got {self.min_word_length}")


@dataclass(frozen=True)
class GeneratorConfig:
    words_file: str = WORDS_FILE
    output_dir: str = OUTPUT_DIR
    num_letters: int = NUM_LETTERS
    parallel: int = PARALLEL
    verbose: bool = True
    alphabet: str = ALPHABET
    channel_size: int = CHANNEL_SIZE
    min_zipf: float = MIN_ZIPF
    cpuprofile: str = ""
    policy: PuzzlePolicy = field(default_factory=PuzzlePolicy)

    def __post_init__(self):
        if self.num_letters < 1:
            raise ValueError(f"num_letters must be positive, got {self.num_letters}")
        if self.parallel < 1:
            raise ValueError(f"parallel must be positive, got {self.parallel}")
        if self.channel_size < 1:
            raise ValueError(f"channel_size must be positive, got {self.channel_size}")
        if not set(self.alphabet) <= set(ascii_lowercase):
            raise ValueError(f"alphabet must only use a-z, got {self.alphabet!r}")
        if len(set(self.alphabet)) != len(self.alphabet):
            raise ValueError(f"alphabet has repeated letters: {self.alphabet!r}")
