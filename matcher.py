"""
Puzzle matching and scoring.

For a rotation variant such as "gabcdef" the first letter ("g") is the
mandatory letter. A dictionary word answers the puzzle when it contains the
mandatory letter and uses nothing outside the variant's letters. A variant
becomes a puzzle only if it has enough answers and at least one of them is
a pangram (uses every letter); pangrams score more than ordinary answers.

The scan over the whole dictionary is the expensive part of a run, so
run_matchers() spreads variants over a pool of worker threads that all read
the same WordList.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from channels import Channel, StageFailures, WaitGroup, close_when_done, spawn
from settings import PuzzlePolicy
from wordlist import WordList, letter_mask

DEFAULT_POLICY = PuzzlePolicy()


@dataclass(frozen=True)
class Puzzle:
    letters: str                # Mandatory letter first
    words: Tuple[str, ...]      # Dictionary order
    max_points: int
    pangrams: Tuple[str, ...] = ()


@dataclass
class MatchStats:
    examined: int = 0
    too_few_words: int = 0
    no_pangram: int = 0
    accepted: int = 0

    @classmethod
    def merge(cls, stats: Iterable["MatchStats"]) -> "MatchStats":
        total = cls()
        for s in stats:
            total.examined += s.examined
            total.too_few_words += s.too_few_words
            total.no_pangram += s.no_pangram
            total.accepted += s.accepted
        return total


def match_variant(
    words: WordList,
    letters: str,
    policy: PuzzlePolicy = DEFAULT_POLICY,
    stats: Optional[MatchStats] = None,
) -> Optional[Puzzle]:
    """Return the puzzle for this rotation variant, or None if it is rejected."""
    if stats is None:
        stats = MatchStats()
    stats.examined += 1

    required = letter_mask(letters[0])
    allowed = letter_mask(letters)
    outside = ~allowed

    matched: List[Tuple[str, int]] = [
        (word, mask)
        for word, mask in zip(words.words, words.masks)
        if mask & required and not mask & outside
    ]

    # This combination of letters doesn't produce enough answers
    if len(matched) < policy.min_words:
        stats.too_few_words += 1
        return None

    max_points = 0
    pangrams = []
    for word, mask in matched:
        if mask == allowed:
            pangrams.append(word)
            max_points += policy.pangram_points
        else:
            max_points += policy.word_points

    # Must be solvable with the full letter set
    if not pangrams:
        stats.no_pangram += 1
        return None

    stats.accepted += 1
    return Puzzle(
        letters=letters,
        words=tuple(word for word, _ in matched),
        max_points=max_points,
        pangrams=tuple(pangrams),
    )


def match_variants(
    words: WordList,
    variants: Iterable[str],
    policy: PuzzlePolicy = DEFAULT_POLICY,
    stats: Optional[MatchStats] = None,
) -> Iterator[Puzzle]:
    for letters in variants:
        puzzle = match_variant(words, letters, policy, stats)
        if puzzle is not None:
            yield puzzle


def _matcher_worker(
    words: WordList,
    variants: Channel,
    puzzles: Channel,
    policy: PuzzlePolicy,
    stats: MatchStats,
) -> None:
    for puzzle in match_variants(words, variants, policy, stats):
        puzzles.put(puzzle)


def run_matchers(
    words: WordList,
    variants: Channel,
    puzzles: Channel,
    workers: int,
    policy: PuzzlePolicy = DEFAULT_POLICY,
    failures: Optional[StageFailures] = None,
) -> List[MatchStats]:
    """
    Start `workers` matcher threads reading variants and writing puzzles.

    Returns immediately. puzzles is closed once every worker has finished;
    the returned per-worker stats are complete from then on.
    """
    if workers < 1:
        raise ValueError(f"Worker count must be positive, got {workers}")

    group = WaitGroup()
    group.add(workers)
    stats = [MatchStats() for _ in range(workers)]
    for i, worker_stats in enumerate(stats):
        spawn(
            f"matcher-{i}",
            _matcher_worker,
            words, variants, puzzles, policy, worker_stats,
            on_exit=group.done,
            failures=failures,
        )
    spawn("matchers-done", close_when_done, group, puzzles, failures=failures)
    return stats
