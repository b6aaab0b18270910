"""
Wiring of the puzzle generation pipeline.

  combinations -> rotations -> matcher pool (N threads) -> writer

Each arrow is a bounded Channel. The first two stages and every matcher run
in daemon threads; the writer runs in the calling thread, so a write
failure propagates straight to the caller.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

from tqdm import tqdm

from channels import Channel, StageFailures, spawn
from combos import combination_count, expand_rotations, iter_combinations
from matcher import MatchStats, run_matchers
from settings import GeneratorConfig
from wordlist import WordList
from writer import check_output_dir, write_puzzles


def progress(iterable, desc="", **kwargs):
    """Progress bar with a custom format."""
    return tqdm(iterable, desc=desc, ascii=" ▖▘▝▗▚▞█", bar_format='{desc}: |{bar:20}| {n_fmt}/{total_fmt}', **kwargs)


@dataclass
class PipelineResult:
    written: int
    stats: MatchStats


def start_pipeline(
    config: GeneratorConfig,
    words: WordList,
    failures: StageFailures,
) -> Tuple[Channel, List[MatchStats]]:
    """Start every stage up to the matcher pool and return its output channel."""
    combos: Channel = Channel(config.channel_size)
    variants: Channel = Channel(config.channel_size)
    puzzles: Channel = Channel(config.channel_size)

    letter_sets = progress(
        iter_combinations(config.num_letters, config.alphabet),
        "Letter sets",
        total=combination_count(config.num_letters, config.alphabet),
        disable=not config.verbose,
    )
    spawn("combinations", combos.send_all, letter_sets, on_exit=combos.close, failures=failures)
    spawn("rotations", variants.send_all, expand_rotations(combos), on_exit=variants.close, failures=failures)
    stats = run_matchers(words, variants, puzzles, config.parallel, config.policy, failures)
    return puzzles, stats


def run_pipeline(config: GeneratorConfig, words: WordList) -> PipelineResult:
    """Generate and write every puzzle; returns once the last file is written."""
    check_output_dir(config.output_dir)

    failures = StageFailures()
    puzzles, stats = start_pipeline(config, words, failures)
    written = write_puzzles(puzzles, config.output_dir, verbose=config.verbose)
    failures.raise_if_failed()
    return PipelineResult(written=written, stats=MatchStats.merge(stats))
