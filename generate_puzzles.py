#!/usr/bin/env python3
"""
Generate every spelling-bee puzzle a word list supports.

Usage:
  python3 generate_puzzles.py --words-file dict.txt --output-dir puzzles/
  python3 generate_puzzles.py --num-letters 5 --parallel 8 --quiet
  python3 generate_puzzles.py --cpuprofile gen.prof

--cpuprofile profiles the main thread only: dictionary loading and puzzle
writing. Matcher threads are not included.
"""

from __future__ import annotations
import argparse
import cProfile
import sys
import time

from channels import PipelineError
from pipeline import run_pipeline
from settings import (
    CHANNEL_SIZE, MIN_WORDS, MIN_WORD_LENGTH, MIN_ZIPF, NUM_LETTERS, OUTPUT_DIR,
    PANGRAM_POINTS, PARALLEL, WORD_POINTS, WORDS_FILE,
    GeneratorConfig, PuzzlePolicy,
)
from wordlist import DictionaryError, load_words
from writer import PuzzleWriteError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate spelling-bee puzzles from a word list")
    parser.add_argument("--words-file", default=WORDS_FILE, help="File containing valid words, one per line")
    parser.add_argument("--num-letters", type=int, default=NUM_LETTERS, help="Number of letters in resulting puzzles")
    parser.add_argument("--parallel", type=int, default=PARALLEL, help="Number of matcher threads")
    parser.add_argument("--output-dir", default=OUTPUT_DIR, help="Existing directory to write puzzles to")
    parser.add_argument("-v", "--verbose", dest="verbose", action="store_true", help="Verbose output (default)")
    parser.add_argument("-q", "--quiet", dest="verbose", action="store_false", help="Only print the summary")
    parser.add_argument("--min-words", type=int, default=MIN_WORDS, help="Minimum answers for a puzzle")
    parser.add_argument("--min-word-length", type=int, default=MIN_WORD_LENGTH, help="Shortest usable word")
    parser.add_argument("--pangram-points", type=int, default=PANGRAM_POINTS, help="Score of an answer using every letter")
    parser.add_argument("--word-points", type=int, default=WORD_POINTS, help="Score of any other answer")
    parser.add_argument("--min-zipf", type=float, default=MIN_ZIPF, help="Drop words rarer than this Zipf frequency (0 = keep all)")
    parser.add_argument("--channel-size", type=int, default=CHANNEL_SIZE, help="Capacity of each pipeline channel")
    parser.add_argument("--cpuprofile", default="", help="Write cProfile stats for the main thread (load and write, not matchers) to this file")
    parser.set_defaults(verbose=True)
    return parser


def config_from_args(args: argparse.Namespace) -> GeneratorConfig:
    policy = PuzzlePolicy(
        min_words=args.min_words,
        min_word_length=args.min_word_length,
        pangram_points=args.pangram_points,
        word_points=args.word_points,
    )
    return GeneratorConfig(
        words_file=args.words_file,
        output_dir=args.output_dir,
        num_letters=args.num_letters,
        parallel=args.parallel,
        verbose=args.verbose,
        channel_size=args.channel_size,
        min_zipf=args.min_zipf,
        cpuprofile=args.cpuprofile,
        policy=policy,
    )


def generate(config: GeneratorConfig) -> int:
    """Load the dictionary, run the pipeline and return the number of puzzles written."""
    start = time.time()
    words = load_words(
        config.words_file,
        config.num_letters,
        min_length=config.policy.min_word_length,
        min_zipf=config.min_zipf,
    )
    print(f"Matching {len(words)} words ({words.total_lines} lines in {config.words_file})")

    result = run_pipeline(config, words)

    stats = result.stats
    if config.verbose:
        print(f"Examined {stats.examined} letter variants")
        print(f"  {stats.too_few_words} with fewer than {config.policy.min_words} words")
        print(f"  {stats.no_pangram} without a pangram")
    print(f"Wrote {result.written} puzzles to {config.output_dir}")
    print(f"Generation took {time.time() - start:.0f}s")
    return result.written


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    profiler = None
    if config.cpuprofile:
        profiler = cProfile.Profile()
        profiler.enable()

    try:
        generate(config)
    except (DictionaryError, PuzzleWriteError, PipelineError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        if profiler is not None:
            profiler.disable()
            profiler.dump_stats(config.cpuprofile)


if __name__ == "__main__":
    main()
