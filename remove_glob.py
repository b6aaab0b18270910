#!/usr/bin/env python3
"""
Delete everything matching a glob pattern.

Usage:
  python3 remove_glob.py 'puzzles/*.txt'

Matching directories are removed with their contents. Unrelated to puzzle
generation; handy for clearing an output directory between runs.
"""

from __future__ import annotations
import argparse
import glob
import os
import shutil
import sys
from typing import List


def remove_glob(pattern: str) -> List[str]:
    """Remove every path matching pattern and return the removed paths."""
    removed = []
    # Wildcards match dotfiles too, like a shell with dotglob set
    for path in sorted(glob.glob(pattern, include_hidden=True)):
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        else:
            os.remove(path)
        removed.append(path)
    return removed


def main(argv=None):
    parser = argparse.ArgumentParser(description="Remove files and directories matching a glob pattern")
    parser.add_argument("pattern", help="Glob pattern, quoted so the shell does not expand it")
    args = parser.parse_args(argv)

    try:
        removed = remove_glob(args.pattern)
    except OSError as e:
        print(f"Error removing files: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"Removed {len(removed)} files")


if __name__ == "__main__":
    main()
