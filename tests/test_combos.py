import time
from math import comb

import pytest

from combos import combination_count, expand_rotations, iter_combinations, rotations


@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_iter_combinations_counts_and_order(n: int) -> None:
    combos = list(iter_combinations(n))

    assert len(combos) == comb(26, n)
    assert len(set(combos)) == len(combos)
    for s in combos:
        assert len(s) == n
        assert list(s) == sorted(set(s))


def test_iter_combinations_single_letters() -> None:
    assert "".join(iter_combinations(1)) == "abcdefghijklmnopqrstuvwxyz"


def test_iter_combinations_is_lexicographic() -> None:
    combos = list(iter_combinations(3))
    assert combos[0] == "abc"
    assert combos[-1] == "xyz"
    assert combos == sorted(combos)


def test_iter_combinations_restricted_alphabet() -> None:
    assert list(iter_combinations(2, "abcd")) == ["ab", "ac", "ad", "bc", "bd", "cd"]


def test_iter_combinations_whole_alphabet_and_beyond() -> None:
    assert list(iter_combinations(26)) == ["abcdefghijklmnopqrstuvwxyz"]
    assert list(iter_combinations(27)) == []


@pytest.mark.parametrize("n", [23, 24, 25])
def test_iter_combinations_near_alphabet_size(n: int) -> None:
    start = time.perf_counter()
    combos = list(iter_combinations(n))

    assert len(combos) == comb(26, n)
    assert time.perf_counter() - start < 2


def test_iter_combinations_rejects_zero() -> None:
    with pytest.raises(ValueError):
        iter_combinations(0)


def test_combination_count() -> None:
    assert combination_count(7) == 657800
    assert combination_count(3, "abc") == 1
    assert combination_count(4, "abc") == 0
    assert combination_count(0) == 0


def test_rotations_order() -> None:
    assert list(rotations("abcdefg")) == [
        "abcdefg", "bcdefga", "cdefgab", "defgabc", "efgabcd", "fgabcde", "gabcdef",
    ]


def test_rotating_n_times_returns_original() -> None:
    for s in iter_combinations(4, "abcdefg"):
        variant = s
        for _ in range(len(s)):
            variant = list(rotations(variant))[1]
        assert variant == s


def test_expand_rotations_count() -> None:
    combos = list(iter_combinations(3, "abcdef"))
    variants = list(expand_rotations(combos))

    assert len(variants) == 3 * len(combos)
    assert variants[:3] == ["abc", "bca", "cab"]
    assert len(set(variants)) == len(variants)
    # Every variant keeps its combination's letter set
    for i, variant in enumerate(variants):
        assert set(variant) == set(combos[i // 3])
