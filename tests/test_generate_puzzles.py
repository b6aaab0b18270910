import pstats

import pytest

from generate_puzzles import build_parser, config_from_args, main

ABC_WORDS = [
    "aaaaa", "aaaab", "aaaba", "aabaa", "abaaa",
    "baaaa", "aaaac", "aaaca", "aacaa", "abcaa",
]


@pytest.fixture
def words_file(tmp_path) -> str:
    path = tmp_path / "dict.txt"
    path.write_text("\n".join(ABC_WORDS) + "\n", encoding="utf-8")
    return str(path)


@pytest.fixture
def output_dir(tmp_path) -> str:
    out = tmp_path / "puzzles"
    out.mkdir()
    return str(out)


def test_defaults() -> None:
    config = config_from_args(build_parser().parse_args([]))

    assert config.words_file == "./dict.txt"
    assert config.num_letters == 7
    assert config.parallel == 100
    assert config.verbose
    assert config.policy.min_words == 10
    assert config.policy.min_word_length == 5
    assert config.policy.pangram_points == 3
    assert config.policy.word_points == 1


def test_quiet_flag() -> None:
    assert not config_from_args(build_parser().parse_args(["--quiet"])).verbose
    assert config_from_args(build_parser().parse_args(["-q", "-v"])).verbose


def test_main_writes_puzzles(tmp_path, words_file, output_dir, capsys) -> None:
    main([
        "--words-file", words_file, "--output-dir", output_dir,
        "--num-letters", "3", "--parallel", "8", "--quiet",
    ])

    assert sorted(p.name for p in (tmp_path / "puzzles").iterdir()) == ["abc.txt"]
    out = capsys.readouterr().out
    assert "Matching 10 words" in out
    assert "Wrote 1 puzzles" in out


def test_main_writes_profile(tmp_path, words_file, output_dir) -> None:
    profile = tmp_path / "gen.prof"
    main([
        "--words-file", words_file, "--output-dir", output_dir,
        "--num-letters", "3", "--parallel", "2", "--quiet",
        "--cpuprofile", str(profile),
    ])

    assert profile.exists()
    functions = {name for _, _, name in pstats.Stats(str(profile)).stats}
    assert "load_words" in functions
    assert "write_puzzles" in functions


def test_main_missing_dictionary(tmp_path, output_dir, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--words-file", str(tmp_path / "missing.txt"), "--output-dir", output_dir, "--quiet"])

    assert exc.value.code == 1
    assert "Error:" in capsys.readouterr().err


def test_main_missing_output_dir(tmp_path, words_file, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--words-file", words_file, "--output-dir", str(tmp_path / "missing"), "--num-letters", "3", "--quiet"])

    assert exc.value.code == 1
    assert "does not exist" in capsys.readouterr().err


def test_main_rejects_bad_worker_count(words_file) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--words-file", words_file, "--parallel", "0"])

    assert exc.value.code == 2
