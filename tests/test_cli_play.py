import io
from pathlib import Path

import pytest
from apps.cli.play import main, parse_seed
from termwordle.engine import classify
from termwordle.game import colorize

# sorted: crane deeds eerie speed there  ->  seed 1 selects index 3 ("speed")
WORDS = ["there", "speed", "crane", "eerie", "deeds"]


@pytest.fixture
def wordfile(tmp_path: Path) -> Path:
    p = tmp_path / "words.txt"
    p.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return p


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("WORDLE_SCORES", raising=False)
    monkeypatch.delenv("WORDLE_LOG_LEVEL", raising=False)


def _stdin(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_win_updates_history(monkeypatch, capsys, wordfile, tmp_path):
    scores = tmp_path / "scores.txt"
    _stdin(monkeypatch, "deeds\nspeed\n")
    assert main([str(wordfile), "1", "--scores", str(scores)]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out[0] == colorize("deeds", classify("deeds", "speed"))
    assert out[1] == "Solved in 2 guesses"
    assert out[2:] == [
        " 1  :    0", " 2  :    1", " 3  :    0", " 4  :    0", " 5  :    0",
        " 6  :    0", " 7  :    0", " 8  :    0", " 9  :    0", "10+ :    0",
    ]
    assert scores.read_text(encoding="utf-8") == "0 1 0 0 0 0 0 0 0 0\n"


def test_scores_path_from_environment(monkeypatch, capsys, wordfile, tmp_path):
    scores = tmp_path / "env_scores.txt"
    monkeypatch.setenv("WORDLE_SCORES", str(scores))
    _stdin(monkeypatch, "crane\n")
    assert main([str(wordfile), "0"]) == 0
    assert scores.exists()


def test_quit_leaves_history_alone(monkeypatch, capsys, wordfile, tmp_path):
    scores = tmp_path / "scores.txt"
    _stdin(monkeypatch, "quit\n")
    assert main([str(wordfile), "2", "--scores", str(scores)]) == 0
    assert capsys.readouterr().out == 'The word was "deeds"\n'
    assert not scores.exists()


def test_duplicate_word_file_is_fatal(capsys, tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("crane\nspeed\ncrane\n", encoding="utf-8")
    assert main([str(p), "0"]) == 1
    assert "Invalid word file" in capsys.readouterr().err


def test_malformed_word_file_is_fatal(capsys, tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("crane\nspeedy\n", encoding="utf-8")
    assert main([str(p), "0"]) == 1
    assert "Invalid word file" in capsys.readouterr().err


def test_missing_word_file(capsys, tmp_path):
    missing = tmp_path / "nope.txt"
    assert main([str(missing)]) == 1
    assert f"Can't open the word list: {missing}" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [[], ["a", "b", "c"], ["words.txt", "12a"], ["words.txt", "-5"]])
def test_usage_errors(capsys, argv):
    with pytest.raises(SystemExit) as ei:
        main(argv)
    assert ei.value.code == 1
    assert "usage: wordle <word-list-file> [seed-number]" in capsys.readouterr().err


def test_parse_seed():
    assert parse_seed("0") == 0
    assert parse_seed("4611686018453") == 4611686018453
