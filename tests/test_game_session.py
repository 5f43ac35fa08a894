import io

import pytest
from termwordle.engine import classify
from termwordle.game import colorize, play, solved_message
from termwordle.game.render import DEFAULT, GREEN, YELLOW
from termwordle.lexicon import build_lexicon

WORDS = ["crane", "deeds", "eerie", "speed", "there"]


@pytest.fixture
def lexicon():
    return build_lexicon(io.StringIO("\n".join(WORDS) + "\n"))


def _play(lexicon, target, lines):
    out = io.StringIO()
    result = play(lexicon, target, instream=io.StringIO(lines), out=out)
    return result, out.getvalue()


def test_colorize_coalesces_runs():
    got = colorize("deeds", classify("deeds", "speed"))
    assert got == f"{YELLOW}de{GREEN}e{DEFAULT}d{YELLOW}s{DEFAULT}"


def test_colorize_all_absent_has_no_codes():
    assert colorize("xyzzy", classify("xyzzy", "aaaaa")) == "xyzzy"


def test_colorize_all_green_resets_at_end():
    assert colorize("crane", classify("crane", "crane")) == f"{GREEN}crane{DEFAULT}"


def test_solved_message_pluralization():
    assert solved_message(1) == "Solved in 1 guess"
    assert solved_message(3) == "Solved in 3 guesses"


def test_first_guess_wins(lexicon):
    result, out = _play(lexicon, "speed", "speed\n")
    assert result.solved is True
    assert result.guesses == 1
    assert out == "Solved in 1 guess\n"


def test_wrong_guesses_get_feedback(lexicon):
    result, out = _play(lexicon, "speed", "deeds\nspeed\n")
    assert result.guesses == 2
    lines = out.splitlines()
    assert lines[0] == colorize("deeds", classify("deeds", "speed"))
    assert lines[1] == "Solved in 2 guesses"


def test_invalid_guesses_do_not_count(lexicon):
    result, out = _play(lexicon, "speed", "xyzzy\nSPEED\nspee\nspeeds\n\nspeed\n")
    assert result.guesses == 1
    assert out.count("Invalid guess\n") == 5
    assert out.endswith("Solved in 1 guess\n")


def test_crlf_input_is_accepted(lexicon):
    result, _ = _play(lexicon, "speed", "speed\r\n")
    assert result.solved is True


def test_quit_reveals_target(lexicon):
    result, out = _play(lexicon, "speed", "crane\nquit\nspeed\n")
    assert result.solved is False
    assert result.guesses == 1
    assert out.endswith('The word was "speed"\n')


def test_end_of_input_reveals_target(lexicon):
    result, out = _play(lexicon, "there", "crane\n")
    assert result.solved is False
    assert out.endswith('The word was "there"\n')


def test_final_line_without_newline_is_still_a_guess(lexicon):
    result, _ = _play(lexicon, "there", "there")
    assert result.solved is True
