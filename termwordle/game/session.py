"""
The interactive guess loop.

One call to `play` is one game: read guesses line by line, reject anything
that is not a playable word, echo colored feedback for wrong guesses, and
stop on a correct guess, on "quit", or at end of input.

The loop only talks to text streams, so tests drive it with io.StringIO.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import IO

from termwordle.engine import classify, validate_guess
from termwordle.lexicon import Lexicon
from .render import colorize

log = logging.getLogger(__name__)

QUIT = "quit"


@dataclass(frozen=True)
class GameResult:
    target: str
    solved: bool
    guesses: int      # valid guesses only; rejected lines do not count


def solved_message(guesses: int) -> str:
    return "Solved in 1 guess" if guesses == 1 else f"Solved in {guesses} guesses"


def play(lexicon: Lexicon, target: str, *, instream: IO[str], out: IO[str]) -> GameResult:
    """
    Run one game against `target` until it is solved or the player leaves.

    Args:
      lexicon  : sorted, duplicate-checked lexicon used to validate guesses
      target   : the secret word (expected to be in `lexicon`)
      instream : where guesses are read from, one per line
      out      : where feedback and messages are written

    Returns:
      GameResult; `solved` is False when the player quit or input ran out.
    """
    guesses = 0

    while True:
        line = instream.readline()

        # End of input counts as quitting
        if not line:
            log.debug("input exhausted after %d guesses", guesses)
            out.write(f'The word was "{target}"\n')
            return GameResult(target=target, solved=False, guesses=guesses)

        guess = line.rstrip("\r\n")
        if guess == QUIT:
            out.write(f'The word was "{target}"\n')
            return GameResult(target=target, solved=False, guesses=guesses)

        if not validate_guess(guess, lexicon):
            out.write("Invalid guess\n")
            continue

        guesses += 1
        if guess == target:
            break

        # Correct guesses are not echoed; only misses get colored feedback
        out.write(colorize(guess, classify(guess, target)) + "\n")

    out.write(solved_message(guesses) + "\n")
    return GameResult(target=target, solved=True, guesses=guesses)
