# apps/cli/play.py
"""
CLI entry point for a game of termwordle.

    wordle <word-list-file> [seed-number]

This script:
  1) Loads, sorts and duplicate-checks the word list (any problem is fatal).
  2) Picks the target from the seed (current UNIX time when omitted).
  3) Runs the guess loop on stdin/stdout.
  4) On a win, bumps and prints the guess-count history.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import List, NoReturn

from termwordle.config import Settings
from termwordle.errors import LexiconError
from termwordle.game import play
from termwordle.history import HistoryFormatError, format_scores, update_score
from termwordle.lexicon import build_lexicon, choose
from termwordle.logging_setup import setup_logging

log = logging.getLogger("termwordle.cli")

USAGE = "usage: wordle <word-list-file> [seed-number]"


class _Parser(argparse.ArgumentParser):
    """argparse with the game's one-line usage message on every error."""

    def error(self, message: str) -> NoReturn:
        log.debug("argument error: %s", message)
        self.exit(1, USAGE + "\n")


def parse_seed(text: str) -> int:
    """Digits only; signs, spaces and the like are usage errors."""
    if not text or not all("0" <= ch <= "9" for ch in text):
        raise argparse.ArgumentTypeError(f"invalid seed: {text!r}")
    return int(text)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    ap = _Parser(prog="wordle", usage=USAGE, description="termwordle — guess the word")
    ap.add_argument("wordlist", help="word list file, one word per line")
    ap.add_argument("seed", nargs="?", type=parse_seed,
                    help="non-negative integer selecting the target (default: current time)")
    ap.add_argument("--scores", default=str(settings.scores_path),
                    help="score history file (env WORDLE_SCORES)")
    ap.add_argument("--log-level", default=settings.log_level,
                    help="logging level for stderr diagnostics (env WORDLE_LOG_LEVEL)")
    return ap


def main(argv: List[str] | None = None) -> int:
    """
    Parse args, build the lexicon, play one game and record the result.
    Returns the process exit status.
    """
    settings = Settings.load()
    args = build_parser(settings).parse_args(argv)
    setup_logging(args.log_level)

    # 1) Lexicon: a malformed word list must never be played
    try:
        lexicon = build_lexicon(args.wordlist)
    except LexiconError as e:
        log.error("rejecting %s: %s", args.wordlist, e)
        print("Invalid word file", file=sys.stderr)
        return 1
    except OSError as e:
        log.error("cannot open %s: %s", args.wordlist, e)
        print(f"Can't open the word list: {args.wordlist}", file=sys.stderr)
        return 1

    # 2) Target
    seed = args.seed if args.seed is not None else int(time.time())
    target = choose(lexicon, seed)
    log.info("playing with %d words, seed %d", len(lexicon), seed)

    # 3) Game loop
    result = play(lexicon, target, instream=sys.stdin, out=sys.stdout)
    if not result.solved:
        return 0

    # 4) History
    try:
        scores = update_score(args.scores, result.guesses)
    except (HistoryFormatError, OSError) as e:
        log.error("cannot update %s: %s", args.scores, e)
        print(f"Can't update score history: {args.scores}", file=sys.stderr)
        return 1

    for row in format_scores(scores):
        print(row)
    return 0


if __name__ == "__main__":
    sys.exit(main())
