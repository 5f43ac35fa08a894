"""
Configuration for termwordle.

Module constants are the reference configuration. `LexiconConfig` is what the
lexicon store actually reads, so tests can run with other word lengths or a
tiny capacity limit. `Settings` gathers the runtime knobs the CLI exposes and
can be seeded from environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# Letters per word.
WORD_LEN = 5

# Maximum number of words in a word source.
WORD_LIMIT = 100_000

# Starting size of the lexicon's growable storage (doubles on overflow).
INITIAL_CAPACITY = 10

# Large odd multiplier used by the seeded word selection.
MULTIPLIER = 4611686018453

# Games won in this many guesses or more share the last histogram bucket.
HISTORY_BUCKETS = 10

DEFAULT_SCORES_PATH = "scores.txt"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class LexiconConfig:
    word_len: int = WORD_LEN
    max_words: int = WORD_LIMIT
    initial_capacity: int = INITIAL_CAPACITY

    def __post_init__(self) -> None:
        if self.word_len < 1:
            raise ValueError(f"word_len must be positive; got {self.word_len}")
        if self.max_words < 1:
            raise ValueError(f"max_words must be positive; got {self.max_words}")
        if not 1 <= self.initial_capacity <= self.max_words:
            raise ValueError(
                f"initial_capacity must be in 1..{self.max_words}; got {self.initial_capacity}")


DEFAULT_CONFIG = LexiconConfig()


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings for the game CLI.

    Environment:
      WORDLE_SCORES    : path of the score-history file (default: scores.txt)
      WORDLE_LOG_LEVEL : logging level name (default: WARNING)
    """

    scores_path: Path
    log_level: str

    @classmethod
    def load(cls) -> "Settings":
        scores = os.getenv("WORDLE_SCORES", DEFAULT_SCORES_PATH)
        log_level = os.getenv("WORDLE_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        return cls(scores_path=Path(scores), log_level=log_level)
