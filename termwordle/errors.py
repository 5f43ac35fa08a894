from __future__ import annotations


class WordleError(Exception):
    """Base class for all termwordle errors."""


# -------------------------
# Lexicon / word source
# -------------------------

class LexiconError(WordleError):
    """The word source cannot be used for play. Always fatal for the session."""


class InvalidWordFormat(LexiconError):
    """A record in the word source is malformed (length, alphabet, terminator)."""

    def __init__(self, record: int, reason: str):
        self.record = record
        self.reason = reason
        super().__init__(f"record {record}: {reason}")


class DuplicateWord(LexiconError):
    """Two entries of the sorted lexicon compare equal."""

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"duplicate word: {word!r}")


class CapacityExceeded(LexiconError):
    """The word source holds more words than the configured maximum."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"word source exceeds {limit} words")


class EmptyLexicon(LexiconError):
    """A word was requested from a lexicon with no words."""
