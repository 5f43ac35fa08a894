"""
Guess validation.

A guess is playable iff:
  - it is exactly `word_len` characters long
  - every character is a lowercase letter a-z
  - it is in the lexicon

No case folding or trimming: the game reads guesses verbatim, so "CRANE" and
" crane" are both rejected.
"""

from __future__ import annotations

from termwordle.lexicon import Lexicon, contains


def is_well_formed(word: str, word_len: int) -> bool:
    """Shape check only: length and alphabet."""
    return len(word) == word_len and all("a" <= ch <= "z" for ch in word)


def validate_guess(word: str, lexicon: Lexicon) -> bool:
    """Return True if `word` may be played against `lexicon`."""
    if not isinstance(word, str):
        return False

    if not is_well_formed(word, lexicon.config.word_len):
        return False

    return contains(lexicon, word)
