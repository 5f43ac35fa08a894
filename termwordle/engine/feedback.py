"""
Per-letter feedback for a single (guess, target) pair.

Conventions:
  - CORRECT ('G') : right letter in the right position
  - PRESENT ('Y') : letter occurs elsewhere in the target, not yet claimed
  - ABSENT  ('-') : no unclaimed occurrence left in the target

Algorithm (two-pass, one-to-one letter claiming):
  1) Every exact positional match claims its own target position.
  2) Each remaining guess letter, left to right, claims the lowest-index
     unclaimed target position holding the same letter.
  3) Anything unclaimed is ABSENT.

All exact matches are claimed before any elsewhere-match, so a guess letter is
never reported PRESENT at the cost of a later letter that sits in its own spot.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List


class Feedback(Enum):
    CORRECT = "G"
    PRESENT = "Y"
    ABSENT = "-"

    @property
    def symbol(self) -> str:
        return self.value


def classify(guess: str, target: str) -> List[Feedback]:
    """
    Classify every letter of `guess` against `target`.

    Preconditions (not checked):
      - len(guess) == len(target)
      - both words are lowercase a-z

    Examples:
      classify("deeds", "speed") -> [PRESENT, PRESENT, CORRECT, ABSENT, PRESENT]
    """
    n = len(target)
    claimed = [False] * n                 # letter-tie table, one slot per target position
    result = [Feedback.ABSENT] * n

    # Pass 1: exact matches claim their own position
    for i in range(n):
        if guess[i] == target[i]:
            claimed[i] = True
            result[i] = Feedback.CORRECT

    # Pass 2: first unclaimed occurrence elsewhere wins
    for i in range(n):
        if result[i] is Feedback.CORRECT:
            continue
        for j in range(n):
            if not claimed[j] and guess[i] == target[j]:
                claimed[j] = True
                result[i] = Feedback.PRESENT
                break

    return result


def to_pattern(results: Iterable[Feedback]) -> str:
    """Render a feedback sequence as a pattern string, e.g. "YYG-Y"."""
    return "".join(r.symbol for r in results)


def score(guess: str, target: str) -> str:
    """
    Pattern string for `guess` against `target`.

      score("belle", "level") -> "-GYYY"
      score("lemon", "level") -> "GG---"
    """
    return to_pattern(classify(guess, target))
