"""
ANSI rendering of feedback.

Green marks CORRECT letters, yellow PRESENT, the terminal default ABSENT.
A color code is written only when the color changes from the previous letter,
and every rendered line ends back in the default color.
"""

from __future__ import annotations

from typing import Dict, Sequence

from termwordle.engine import Feedback

GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
DEFAULT = "\x1b[0m"

COLORS: Dict[Feedback, str] = {
    Feedback.CORRECT: GREEN,
    Feedback.PRESENT: YELLOW,
    Feedback.ABSENT: DEFAULT,
}


def colorize(guess: str, results: Sequence[Feedback]) -> str:
    """
    Return `guess` with color codes inserted at every color change.

    Example (target "speed"):
      colorize("deeds", classify("deeds", "speed"))
        -> ESC[33m "de" ESC[32m "e" ESC[0m "d" ESC[33m "s" ESC[0m
    """
    parts = []
    current = DEFAULT
    for ch, res in zip(guess, results):
        color = COLORS[res]
        if color != current:
            parts.append(color)
            current = color
        parts.append(ch)

    if current != DEFAULT:
        parts.append(DEFAULT)
    return "".join(parts)
