"""
Guess-count histogram persisted in a side file.

File format: one line of `buckets` space-separated integers, e.g.
    0 3 5 2 1 0 0 0 0 1
Bucket i (1-based) counts games solved in exactly i guesses, except the last
bucket which counts every game that took `buckets` guesses or more.
A missing file means no games yet (all zeros).
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import numpy as np

from termwordle.config import HISTORY_BUCKETS
from termwordle.errors import WordleError


class HistoryFormatError(WordleError):
    """The score file exists but does not hold the expected counters."""


def bucket_index(guesses: int, buckets: int = HISTORY_BUCKETS) -> int:
    """0-based bucket for a game solved in `guesses` guesses."""
    if guesses < 1:
        raise ValueError(f"guesses must be positive; got {guesses}")
    return min(guesses, buckets) - 1


def read_scores(path: Path | str, buckets: int = HISTORY_BUCKETS) -> np.ndarray:
    p = Path(path)
    if not p.exists():
        return np.zeros(buckets, dtype=np.int64)

    try:
        scores = np.loadtxt(p, dtype=np.int64, ndmin=1)
    except ValueError as e:
        raise HistoryFormatError(f"{p}: {e}") from e

    if scores.shape != (buckets,):
        raise HistoryFormatError(f"{p}: expected {buckets} counters, found {scores.size}")
    return scores


def write_scores(path: Path | str, scores: np.ndarray) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    np.savetxt(p, scores.reshape(1, -1), fmt="%d")
    return str(p)


def record(scores: np.ndarray, guesses: int) -> np.ndarray:
    """Return a copy of `scores` with the bucket for `guesses` incremented."""
    out = scores.copy()
    out[bucket_index(guesses, out.size)] += 1
    return out


def format_scores(scores: np.ndarray) -> List[str]:
    """
    Display rows, e.g. " 1  :    0" ... "10+ :    1".
    """
    k = scores.size
    rows = [f"{i + 1:2d}  : {int(scores[i]):4d}" for i in range(k - 1)]
    rows.append(f"{k:2d}+ : {int(scores[k - 1]):4d}")
    return rows


def update_score(path: Path | str, guesses: int, buckets: int = HISTORY_BUCKETS) -> np.ndarray:
    """Read, bump and persist the histogram; returns the updated counters."""
    scores = record(read_scores(path, buckets), guesses)
    write_scores(path, scores)
    return scores
