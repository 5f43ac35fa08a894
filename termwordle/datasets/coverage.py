"""
How much of a lexicon the seeded selection can actually reach.

`choose` uses (seed mod n) * M mod n, which is a permutation of 0..n-1 only
when gcd(M, n) == 1. This module counts, for seeds 0..S-1, how many distinct
indices come out and how often each one is hit.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import gcd

import numpy as np
from tqdm import tqdm

from termwordle.config import MULTIPLIER
from termwordle.lexicon import choose_index


@dataclass
class Coverage:
    n: int                 # lexicon size
    seeds: int             # seeds tried: 0..seeds-1
    reachable: int         # distinct indices selected
    max_hits: int          # most selections of a single index
    is_permutation: bool   # every index reachable for seeds 0..n-1


def selection_coverage(n: int, seeds: int, *, progress: bool = False) -> Coverage:
    """Tally `choose_index(n, seed)` for every seed in range(seeds)."""
    hits = np.zeros(n, dtype=np.int64)
    for seed in tqdm(range(seeds), ncols=80, desc="Seeds", unit="seed", disable=not progress):
        hits[choose_index(n, seed)] += 1

    return Coverage(
        n=n,
        seeds=seeds,
        reachable=int(np.count_nonzero(hits)),
        max_hits=int(hits.max()) if seeds else 0,
        is_permutation=gcd(MULTIPLIER, n) == 1,
    )
