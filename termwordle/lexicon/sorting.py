"""
Merge sort over word sequences.

Top-down: split in half (the right half takes the extra element on odd
lengths), sort each half, then merge by repeatedly taking the smaller head.
Recursion depth is log2(n), about 17 at the 100k word limit.

Words are compared as plain `str`, which for lowercase a-z is the same order
as comparing character codes left to right.
"""

from __future__ import annotations

from typing import List, Sequence


def merge(left: Sequence[str], right: Sequence[str]) -> List[str]:
    """Merge two ascending sequences into one ascending list."""
    out: List[str] = []
    i = j = 0
    while i < len(left) and j < len(right):
        # `<=` keeps equal words in left-then-right order
        if left[i] <= right[j]:
            out.append(left[i])
            i += 1
        else:
            out.append(right[j])
            j += 1

    # One side is exhausted; the other is already in order
    out.extend(left[i:])
    out.extend(right[j:])
    return out


def merge_sort(words: Sequence[str]) -> List[str]:
    """
    Return a new list holding `words` in ascending order.

    Examples:
      merge_sort(["candy", "apple", "baker"]) -> ["apple", "baker", "candy"]
      merge_sort([]) -> []
    """
    n = len(words)
    if n <= 1:
        return list(words)

    mid = n // 2
    left = merge_sort(words[:mid])
    right = merge_sort(words[mid:])
    return merge(left, right)


def is_strictly_ascending(words: Sequence[str]) -> bool:
    """True if every adjacent pair satisfies words[i] < words[i + 1]."""
    return all(a < b for a, b in zip(words, words[1:]))
