"""
Lexicon store: the set of words a game may use.

Lifecycle (see `build_lexicon`):
  1) load   : read one word per line from a word source, rejecting the whole
              source on the first malformed record or when it is too large.
  2) sort   : merge sort into ascending order.
  3) check  : adjacent scan of the sorted words; any duplicate is fatal.

After the check the lexicon is treated as read-only, so `contains` and
`choose` can be called from anywhere without coordination.

Word source format:
  - each record is exactly `word_len` letters a-z followed by "\\n"
  - the last record may omit the "\\n"
  - blank lines, "\\r", and an empty source are all malformed
"""

from __future__ import annotations

import logging
from bisect import bisect_left
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Iterator, List, Union

from termwordle.config import DEFAULT_CONFIG, MULTIPLIER, LexiconConfig
from termwordle.errors import CapacityExceeded, DuplicateWord, EmptyLexicon, InvalidWordFormat
from .sorting import merge_sort

log = logging.getLogger(__name__)

Source = Union[str, Path, IO[str]]


@dataclass
class Lexicon:
    """An explicitly owned word list plus the bookkeeping the store needs."""
    config: LexiconConfig = DEFAULT_CONFIG
    words: List[str] = field(default_factory=list)
    capacity: int = 0            # logical size of the growable storage
    is_sorted: bool = False

    def __post_init__(self) -> None:
        if not self.capacity:
            self.capacity = self.config.initial_capacity

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __getitem__(self, index: int) -> str:
        return self.words[index]

    def append(self, word: str) -> None:
        """
        Add one word, growing storage by doubling (capped at max_words).
        Raises CapacityExceeded once max_words words are already stored.
        """
        limit = self.config.max_words
        if len(self.words) == self.capacity:
            new_capacity = limit if self.capacity > limit // 2 else self.capacity * 2
            if new_capacity != self.capacity:
                log.debug("lexicon storage grows %d -> %d", self.capacity, new_capacity)
            self.capacity = new_capacity

        if len(self.words) == limit:
            raise CapacityExceeded(limit)

        self.words.append(word)
        self.is_sorted = False


# -----------------------------
# Helpers
# -----------------------------

def check_record(raw: str, record: int, word_len: int) -> str:
    """Strip the terminator from one raw line and validate what is left."""
    word = raw[:-1] if raw.endswith("\n") else raw

    for ch in word[:word_len]:
        if not "a" <= ch <= "z":
            raise InvalidWordFormat(record, f"character {ch!r} outside a-z")

    if len(word) < word_len:
        raise InvalidWordFormat(record, f"expected {word_len} letters, got {len(word)}")
    if len(word) > word_len:
        if word[word_len] == "\r":
            raise InvalidWordFormat(record, "record not terminated by a line feed")
        raise InvalidWordFormat(record, f"expected {word_len} letters, got {len(word)}")

    return word


def _read(stream: IO[str], config: LexiconConfig) -> Lexicon:
    lex = Lexicon(config=config)
    record = 0
    for record, raw in enumerate(stream, start=1):
        lex.append(check_record(raw, record, config.word_len))

    if record == 0:
        raise InvalidWordFormat(1, "word source is empty")

    return lex


# -----------------------------
# Public API
# -----------------------------

def load(source: Source, config: LexiconConfig = DEFAULT_CONFIG) -> Lexicon:
    """
    Read a word source into a new, unsorted Lexicon.

    Args:
      source : a path, or an already-open text stream
      config : word length and size limits

    Raises:
      InvalidWordFormat : malformed record (length, alphabet, terminator)
      CapacityExceeded  : more than config.max_words records
      OSError           : the path cannot be opened

    Nothing is returned on failure, so a half-read source can never be played.
    """
    if isinstance(source, (str, Path)):
        # latin-1 maps every byte to a character; the alphabet check rejects
        # anything that is not a-z. newline="" keeps "\r" visible.
        with open(source, "r", encoding="latin-1", newline="") as f:
            lex = _read(f, config)
    else:
        lex = _read(source, config)

    log.debug("loaded %d words (capacity %d)", len(lex), lex.capacity)
    return lex


def sort(lexicon: Lexicon) -> Lexicon:
    """Sort the lexicon in ascending order (in place) and return it."""
    lexicon.words[:] = merge_sort(lexicon.words)
    lexicon.is_sorted = True
    log.debug("sorted %d words", len(lexicon))
    return lexicon


def check_no_duplicates(lexicon: Lexicon) -> None:
    """
    Raise DuplicateWord if two adjacent words of the sorted lexicon are equal.
    In a sorted sequence equal words are neighbours, so one pass is enough.
    """
    _require_sorted(lexicon, "check_no_duplicates")
    words = lexicon.words
    for a, b in zip(words, words[1:]):
        if a == b:
            raise DuplicateWord(a)


def contains(lexicon: Lexicon, word: str) -> bool:
    """Binary search for an exact match. O(log n)."""
    _require_sorted(lexicon, "contains")
    words = lexicon.words
    i = bisect_left(words, word)
    return i < len(words) and words[i] == word


def choose_index(n: int, seed: int) -> int:
    """
    Seeded index into a list of n words: (seed mod n) * MULTIPLIER mod n.

    Not a good random source (visible bias for small n), but the exact formula
    is what makes a seed reproduce the same target everywhere.
    """
    if n <= 0:
        raise EmptyLexicon("cannot choose a word from an empty lexicon")
    if seed < 0:
        raise ValueError(f"seed must be non-negative; got {seed}")
    return (seed % n) * MULTIPLIER % n


def choose(lexicon: Lexicon, seed: int) -> str:
    """Deterministically pick the target word for `seed`."""
    index = choose_index(len(lexicon), seed)
    log.debug("seed %d selects index %d of %d", seed, index, len(lexicon))
    return lexicon.words[index]


def build_lexicon(source: Source, config: LexiconConfig = DEFAULT_CONFIG) -> Lexicon:
    """Load, sort and duplicate-check a word source; the startup sequence."""
    lexicon = sort(load(source, config))
    check_no_duplicates(lexicon)
    return lexicon


def _require_sorted(lexicon: Lexicon, op: str) -> None:
    if not lexicon.is_sorted:
        raise ValueError(f"{op} requires a sorted lexicon; call sort() first")
