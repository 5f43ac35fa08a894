"""
Word-file report for termwordle.

The lexicon loader stops at the first bad record, which is right for play but
unhelpful when fixing a file. This module reads the whole file and reports:
- counts of valid and invalid records (with the first few bad record numbers)
- duplicate words
- whether the file exceeds the word limit
- SHA-256 of the raw bytes
and a `passed` flag that is True exactly when `build_lexicon` would accept
the file.

Typical use:
    from termwordle.datasets import validate_wordfile, pretty_summary
    rep = validate_wordfile("words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib

from termwordle.config import DEFAULT_CONFIG, LexiconConfig
from termwordle.errors import InvalidWordFormat
from termwordle.lexicon import check_record

# How many offending records / duplicates to list in issues
_SHOW = 5


@dataclass
class WordFileReport:
    """Per-file diagnostics and metadata."""
    path: str              # file path (as given)
    exists: bool           # did the file exist on disk?
    word_len: int          # expected letters per record
    count: int             # number of VALID records
    unique_count: int      # distinct valid words
    invalid_records: int   # records the loader would reject
    sha256: str            # SHA-256 of raw file bytes (empty string if missing)
    within_limit: bool     # record count <= max_words
    passed: bool
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


# -----------------------------
# Public API
# -----------------------------

def validate_wordfile(path: str | Path, config: LexiconConfig = DEFAULT_CONFIG) -> Dict:
    """
    Check every record of a word file against the word-source rules.

    Returns
    -------
    Dict
        JSON-serializable WordFileReport.
    """
    p = Path(path)
    if not p.exists():
        rep = WordFileReport(
            path=str(path), exists=False, word_len=config.word_len, count=0,
            unique_count=0, invalid_records=0, sha256="", within_limit=True,
            passed=False, issues=[f"word file not found: {path}"],
        )
        return asdict(rep)

    issues: List[str] = []
    valid: List[str] = []
    bad: List[str] = []
    total = 0

    with p.open("r", encoding="latin-1", newline="") as f:
        for total, raw in enumerate(f, start=1):
            try:
                valid.append(check_record(raw, total, config.word_len))
            except InvalidWordFormat as e:
                bad.append(str(e))

    counts = Counter(valid)
    dupes = sorted(w for w, c in counts.items() if c > 1)
    within_limit = total <= config.max_words

    if total == 0:
        issues.append("word file is empty")
    if bad:
        issues.append(f"{len(bad)} invalid record(s), e.g. {bad[:_SHOW]}")
    if dupes:
        issues.append(f"{len(dupes)} duplicate word(s), e.g. {dupes[:_SHOW]}")
    if not within_limit:
        issues.append(f"{total} records exceed the limit of {config.max_words}")

    rep = WordFileReport(
        path=str(p),
        exists=True,
        word_len=config.word_len,
        count=len(valid),
        unique_count=len(counts),
        invalid_records=len(bad),
        sha256=_sha256_file(p),
        within_limit=within_limit,
        passed=total > 0 and not bad and not dupes and within_limit,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for the console.

    Example:
        words.txt | N=5 | words=2315 (uniq=2315, invalid=0, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{report['path']} | N={report['word_len']} | words={report['count']} "
        f"(uniq={report['unique_count']}, invalid={report['invalid_records']}, sha={sha}) "
        f"| {status}"
    )
