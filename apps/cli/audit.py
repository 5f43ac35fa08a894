# apps/cli/audit.py
"""
Inspect a word list before playing it.

This script:
  1) Validates every record (counts, SHA, invalid records, duplicates) and
     prints a one-line summary.
  2) Optionally writes the full report as JSON.
  3) With --seeds S, reports how many words seeds 0..S-1 can select.

Exit status is 0 when the file would be accepted by the game, 1 otherwise.
"""

from __future__ import annotations

import argparse
import sys
from typing import List

from termwordle.config import LexiconConfig, WORD_LEN, WORD_LIMIT
from termwordle.datasets import pretty_summary, selection_coverage, validate_wordfile, write_report
from termwordle.logging_setup import setup_logging


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="termwordle — audit a word list")
    ap.add_argument("wordlist", help="word list file, one word per line")
    ap.add_argument("--N", type=int, default=WORD_LEN, help="word length")
    ap.add_argument("--max-words", type=int, default=WORD_LIMIT, help="word limit")
    ap.add_argument("--json", dest="json_out", help="write the full report to this path")
    ap.add_argument("--seeds", type=int, default=0,
                    help="tally target selection for seeds 0..SEEDS-1")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="progress bar for --seeds (auto=bar when stderr is a terminal)."
    )
    ap.add_argument("--log-level", default="WARNING")
    args = ap.parse_args(argv)
    setup_logging(args.log_level)

    config = LexiconConfig(word_len=args.N, max_words=args.max_words,
                           initial_capacity=min(10, args.max_words))

    # 1) Validate
    rep = validate_wordfile(args.wordlist, config)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}")

    # 2) JSON report
    if args.json_out:
        print(f"Wrote: {write_report(rep, args.json_out)}")

    # 3) Selection coverage over the valid distinct words
    if args.seeds > 0 and rep["unique_count"] > 0:
        progress = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())
        cov = selection_coverage(rep["unique_count"], args.seeds, progress=progress)
        print(
            f"seeds 0..{cov.seeds - 1}: {cov.reachable}/{cov.n} words reachable "
            f"(max hits {cov.max_hits}, permutation={cov.is_permutation})"
        )

    return 0 if rep["passed"] else 1


if __name__ == "__main__":
    sys.exit(main())
