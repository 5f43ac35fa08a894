"""
Turn a raw word list into a word source the game accepts.

Steps:
- Trim whitespace and lowercase every line (with --case-insensitive; otherwise
  lines with uppercase letters are dropped).
- Keep only lines of exactly N letters a-z.
- Remove duplicates.
- Merge-sort the result, so the file is already in lexicon order.
- Overwrite in place by default, or write to a separate --out path.

Usage:
    python -m script.prepare_wordlist --in raw_words.txt --out words.txt --case-insensitive
"""

import argparse
from pathlib import Path

from termwordle.config import WORD_LEN
from termwordle.datasets import read_lines, write_lines
from termwordle.engine import is_well_formed
from termwordle.lexicon import merge_sort


def unique_preserve_order(lines: list[str]) -> list[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def prepare(lines: list[str], N: int = WORD_LEN, case_insensitive: bool = False) -> list[str]:
    words = [s.strip() for s in lines]
    if case_insensitive:
        words = [w.lower() for w in words]
    words = [w for w in words if is_well_formed(w, N)]
    return merge_sort(unique_preserve_order(words))


def main():
    ap = argparse.ArgumentParser(description="Build a valid word list from a raw text file.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--out", dest="out", help="output file (default: overwrite input)")
    ap.add_argument("--N", type=int, default=WORD_LEN, help="word length")
    ap.add_argument("--case-insensitive", action="store_true", help="lowercase words instead of dropping them")
    args = ap.parse_args()

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp

    lines = read_lines(inp)
    out = prepare(lines, N=args.N, case_insensitive=args.case_insensitive)

    write_lines(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} words)")


if __name__ == "__main__":
    main()
