"""
Scrape past Wordle answers and write them as a word source.

What it does:
- Downloads the page with historical answers.
- Parses visible text and extracts rows like: YYYY-MM-DD (Day) <num> <ANSWER>
- Captures the final 5-letter UPPERCASE token as the answer.
- Lowercases, de-duplicates, merge-sorts, and writes one word per line.

Usage:
    python -m script.fetch_wordlist --out words.txt
"""

import re
import argparse
from pathlib import Path

import requests
from bs4 import BeautifulSoup

from termwordle.datasets import write_lines
from termwordle.lexicon import merge_sort

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]{5})\b")


def extract_answers(html: str) -> list[str]:
    """Answers found in `html`, lowercased, unique and sorted."""
    soup = BeautifulSoup(html, "html.parser")
    text = soup.get_text("\n", strip=True)
    answers = {m.group(2).lower() for m in ROW_RE.finditer(text)}
    return merge_sort(list(answers))


def fetch_answers(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return extract_answers(r.text)


def main():
    ap = argparse.ArgumentParser(description="Fetch past Wordle answers as a word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="words.txt")
    args = ap.parse_args()

    answers = fetch_answers(args.url)
    write_lines(answers, args.out)
    print(f"Wrote {len(answers)} words -> {Path(args.out)}")


if __name__ == "__main__":
    main()
