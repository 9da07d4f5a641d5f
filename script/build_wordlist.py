"""
Download a plain-text dictionary and write a clean word list.

What it does:
- Downloads a newline-separated word list over HTTP.
- Lowercases, keeps alphabet-only words whose length is within the
  supported bounds (or exactly --length).
- De-duplicates while preserving source order, optionally sorts.
- Writes one word per line.

Usage:
    python -m script.build_wordlist --out wordlewords.txt --length 5
    python -m script.build_wordlist --url https://example.org/words.txt --sort
"""

import argparse

import requests

from packages.datasets import write_lines
from packages.engine import is_clean_word, normalize_word
from packages.engine.constraints import MAX_WORD_LENGTH, MIN_WORD_LENGTH

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def clean_words(lines, length=None):
    """Normalize lines and keep usable words (exact `length` if given)."""
    lengths = [length] if length else range(MIN_WORD_LENGTH, MAX_WORD_LENGTH + 1)
    out = []
    for ln in lines:
        w = normalize_word(ln)
        if any(is_clean_word(w, n) for n in lengths):
            out.append(w)
    return unique_preserve_order(out)


def fetch_lines(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return r.text.splitlines()


def main():
    ap = argparse.ArgumentParser(description="Build a clean word list from a remote dictionary")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="wordlewords.txt")
    ap.add_argument("--length", type=int, help="keep only words of exactly this length")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = clean_words(fetch_lines(args.url), args.length)
    if args.sort:
        words = sorted(words)

    out = write_lines(words, args.out)
    print(f"Wrote {len(words)} words -> {out}")


if __name__ == "__main__":
    main()
