"""
Word hygiene.

This module answers the question: "Is this line even a candidate?"
A candidate word is valid iff:
  - it is a string
  - it has exact length N
  - every character is a lowercase alphabet letter (ASCII a-z)

Anything else is silently not a match. Malformed lines are never errors;
matchers call is_clean_word() first and reject without scanning further.
"""

from __future__ import annotations

from .letters import LETTER_INDEX


def is_clean_word(word: object, N: int) -> bool:
    """Return True if `word` is an N-letter lowercase alphabet string."""
    if not isinstance(word, str) or len(word) != N:
        return False
    return all(c in LETTER_INDEX for c in word)


def normalize_word(line: str) -> str:
    """
    Canonical form of a raw word-list line: surrounding whitespace and the
    line terminator removed, lowercased. Word lists are case-insensitive.
    """
    return line.strip().lower()
