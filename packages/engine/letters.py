"""
LetterSet: a bit-vector set over the lowercase alphabet.

Bit i is set iff ALPHABET[i] is a member. The alphabet is a single
configuration point; nothing else in the engine hardcodes its size.

Typical use:
    excluded = LetterSet.from_tokens("q,x,z".split(","))
    "q" in excluded          -> True
    excluded.cardinality()   -> 3
    excluded.display()       -> "[                q      x z]"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator

from .errors import ConstraintError

# Single source of truth for the alphabet.
ALPHABET = "abcdefghijklmnopqrstuvwxyz"
ALPHABET_SIZE = len(ALPHABET)
FULL_MASK = (1 << ALPHABET_SIZE) - 1

# letter -> bit index; anything missing here is "not a letter"
LETTER_INDEX: Dict[str, int] = {c: i for i, c in enumerate(ALPHABET)}


def letter_bit(c: str) -> int:
    """Return the single-bit mask for letter `c` (KeyError if not a letter)."""
    return 1 << LETTER_INDEX[c]


def normalize_letter(token: str) -> str | None:
    """
    Return the lowercase letter a token stands for, or None if the token is
    not exactly one alphabet character.
    """
    if len(token) != 1:
        return None
    c = token.lower()
    return c if c in LETTER_INDEX else None


@dataclass(frozen=True)
class LetterSet:
    """Immutable set of letters backed by an int bitmask."""
    bits: int = 0

    def __post_init__(self):
        if self.bits < 0 or self.bits & ~FULL_MASK:
            raise ValueError(f"bits out of range for a {ALPHABET_SIZE}-letter alphabet: {self.bits:#x}")

    # -----------------------------
    # Constructors
    # -----------------------------

    @classmethod
    def empty(cls) -> "LetterSet":
        return cls(0)

    @classmethod
    def full(cls) -> "LetterSet":
        return cls(FULL_MASK)

    @classmethod
    def from_letters(cls, letters: Iterable[str]) -> "LetterSet":
        """Build from already-clean lowercase letters (KeyError on anything else)."""
        bits = 0
        for c in letters:
            bits |= letter_bit(c)
        return cls(bits)

    @classmethod
    def from_tokens(cls, tokens: Iterable[str], *, strict: bool = False) -> "LetterSet":
        """
        Build from raw tokens such as the pieces of "m,s,E".

        Each token must be exactly one letter (case-insensitive). Empty
        tokens are always ignored. Other malformed tokens are skipped unless
        `strict` is set, in which case a ConstraintError is raised.
        """
        bits = 0
        for raw in tokens:
            tok = raw.strip()
            if not tok:
                continue
            c = normalize_letter(tok)
            if c is None:
                if strict:
                    raise ConstraintError("bad_letter_token", f"Not a single letter: {raw!r}")
                continue
            bits |= letter_bit(c)
        return cls(bits)

    # -----------------------------
    # Set algebra
    # -----------------------------

    def contains(self, c: str) -> bool:
        i = LETTER_INDEX.get(c)
        return i is not None and bool(self.bits >> i & 1)

    __contains__ = contains

    def union(self, other: "LetterSet") -> "LetterSet":
        return LetterSet(self.bits | other.bits)

    def intersect(self, other: "LetterSet") -> "LetterSet":
        return LetterSet(self.bits & other.bits)

    def complement(self) -> "LetterSet":
        return LetterSet(FULL_MASK & ~self.bits)

    __or__ = union
    __and__ = intersect
    __invert__ = complement

    def is_empty(self) -> bool:
        return self.bits == 0

    def cardinality(self) -> int:
        return bin(self.bits).count("1")

    __len__ = cardinality

    def is_disjoint_from(self, other: "LetterSet") -> bool:
        return (self.bits & other.bits) == 0

    def issubset(self, other: "LetterSet") -> bool:
        return (self.bits & other.bits) == self.bits

    def __iter__(self) -> Iterator[str]:
        """Members in ascending alphabet order."""
        for i, c in enumerate(ALPHABET):
            if self.bits >> i & 1:
                yield c

    # -----------------------------
    # Display
    # -----------------------------

    def display(self) -> str:
        """
        Fixed-width mask view: one column per alphabet letter, blank when
        absent. e.g. {a, c} -> "[a c                       ]"
        """
        return "[" + "".join(c if self.bits >> i & 1 else " " for i, c in enumerate(ALPHABET)) + "]"

    def __str__(self) -> str:
        return "".join(self)
