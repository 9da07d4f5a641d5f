"""
Constraint model for one filtering run.

Holds the three independent constraint sets of a word-guessing game:
  - excluded : letters that must not appear anywhere in the word
  - required : letters that must appear somewhere (position unknown)
  - known    : per-position pinned letters (None = unconstrained)

The model is validated once, at construction. A contradictory or malformed
configuration raises ConstraintError before any word is scanned; nothing
about a model can fail later on a per-word basis.

Input grammar (already split on commas by from_args):
  exclude / require : single letters, e.g. "m,s,e"   (junk tokens skipped)
  known             : position + letter, e.g. "1m,2o" (junk tokens rejected)
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from .errors import ConstraintError
from .letters import ALPHABET_SIZE, LETTER_INDEX, LetterSet

logger = logging.getLogger(__name__)

DEFAULT_WORD_LENGTH = 5
MIN_WORD_LENGTH = 2
MAX_WORD_LENGTH = 16

# 1-based position immediately followed by one letter: "3u", "12e"
KNOWN_TOKEN_RE = re.compile(r"^(\d+)([A-Za-z])$")

Known = Tuple[Optional[str], ...]


def split_arg(arg: str | None) -> List[str]:
    """Split a comma-separated option value; None/blank -> []."""
    if not arg:
        return []
    return arg.split(",")


def parse_known(tokens: Iterable[str], word_length: int) -> Known:
    """
    Parse known-position tokens into a tuple of length `word_length`.

    Empty tokens (e.g. from a trailing comma) are ignored. Anything else
    that is not <position><letter>, a position outside [1, word_length],
    or two different letters for one position is a ConstraintError.
    """
    placed: Dict[int, str] = {}
    for raw in tokens:
        tok = raw.strip()
        if not tok:
            continue
        m = KNOWN_TOKEN_RE.match(tok)
        if m is None:
            raise ConstraintError(
                "bad_known_token",
                f"Format for known letters must be <position><letter>, e.g. 1e (got {raw!r})",
            )
        pos = int(m.group(1))
        letter = m.group(2).lower()
        if pos < 1 or pos > word_length:
            raise ConstraintError(
                "known_out_of_range",
                f"Invalid position {pos} in {raw!r}. Valid positions are [1, {word_length}].",
            )
        prev = placed.get(pos - 1)
        if prev is not None and prev != letter:
            raise ConstraintError(
                "known_conflict",
                f"Position {pos} is given two different letters: {prev!r} and {letter!r}",
            )
        placed[pos - 1] = letter

    return tuple(placed.get(i) for i in range(word_length))


@dataclass(frozen=True)
class ConstraintModel:
    excluded: LetterSet
    required: LetterSet
    known: Known

    def __post_init__(self):
        # accept any sequence for `known`, store a tuple so models hash and compare
        object.__setattr__(self, "known", tuple(self.known))
        self._validate()
        logger.debug(
            "constraints: excluded=%s required=%s known=%s",
            self.excluded or "-", self.required or "-", self.known_pattern(),
        )

    # -----------------------------
    # Construction
    # -----------------------------

    @classmethod
    def from_tokens(
            cls,
            exclude: Iterable[str] = (),
            require: Iterable[str] = (),
            known: Iterable[str] = (),
            *,
            word_length: int = DEFAULT_WORD_LENGTH,
    ) -> "ConstraintModel":
        """Build from pre-split tokens (see module docstring for the grammar)."""
        _check_word_length(word_length)
        return cls(
            excluded=LetterSet.from_tokens(exclude),
            required=LetterSet.from_tokens(require),
            known=parse_known(known, word_length),
        )

    @classmethod
    def from_args(
            cls,
            exclude: str | None = None,
            require: str | None = None,
            known: str | None = None,
            *,
            word_length: int = DEFAULT_WORD_LENGTH,
    ) -> "ConstraintModel":
        """Build from raw comma-separated option strings, e.g. ("q,x", "a", "1c,5e")."""
        return cls.from_tokens(
            split_arg(exclude), split_arg(require), split_arg(known), word_length=word_length
        )

    @classmethod
    def unconstrained(cls, word_length: int = DEFAULT_WORD_LENGTH) -> "ConstraintModel":
        _check_word_length(word_length)
        return cls(LetterSet.empty(), LetterSet.empty(), (None,) * word_length)

    # -----------------------------
    # Validation
    # -----------------------------

    def _validate(self) -> None:
        n = len(self.known)
        _check_word_length(n)

        for i, c in enumerate(self.known):
            if c is not None and c not in LETTER_INDEX:
                raise ConstraintError("bad_known_token", f"Known letter at position {i + 1} is not a letter: {c!r}")

        if self.excluded.cardinality() >= ALPHABET_SIZE:
            raise ConstraintError("all_excluded", f"All {ALPHABET_SIZE} letters of the alphabet have been excluded.")

        if self.required.cardinality() > n:
            raise ConstraintError(
                "too_many_required",
                f"More letters are required ({self.required.cardinality()}) than are in the word ({n}).",
            )

        if not self.excluded.is_disjoint_from(self.required):
            common = ", ".join(self.excluded & self.required)
            raise ConstraintError(
                "not_disjoint",
                f"The set of excluded letters and the set of required letters are not disjoint ({common}).",
            )

        for i, c in enumerate(self.known):
            if c is not None and c in self.excluded:
                raise ConstraintError(
                    "known_excluded",
                    f"Known letter {c!r} at position {i + 1} is also in the set of excluded letters.",
                )

    # -----------------------------
    # Accessors
    # -----------------------------

    @property
    def word_length(self) -> int:
        return len(self.known)

    @property
    def allowed(self) -> LetterSet:
        """Letters an unconstrained position may hold."""
        return self.excluded.complement()

    def num_known(self) -> int:
        return sum(1 for c in self.known if c is not None)

    def is_unconstrained(self) -> bool:
        return self.excluded.is_empty() and self.required.is_empty() and self.num_known() == 0

    def known_pattern(self, blank: str = "_") -> str:
        """e.g. (c, None, None, None, e) -> "c___e" """
        return "".join(c if c is not None else blank for c in self.known)

    def describe(self) -> str:
        """Multi-line summary of how the arguments were interpreted."""
        return "\n".join([
            "Excluded letters:",
            self.excluded.display(),
            "Required letters:",
            self.required.display(),
            "Known letters:",
            f"[{self.known_pattern()}]",
        ])


def _check_word_length(n: int) -> None:
    if not (MIN_WORD_LENGTH <= n <= MAX_WORD_LENGTH):
        raise ConstraintError(
            "bad_word_length",
            f"Word length must be between {MIN_WORD_LENGTH} and {MAX_WORD_LENGTH}; got {n}.",
        )
