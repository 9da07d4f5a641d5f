"""
Pattern compiler: ConstraintModel -> CompiledPattern.

A compiled pattern is a sequence of position groups that tile the word:
  - Fixed('o')               one position pinned to one letter
  - Wildcard(tokens, n)      n consecutive unknown positions, each any
                             letter from the allowed class

Consecutive unknown positions are merged into one Wildcard, so a model with
a single known letter mid-word compiles to three groups, not five:

    known = [_, _, o, _, _]  ->  Wildcard(cls, 2), Fixed('o'), Wildcard(cls, 2)

Required letters are not part of the pattern: "letter X somewhere" is a
global existential that positional groups cannot express. Matchers that use
a compiled pattern must add the required-letter pass themselves.

to_regex() is the only place regex text is produced:
    ^[a-pr-z]{2}o[a-pr-z]{2}$
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Tuple, Union

from .constraints import ConstraintModel
from .letters import LETTER_INDEX
from .ranges import RangeToken, compress, expand, render_class

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Fixed:
    letter: str

    @property
    def span(self) -> int:
        return 1

    def render(self) -> str:
        return self.letter


@dataclass(frozen=True)
class Wildcard:
    tokens: Tuple[RangeToken, ...]
    count: int

    @property
    def span(self) -> int:
        return self.count

    def render(self) -> str:
        cls = render_class(self.tokens)
        return cls if self.count == 1 else f"{cls}{{{self.count}}}"


PositionGroup = Union[Fixed, Wildcard]


@dataclass(frozen=True)
class CompiledPattern:
    groups: Tuple[PositionGroup, ...]
    word_length: int

    def spans(self) -> List[Tuple[int, int]]:
        """[start, end) of every group, in order."""
        out, pos = [], 0
        for g in self.groups:
            out.append((pos, pos + g.span))
            pos += g.span
        return out

    def to_regex(self) -> str:
        """Anchored regex text for this pattern."""
        return "^" + "".join(g.render() for g in self.groups) + "$"

    def __str__(self) -> str:
        return self.to_regex()


def compile_pattern(model: ConstraintModel, word_length: int | None = None) -> CompiledPattern:
    """
    Compile `model` into position groups. O(word_length + alphabet).

    `word_length` defaults to the model's own length; passing a different
    value is a programming error.
    """
    n = model.word_length if word_length is None else word_length
    if n != model.word_length:
        raise ValueError(f"model was built for length {model.word_length}, not {n}")

    # The allowed class is shared by every wildcard group. With nothing
    # excluded it is the full alphabet, i.e. a single a-z range.
    allowed_class = compress(model.allowed)

    groups: List[PositionGroup] = []
    run = 0
    for c in model.known:
        if c is None:
            run += 1
            continue
        if run:
            groups.append(Wildcard(allowed_class, run))
            run = 0
        groups.append(Fixed(c))
    if run:
        groups.append(Wildcard(allowed_class, run))

    pattern = CompiledPattern(tuple(groups), n)
    assert sum(g.span for g in pattern.groups) == n, "groups must tile the whole word"

    logger.debug("compiled %d group(s): %s", len(groups), pattern.to_regex())
    return pattern


def matches_groups(pattern: CompiledPattern, word: str) -> bool:
    """
    Positional check of `word` against the groups only (no required-letter
    pass). Callers must have checked the word's length.
    """
    pos = 0
    for g in pattern.groups:
        if isinstance(g, Fixed):
            if word[pos] != g.letter:
                return False
        else:
            allowed = _class_bits(g.tokens)
            for c in word[pos:pos + g.count]:
                i = LETTER_INDEX.get(c)
                if i is None or not (allowed >> i & 1):
                    return False
        pos += g.span
    return True


@lru_cache(maxsize=None)
def _class_bits(tokens: Tuple[RangeToken, ...]) -> int:
    return expand(tokens).bits
