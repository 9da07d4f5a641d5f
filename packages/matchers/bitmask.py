"""
Bitmask strategy: test each word directly against the model.

One left-to-right scan per word:
  - reject on a character outside the alphabet
  - reject on a known-position mismatch
  - reject on an excluded letter
  - otherwise OR the letter's bit into `found`
Accept iff found & required == required. Required letters may sit anywhere,
including positions that are also pinned by a known letter.

This is the reference semantics the other strategies are tested against.
"""

from __future__ import annotations

from packages.engine import ConstraintModel
from packages.engine.letters import LETTER_INDEX
from .base import BaseMatcher, register


@register
class BitmaskMatcher(BaseMatcher):
    id = "bitmask"
    name = "Bitmask scan"

    def __init__(self, model: ConstraintModel):
        super().__init__(model)
        self.excluded_bits = model.excluded.bits
        self.known = model.known

    def matches(self, word: str) -> bool:
        if not isinstance(word, str) or len(word) != self.N:
            return False

        found = 0
        for c, k in zip(word, self.known):
            i = LETTER_INDEX.get(c)
            if i is None:
                return False
            if k is not None and c != k:
                return False
            bit = 1 << i
            if self.excluded_bits & bit:
                return False
            found |= bit

        return (found & self.required_bits) == self.required_bits
