"""
Pattern strategy: evaluate the compiled position groups, then the
required-letter pass.

The groups alone only say "letter X at position i" and "these positions
hold allowed letters". Dropping the required-letter pass would accept words
that miss a required letter.
"""

from __future__ import annotations

from packages.engine import ConstraintModel, compile_pattern, is_clean_word
from packages.engine.compiler import matches_groups
from .base import BaseMatcher, register


@register
class PatternMatcher(BaseMatcher):
    id = "pattern"
    name = "Compiled position groups"

    def __init__(self, model: ConstraintModel):
        super().__init__(model)
        self.pattern = compile_pattern(model)

    def matches(self, word: str) -> bool:
        if not is_clean_word(word, self.N):
            return False
        return matches_groups(self.pattern, word) and self.has_required(word)

    def describe(self) -> str:
        return f"{self.name}: {len(self.pattern.groups)} group(s)"
