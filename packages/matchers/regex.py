"""
Regex strategy: serialize the compiled pattern to an anchored regular
expression and run it with `re`, then the required-letter pass.

The character classes only list ASCII lowercase letters, so digits,
punctuation and uppercase never match a wildcard position.
"""

from __future__ import annotations

import logging
import re

from packages.engine import ConstraintModel, compile_pattern
from .base import BaseMatcher, register

logger = logging.getLogger(__name__)


@register
class RegexMatcher(BaseMatcher):
    id = "regex"
    name = "Regular expression"

    def __init__(self, model: ConstraintModel):
        super().__init__(model)
        self.pattern = compile_pattern(model)
        self.regex_text = self.pattern.to_regex()
        self.regex = re.compile(self.regex_text)
        logger.debug("regex strategy using %s", self.regex_text)

    def matches(self, word: str) -> bool:
        if not isinstance(word, str) or len(word) != self.N:
            return False
        return self.regex.fullmatch(word) is not None and self.has_required(word)

    def describe(self) -> str:
        return f"{self.name}: {self.regex_text}"
