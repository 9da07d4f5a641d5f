from __future__ import annotations
from itertools import islice
from typing import Dict, Iterable, Iterator, List, Type

from packages.engine import ConstraintModel, LetterSet

# ---- Global matcher registry ----
REGISTRY: Dict[str, Type["BaseMatcher"]] = {}


def register(cls: Type["BaseMatcher"]) -> Type["BaseMatcher"]:
    """
    Decorator: @register on a matcher class adds it to REGISTRY by its `id`.
    """
    mid = getattr(cls, "id", None)
    if not mid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if mid in REGISTRY:
        raise ValueError(f"Duplicate matcher id: {mid}")
    REGISTRY[mid] = cls
    return cls


def chunked(items: Iterable[str], size: int) -> Iterator[List[str]]:
    """Yield consecutive lists of up to `size` items, preserving order."""
    if size < 1:
        raise ValueError(f"chunk size must be positive; got {size}")
    it = iter(items)
    while True:
        chunk = list(islice(it, size))
        if not chunk:
            return
        yield chunk


# ---- Base class that matchers inherit ----
class BaseMatcher:
    """
    One evaluation strategy for a fixed ConstraintModel.

    Matchers are read-only after __init__ and hold no per-word state, so a
    single instance can be shared (or pickled to worker processes).
    """
    id = "base"
    name = "Base"

    def __init__(self, model: ConstraintModel):
        self.model = model
        self.N: int = model.word_length
        self.required_bits: int = model.required.bits

    def matches(self, word: str) -> bool:
        raise NotImplementedError("Override in subclass")

    def filter(self, words: Iterable[str]) -> Iterator[str]:
        """Lazily yield the words that match, in input order."""
        for w in words:
            if self.matches(w):
                yield w

    def has_required(self, word: str) -> bool:
        """
        Required-letter pass: every required letter occurs somewhere in
        `word`. Expects a clean word (all characters are letters).
        """
        if not self.required_bits:
            return True
        return self.model.required.issubset(LetterSet.from_letters(word))

    def describe(self) -> str:
        return self.name
