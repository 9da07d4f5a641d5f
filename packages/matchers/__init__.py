from __future__ import annotations
from typing import List
from packages.engine import ConstraintModel
from .base import BaseMatcher, REGISTRY, register, chunked

from . import bitmask  # noqa: F401
from . import pattern  # noqa: F401
from . import regex  # noqa: F401
from . import vectorized  # noqa: F401

DEFAULT_MATCHER = "bitmask"


def create_matcher(matcher_id: str, model: ConstraintModel) -> BaseMatcher:
    """
    Factory: instantiate a registered matcher by id for `model`.
    """
    try:
        cls = REGISTRY[matcher_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown matcher id: {matcher_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(model)


def get_matcher_ids() -> List[str]:
    """
    Return all registered matcher ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
