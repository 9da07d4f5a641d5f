"""
Vectorized strategy: evaluate many words at once with numpy.

Words are taken in chunks. Each clean word of a chunk becomes one row of a
(m, N) uint8 array of letter codes; then
  - known positions    : codes[:, pos] == known codes
  - excluded letters   : lookup table indexed by code, any() per row
  - required letters   : OR-reduce of per-letter bits per row vs. required mask
Rows that are not clean N-letter words never reach the array and are
reported as non-matches.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

import numpy as np

from packages.engine import ConstraintModel, is_clean_word
from packages.engine.letters import ALPHABET, ALPHABET_SIZE, LETTER_INDEX
from .base import BaseMatcher, chunked, register

# byte value -> letter code (only alphabet bytes are ever looked up)
_BYTE_TO_CODE = np.zeros(256, dtype=np.uint8)
for _c, _i in LETTER_INDEX.items():
    _BYTE_TO_CODE[ord(_c)] = _i

_LETTER_BITS = np.left_shift(np.uint32(1), np.arange(ALPHABET_SIZE, dtype=np.uint32))


@register
class VectorizedMatcher(BaseMatcher):
    id = "vectorized"
    name = "Vectorized (numpy)"
    chunk_size = 4096

    def __init__(self, model: ConstraintModel):
        super().__init__(model)
        self._excluded_lut = np.array([c in model.excluded for c in ALPHABET], dtype=bool)
        placed = [(i, LETTER_INDEX[c]) for i, c in enumerate(model.known) if c is not None]
        self._known_pos = np.array([i for i, _ in placed], dtype=np.intp)
        self._known_codes = np.array([code for _, code in placed], dtype=np.uint8)
        self._required = np.uint32(self.required_bits)

    def mask(self, words: Sequence[str]) -> np.ndarray:
        """Boolean verdict for every word in `words`, same order."""
        out = np.zeros(len(words), dtype=bool)
        clean = [i for i, w in enumerate(words) if is_clean_word(w, self.N)]
        if not clean:
            return out

        raw = np.frombuffer("".join(words[i] for i in clean).encode("ascii"), dtype=np.uint8)
        codes = _BYTE_TO_CODE[raw].reshape(len(clean), self.N)

        ok = ~self._excluded_lut[codes].any(axis=1)
        if self._known_pos.size:
            ok &= (codes[:, self._known_pos] == self._known_codes).all(axis=1)
        if self.required_bits:
            found = np.bitwise_or.reduce(_LETTER_BITS[codes], axis=1)
            ok &= (found & self._required) == self._required

        out[np.asarray(clean, dtype=np.intp)] = ok
        return out

    def matches(self, word: str) -> bool:
        return bool(self.mask([word])[0])

    def filter(self, words: Iterable[str]) -> Iterator[str]:
        for chunk in chunked(words, self.chunk_size):
            for w, keep in zip(chunk, self.mask(chunk)):
                if keep:
                    yield w
