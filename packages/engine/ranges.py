"""
Range compression for letter classes.

compress() turns a LetterSet into the shortest ascending run of tokens:
  - SingleLetter('c')       for an isolated member
  - LetterRange('h', 'j')   for two or more alphabetically consecutive members

Examples:
  {h, i, j}          -> (LetterRange('h','j'),)
  {a, c, d, z}       -> (SingleLetter('a'), LetterRange('c','d'), SingleLetter('z'))
  {} (empty)         -> ()

The tokens partition the input set exactly (no overlaps, nothing dropped,
including a run that ends on the last letter of the alphabet).
"""

from __future__ import annotations

from typing import List, NamedTuple, Tuple, Union

from .letters import ALPHABET, LETTER_INDEX, LetterSet


class SingleLetter(NamedTuple):
    letter: str

    def letters(self) -> str:
        return self.letter

    def render(self) -> str:
        return self.letter


class LetterRange(NamedTuple):
    lo: str
    hi: str

    def letters(self) -> str:
        return ALPHABET[LETTER_INDEX[self.lo]:LETTER_INDEX[self.hi] + 1]

    def render(self) -> str:
        return f"{self.lo}-{self.hi}"


RangeToken = Union[SingleLetter, LetterRange]


def _flush(start: int, length: int) -> RangeToken:
    if length == 1:
        return SingleLetter(ALPHABET[start])
    return LetterRange(ALPHABET[start], ALPHABET[start + length - 1])


def compress(letters: LetterSet) -> Tuple[RangeToken, ...]:
    """
    Scan the alphabet once, extending a run while members are consecutive
    and flushing it on the first gap (and once more at the end of the scan).
    """
    out: List[RangeToken] = []
    run_start = -1
    run_len = 0

    for i, c in enumerate(ALPHABET):
        if c in letters:
            if run_len == 0:
                run_start = i
            run_len += 1
        elif run_len:
            out.append(_flush(run_start, run_len))
            run_len = 0

    # a run touching the end of the alphabet is still pending here
    if run_len:
        out.append(_flush(run_start, run_len))

    return tuple(out)


def expand(tokens: Tuple[RangeToken, ...]) -> LetterSet:
    """Inverse of compress(): the set of letters the tokens cover."""
    return LetterSet.from_letters("".join(t.letters() for t in tokens))


def render_class(tokens: Tuple[RangeToken, ...]) -> str:
    """
    Render tokens as a regex character class, e.g. "[a-gk-pr-z]".

    An empty token tuple means "no letter at all", which has no faithful
    class text here; it is refused rather than rendered as "[]" (invalid)
    or confused with "any letter".
    """
    if not tokens:
        raise ValueError("cannot render an empty letter class")
    return "[" + "".join(t.render() for t in tokens) + "]"
