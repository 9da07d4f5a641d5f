from __future__ import annotations
from pathlib import Path
from typing import Iterable, Iterator, List

from packages.engine import is_clean_word, normalize_word


def iter_lines(p: Path | str) -> Iterator[str]:
    """
    Lazily yield the lines of a UTF-8 text file, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    with p.open("r", encoding="utf-8") as f:
        for ln in f:
            yield ln.rstrip("\r\n")


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    return list(iter_lines(p))


def iter_words(p: Path | str, *, normalize: bool = True) -> Iterator[str]:
    """
    Candidate stream for one word list: every line, trimmed and lowercased
    when `normalize` is set. Malformed lines are passed through untouched;
    matchers reject them.
    """
    for ln in iter_lines(p):
        yield normalize_word(ln) if normalize else ln


def merge_wordlists(paths: Iterable[Path | str], N: int) -> List[str]:
    """
    Union of several word lists: lowercase, N letters, alphabet-only,
    de-duplicated and sorted.
    """
    words = set()
    for p in paths:
        words.update(w for w in iter_words(p) if is_clean_word(w, N))
    return sorted(words)


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, one per line (an empty input gives an
    empty file).
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("".join(ln + "\n" for ln in lines), encoding="utf-8")
    return str(p)
