"""
Word list validator.

What this module does:
- Validate one word list for a given word length N.
- Count lines that are usable candidates (lowercase a–z, exact length N)
  and lines that are not (wrong length, non-letters, blanks).
- Detect duplicates; compute SHA-256 of the raw file.
- Optionally compare the number of usable words against an expected count.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Invalid lines are not fatal for a filtering run (they are simply never
matches); the report only surfaces them.

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "wordlewords.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from packages.engine import is_clean_word, normalize_word


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class WordlistReport:
    """Diagnostics and metadata for one word list."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after normalization
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line, case-insensitive (normalized to lowercase)
      - must be alphabet letters only
      - must have exact length N
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = normalize_word(raw)
            if is_clean_word(w, N):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(N: int, path: str, expected_count: int | None = None) -> Dict:
    """
    Validate a word list for length N.

    Parameters
    ----------
    N : int
        Word length.
    path : str
        Path to the word list (one word per line).
    expected_count : int, optional
        If given, a different number of valid words is reported as an issue.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordlistReport schema). `passed`
        is strict: file exists, non-empty, no duplicates, count matches the
        expectation if one was given. Invalid lines are reported but do not
        fail the list, since most dictionaries mix word lengths.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"word list not found: {path}")
        return asdict(WordlistReport(N, path, False, 0, "", 0, 0, False, issues))

    words, invalid = _load_and_check(p, N)
    unique_count = len(set(words))

    if not words:
        issues.append(f"word list contains 0 valid {N}-letter words")
    if invalid:
        issues.append(f"word list has {invalid} line(s) that are not {N}-letter words")
    if len(words) != unique_count:
        issues.append("word list contains duplicate words")
    count_ok = expected_count is None or expected_count == len(words)
    if not count_ok:
        issues.append(f"expected {expected_count} words but found {len(words)}")

    rep = WordlistReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=unique_count,
        invalid_lines=invalid,
        passed=bool(words) and len(words) == unique_count and count_ok,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | words=2315 (uniq=2315, invalid=0, sha=abc123...) | wordlewords.txt | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {report['path']} | {status}"
    )
