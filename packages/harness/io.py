"""
I/O utilities for filtering runs.

Responsibilities:
- write_results:  save the matching words to a text file (one per line).
- write_manifest: dump a JSON manifest with config, word list report and counts.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable
import json
import subprocess
import datetime as dt

DEFAULT_RESULTS_PATH = "results.txt"


def write_results(words: Iterable[str], path: str = DEFAULT_RESULTS_PATH,
                  header: str | None = None) -> str:
    """
    Write matching words to `path`, replacing any existing file.

    Args:
      words : accepted words, in output order.
      path  : output text path.
      header: optional first line, e.g. "Potential solutions:".

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    lines = ([header] if header else []) + list(words)
    # an empty result is an empty file, not a single blank line
    p.write_text("".join(ln + "\n" for ln in lines), encoding="utf-8")
    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest describing one run.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (dict paths, length, exclude/require/known, strategy)
      - constraints: interpreted letter sets and known pattern
      - regex: serialized compiled pattern
      - wordlists: output of datasets.validate_wordlist(...) per list
      - scanned, count, time_ms
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
