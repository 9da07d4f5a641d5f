from pathlib import Path
from packages.datasets import (
    iter_lines, iter_words, merge_wordlists, pretty_summary, read_lines, validate_wordlist,
)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    wl = tmp_path / "words.txt"
    _write(wl, ["crane", "raise", "Stare"])

    rep = validate_wordlist(5, str(wl), expected_count=3)
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["invalid_lines"] == 0
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "N=5" in s and "words=3" in s and s.endswith("OK")


def test_validate_wordlist_flags_invalid_and_duplicates(tmp_path: Path):
    wl = tmp_path / "words.txt"
    # 'crane' (len 5) invalid for N=6, '???' invalid chars, blank line invalid
    wl.write_text("raiser\ncrane\n???\n\nraiser\n", encoding="utf-8")

    rep = validate_wordlist(6, str(wl))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 3
    assert rep["unique_count"] == 1
    assert any("duplicate" in msg for msg in rep["issues"])
    assert any("6-letter" in msg for msg in rep["issues"])


def test_validate_wordlist_expected_count_and_missing(tmp_path: Path):
    wl = tmp_path / "words.txt"
    _write(wl, ["crane", "raise"])
    rep = validate_wordlist(5, str(wl), expected_count=3)
    assert rep["passed"] is False
    assert any("expected 3" in msg for msg in rep["issues"])

    rep = validate_wordlist(5, str(tmp_path / "nope.txt"))
    assert rep["exists"] is False and rep["passed"] is False
    assert "FAIL" in pretty_summary(rep)


def test_line_readers(tmp_path: Path):
    wl = tmp_path / "words.txt"
    wl.write_bytes(b" Crane \r\nBLAST\n")
    assert read_lines(wl) == [" Crane ", "BLAST"]
    assert list(iter_lines(wl)) == [" Crane ", "BLAST"]
    assert list(iter_words(wl)) == ["crane", "blast"]
    assert list(iter_words(wl, normalize=False)) == [" Crane ", "BLAST"]


def test_merge_wordlists_sorted_unique(tmp_path: Path):
    a, b = tmp_path / "a.txt", tmp_path / "b.txt"
    _write(a, ["stare", "Crane", "cranes"])
    _write(b, ["crane", "adieu", "x1yz!"])
    assert merge_wordlists([a, b], 5) == ["adieu", "crane", "stare"]


def test_write_lines_round_trip(tmp_path: Path):
    from packages.datasets import write_lines
    out = tmp_path / "sub" / "w.txt"
    assert write_lines(["crane", "stare"], out) == str(out)
    assert read_lines(out) == ["crane", "stare"]


def test_write_lines_empty_gives_empty_file(tmp_path: Path):
    from packages.datasets import write_lines
    out = tmp_path / "empty.txt"
    write_lines([], out)
    assert out.read_text(encoding="utf-8") == ""
