import json
import logging
from pathlib import Path

import pytest
from apps.cli.solve import main


def _wordlist(tmp_path: Path, words) -> str:
    p = tmp_path / "words.txt"
    p.write_text("\n".join(words) + "\n", encoding="utf-8")
    return str(p)


WORDS = ["apple", "queue", "CRANE", "blast", "close", "cr4ne", "cranes"]


@pytest.mark.parametrize("strategy", ["bitmask", "pattern", "regex", "vectorized"])
def test_solve_prints_matches_in_order(tmp_path, capsys, strategy):
    wl = _wordlist(tmp_path, WORDS)
    assert main(["--dict", wl, "--exclude", "q", "--strategy", strategy]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["4 possible solutions:", "apple", "crane", "blast", "close"]


def test_solve_no_solutions(tmp_path, capsys):
    wl = _wordlist(tmp_path, WORDS)
    assert main(["--dict", wl, "--require", "z"]) == 0
    assert capsys.readouterr().out.strip() == "No solutions found."


def test_solve_configuration_error_produces_no_output(tmp_path, capsys):
    wl = _wordlist(tmp_path, WORDS)
    assert main(["--dict", wl, "--exclude", "a", "--include", "a"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error:" in captured.err and "disjoint" in captured.err


def test_solve_rejects_malformed_known(tmp_path, capsys):
    wl = _wordlist(tmp_path, WORDS)
    assert main(["--dict", wl, "--known", "c1"]) == 1
    assert "position" in capsys.readouterr().err


def test_solve_requires_some_constraint(tmp_path):
    wl = _wordlist(tmp_path, WORDS)
    with pytest.raises(SystemExit) as ei:
        main(["--dict", wl])
    assert ei.value.code == 2


def test_solve_missing_wordlist(tmp_path, capsys):
    assert main(["--dict", str(tmp_path / "nope.txt"), "--exclude", "q"]) == 1
    assert "unable to open" in capsys.readouterr().err


def test_solve_verbose_shows_pattern(tmp_path, capsys):
    wl = _wordlist(tmp_path, WORDS)
    assert main(["--dict", wl, "--exclude", "q", "--known", "3o", "--verbose"]) == 0
    out = capsys.readouterr().out
    assert "[a-pr-z]" in out
    assert "^[a-pr-z]{2}o[a-pr-z]{2}$" in out
    assert "[__o__]" in out
    assert "1 possible solutions:" in out


def test_solve_save_and_manifest(tmp_path, capsys):
    wl = _wordlist(tmp_path, WORDS)
    res = tmp_path / "results.txt"
    man = tmp_path / "run.json"
    rc = main(["--dict", wl, "--require", "a,e", "--save", "--out", str(res),
               "--manifest", str(man), "--workers", "2"])
    assert rc == 0
    assert res.read_text(encoding="utf-8") == "apple\ncrane\n"
    data = json.loads(man.read_text(encoding="utf-8"))
    assert data["count"] == 2 and data["scanned"] == len(WORDS)
    assert data["constraints"]["required"] == "ae"
    assert data["wordlists"][0]["N"] == 5


def test_solve_merges_several_lists(tmp_path, capsys):
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    a.write_text("stare\ncrane\n", encoding="utf-8")
    b.write_text("crane\nadieu\n", encoding="utf-8")
    assert main(["--dict", str(a), str(b), "--require", "a"]) == 0
    assert capsys.readouterr().out.splitlines()[1:] == ["adieu", "crane", "stare"]


def test_solve_single_list_keeps_file_order_and_duplicates(tmp_path, capsys):
    wl = _wordlist(tmp_path, ["stare", "crane", "stare", "adieu"])
    assert main(["--dict", wl, "--require", "a"]) == 0
    assert capsys.readouterr().out.splitlines()[1:] == ["stare", "crane", "stare", "adieu"]


@pytest.mark.parametrize("extra,level", [([], logging.INFO), (["--verbose"], logging.DEBUG)])
def test_solve_configures_logging_level(tmp_path, capsys, monkeypatch, extra, level):
    seen = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: seen.update(kw))
    wl = _wordlist(tmp_path, WORDS)
    assert main(["--dict", wl, "--exclude", "q", *extra]) == 0
    assert seen["level"] == level
