# apps/cli/solve.py
"""
CLI entry point for filtering a word list against game constraints.

This script:
  1) Parses the exclude / require / known options into a ConstraintModel
     (configuration errors abort here, before any word is read).
  2) Builds the requested matcher (bitmask, pattern, regex, vectorized).
  3) Streams the word list(s) through the matcher and prints the matches
     in word-list order; optionally saves them and writes a JSON manifest.

Examples:
    python -m apps.cli.solve --exclude q,x,z --require a,e --known 1c
    python -m apps.cli.solve --length 6 --dict words6.txt --known 3o --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from packages.datasets import iter_words, merge_wordlists, pretty_summary, validate_wordlist
from packages.engine import ConstraintError, ConstraintModel, compile_pattern
from packages.engine.constraints import DEFAULT_WORD_LENGTH
from packages.engine.ranges import compress, render_class
from packages.harness import run_query, write_manifest, write_results
from packages.harness.io import DEFAULT_RESULTS_PATH, git_commit_or_unknown, timestamp_id
from packages.matchers import DEFAULT_MATCHER, create_matcher, get_matcher_ids

DEFAULT_WORDLIST = "wordlewords.txt"

logger = logging.getLogger("solve")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Filter a word list against word-game constraints.")
    ap.add_argument("--dict", nargs="+", default=[DEFAULT_WORDLIST], metavar="PATH",
                    help="word list file(s), one word per line; a single list is scanned as-is "
                         "(file order, duplicates kept), several lists are merged into one "
                         "sorted unique list")
    ap.add_argument("--length", type=int, default=DEFAULT_WORD_LENGTH,
                    help="the length of the word to be found")
    ap.add_argument("--exclude", default="",
                    help="letters known to not be in the word, e.g. --exclude m,s,e")
    ap.add_argument("--require", "--include", dest="require", default="",
                    help="letters known to be in the word at unknown positions, e.g. --require m,s,e")
    ap.add_argument("--known", default="",
                    help="known positions and letters (1-based), e.g. --known 1m,2o,3u")
    ap.add_argument("--strategy", choices=get_matcher_ids(), default=DEFAULT_MATCHER,
                    help="how each word is evaluated (all strategies give the same result)")
    ap.add_argument("--workers", type=int, default=1,
                    help="worker processes for the scan (1 = in-process)")
    ap.add_argument("--save", action="store_true",
                    help="save the potential solutions to a .txt file")
    ap.add_argument("--out", default=DEFAULT_RESULTS_PATH,
                    help="path used by --save")
    ap.add_argument("--manifest", help="write a JSON manifest of the run to this path")
    ap.add_argument("--verbose", action="store_true",
                    help="show how the arguments were interpreted")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="off",
        help="show a progress bar while scanning (auto = bar if stderr is a terminal)",
    )
    return ap


def _show_interpretation(model: ConstraintModel) -> None:
    """Verbose view of the model and the compiled pattern."""
    pattern = compile_pattern(model)
    print(model.describe())
    print("Letter group for unknown positions:")
    print(render_class(compress(model.allowed)))
    print("Pattern to apply to each word:")
    print(pattern.to_regex())
    print()


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, build constraints, scan the word list(s), and report.
    Returns the process exit status.
    """
    ap = build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not (args.exclude or args.require or args.known):
        ap.error("no constraints were provided (use --exclude, --require and/or --known)")
    if args.workers < 1:
        ap.error("--workers must be at least 1")

    # 1) Constraints: any configuration error stops the run before output
    try:
        model = ConstraintModel.from_args(args.exclude, args.require, args.known,
                                          word_length=args.length)
    except ConstraintError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        _show_interpretation(model)

    # 2) Matcher
    matcher = create_matcher(args.strategy, model)
    logger.debug("strategy: %s", matcher.describe())

    # 3) Candidate stream: stream a single list, merge several
    paths = [Path(p) for p in args.dict]
    missing = [str(p) for p in paths if not p.exists()]
    if missing:
        print(f"Error: unable to open the list of words: {', '.join(missing)}", file=sys.stderr)
        return 1

    reports = []
    if args.verbose or args.manifest:
        reports = [validate_wordlist(args.length, str(p)) for p in paths]
    if args.verbose:
        for rep in reports:
            print(pretty_summary(rep))

    words = iter_words(paths[0]) if len(paths) == 1 else merge_wordlists(paths, args.length)

    show_bar = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())
    result = run_query(matcher, words, workers=args.workers, progress=show_bar)

    # 4) Show results
    if not result["matches"]:
        print("No solutions found.")
    else:
        print(f"{result['count']} possible solutions:")
        for w in result["matches"]:
            print(w)

    if args.save:
        written = write_results(result["matches"], args.out)
        print(f"Wrote: {written}")

    if args.manifest:
        manifest = {
            "run_id": timestamp_id(),
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "constraints": {
                "excluded": str(model.excluded),
                "required": str(model.required),
                "known": model.known_pattern(),
            },
            "regex": result["regex"],
            "strategy": result["strategy"],
            "wordlists": reports,
            "scanned": result["scanned"],
            "count": result["count"],
            "time_ms": round(result["time_ms"], 3),
        }
        print(f"Wrote: {write_manifest(manifest, args.manifest)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
