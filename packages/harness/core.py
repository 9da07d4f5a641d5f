"""
Run driver primitives.

- iter_matches: lazily filter a candidate stream with a matcher, in-process
                or across a process pool, preserving input order.
- run_query:    filter a whole stream and return a result dict (matches,
                counts, timing) for printing or persisting.

These functions are UI-agnostic so they can be reused by the CLI, a
notebook, or tests without changes. Constraint errors never reach them:
a matcher can only be built from an already-validated ConstraintModel.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from concurrent.futures import ProcessPoolExecutor
from typing import Dict, Iterable, Iterator, List

from tqdm import tqdm

from packages.engine import compile_pattern
from packages.matchers import BaseMatcher, chunked

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 2048


def _assert_workers(workers: int) -> None:
    """Guardrail: a pool needs at least one worker."""
    if workers < 1:
        raise ValueError(f"workers must be >= 1; got {workers}")


def _match_chunk(matcher: BaseMatcher, chunk: List[str]) -> List[str]:
    # module-level so it can be pickled to worker processes
    return list(matcher.filter(chunk))


def iter_matches(
        matcher: BaseMatcher,
        words: Iterable[str],
        *,
        workers: int = 1,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Iterator[str]:
    """
    Yield the words accepted by `matcher`, in the order they appear in `words`.

    With workers > 1 the stream is cut into chunks evaluated on a process
    pool. At most `2 * workers` chunks are in flight at a time, so the
    stream is read only as fast as it is scanned, and results are taken
    from the oldest chunk first to keep the in-process order.
    """
    _assert_workers(workers)
    if workers == 1:
        yield from matcher.filter(words)
        return

    window = 2 * workers
    with ProcessPoolExecutor(workers) as ex:
        pending = deque()
        for chunk in chunked(words, chunk_size):
            pending.append(ex.submit(_match_chunk, matcher, chunk))
            if len(pending) >= window:
                yield from pending.popleft().result()
        while pending:
            yield from pending.popleft().result()


def run_query(
        matcher: BaseMatcher,
        words: Iterable[str],
        *,
        workers: int = 1,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        progress: bool = False,
        total: int | None = None,
) -> Dict:
    """
    Filter every candidate in `words` and collect the result.

    Args:
        matcher:    any registered matcher built for the run's model
        words:      candidate stream (one word per item)
        workers:    process-pool size; 1 evaluates in-process
        chunk_size: words per task when workers > 1
        progress:   show a tqdm bar over the scanned words (stderr)
        total:      expected number of words, for the progress bar only

    Returns:
        dict with keys:
            strategy (str), N (int), regex (str), scanned (int),
            matches (list[str]), count (int), time_ms (float)
    """
    scanned = 0

    def _counted(it: Iterable[str]) -> Iterator[str]:
        nonlocal scanned
        for w in it:
            scanned += 1
            yield w

    stream = tqdm(words, total=total, desc="Scanning", unit="word", ncols=80,
                  disable=not progress)

    t0 = time.perf_counter()
    matches = list(iter_matches(matcher, _counted(stream), workers=workers, chunk_size=chunk_size))
    dt = (time.perf_counter() - t0) * 1000.0
    stream.close()

    logger.debug("%s: %d of %d word(s) matched in %.1f ms", matcher.id, len(matches), scanned, dt)
    return {
        "strategy": matcher.id,
        "N": matcher.N,
        "regex": compile_pattern(matcher.model).to_regex(),
        "scanned": scanned,
        "matches": matches,
        "count": len(matches),
        "time_ms": dt,
    }
