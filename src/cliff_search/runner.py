"""Searcher construction and the benchmark driving loop."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from tqdm import tqdm

from .binmin import BinaryMinSearcher
from .config import SearchConfig
from .exponential import ExponentialCliffSearcher
from .load_list import LoadIterator
from .logging_utils import get_logger
from .models import Attempt, Bracket, CliffSearch

BenchmarkFn = Callable[[int], bool]


@dataclass
class SearchResult:
    estimate: Bracket
    attempts: list[Attempt] = field(default_factory=list)

    @property
    def overloaded_loads(self) -> list[int]:
        return [attempt.load for attempt in self.attempts if attempt.overloaded]


def build_searcher(config: SearchConfig, *, logger: logging.Logger | None = None) -> CliffSearch:
    """Build the searcher selected by ``config.mode``."""
    if config.mode == "list":
        return LoadIterator(config.loads or (), logger=logger)
    if config.mode == "min":
        return BinaryMinSearcher(config.start, config.effective_fidelity(), logger=logger)
    searcher = ExponentialCliffSearcher(
        config.start,
        config.effective_fidelity(),
        ceiling=config.ceiling,
        logger=logger,
    )
    if config.fill_left:
        searcher.fill_left()
    return searcher


def choose_searcher(
    start: int,
    loads: Iterable[int] | None = None,
    fidelity: int | None = None,
    *,
    logger: logging.Logger | None = None,
) -> CliffSearch:
    """Walk ``loads`` when the user supplied any, otherwise search from ``start``.

    ``loads`` is materialised first so an empty generator falls back to search.
    """
    values = tuple(loads or ())
    if values:
        return LoadIterator(values, logger=logger)
    return ExponentialCliffSearcher(start, fidelity, logger=logger)


def find_cliff(
    searcher: CliffSearch,
    benchmark: BenchmarkFn,
    *,
    show_progress: bool = False,
    logger: logging.Logger | None = None,
) -> SearchResult:
    """Run ``benchmark`` on each candidate until the searcher is exhausted.

    ``benchmark`` returns True when the system kept up with the offered load.
    """
    logger = logger or get_logger()
    result = SearchResult(estimate=searcher.estimate())
    progress = tqdm(desc="probing loads", unit="run") if show_progress else None
    try:
        while True:
            load = searcher.produce()
            if load is None:
                break
            kept_up = benchmark(load)
            if not kept_up:
                searcher.report_overloaded()
            result.attempts.append(Attempt(load=load, overloaded=not kept_up))
            logger.info("Load %d: %s", load, "kept up" if kept_up else "overloaded")
            if progress is not None:
                progress.update(1)
    finally:
        if progress is not None:
            progress.close()

    result.estimate = searcher.estimate()
    hi = result.estimate.hi
    logger.info(
        "Cliff lies in [%d, %s) after %d runs",
        result.estimate.lo,
        "inf" if hi is None else hi,
        len(result.attempts),
    )
    return result
