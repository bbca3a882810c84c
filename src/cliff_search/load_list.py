"""Walk a caller-supplied list of loads until the system falls over."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .bracket import BracketEngine, Direction
from .models import Bracket
from .validation import validate_load

_EXHAUSTED = object()


class LoadIterator:
    """Try each load in order and stop at the first overload.

    Provides manual override with the same reporting contract as the search
    strategies. The loads are pulled lazily, one per ``produce()`` call. After
    an overload the estimate is ``[last_good, last_bad)``; if the loads run
    out first it is ``[last_load, unbounded)``.
    """

    def __init__(self, loads: Iterable[int], *, logger: logging.Logger | None = None) -> None:
        self._loads: Iterator[int] = iter(loads)
        self._engine = BracketEngine(
            lo=0,
            hi=None,
            first=0,
            fidelity=0,
            direction=Direction.UP,
            logger=logger,
        )

    def produce(self) -> int | None:
        engine = self._engine
        if engine.terminal:
            return None
        outcome = engine.fold()
        if outcome is not None and outcome.overloaded:
            engine.terminate()
            return None
        value = next(self._loads, _EXHAUSTED)
        if value is _EXHAUSTED:
            engine.terminate()
            return None
        return engine.propose(validate_load(value))

    def report_overloaded(self) -> None:
        self._engine.report_overloaded()

    def estimate(self) -> Bracket:
        return self._engine.estimate()

    def __iter__(self) -> LoadIterator:
        return self

    def __next__(self) -> int:
        value = self.produce()
        if value is None:
            raise StopIteration
        return value
