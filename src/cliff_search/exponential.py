"""Exponential search for the maximum load a system tolerates."""

from __future__ import annotations

import logging

from .bracket import BracketEngine, Direction
from .config import DEFAULT_CEILING
from .errors import ConfigError
from .models import AwaitingOutcome, Bracket
from .validation import validate_ceiling, validate_fidelity, validate_start


class ExponentialCliffSearcher:
    """Double the offered load until the system falls over, then bisect.

    As long as the system keeps up, each success raises the lower bound and the
    next candidate is twice that bound. The first overload sets the upper
    bound, after which candidates bisect ``[lo, hi)`` until the bracket is no
    wider than ``fidelity``.

    Example, starting at 500 with the default fidelity of 250::

        500, 1000, 2000, 4000 (overloaded), 3000, 3500 (overloaded), 3250

    leaves the estimate at ``[3250, 3500)``.
    """

    def __init__(
        self,
        start: int,
        fidelity: int | None = None,
        *,
        ceiling: int = DEFAULT_CEILING,
        logger: logging.Logger | None = None,
    ) -> None:
        validate_start(start)
        if fidelity is None:
            fidelity = start // 2
        validate_fidelity(fidelity)
        validate_ceiling(ceiling)
        if start > ceiling:
            raise ConfigError("start cannot be greater than ceiling.")
        self._engine = BracketEngine(
            lo=start,
            hi=None,
            first=start,
            fidelity=fidelity,
            direction=Direction.UP,
            grow=True,
            ceiling=ceiling,
            logger=logger,
        )
        self._pre_bound_low = start
        self._fill_left = False

    @classmethod
    def until(
        cls,
        start: int,
        fidelity: int,
        *,
        ceiling: int = DEFAULT_CEILING,
        logger: logging.Logger | None = None,
    ) -> ExponentialCliffSearcher:
        """Search from ``start`` until the maximum is known to within ``fidelity``."""
        return cls(start, fidelity, ceiling=ceiling, logger=logger)

    def fill_left(self) -> None:
        """Also sample loads just below the discovered lower bound.

        Starting at 1M against a system that handles 8M, the search probes 1M,
        2M, 4M, 8M and 16M, then bisects down to an 8M lower bound. Plotted,
        the jump from the 4M sample to the 8M sample hides how the system
        behaves leading up to capacity. With filling enabled, the searcher
        keeps going after it has finished and also samples 6M and 7M, bisecting
        the gap between the last pre-overload lower bound and the final one
        until it is within ``fidelity``. Outcomes of fill samples do not move
        the estimate.
        """
        self._fill_left = True

    def report_overloaded(self) -> None:
        self._engine.report_overloaded()

    def estimate(self) -> Bracket:
        return self._engine.estimate()

    def produce(self) -> int | None:
        engine = self._engine
        if engine.terminal:
            return self._next_fill()

        pending = engine.pending
        if engine.hi is None and isinstance(pending, AwaitingOutcome) and not pending.overloaded:
            # Remember where growth came from until the first overload is seen.
            self._pre_bound_low = engine.lo
        candidate = engine.advance()
        if candidate is None:
            return self._next_fill()
        return candidate

    def _next_fill(self) -> int | None:
        if not self._fill_left:
            return None
        gap = self._engine.lo - self._pre_bound_low
        if gap > max(self._engine.fidelity, 1):
            self._pre_bound_low += gap // 2
            return self._pre_bound_low
        self._fill_left = False
        return None

    def __iter__(self) -> ExponentialCliffSearcher:
        return self

    def __next__(self) -> int:
        value = self.produce()
        if value is None:
            raise StopIteration
        return value
