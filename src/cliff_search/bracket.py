"""Generic bracket-narrowing engine shared by the searchers."""

from __future__ import annotations

import enum
import logging
from dataclasses import replace

from .config import DEFAULT_CEILING
from .logging_utils import get_logger
from .models import IDLE, AwaitingOutcome, Bracket, Pending


class Direction(enum.Enum):
    """Which bound a successful candidate moves."""

    # Maximum search: success raises lo, overload lowers hi.
    UP = "up"
    # Minimum search: success lowers hi, overload raises lo.
    DOWN = "down"


class BracketEngine:
    """State machine that folds outcomes into ``[lo, hi)`` and picks the next candidate.

    The engine owns the whole search state. Searchers configure it with a
    direction, a first candidate and whether the exponential growth phase is
    allowed while ``hi`` is unbounded, then drive it through ``advance()`` or
    the lower-level ``propose()`` / ``fold()`` pair.
    """

    def __init__(
        self,
        *,
        lo: int,
        hi: int | None,
        first: int,
        fidelity: int,
        direction: Direction,
        grow: bool = False,
        ceiling: int = DEFAULT_CEILING,
        logger: logging.Logger | None = None,
    ) -> None:
        self._lo = lo
        self._hi = hi
        self._first = first
        self._fidelity = fidelity
        self._direction = direction
        self._grow = grow
        self._ceiling = ceiling
        self._logger = logger or get_logger()
        self._pending: Pending = IDLE
        self._started = False
        self._terminal = False

    @property
    def lo(self) -> int:
        return self._lo

    @property
    def hi(self) -> int | None:
        return self._hi

    @property
    def fidelity(self) -> int:
        return self._fidelity

    @property
    def pending(self) -> Pending:
        return self._pending

    @property
    def started(self) -> bool:
        return self._started

    @property
    def terminal(self) -> bool:
        return self._terminal

    def estimate(self) -> Bracket:
        return Bracket(self._lo, self._hi)

    def report_overloaded(self) -> None:
        """Flag the pending candidate; a no-op when nothing is pending."""
        if isinstance(self._pending, AwaitingOutcome):
            self._pending = replace(self._pending, overloaded=True)

    def propose(self, value: int) -> int:
        """Record ``value`` as the candidate awaiting an outcome and return it."""
        self._started = True
        self._pending = AwaitingOutcome(value)
        return value

    def fold(self) -> AwaitingOutcome | None:
        """Move the pending outcome into the bracket and return it."""
        pending = self._pending
        if not isinstance(pending, AwaitingOutcome):
            return None
        self._pending = IDLE
        if pending.overloaded == (self._direction is Direction.UP):
            self._hi = pending.value
        else:
            self._lo = pending.value
        self._logger.debug(
            "%s %d, bracket now [%d, %s)",
            "overloaded at" if pending.overloaded else "kept up at",
            pending.value,
            self._lo,
            "inf" if self._hi is None else self._hi,
        )
        return pending

    def narrowed(self) -> bool:
        """Return True once the bracket is within fidelity.

        A width-1 bracket is always narrow enough: bisecting it would
        propose ``lo`` again.
        """
        if self._hi is None:
            return False
        return self._hi - self._lo <= max(self._fidelity, 1)

    def next_candidate(self) -> int | None:
        """Return the next value to probe, or None when growth is exhausted."""
        if self._hi is not None:
            return self._lo + (self._hi - self._lo) // 2
        if not self._grow or self._lo >= self._ceiling:
            return None
        # Doubling from zero would stall.
        return min(max(2 * self._lo, 1), self._ceiling)

    def terminate(self) -> None:
        if not self._terminal:
            self._logger.debug("search finished with bracket %s", self.estimate())
        self._terminal = True
        self._pending = IDLE

    def advance(self) -> int | None:
        """Fold the last outcome and return the next candidate for max/min search."""
        if self._terminal:
            return None
        if not self._started:
            return self.propose(self._first)

        self.fold()
        if self.narrowed():
            self.terminate()
            return None
        candidate = self.next_candidate()
        if candidate is None:
            self._logger.debug("growth saturated at ceiling %d", self._ceiling)
            self.terminate()
            return None
        return self.propose(candidate)
