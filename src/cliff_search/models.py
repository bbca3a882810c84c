"""Protocols and lightweight model types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class CliffSearch(Protocol):
    """Contract shared by every searcher.

    The caller alternates strictly: ``produce()`` a candidate, apply it to the
    system under test, optionally ``report_overloaded()``, then ``produce()``
    again. A report only ever applies to the most recent candidate.
    """

    def produce(self) -> int | None:
        """Return the next load to try, or None once the search is over."""

    def report_overloaded(self) -> None:
        """Mark the most recently produced load as beyond capacity."""

    def estimate(self) -> Bracket:
        """Return the current half-open bracket containing the cliff."""


@dataclass(frozen=True)
class Bracket:
    """Half-open interval ``[lo, hi)``; ``hi is None`` means no upper bound is known."""

    lo: int
    hi: int | None

    @property
    def bounded(self) -> bool:
        return self.hi is not None

    @property
    def width(self) -> int | None:
        if self.hi is None:
            return None
        return self.hi - self.lo


@dataclass(frozen=True)
class Idle:
    """No candidate is waiting for an outcome."""


@dataclass(frozen=True)
class AwaitingOutcome:
    """A proposed candidate whose outcome has not been folded into the bracket."""

    value: int
    overloaded: bool = False


Pending = Idle | AwaitingOutcome

IDLE = Idle()


@dataclass(frozen=True)
class Attempt:
    """One load tried by the runner and whether it overloaded the system."""

    load: int
    overloaded: bool
