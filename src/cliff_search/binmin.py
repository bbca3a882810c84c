"""Binary search for the minimum value of a system parameter."""

from __future__ import annotations

import logging

from .bracket import BracketEngine, Direction
from .models import Bracket
from .validation import validate_fidelity, validate_start


class BinaryMinSearcher:
    """Bisect ``[0, start)`` toward the smallest value the system still tolerates.

    ``start`` is the first value probed. A success lowers the upper bound, an
    overload raises the lower bound. No growth phase is needed since ``0``
    already bounds the search from below. With ``start=1024`` and
    ``fidelity=8``::

        1024, 512, 256, 128, 64 (overloaded), 96, 80 (overloaded), 88

    leaves the estimate at ``[80, 88)``.
    """

    def __init__(
        self, start: int, fidelity: int, *, logger: logging.Logger | None = None
    ) -> None:
        validate_start(start)
        validate_fidelity(fidelity)
        self._engine = BracketEngine(
            lo=0,
            hi=start,
            first=start,
            fidelity=fidelity,
            direction=Direction.DOWN,
            logger=logger,
        )

    @classmethod
    def until(
        cls, start: int, fidelity: int, *, logger: logging.Logger | None = None
    ) -> BinaryMinSearcher:
        """Search below ``start`` until the minimum is known to within ``fidelity``."""
        return cls(start, fidelity, logger=logger)

    def produce(self) -> int | None:
        return self._engine.advance()

    def report_overloaded(self) -> None:
        self._engine.report_overloaded()

    def estimate(self) -> Bracket:
        return self._engine.estimate()

    def __iter__(self) -> BinaryMinSearcher:
        return self

    def __next__(self) -> int:
        value = self.produce()
        if value is None:
            raise StopIteration
        return value
