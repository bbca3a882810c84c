"""Search configuration model."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from .validation import validate_search_parameters

DEFAULT_MODE = "max"
# Largest index-sized integer; exponential growth saturates here.
DEFAULT_CEILING = sys.maxsize


@dataclass(frozen=True)
class SearchConfig:
    """Validated parameters used to build a searcher."""

    start: int = 0
    mode: str = DEFAULT_MODE
    fidelity: int | None = None
    fill_left: bool = False
    loads: tuple[int, ...] | None = None
    ceiling: int = DEFAULT_CEILING

    def __post_init__(self) -> None:
        validate_search_parameters(
            mode=self.mode,
            start=self.start,
            fidelity=self.fidelity,
            ceiling=self.ceiling,
            loads=self.loads,
            fill_left=self.fill_left,
        )

    def effective_fidelity(self) -> int:
        """Return the configured fidelity, or half the start when unset."""
        if self.fidelity is None:
            return self.start // 2
        return self.fidelity
