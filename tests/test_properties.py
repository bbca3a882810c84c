"""Exhaustive checks over every overload pattern of short searches."""

import itertools
from collections.abc import Callable

import pytest

from cliff_search.binmin import BinaryMinSearcher
from cliff_search.exponential import ExponentialCliffSearcher
from cliff_search.load_list import LoadIterator
from cliff_search.models import Bracket, CliffSearch

MAX_STEPS = 200
PATTERNS = list(itertools.product((False, True), repeat=8))


def drive(searcher: CliffSearch, pattern: tuple[bool, ...]) -> tuple[list[int], list[Bracket]]:
    """Run the searcher, reporting overload per ``pattern`` (success once it runs out)."""
    loads: list[int] = []
    estimates = [searcher.estimate()]
    for step in range(MAX_STEPS):
        load = searcher.produce()
        estimates.append(searcher.estimate())
        if load is None:
            return loads, estimates
        loads.append(load)
        if step < len(pattern) and pattern[step]:
            searcher.report_overloaded()
    pytest.fail(f"search did not terminate within {MAX_STEPS} steps")


SEARCHERS: dict[str, tuple[Callable[[], CliffSearch], int]] = {
    "max": (lambda: ExponentialCliffSearcher(500, ceiling=1 << 20), 500),
    "max-fine": (lambda: ExponentialCliffSearcher(3, 0, ceiling=1 << 12), 3),
    "min": (lambda: BinaryMinSearcher(1024, 8), 1024),
    "min-fine": (lambda: BinaryMinSearcher(100, 0), 100),
    "list": (lambda: LoadIterator([5, 10, 20, 40, 80, 160]), 5),
}


@pytest.mark.parametrize("name", sorted(SEARCHERS))
def test_first_value_is_start(name: str) -> None:
    factory, start = SEARCHERS[name]
    for pattern in PATTERNS:
        loads, _ = drive(factory(), pattern)
        assert loads[0] == start


@pytest.mark.parametrize("name", ["max", "max-fine", "list"])
def test_max_style_brackets_only_narrow(name: str) -> None:
    factory, _ = SEARCHERS[name]
    for pattern in PATTERNS:
        _, estimates = drive(factory(), pattern)
        for before, after in zip(estimates, estimates[1:]):
            assert after.lo >= before.lo
            if before.hi is not None:
                assert after.hi is not None and after.hi <= before.hi
            if after.hi is not None:
                assert after.lo <= after.hi


@pytest.mark.parametrize("name", ["min", "min-fine"])
def test_min_brackets_only_narrow(name: str) -> None:
    factory, _ = SEARCHERS[name]
    for pattern in PATTERNS:
        _, estimates = drive(factory(), pattern)
        for before, after in zip(estimates, estimates[1:]):
            assert after.hi <= before.hi
            assert after.lo >= before.lo
            assert after.lo <= after.hi


@pytest.mark.parametrize(("name", "fidelity"), [("max", 250), ("max-fine", 0), ("min", 8), ("min-fine", 0)])
def test_bounded_searches_converge_to_fidelity(name: str, fidelity: int) -> None:
    factory, _ = SEARCHERS[name]
    for pattern in PATTERNS:
        _, estimates = drive(factory(), pattern)
        final = estimates[-1]
        if final.hi is not None:
            assert final.hi - final.lo <= max(fidelity, 1)


@pytest.mark.parametrize("name", sorted(SEARCHERS))
def test_termination_is_permanent_and_stable(name: str) -> None:
    factory, _ = SEARCHERS[name]
    for pattern in PATTERNS[::17]:
        searcher = factory()
        _, estimates = drive(searcher, pattern)
        final = estimates[-1]
        for _ in range(3):
            searcher.report_overloaded()
            assert searcher.produce() is None
            assert searcher.estimate() == final


def test_fill_left_values_lie_below_final_lower_bound() -> None:
    for pattern in PATTERNS:
        plain = ExponentialCliffSearcher(500, 100, ceiling=1 << 20)
        filled = ExponentialCliffSearcher(500, 100, ceiling=1 << 20)
        filled.fill_left()
        plain_loads, plain_estimates = drive(plain, pattern)
        filled_loads, _ = drive(filled, pattern)

        assert filled_loads[: len(plain_loads)] == plain_loads
        assert filled.estimate() == plain_estimates[-1]
        extra = filled_loads[len(plain_loads):]
        final_lo = plain_estimates[-1].lo
        if not extra:
            continue
        assert extra[0] > 500
        assert all(earlier < later for earlier, later in zip(extra, extra[1:]))
        assert all(value < final_lo for value in extra)
        assert final_lo - extra[-1] <= 100
