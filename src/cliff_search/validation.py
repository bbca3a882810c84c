"""Validation and construction guardrails."""

from __future__ import annotations

from typing import Any

from .errors import ConfigError, InvalidLoadError

SEARCH_MODES = ("max", "min", "list")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_start(start: Any) -> None:
    """Reject starting values that are not non-negative integers."""
    if not _is_int(start):
        raise ConfigError(f"start must be an integer, got {start!r}.")
    if start < 0:
        raise ConfigError("start must be >= 0.")


def validate_fidelity(fidelity: Any) -> None:
    """Reject fidelities that are not non-negative integers."""
    if not _is_int(fidelity):
        raise ConfigError(f"fidelity must be an integer, got {fidelity!r}.")
    if fidelity < 0:
        raise ConfigError("fidelity must be >= 0.")


def validate_ceiling(ceiling: Any) -> None:
    """Reject growth ceilings that could never hold a candidate."""
    if not _is_int(ceiling):
        raise ConfigError(f"ceiling must be an integer, got {ceiling!r}.")
    if ceiling < 1:
        raise ConfigError("ceiling must be >= 1.")


def validate_load(value: Any) -> int:
    """Return a list-walk element unchanged, or raise InvalidLoadError."""
    if not _is_int(value) or value < 0:
        raise InvalidLoadError(f"load values must be non-negative integers, got {value!r}.")
    return value


def validate_search_parameters(
    *,
    mode: str,
    start: int,
    fidelity: int | None,
    ceiling: int,
    loads: tuple[int, ...] | None,
    fill_left: bool = False,
) -> None:
    """Validate a search configuration and raise ConfigError on invalid values."""
    if mode not in SEARCH_MODES:
        raise ConfigError(f"mode must be one of {', '.join(SEARCH_MODES)}; got {mode!r}.")
    if mode == "list":
        if not loads:
            raise ConfigError("mode 'list' requires a non-empty loads sequence.")
        if fidelity is not None or fill_left:
            raise ConfigError("mode 'list' does not take fidelity or fill_left.")
        for value in loads:
            try:
                validate_load(value)
            except InvalidLoadError as exc:
                raise ConfigError(str(exc)) from exc
        return
    validate_start(start)
    if fidelity is not None:
        validate_fidelity(fidelity)
    if mode == "min":
        if fidelity is None:
            raise ConfigError("mode 'min' requires an explicit fidelity.")
        if fill_left:
            raise ConfigError("mode 'min' does not support fill_left.")
        # Min search is bounded by start; the growth ceiling does not apply.
        return
    validate_ceiling(ceiling)
    if start > ceiling:
        raise ConfigError("start cannot be greater than ceiling.")
