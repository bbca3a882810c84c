import logging

import pytest

from cliff_search import logging_utils


def test_configure_logging_levels(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging_utils.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    logging_utils.configure_logging()
    logging_utils.configure_logging(verbose=True)

    assert [call["level"] for call in calls] == [logging.INFO, logging.DEBUG]
    assert all(call["format"] == logging_utils.LOG_FORMAT for call in calls)


def test_get_logger_name() -> None:
    assert logging_utils.get_logger().name == "cliff_search"
