"""Unit tests for femtologging integration helpers.

Run with:
    pytest tests/unit/test_logging.py
"""

from __future__ import annotations

import pytest

from tentacle.logging import (
    LOG_LEVEL_ENV_VAR,
    configure_logging,
    format_log_message,
    log_debug,
    log_exception,
    log_info,
    log_warning,
    normalize_log_level,
)


class _FakeLogger:
    """Collects log calls for assertions."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, object | None, bool]] = []

    def log(
        self,
        level: str,
        message: str,
        /,
        *,
        exc_info: object | None = None,
        stack_info: bool = False,
    ) -> str:
        self.calls.append((level, message, exc_info, stack_info))
        return message


@pytest.mark.parametrize(
    ("input_level", "expected_level", "expected_invalid"),
    [
        (" debug ", "DEBUG", False),
        ("warn", "WARN", False),
        (None, "INFO", True),
        ("verbose", "INFO", True),
    ],
)
def test_normalize_log_level(
    input_level: str | None,
    expected_level: str,
    expected_invalid: bool,  # noqa: FBT001 - parametrized expectation
) -> None:
    """Normalize log levels and flag invalid inputs."""
    level, invalid = normalize_log_level(input_level)

    assert level == expected_level, (
        f"Expected {input_level!r} to normalize to {expected_level}."
    )
    assert invalid is expected_invalid, (
        f"Expected invalid flag to be {expected_invalid} for {input_level!r}."
    )


def test_format_log_message_uses_percent_formatting() -> None:
    """Percent formatting produces the expected message."""
    message = format_log_message("%s %s -> %d", "GET", "/user", 200)
    assert message == "GET /user -> 200", "Expected percent formatting result."


def test_log_helpers_emit_levels() -> None:
    """Each helper formats its message and emits its own level."""
    logger = _FakeLogger()
    exc = ValueError("boom")

    log_debug(logger, "debug %d", 1)
    log_info(logger, "info %s", "two")
    log_warning(logger, "warning: %s", "oops", exc_info=exc)

    assert logger.calls == [
        ("DEBUG", "debug 1", None, False),
        ("INFO", "info two", None, False),
        ("WARNING", "warning: oops", exc, False),
    ], "Expected formatted entries at DEBUG, INFO and WARNING."


def test_log_exception_passes_message_verbatim() -> None:
    """log_exception does not interpolate and forwards the exception."""
    logger = _FakeLogger()
    exc = ValueError("boom")

    log_exception(logger, "failed at 100%", exc)

    assert logger.calls == [("ERROR", "failed at 100%", exc, False)], (
        "Expected ERROR log entry with exc_info."
    )


def test_configure_logging_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without an explicit level, TENTACLE_LOG_LEVEL is used."""
    captured: dict[str, object] = {}

    def fake_basic_config(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr("tentacle.logging.basicConfig", fake_basic_config)
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "error")

    normalized, invalid = configure_logging()

    assert (normalized, invalid) == ("ERROR", False)
    assert captured == {"level": "ERROR", "force": False}, (
        "Expected basicConfig to receive the normalized level."
    )


def test_configure_logging_falls_back_on_invalid_level(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Invalid levels fall back to INFO and are flagged."""
    captured: dict[str, object] = {}
    monkeypatch.setattr(
        "tentacle.logging.basicConfig", lambda **kwargs: captured.update(kwargs)
    )

    normalized, invalid = configure_logging("loud", force=True)

    assert (normalized, invalid) == ("INFO", True)
    assert captured == {"level": "INFO", "force": True}
