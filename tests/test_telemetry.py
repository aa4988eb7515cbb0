from __future__ import annotations

import pytest

from textundo.runtime import telemetry


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_get_logger_is_cached() -> None:
    assert telemetry.get_logger("textundo.test") is telemetry.get_logger(
        "textundo.test"
    )


def test_record_event_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        telemetry.record_event("bogus", level="shout")


def test_span_reraises_and_keeps_working() -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("test::boom", metadata={"case": "fail"}):
            raise RuntimeError("boom")

    with telemetry.span("test::ok", component=True) as handle:
        handle.add_metadata("size", 3)
    assert handle.metadata["size"] == "3"
