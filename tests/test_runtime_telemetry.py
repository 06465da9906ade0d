from __future__ import annotations

from pathlib import Path

import pytest

from edit_history.runtime import telemetry


def test_get_logger_is_cached() -> None:
    first = telemetry.get_logger("edit_history.tests")

    assert telemetry.get_logger("edit_history.tests") is first


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError, match="Unknown preset"):
        telemetry.configure(preset="verbose")


def test_configure_reads_preset_from_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("EDIT_HISTORY_PRESET", "Production")
    monkeypatch.setenv("EDIT_HISTORY_LOG_FILE", str(tmp_path / "history.log"))
    try:
        telemetry.configure()
        assert telemetry.active_preset() == "production"

        monkeypatch.delenv("EDIT_HISTORY_PRESET")
        telemetry.configure()
        assert telemetry.active_preset() is None
    finally:
        monkeypatch.delenv("EDIT_HISTORY_PRESET", raising=False)
        telemetry.configure()


def test_configure_preset_resets_logger_cache() -> None:
    before = telemetry.get_logger("edit_history.tests")
    try:
        telemetry.configure(preset="quiet")
        assert telemetry.active_preset() == "quiet"
        assert telemetry.get_logger("edit_history.tests") is not before
    finally:
        telemetry.configure()


def test_span_reraises_and_yields_handle() -> None:
    with telemetry.span("tests::ok", component=True, metadata={"k": 1}) as handle:
        handle.add_metadata("extra", [1, 2])
    assert handle.metadata == {"k": "1", "extra": "[1, 2]"}
    assert handle.component_name == "tests::ok"

    with pytest.raises(LookupError):
        with telemetry.span("tests::boom", component="tests"):
            raise LookupError("nope")


def test_record_event_accepts_levels() -> None:
    telemetry.record_event("tests.event", level="debug", data={"n": 1})

    with pytest.raises(ValueError, match="Unsupported log level"):
        telemetry.record_event("tests.event", level="loud")
