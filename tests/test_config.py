from __future__ import annotations

import pytest

from linepad.runtime import telemetry
from linepad.runtime.config import EditorConfig


def test_defaults() -> None:
    config = EditorConfig.from_env({})

    assert config.tab_width == 4
    assert config.gutter_width == 8
    assert config.log_preset is None
    assert config.tab_text == "    "


def test_from_env_reads_prefixed_values() -> None:
    config = EditorConfig.from_env(
        {
            "LINEPAD_TAB_WIDTH": "2",
            "LINEPAD_GUTTER_WIDTH": "4",
            "LINEPAD_LOG_PRESET": "production",
        }
    )

    assert config == EditorConfig(tab_width=2, gutter_width=4, log_preset="production")


def test_invalid_integer_falls_back() -> None:
    assert EditorConfig.from_env({"LINEPAD_TAB_WIDTH": "wide"}).tab_width == 4


@pytest.mark.parametrize(
    "kwargs",
    [{"tab_width": 0}, {"gutter_width": -1}, {"log_preset": "verbose"}],
)
def test_invalid_values_rejected(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        EditorConfig(**kwargs)


def test_override_skips_none() -> None:
    config = EditorConfig(tab_width=3).override(tab_width=None, log_preset="quiet")

    assert config.tab_width == 3
    assert config.log_preset == "quiet"


def test_telemetry_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="loud")


def test_telemetry_rejects_config_and_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="quiet")


def test_span_reraises_and_records_failure() -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("test::failing", component=True, metadata={"k": 1}):
            raise RuntimeError("boom")


def test_logger_cache_reset_on_configure() -> None:
    first = telemetry.get_logger("linepad.test")
    assert telemetry.get_logger("linepad.test") is first

    telemetry.configure()

    assert telemetry.get_logger("linepad.test") is not first


def test_env_settings_read_level_and_file(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LINEPAD_LOG_LEVEL", "debug")
    monkeypatch.setenv("LINEPAD_LOG_FILE", "edit.log")

    settings = telemetry.settings_for()

    assert settings == telemetry.LogSettings(
        level="debug", console=True, log_file="edit.log"
    )


def test_quiet_preset_never_writes_to_console(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LINEPAD_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LINEPAD_LOG_FILE", raising=False)

    settings = telemetry.settings_for("quiet")

    assert settings.console is False
    assert settings.level == "WARNING"
    assert settings.log_file is None


def test_production_preset_defaults_to_log_file(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv("LINEPAD_LOG_FILE", raising=False)

    settings = telemetry.settings_for("Production")

    assert settings.log_file == "linepad.log"
    assert settings.buffered is True
