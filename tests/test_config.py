import pytest
from pydantic import ValidationError

from streaming_moments.config import MomentSettings, ReaderConfig


def test_settings_load_defaults() -> None:
    settings = MomentSettings()
    assert settings.logging.level == "INFO"
    assert settings.logging.json_format
    assert settings.reader.delimiter == ","
    assert settings.reader.report_every == 0


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STREAMING_MOMENTS_READER__DELIMITER", ";")
    monkeypatch.setenv("STREAMING_MOMENTS_LOGGING__LEVEL", "DEBUG")
    settings = MomentSettings()
    assert settings.reader.delimiter == ";"
    assert settings.logging.level == "DEBUG"


def test_settings_from_toml(tmp_path) -> None:
    path = tmp_path / "moments.toml"
    path.write_text(
        "[logging]\n"
        "level = \"WARNING\"\n"
        "json_format = false\n"
        "\n"
        "[reader]\n"
        "delimiter = \"\\t\"\n"
        "skip_header = true\n"
        "report_every = 1000\n"
    )
    settings = MomentSettings.from_toml(path)
    assert settings.logging.level == "WARNING"
    assert not settings.logging.json_format
    assert settings.reader.delimiter == "\t"
    assert settings.reader.skip_header
    assert settings.reader.report_every == 1000


def test_reader_config_rejects_negative_interval() -> None:
    with pytest.raises(ValidationError):
        ReaderConfig(report_every=-1)


def test_reader_config_rejects_empty_delimiter() -> None:
    with pytest.raises(ValidationError):
        ReaderConfig(delimiter="")
