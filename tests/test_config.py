"""Tests for settings loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from returntyper.config import Settings, get_settings, reload_settings


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    for var in ("RETURNTYPER_OUTPUT_FORMAT", "RETURNTYPER_CONTINUE_ON_ERROR",
                "RETURNTYPER_LOG_LEVEL", "RETURNTYPER_TYPE_TABLE"):
        monkeypatch.delenv(var, raising=False)
    yield
    monkeypatch.undo()
    reload_settings()


def test_defaults():
    settings = Settings()
    assert settings.output_format == "table"
    assert settings.continue_on_error is True
    assert settings.log_level == "WARNING"
    assert settings.type_table is None


def test_yaml_config(tmp_path):
    (tmp_path / "returntyper.yaml").write_text(
        "output_format: json\ncontinue_on_error: false\ntype_table: types.yaml\n"
    )
    settings = Settings()
    assert settings.output_format == "json"
    assert settings.continue_on_error is False
    assert settings.type_table == Path("types.yaml")


def test_env_overrides_yaml(tmp_path, monkeypatch):
    (tmp_path / "returntyper.yaml").write_text("output_format: json\n")
    monkeypatch.setenv("RETURNTYPER_OUTPUT_FORMAT", "table")
    assert Settings().output_format == "table"


def test_home_is_expanded(monkeypatch, tmp_path):
    monkeypatch.setenv("RETURNTYPER_TYPE_TABLE", "~/types.yaml")
    assert Settings().type_table == tmp_path / "types.yaml"


def test_log_level_normalized(monkeypatch):
    monkeypatch.setenv("RETURNTYPER_LOG_LEVEL", "debug")
    assert Settings().log_level == "DEBUG"


def test_invalid_values(monkeypatch):
    monkeypatch.setenv("RETURNTYPER_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        Settings()


def test_reload_settings(monkeypatch):
    monkeypatch.setenv("RETURNTYPER_OUTPUT_FORMAT", "json")
    assert reload_settings().output_format == "json"
    assert get_settings().output_format == "json"
