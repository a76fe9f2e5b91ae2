"""Tests for settings loading and validation."""

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from fluentcheck.config import (
    CONFIG_ENV_VAR,
    CheckSettings,
    configure,
    get_settings,
    load_settings,
)


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""

    def _write(content: str) -> Path:
        p = tmp_path / "fluentcheck.yaml"
        p.write_text(textwrap.dedent(content))
        return p

    return _write


def test_defaults():
    settings = CheckSettings()
    assert settings.max_rendering_length is None
    assert settings.trace_checks is True
    assert settings.logger_name == "fluentcheck"


def test_load_settings(tmp_yaml):
    path = tmp_yaml("""\
        max_rendering_length: 80
        trace_checks: false
    """)
    settings = load_settings(path)
    assert settings.max_rendering_length == 80
    assert settings.trace_checks is False
    assert settings.logger_name == "fluentcheck"


def test_load_empty_settings_file(tmp_yaml):
    assert load_settings(tmp_yaml("")) == CheckSettings()


def test_load_settings_expands_env_vars(tmp_yaml, monkeypatch):
    monkeypatch.setenv("CHECK_LOGGER", "tests.checks")
    path = tmp_yaml("""\
        logger_name: ${CHECK_LOGGER}
        max_rendering_length: ${CHECK_LIMIT:-120}
    """)
    settings = load_settings(path)
    assert settings.logger_name == "tests.checks"
    assert settings.max_rendering_length == 120


def test_unknown_key_rejected(tmp_yaml):
    with pytest.raises(ValidationError):
        load_settings(tmp_yaml("colour: true\n"))


def test_non_mapping_rejected(tmp_yaml):
    with pytest.raises(ValueError, match="must contain a mapping"):
        load_settings(tmp_yaml("- a\n- b\n"))


def test_rendering_length_must_be_positive():
    with pytest.raises(ValidationError, match="positive"):
        CheckSettings(max_rendering_length=0)


def test_logger_name_must_not_be_empty():
    with pytest.raises(ValidationError):
        CheckSettings(logger_name="  ")


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "absent.yaml")


def test_get_settings_reads_env_file(tmp_yaml, monkeypatch):
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_yaml("max_rendering_length: 7\n")))
    assert get_settings().max_rendering_length == 7
    # cached until reset
    monkeypatch.delenv(CONFIG_ENV_VAR)
    assert get_settings().max_rendering_length == 7


def test_get_settings_defaults_without_env(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    assert get_settings() == CheckSettings()


def test_configure_overrides(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    configure(trace_checks=False)
    configure(max_rendering_length=10)

    settings = get_settings()
    assert settings.trace_checks is False
    assert settings.max_rendering_length == 10


def test_configure_with_settings_object():
    configure(CheckSettings(logger_name="custom"), trace_checks=False)
    assert get_settings() == CheckSettings(logger_name="custom", trace_checks=False)


def test_configure_validates():
    with pytest.raises(ValidationError):
        configure(max_rendering_length=-1)
