from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator

CONFIG_ENV_VAR = "FLUENTCHECK_CONFIG"


class CheckSettings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    max_rendering_length: int | None = None
    trace_checks: bool = True
    logger_name: str = "fluentcheck"

    @field_validator("max_rendering_length")
    @classmethod
    def rendering_length_must_be_positive(cls, v: int | None) -> int | None:
        if v is not None and v <= 0:
            raise ValueError("max_rendering_length must be a positive integer")
        return v

    @field_validator("logger_name")
    @classmethod
    def logger_name_must_not_be_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("logger_name must not be empty")
        return v


def _expand(value: Any) -> Any:
    if isinstance(value, str):
        return expandvars(value)
    if isinstance(value, dict):
        return {k: _expand(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand(v) for v in value]
    return value


def load_settings(path: Path) -> CheckSettings:
    """Load and validate check settings from a YAML file.

    String values may reference environment variables (``${VAR}`` or
    ``${VAR:-default}``); they are expanded before validation.
    """
    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        return CheckSettings()
    if not isinstance(raw, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")

    return CheckSettings(**_expand(raw))


_active: CheckSettings | None = None


def get_settings() -> CheckSettings:
    """Return the active settings, loading them on first use."""
    global _active
    if _active is None:
        config_path = os.environ.get(CONFIG_ENV_VAR)
        _active = load_settings(Path(config_path)) if config_path else CheckSettings()
    return _active


def configure(settings: CheckSettings | None = None, **overrides: Any) -> CheckSettings:
    """Replace the active settings.

    Overrides are applied on top of ``settings`` (or of the currently active
    settings when none are given) and validated as a whole.
    """
    global _active
    base = settings if settings is not None else get_settings()
    _active = CheckSettings(**{**base.model_dump(), **overrides})
    return _active


def reset_settings() -> None:
    global _active
    _active = None
