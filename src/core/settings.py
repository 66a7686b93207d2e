"""Configuration loading and validation for the delimiter splitter."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


class SettingsError(ValueError):
    """Raised when settings validation fails."""


def _require_mapping(data: Dict[str, Any], key: str, path: str) -> Dict[str, Any]:
    value = data.get(key)
    if value is None:
        raise SettingsError(f"Missing required field: {path}.{key}")
    if not isinstance(value, dict):
        raise SettingsError(f"Expected mapping for field: {path}.{key}")
    return value


def _require_value(data: Dict[str, Any], key: str, path: str) -> Any:
    if key not in data or data.get(key) is None:
        raise SettingsError(f"Missing required field: {path}.{key}")
    return data[key]


def _require_str(data: Dict[str, Any], key: str, path: str) -> str:
    value = _require_value(data, key, path)
    if not isinstance(value, str) or not value.strip():
        raise SettingsError(f"Expected non-empty string for field: {path}.{key}")
    return value


def _require_char(data: Dict[str, Any], key: str, path: str) -> str:
    # Whitespace is a valid delimiter, so _require_str does not apply.
    value = _require_value(data, key, path)
    if not isinstance(value, str) or len(value) != 1:
        raise SettingsError(f"Expected single character for field: {path}.{key}")
    return value


def _optional_int(data: Dict[str, Any], key: str, path: str) -> Optional[int]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise SettingsError(f"Expected integer for field: {path}.{key}")
    return value


@dataclass(frozen=True)
class SplitterSettings:
    provider: str
    delimiter: str
    max_segments: Optional[int] = None


@dataclass(frozen=True)
class ObservabilitySettings:
    log_level: str


@dataclass(frozen=True)
class Settings:
    splitter: SplitterSettings
    observability: ObservabilitySettings

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        if not isinstance(data, dict):
            raise SettingsError("Settings root must be a mapping")

        splitter = _require_mapping(data, "splitter", "settings")
        observability = _require_mapping(data, "observability", "settings")

        settings = cls(
            splitter=SplitterSettings(
                provider=_require_str(splitter, "provider", "splitter"),
                delimiter=_require_char(splitter, "delimiter", "splitter"),
                max_segments=_optional_int(splitter, "max_segments", "splitter"),
            ),
            observability=ObservabilitySettings(
                log_level=_require_str(observability, "log_level", "observability"),
            ),
        )

        return settings


def validate_settings(settings: Settings) -> None:
    """Validate settings and raise SettingsError if invalid."""

    if not settings.splitter.provider:
        raise SettingsError("Missing required field: splitter.provider")
    if len(settings.splitter.delimiter) != 1:
        raise SettingsError("Expected single character for field: splitter.delimiter")
    if settings.splitter.max_segments is not None and settings.splitter.max_segments < 0:
        raise SettingsError("Expected non-negative integer for field: splitter.max_segments")
    if not settings.observability.log_level:
        raise SettingsError("Missing required field: observability.log_level")
    if not isinstance(logging.getLevelName(settings.observability.log_level.upper()), int):
        raise SettingsError(
            f"Unknown log level for field: observability.log_level "
            f"({settings.observability.log_level})"
        )


def load_settings(path: str | Path) -> Settings:
    """Load settings from a YAML file and validate required fields."""

    settings_path = Path(path)
    if not settings_path.exists():
        raise SettingsError(f"Settings file not found: {settings_path}")

    with settings_path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle)

    settings = Settings.from_dict(data or {})
    validate_settings(settings)
    return settings
