"""Configuration loading for repolens (.repolens.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .constants import DEFAULT_SECTIONS, OUTPUT_FORMATS
from .rules import select_tables

CONFIG_FILENAME = ".repolens.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class OutputConfig:
    """How analysis reports are rendered."""

    format: str = "text"
    sections: List[str] = field(default_factory=lambda: list(DEFAULT_SECTIONS))


@dataclass
class ServiceConfig:
    """HTTP service bind settings."""

    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class RepoLensConfig:
    """Represents the settings defined in .repolens.yml."""

    language: Optional[str] = None
    output: OutputConfig = field(default_factory=OutputConfig)
    require_github: bool = True
    service: ServiceConfig = field(default_factory=ServiceConfig)


def load_config(config_path: Path) -> RepoLensConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)

    if not config_file.exists():
        return RepoLensConfig()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    output = OutputConfig()
    output_data = _as_dict(data.get("output"))
    fmt = _as_str(output_data.get("format"))
    if fmt is not None:
        fmt = fmt.lower()
        if fmt not in OUTPUT_FORMATS:
            allowed = ", ".join(OUTPUT_FORMATS)
            raise ConfigError(f"Unsupported output format '{fmt}' (expected one of: {allowed})")
        output.format = fmt

    sections = _as_str_list(data.get("sections"))
    if sections:
        try:
            output.sections = [table.name for table in select_tables(sections)]
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc

    validation_data = _as_dict(data.get("validation"))
    require_github = _as_bool(validation_data.get("require_github"))

    service = ServiceConfig()
    service_data = _as_dict(data.get("service"))
    if service_data:
        service.host = _as_str(service_data.get("host")) or service.host
        port = _as_int(service_data.get("port"))
        if port is not None:
            service.port = port

    return RepoLensConfig(
        language=_as_str(data.get("language")),
        output=output,
        require_github=True if require_github is None else require_github,
        service=service,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "OutputConfig",
    "RepoLensConfig",
    "ServiceConfig",
    "load_config",
]
