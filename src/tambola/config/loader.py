"""Load game config from YAML or JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .schema import GameConfig


class ConfigLoadError(ValueError):
    """Raised when config cannot be loaded or parsed."""


def load_config(path: str | Path) -> GameConfig:
    """Load config file from YAML/JSON and validate with Pydantic."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    suffix = config_path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        data = _load_yaml(config_path)
    elif suffix == ".json":
        data = _load_json(config_path)
    else:
        raise ConfigLoadError(
            f"Unsupported config format '{suffix}'. Use .yaml/.yml or .json."
        )

    if not isinstance(data, dict):
        raise ConfigLoadError("Config root must be a JSON/YAML object.")

    return GameConfig.model_validate(data)


def _load_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as file:
        try:
            parsed = yaml.safe_load(file)
        except yaml.YAMLError as exc:
            raise ConfigLoadError(f"Invalid YAML in {path}: {exc}") from exc

    return {} if parsed is None else parsed


def _load_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as file:
        try:
            parsed = json.load(file)
        except json.JSONDecodeError as exc:
            raise ConfigLoadError(f"Invalid JSON in {path}: {exc}") from exc

    return {} if parsed is None else parsed
