from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from undo_kv.config.models import StoreAppConfig


# ConfigError is raised for invalid configuration (fail fast).
class ConfigError(ValueError):
    pass


def load_config(path: Path) -> StoreAppConfig:
    # YAML loader; an empty file yields the default config.
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        raw = {}
    return parse_config(raw)


def parse_config(raw: object) -> StoreAppConfig:
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    try:
        return StoreAppConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
