"""YAML config loader with environment override and dotted-key lookup."""

import os
from pathlib import Path
from typing import Any

import yaml

from surfcast.config.defaults import TOKEN_ENV_VAR
from surfcast.config.schema import SurfcastConfig


def load_config(path: str | Path) -> SurfcastConfig:
    """Load and validate config from a YAML file.

    A missing file or empty YAML yields the defaults. If the file leaves
    stormglass.api_token empty, STORMGLASS_API_TOKEN fills it in.
    """
    path = Path(path)
    raw: dict[str, Any] = {}
    if path.exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(
            f"Config file {path} must contain a mapping, got {type(raw).__name__}"
        )

    stormglass = dict(raw.get("stormglass") or {})
    if not stormglass.get("api_token"):
        token = os.environ.get(TOKEN_ENV_VAR, "")
        if token:
            stormglass["api_token"] = token
    raw["stormglass"] = stormglass
    if raw.get("logging") is None:
        raw.pop("logging", None)

    return SurfcastConfig(**raw)


def get_config_value(config: SurfcastConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'stormglass.source'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def redacted_json(config: SurfcastConfig) -> str:
    """Config as indented JSON with the API token masked."""
    token = config.stormglass.api_token
    masked = config.model_copy(
        update={
            "stormglass": config.stormglass.model_copy(
                update={"api_token": "***" if token else ""}
            )
        }
    )
    return masked.model_dump_json(indent=2)
