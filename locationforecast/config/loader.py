"""YAML config loader."""

from pathlib import Path

import yaml

from locationforecast.config.schema import ClientConfig


def load_config(path: str | Path) -> ClientConfig:
    """Load and validate client config from a YAML file.

    The file may hold the settings at the top level or under a ``client`` key.
    """
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if isinstance(raw, dict) and "client" in raw:
        raw = raw["client"] or {}

    if not isinstance(raw, dict):
        raise ValueError(
            f"Config file {path} must contain a mapping, got {type(raw).__name__}"
        )

    return ClientConfig(**raw)
