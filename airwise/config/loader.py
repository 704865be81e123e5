"""YAML config loader with environment overlay and dotted-key lookup."""

import os
import random
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from airwise.config.defaults import CREDENTIAL_ENV_VARS, DEMO_MODE_ENV_VAR
from airwise.config.schema import AppConfig

_TRUTHY = {"1", "true", "yes", "on"}


def load_config(
    path: str | Path | None = None, environ: Mapping[str, str] | None = None
) -> AppConfig:
    """Load and validate config from an optional YAML file.

    A missing or empty file yields defaults. Credentials and demo mode are
    then overlaid from the environment, which wins over the file.
    """
    raw: dict[str, Any] = {}
    if path is not None and Path(path).exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

    env = os.environ if environ is None else environ
    credentials = dict(raw.get("credentials") or {})
    for field_name, var in CREDENTIAL_ENV_VARS.items():
        value = env.get(var)
        if value:
            credentials[field_name] = value
    if credentials:
        raw["credentials"] = credentials

    demo = env.get(DEMO_MODE_ENV_VAR)
    if demo is not None:
        raw["demo_mode"] = demo.strip().lower() in _TRUTHY

    return AppConfig(**raw)


def make_rng(config: AppConfig) -> random.Random:
    """Build the random source for mock data and simulation."""
    return random.Random(config.ops.random_seed)


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'forecast.days'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def redacted_dump(config: AppConfig) -> str:
    """JSON dump with credential values masked."""
    data = config.model_dump(mode="json")
    for key, value in data["credentials"].items():
        if key != "reddit_user_agent" and value:
            data["credentials"][key] = "***"
    return AppConfig.model_validate(data).model_dump_json(indent=2)
