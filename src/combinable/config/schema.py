"""Typed configuration schema and loader for the combinable package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, conint, model_validator

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class RetrySettings(BaseModel):
    """Retry budget shared by the ``filter`` and ``unique`` combinators."""

    max_tries: conint(ge=1)

    model_config = ConfigDict(extra="forbid")


class StringSettings(BaseModel):
    """Default length bounds for string generators."""

    min_length: conint(ge=0)
    max_length: conint(ge=0)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_bounds(self) -> "StringSettings":
        if self.min_length > self.max_length:
            raise ValueError("strings.min_length must not exceed strings.max_length")
        return self


class SeedSettings(BaseModel):
    """Settings for the random source seed."""

    seed_env: str
    value: int | None = None

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    retry: RetrySettings
    strings: StringSettings
    seed: SeedSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable for the seed.
    """

    with (
        importlib_resources.files("combinable.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        if not isinstance(overrides, dict):
            raise ValueError(f"config file {path} must contain a mapping at the top level")
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    seed_env = cfg.seed.seed_env
    if environ.get(seed_env):
        seed = cfg.seed.model_copy(update={"value": int(environ[seed_env])})
        cfg = cfg.model_copy(update={"seed": seed})

    return cfg


__all__ = [
    "ConfigModel",
    "RetrySettings",
    "StringSettings",
    "SeedSettings",
    "deep_merge_dicts",
    "load_config",
]
