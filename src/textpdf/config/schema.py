"""Typed configuration schema and loader for the textpdf package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, confloat, conint, model_validator

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class PathSettings(BaseModel):
    """Default input file and output location."""

    input: str
    output_dir: str
    output_name: str

    model_config = ConfigDict(extra="forbid")


class PageSettings(BaseModel):
    """Physical page geometry in millimetres."""

    width_mm: confloat(gt=0.0)
    height_mm: confloat(gt=0.0)

    model_config = ConfigDict(extra="forbid")


class LayoutSettings(BaseModel):
    """Margins and vertical spacing in millimetres."""

    margin_mm: confloat(ge=0.0)
    bottom_margin_mm: confloat(ge=0.0)
    line_height_mm: confloat(gt=0.0)
    blank_line_gap_mm: confloat(ge=0.0)

    model_config = ConfigDict(extra="forbid")


class FontSettings(BaseModel):
    """Embedded font lookup and the built-in fallback."""

    logical_name: str
    size: confloat(gt=0.0)
    fallback: str
    path: str | None = None
    path_env: str | None = None
    search_dirs: list[str] | None = None
    candidates: list[str]

    model_config = ConfigDict(extra="forbid")


class MetadataSettings(BaseModel):
    """Document information dictionary entries."""

    title: str | None = None
    author: str | None = None

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    paths: PathSettings
    page: PageSettings
    layout: LayoutSettings
    font: FontSettings
    metadata: MetadataSettings

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_margins_fit(self) -> "ConfigModel":
        usable_h = (
            self.page.height_mm
            - self.layout.margin_mm
            - self.layout.bottom_margin_mm
            - self.layout.line_height_mm
        )
        if usable_h < 0:
            raise ValueError("vertical margins and line height exceed the page height")
        if 2 * self.layout.margin_mm >= self.page.width_mm:
            raise ValueError("horizontal margins exceed the page width")
        return self


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
    environment variable named by ``font.path_env`` for an explicit font file.
    """

    with (
        importlib_resources.files("textpdf.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    path_env = cfg.font.path_env
    if path_env and environ.get(path_env):
        cfg.font.path = environ[path_env]

    return cfg


__all__ = [
    "ConfigModel",
    "PathSettings",
    "PageSettings",
    "LayoutSettings",
    "FontSettings",
    "MetadataSettings",
    "deep_merge_dicts",
    "load_config",
]
