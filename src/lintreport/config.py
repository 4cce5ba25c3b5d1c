"""Reporter configuration — YAML file plus environment overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from lintreport.models import DisplayOptions

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = ".lintreport.yaml"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class ReportConfig:
    """Display configuration for a reporting run."""

    no_progress: bool = False
    context_lines: int = 5
    gutter_width: int = 5

    def display_options(self) -> DisplayOptions:
        return DisplayOptions(
            no_progress=self.no_progress,
            context_lines=self.context_lines,
            gutter_width=self.gutter_width,
        )


def load_config(path: str | Path | None = None) -> ReportConfig:
    """Load config from ``path`` (or ``./.lintreport.yaml``), then the environment."""
    config = ReportConfig()

    if path is None and Path(DEFAULT_CONFIG_NAME).is_file():
        path = DEFAULT_CONFIG_NAME

    if path is not None:
        text = Path(path).read_text(encoding="utf-8")
        data = yaml.safe_load(text) or {}
        if not isinstance(data, dict):
            raise ValueError("Config YAML must be a mapping")
        _apply(config, data)
        logger.debug("Loaded config from %s", path)

    env_progress = os.environ.get("LINTREPORT_NO_PROGRESS")
    if env_progress:
        config.no_progress = env_progress.strip().lower() in _TRUTHY

    env_context = os.environ.get("LINTREPORT_CONTEXT_LINES")
    if env_context:
        config.context_lines = _as_int("LINTREPORT_CONTEXT_LINES", env_context)

    _validate(config)
    return config


def _apply(config: ReportConfig, data: dict) -> None:
    if "no_progress" in data:
        config.no_progress = _as_bool("no_progress", data["no_progress"])
    if "context_lines" in data:
        config.context_lines = _as_int("context_lines", data["context_lines"])
    if "gutter_width" in data:
        config.gutter_width = _as_int("gutter_width", data["gutter_width"])


def _validate(config: ReportConfig) -> None:
    if config.context_lines < 0:
        raise ValueError("context_lines must not be negative")
    if config.gutter_width < 1:
        raise ValueError("gutter_width must be at least 1")


def _as_bool(name: str, value: object) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    if isinstance(value, int):
        return value != 0
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def _as_int(name: str, value: object) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as e:
            raise ValueError(f"{name} must be an integer, got {value!r}") from e
    raise ValueError(f"{name} must be an integer, got {value!r}")
