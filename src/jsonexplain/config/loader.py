"""Render option loading from YAML files."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from jsonexplain.config.model import RenderOptions
from jsonexplain.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_options(path: Path) -> RenderOptions:
    """Load render options from a YAML mapping file."""
    path = path.resolve()
    if not path.exists():
        raise ConfigError(f"Options file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML options file at {path}: {exc}") from exc

    if raw is None:
        logger.debug("Options file %s is empty, using defaults", path)
        return RenderOptions()
    if not isinstance(raw, dict):
        raise ConfigError(f"Options file at {path} must be a YAML mapping")

    return RenderOptions.from_mapping(raw)
