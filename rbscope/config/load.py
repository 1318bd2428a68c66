"""
Configuration loader for `.rbscope.yaml`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..errors import ConfigLoadError
from .model import DslCfg

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".rbscope.yaml"

_yaml = YAML(typ="safe")


def config_path(root: Path) -> Path:
    return root / CONFIG_FILENAME


def _read_yaml_map(path: Path) -> dict:
    """Read a YAML file and return its top-level mapping."""
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise ConfigLoadError(f"{path}: invalid YAML: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigLoadError(f"{path}: YAML must be a mapping")
    return raw


def load_config(root: Path, explicit: Optional[Path] = None) -> DslCfg:
    """
    Load DSL configuration.

    Args:
        root: Project root searched for `.rbscope.yaml`
        explicit: Config file given on the command line; must exist

    Returns:
        Parsed configuration, or defaults when no file is present
    """
    if explicit is not None:
        if not explicit.is_file():
            raise ConfigLoadError(f"Config file not found: {explicit}")
        path = explicit
    else:
        path = config_path(root)
        if not path.is_file():
            logger.debug("No %s in %s, using built-in entry points", CONFIG_FILENAME, root)
            return DslCfg()

    logger.debug("Loading configuration from %s", path)
    raw = _read_yaml_map(path)
    try:
        return DslCfg.from_dict(raw)
    except ConfigLoadError as e:
        raise ConfigLoadError(f"{path}: {e}") from e


__all__ = ["CONFIG_FILENAME", "config_path", "load_config"]
