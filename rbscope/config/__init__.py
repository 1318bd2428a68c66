from __future__ import annotations

from .load import CONFIG_FILENAME, load_config
from .model import DslCfg

__all__ = ["CONFIG_FILENAME", "DslCfg", "load_config"]
