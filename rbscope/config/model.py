"""
Configuration model: extra RSpec DSL names recognised by the classifier.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..errors import ConfigLoadError
from ..scope.table import DEFAULT_TABLE, EntryPointTable

_LIST_KEYS = ("framework_constants", "test_groups", "test_cases", "hooks", "configuration_hooks")


def _str_list(d: Dict[str, Any], key: str) -> List[str]:
    raw = d.get(key)
    if raw is None:
        return []
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, list) or not all(isinstance(x, str) and x for x in raw):
        raise ConfigLoadError(f"{key}: expected a list of non-empty strings, got {raw!r}")
    return [x.strip() for x in raw]


@dataclass
class DslCfg:
    """
    Names added on top of the built-in entry-point table.

    Useful for project DSL aliases, e.g. ``alias_example_group_to :feature_group``.
    """
    framework_constants: List[str] = field(default_factory=list)
    test_groups: List[str] = field(default_factory=list)
    test_cases: List[str] = field(default_factory=list)
    hooks: List[str] = field(default_factory=list)
    configuration_hooks: List[str] = field(default_factory=list)

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> DslCfg:
        """Load configuration from YAML dictionary."""
        if not d:
            return DslCfg()
        if not isinstance(d, dict):
            raise ConfigLoadError(f"configuration must be a mapping, got {type(d).__name__}")

        unknown = sorted(set(d) - set(_LIST_KEYS))
        if unknown:
            raise ConfigLoadError(f"unknown configuration keys: {', '.join(unknown)}")

        return DslCfg(**{key: _str_list(d, key) for key in _LIST_KEYS})

    def to_table(self, base: EntryPointTable = DEFAULT_TABLE) -> EntryPointTable:
        return base.extended(
            test_groups=self.test_groups,
            test_cases=self.test_cases,
            hooks=self.hooks,
            configuration_hooks=self.configuration_hooks,
            framework_constants=self.framework_constants,
        )


__all__ = ["DslCfg"]
