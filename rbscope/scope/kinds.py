"""
Scope kinds produced by the scope stack builder.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ScopeKind(str, Enum):
    """
    Kind of lexical construct enclosing a node.

    Values mirror the RSpec vocabulary so reports stay readable.
    """
    CLASS = "class"
    MODULE = "module"
    DEF = "def"
    TEST_GROUP_DECLARATION = "example_group"
    TEST_CASE_BODY = "example"
    LIFECYCLE_HOOK_BODY = "hook"
    GLOBAL_CONFIGURATION_BLOCK = "rspec_configure"
    GLOBAL_CONFIGURATION_HOOK_BODY = "configure_hook"
    ORDINARY_BLOCK = "block"


@dataclass(frozen=True)
class ScopeFrame:
    """A pushed scope together with the node that introduced it."""
    kind: ScopeKind
    node: Any


__all__ = ["ScopeFrame", "ScopeKind"]
