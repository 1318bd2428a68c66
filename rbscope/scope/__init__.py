"""
Lexical scope analysis for RSpec sources.
"""

from __future__ import annotations

from .ancestry import AncestorStep, ancestor_chain, scan
from .builder import (
    Context,
    build_frames,
    build_stack,
    chain_in_generated_instance_context,
    in_generated_instance_context,
)
from .classifier import ScopeClassifier, classify
from .kinds import ScopeFrame, ScopeKind
from .table import DEFAULT_TABLE, EntryPointTable

__all__ = [
    "AncestorStep",
    "Context",
    "DEFAULT_TABLE",
    "EntryPointTable",
    "ScopeClassifier",
    "ScopeFrame",
    "ScopeKind",
    "ancestor_chain",
    "build_frames",
    "build_stack",
    "chain_in_generated_instance_context",
    "classify",
    "in_generated_instance_context",
    "scan",
]
