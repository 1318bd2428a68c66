"""
rbscope: lexical scope analysis for RSpec sources.

Given a node of a tree-sitter-ruby syntax tree, works out which modules,
classes, methods, example groups, examples, hooks and blocks enclose it, and
whether the code runs inside a generated example-group instance.
"""

from __future__ import annotations

from .ruby import RubyDocument
from .scope import (
    DEFAULT_TABLE,
    AncestorStep,
    Context,
    EntryPointTable,
    ScopeClassifier,
    ScopeFrame,
    ScopeKind,
    ancestor_chain,
    build_frames,
    build_stack,
    chain_in_generated_instance_context,
    classify,
    in_generated_instance_context,
    scan,
)

__all__ = [
    "AncestorStep",
    "Context",
    "DEFAULT_TABLE",
    "EntryPointTable",
    "RubyDocument",
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
