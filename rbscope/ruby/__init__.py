"""
Ruby support: tree-sitter-ruby documents and queries.
"""

from __future__ import annotations

from .document import RubyDocument
from .queries import QUERIES

__all__ = ["QUERIES", "RubyDocument"]
