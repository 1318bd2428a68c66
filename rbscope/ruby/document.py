"""
Ruby document: tree-sitter-ruby parse plus reference lookup.
"""

from __future__ import annotations

from functools import cached_property
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from tree_sitter import Language

from ..scope import Context, ScopeClassifier
from ..scope.ancestry import field_of_child
from ..tree_sitter_support import Node, TreeSitterDocument

# Parameter lists whose direct identifier children are parameter names
_PARAMETER_LISTS = frozenset({
    "method_parameters",
    "block_parameters",
    "lambda_parameters",
    "bare_parameters",
    "destructured_parameter",
})


class RubyDocument(TreeSitterDocument):

    def __init__(self, text: str, path: Optional[Path] = None):
        self.path = path
        super().__init__(text)

    @classmethod
    def from_file(cls, path: Path) -> RubyDocument:
        return cls(path.read_text(encoding="utf-8", errors="replace"), path)

    def get_language(self) -> Language:
        import tree_sitter_ruby as tsruby
        return Language(tsruby.language())

    def get_query_definitions(self) -> Dict[str, str]:
        from .queries import QUERIES
        return QUERIES

    def find_references(self, name: str) -> List[Node]:
        """
        Bare references to ``name``, in source order.

        A reference is either a receiver-less call of that name (the call node
        is returned) or a plain identifier that is neither a definition name
        nor a parameter. Parameter default values are references.
        """
        refs: List[Node] = []
        for node, _capture in self.query("identifiers"):
            if self.get_node_text(node) != name:
                continue
            parent = node.parent
            if parent is None:
                refs.append(node)
                continue

            field = field_of_child(parent, node)
            if parent.type == "call" and field == "method":
                if parent.child_by_field_name("receiver") is None:
                    refs.append(parent)
                continue
            if field in ("name", "locals"):
                continue
            if parent.type in _PARAMETER_LISTS and field is None:
                continue
            refs.append(node)
        return refs

    # ---- heredocs ----

    @cached_property
    def _heredoc_openers(self) -> Dict[Tuple[int, int], Node]:
        # Bodies follow their openers in the same order, one body per opener
        openers = [node for node, name in self.query("heredocs") if name == "opener"]
        bodies = [node for node, name in self.query("heredocs") if name == "body"]
        return {(b.start_byte, b.end_byte): o for o, b in zip(openers, bodies)}

    def heredoc_anchor(self, node: Node) -> Optional[Node]:
        """
        The ``<<~TAG`` token that opened a heredoc body.

        tree-sitter attaches a heredoc body wherever the parser is when the
        opening line ends, which can be outside the block that holds the
        opener. Returns None for any other node.
        """
        if node.type != "heredoc_body":
            return None
        return self._heredoc_openers.get((node.start_byte, node.end_byte))

    def context(self, node: Node, classifier: Optional[ScopeClassifier] = None) -> Context:
        """Scope context of ``node``, with heredoc bodies placed at their opener."""
        return Context.of(node, classifier, relocate=self.heredoc_anchor)


__all__ = ["RubyDocument"]
