"""
Tree-sitter document base.

Owns the source bytes, the parsed tree and a per-document cache of compiled
queries. Language documents supply the grammar and their named queries.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Iterator, List, Optional, Tuple

from tree_sitter import Language, Node, Parser, Query, QueryCursor, Tree

# (1-based line, 0-based column in characters)
SourcePosition = Tuple[int, int]


class TreeSitterDocument(ABC):
    """
    Parsed source with named-query support.
    """

    def __init__(self, text: str):
        self.text = text
        self._source = text.encode("utf-8")
        self._query_cache: Dict[str, Query] = {}
        self.tree: Tree = Parser(self.get_language()).parse(self._source)

    @abstractmethod
    def get_language(self) -> Language:
        """Grammar used for parsing and query compilation."""

    @abstractmethod
    def get_query_definitions(self) -> Dict[str, str]:
        """
        Named queries of this language.

        Returns:
            Dict mapping query names to S-expression query strings
        """

    @property
    def root_node(self) -> Node:
        return self.tree.root_node

    # ---- queries ----

    def _compile(self, query_string: str) -> Query:
        if query_string not in self._query_cache:
            self._query_cache[query_string] = Query(self.get_language(), query_string)
        return self._query_cache[query_string]

    def _captures(self, query_string: str) -> Iterator[Tuple[Node, str]]:
        cursor = QueryCursor(self._compile(query_string))
        for _pattern, captured in cursor.matches(self.root_node):
            for name, nodes in captured.items():
                for node in nodes:
                    yield node, name

    def query(self, query_name: str) -> List[Tuple[Node, str]]:
        """
        Run a named query.

        Returns:
            (node, capture_name) pairs in source order

        Raises:
            ValueError: If the language defines no such query
        """
        definitions = self.get_query_definitions()
        try:
            query_string = definitions[query_name]
        except KeyError:
            raise ValueError(f"Unknown query: {query_name}") from None
        return sorted(self._captures(query_string), key=lambda pair: pair[0].start_byte)

    def query_nodes(self, query_string: str, capture_name: str) -> List[Node]:
        """Nodes captured as ``capture_name`` by an ad-hoc query, in source order."""
        nodes = [node for node, name in self._captures(query_string) if name == capture_name]
        return sorted(nodes, key=lambda n: n.start_byte)

    # ---- traversal ----

    def walk_tree(self, start_node: Optional[Node] = None) -> Iterator[Node]:
        """Pre-order walk over every node, named or not."""
        cursor = (start_node or self.root_node).walk()
        depth = 0
        while True:
            yield cursor.node
            if cursor.goto_first_child():
                depth += 1
                continue
            while depth == 0 or not cursor.goto_next_sibling():
                if depth == 0 or not cursor.goto_parent():
                    return
                depth -= 1

    def find_nodes_by_type(self, node_type: str, start_node: Optional[Node] = None) -> List[Node]:
        return [n for n in self.walk_tree(start_node) if n.type == node_type]

    # ---- text and positions ----

    def get_node_text(self, node: Node) -> str:
        return self._source[node.start_byte:node.end_byte].decode("utf-8")

    def position(self, node: Node) -> SourcePosition:
        row, byte_column = node.start_point
        line_start = node.start_byte - byte_column
        # tree-sitter columns are byte offsets
        prefix = self._source[line_start:node.start_byte].decode("utf-8", errors="replace")
        return row + 1, len(prefix)

    # ---- syntax errors ----

    def has_error(self) -> bool:
        return self.root_node.has_error

    def get_errors(self) -> List[Node]:
        """ERROR and MISSING nodes, in source order."""
        return [n for n in self.walk_tree() if n.is_error or n.is_missing]


__all__ = ["Node", "SourcePosition", "TreeSitterDocument"]
