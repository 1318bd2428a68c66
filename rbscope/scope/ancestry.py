"""
Ancestor-chain materialisation over tree-sitter nodes.

A chain is a list of ``AncestorStep`` ordered from the tree root down to the
target's immediate parent. Each step records which field of the ancestor
leads towards the target, so the classifier can tell a block body from its
parameter list without walking the tree itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class AncestorStep:
    """An ancestor node and the field through which the traversal descends."""
    node: Any
    field: Optional[str] = None


def field_of_child(parent: Any, child: Any) -> Optional[str]:
    """Field name under which ``child`` hangs off ``parent`` (None if unnamed)."""
    for index, candidate in enumerate(parent.children):
        if candidate == child:
            return parent.field_name_for_child(index)
    return None


def ancestor_chain(node: Any, relocate: Optional[Callable[[Any], Any]] = None) -> List[AncestorStep]:
    """
    Build the chain of ancestors of ``node``, outermost first.

    The root node has an empty chain.

    Args:
        node: Target node
        relocate: Maps an ancestor to the node whose parents should be walked
            instead (None keeps the tree parent). Heredoc bodies use this to
            continue from the line that opened them.
    """
    steps: List[AncestorStep] = []
    child = node
    parent = child.parent
    while parent is not None:
        steps.append(AncestorStep(parent, field_of_child(parent, child)))
        child = parent
        anchor = relocate(child) if relocate is not None else None
        if anchor is not None:
            child = anchor
        parent = child.parent
    steps.reverse()
    return steps


def scan(root: Any, *, named_only: bool = True) -> Iterator[Tuple[Any, List[AncestorStep]]]:
    """
    Depth-first pre-order walk yielding ``(node, chain)`` for every node.

    Anonymous tokens (``do``, ``end``, punctuation) are skipped unless
    ``named_only`` is False; they still count for field lookup.
    """
    pending: List[Tuple[Any, List[AncestorStep]]] = [(root, [])]
    while pending:
        node, chain = pending.pop()
        yield node, chain

        children = node.children
        # Reversed push keeps source order on pop
        for index in range(len(children) - 1, -1, -1):
            child = children[index]
            if named_only and not child.is_named:
                continue
            step = AncestorStep(node, node.field_name_for_child(index))
            pending.append((child, chain + [step]))


__all__ = ["AncestorStep", "ancestor_chain", "field_of_child", "scan"]
