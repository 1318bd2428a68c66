"""
Scope node classifier.

Decides, for one ancestor step, whether the ancestor introduces a scope for
the descendant reached through the step's field, and which kind.

tree-sitter-ruby hangs a call's block off the call's ``block`` field as a
separate ``block`` / ``do_block`` node, so block-based constructs are
classified on the block node when descending through its body. The owning
call (the block's parent) carries the method name and receiver. Descending
through the call itself (arguments, receiver, method) never enters a scope.
"""

from __future__ import annotations

from typing import Any, Dict, FrozenSet, Optional

from .ancestry import AncestorStep
from .kinds import ScopeFrame, ScopeKind
from .table import (
    BLOCK_TYPES,
    CALL_TYPES,
    DEFAULT_TABLE,
    CallShape,
    EntryPointTable,
    ReceiverShape,
    call_shape,
    node_text,
)

# Fields of definition nodes that belong to the enclosing scope
_DEFINITION_EXCLUDED: Dict[str, FrozenSet[str]] = {
    "class": frozenset({"name", "superclass"}),
    "singleton_class": frozenset({"value"}),
    "module": frozenset({"name"}),
    "method": frozenset({"name", "parameters"}),
    "singleton_method": frozenset({"object", "name", "parameters"}),
}

_DEFINITION_KINDS: Dict[str, ScopeKind] = {
    "class": ScopeKind.CLASS,
    "singleton_class": ScopeKind.CLASS,
    "module": ScopeKind.MODULE,
    "method": ScopeKind.DEF,
    "singleton_method": ScopeKind.DEF,
}

_BLOCK_EXCLUDED = frozenset({"parameters"})


class ScopeClassifier:
    """
    Table-driven classifier; stateless apart from its entry-point table.
    """

    def __init__(self, table: EntryPointTable = DEFAULT_TABLE):
        self.table = table

    def classify(self, step: AncestorStep, outer: Optional[ScopeFrame] = None) -> Optional[ScopeKind]:
        """
        Classify one ancestor step.

        Args:
            step: Ancestor node and the field leading towards the target
            outer: Most recently pushed frame, needed for configuration hooks

        Returns:
            Scope kind, or None if the step contributes nothing
        """
        node = step.node
        node_type = node.type

        kind = _DEFINITION_KINDS.get(node_type)
        if kind is not None:
            if step.field in _DEFINITION_EXCLUDED[node_type]:
                return None
            return kind

        if node_type in BLOCK_TYPES:
            if step.field in _BLOCK_EXCLUDED:
                return None
            return self._classify_block(node, outer)

        return None

    def _classify_block(self, block: Any, outer: Optional[ScopeFrame]) -> ScopeKind:
        call = block.parent
        if call is None or call.type not in CALL_TYPES:
            # Lambda literals and other block owners
            return ScopeKind.ORDINARY_BLOCK

        shape = call_shape(call, self.table)
        table = self.table

        if shape.method in table.test_groups and shape.receiver in (ReceiverShape.NONE, ReceiverShape.FRAMEWORK):
            return ScopeKind.TEST_GROUP_DECLARATION
        if shape.method in table.test_cases and shape.receiver is ReceiverShape.NONE:
            return ScopeKind.TEST_CASE_BODY
        if shape.method in table.hooks and shape.receiver is ReceiverShape.NONE:
            return ScopeKind.LIFECYCLE_HOOK_BODY
        if shape.method == table.configure_method and shape.receiver is ReceiverShape.FRAMEWORK:
            return ScopeKind.GLOBAL_CONFIGURATION_BLOCK
        if self._is_configuration_hook(shape, outer):
            return ScopeKind.GLOBAL_CONFIGURATION_HOOK_BODY
        return ScopeKind.ORDINARY_BLOCK

    def _is_configuration_hook(self, shape: CallShape, outer: Optional[ScopeFrame]) -> bool:
        if outer is None or outer.kind is not ScopeKind.GLOBAL_CONFIGURATION_BLOCK:
            return False
        if shape.method not in self.table.configuration_hooks:
            return False
        if shape.receiver is not ReceiverShape.IDENTIFIER:
            return False
        param = first_block_parameter(outer.node)
        return param is not None and param == shape.receiver_text


def first_block_parameter(block: Any) -> Optional[str]:
    """Name of the first plain parameter of a block (``|config|``), if any."""
    params = block.child_by_field_name("parameters")
    if params is None:
        return None
    for child in params.named_children:
        if child.type == "identifier":
            return node_text(child)
        # |(a, b)| and friends: the first parameter is not a plain name
        return None
    return None


_DEFAULT = ScopeClassifier()


def classify(step: AncestorStep, outer: Optional[ScopeFrame] = None) -> Optional[ScopeKind]:
    """Classify with the default entry-point table."""
    return _DEFAULT.classify(step, outer)


__all__ = ["ScopeClassifier", "classify", "first_block_parameter"]
