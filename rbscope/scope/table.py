"""
Static table of recognised RSpec entry points.

Entry points are recognised by literal method name and receiver shape only:
no type inference is attempted. A call of a known name on an unrelated
receiver falls through to an ordinary block.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, FrozenSet, Iterable, Optional

CALL_TYPES = frozenset({"call"})
BLOCK_TYPES = frozenset({"block", "do_block"})


class ReceiverShape(str, Enum):
    """Shape of the receiver of a block-carrying call."""
    NONE = "none"
    FRAMEWORK = "framework"
    IDENTIFIER = "identifier"
    OTHER = "other"


@dataclass(frozen=True)
class CallShape:
    """Method name and receiver of a call, as far as the table cares."""
    method: Optional[str]
    receiver: ReceiverShape
    receiver_text: Optional[str] = None


@dataclass(frozen=True)
class EntryPointTable:
    """
    Recognised method names per scope-introducing construct.

    The table is immutable; ``extended`` returns a new table with extra names.
    """
    test_groups: FrozenSet[str] = frozenset()
    test_cases: FrozenSet[str] = frozenset()
    hooks: FrozenSet[str] = frozenset()
    configuration_hooks: FrozenSet[str] = frozenset()
    framework_constants: FrozenSet[str] = frozenset({"RSpec"})
    configure_method: str = "configure"

    def extended(
        self,
        *,
        test_groups: Iterable[str] = (),
        test_cases: Iterable[str] = (),
        hooks: Iterable[str] = (),
        configuration_hooks: Iterable[str] = (),
        framework_constants: Iterable[str] = (),
    ) -> EntryPointTable:
        return replace(
            self,
            test_groups=self.test_groups | frozenset(test_groups),
            test_cases=self.test_cases | frozenset(test_cases),
            hooks=self.hooks | frozenset(hooks),
            configuration_hooks=self.configuration_hooks | frozenset(configuration_hooks),
            framework_constants=self.framework_constants | frozenset(
                c.lstrip(":") for c in framework_constants
            ),
        )

    def is_framework_constant(self, text: str) -> bool:
        # `::RSpec` refers to the same top-level constant
        return text.lstrip(":") in self.framework_constants

    def to_dict(self) -> dict:
        """Sorted, JSON-friendly view used by `rbscope list entry-points`."""
        return {
            "test_groups": sorted(self.test_groups),
            "test_cases": sorted(self.test_cases),
            "hooks": sorted(self.hooks),
            "configuration_hooks": sorted(self.configuration_hooks),
            "framework_constants": sorted(self.framework_constants),
            "configure_method": self.configure_method,
        }


_HOOK_NAMES = frozenset({
    "before", "after", "around",
    "prepend_before", "append_before", "prepend_after", "append_after",
})

DEFAULT_TABLE = EntryPointTable(
    test_groups=frozenset({
        "describe", "context", "feature", "example_group",
        "shared_examples", "shared_examples_for", "shared_context", "share_examples_for",
        "xdescribe", "xcontext", "xfeature",
        "fdescribe", "fcontext", "ffeature",
    }),
    test_cases=frozenset({
        "it", "example", "specify", "scenario", "its",
        "focus", "focused", "fit", "fexample", "fspecify", "fscenario",
        "xit", "xexample", "xspecify", "xscenario",
        "pending", "skip",
    }),
    hooks=_HOOK_NAMES | frozenset({
        "subject", "subject!", "let", "let!",
        "given", "given!", "background",
    }),
    configuration_hooks=_HOOK_NAMES,
)


def node_text(node: Any) -> str:
    """Source text of a node; tree-sitter hands out bytes."""
    text = node.text
    if isinstance(text, bytes):
        return text.decode("utf-8", errors="replace")
    return text or ""


def call_shape(call: Any, table: EntryPointTable) -> CallShape:
    """
    Extract method name and receiver shape of a tree-sitter-ruby ``call`` node.
    """
    method_node = call.child_by_field_name("method")
    method = node_text(method_node) if method_node is not None else None

    receiver = call.child_by_field_name("receiver")
    if receiver is None:
        return CallShape(method, ReceiverShape.NONE)

    text = node_text(receiver)
    if receiver.type in ("constant", "scope_resolution") and table.is_framework_constant(text):
        shape = ReceiverShape.FRAMEWORK
    elif receiver.type == "identifier":
        shape = ReceiverShape.IDENTIFIER
    else:
        shape = ReceiverShape.OTHER
    return CallShape(method, shape, text)


__all__ = [
    "BLOCK_TYPES",
    "CALL_TYPES",
    "CallShape",
    "DEFAULT_TABLE",
    "EntryPointTable",
    "ReceiverShape",
    "call_shape",
    "node_text",
]
