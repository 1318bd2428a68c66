"""
Scope stack builder.

Walks an ancestor chain outermost to innermost, asks the classifier about
each step and collects the resulting scope kinds. Each ancestor contributes
at most one element; adjacent equal kinds are kept as they are.
"""

from __future__ import annotations

from functools import cached_property
from typing import Any, Callable, Iterable, List, Optional, Sequence

from .ancestry import AncestorStep, ancestor_chain
from .classifier import ScopeClassifier
from .kinds import ScopeFrame, ScopeKind

_DEFAULT_CLASSIFIER = ScopeClassifier()

# Scopes that decide what `self` is; everything else is transparent
_SELF_BOUNDARIES = frozenset({
    ScopeKind.CLASS,
    ScopeKind.MODULE,
    ScopeKind.TEST_GROUP_DECLARATION,
    ScopeKind.GLOBAL_CONFIGURATION_BLOCK,
})


def build_frames(
    chain: Iterable[AncestorStep],
    classifier: Optional[ScopeClassifier] = None,
) -> List[ScopeFrame]:
    """Classify every step of ``chain`` and keep the introduced frames."""
    classifier = classifier or _DEFAULT_CLASSIFIER
    frames: List[ScopeFrame] = []
    for step in chain:
        outer = frames[-1] if frames else None
        kind = classifier.classify(step, outer)
        if kind is not None:
            frames.append(ScopeFrame(kind, step.node))
    return frames


def build_stack(
    chain: Iterable[AncestorStep],
    classifier: Optional[ScopeClassifier] = None,
) -> List[ScopeKind]:
    """
    Scope stack for the target at the end of ``chain``, outermost first.

    An empty chain (top-level node) yields an empty stack.
    """
    return [frame.kind for frame in build_frames(chain, classifier)]


def in_generated_instance_context(stack: Sequence[ScopeKind]) -> bool:
    """
    True if code at this stack runs inside a generated example-group instance.

    Methods, example bodies, hooks and ordinary blocks are transparent: a method
    defined in a group body runs on the group instance that calls it, while one
    defined in a class runs on that class's instances.
    """
    for kind in reversed(stack):
        if kind in _SELF_BOUNDARIES:
            return kind is ScopeKind.TEST_GROUP_DECLARATION
    return False


def chain_in_generated_instance_context(
    chain: Iterable[AncestorStep],
    classifier: Optional[ScopeClassifier] = None,
) -> bool:
    return in_generated_instance_context(build_stack(chain, classifier))


class Context:
    """
    Scope information for a single node.

    Usage:
        context = Context.of(node)
        if context.in_generated_instance:
            ...
    """

    def __init__(self, chain: Iterable[AncestorStep], classifier: Optional[ScopeClassifier] = None):
        self.chain: List[AncestorStep] = list(chain)
        self._classifier = classifier

    @classmethod
    def of(
        cls,
        node: Any,
        classifier: Optional[ScopeClassifier] = None,
        relocate: Optional[Callable[[Any], Any]] = None,
    ) -> Context:
        """Build a context from a tree-sitter node by walking its parents."""
        return cls(ancestor_chain(node, relocate), classifier)

    @cached_property
    def frames(self) -> List[ScopeFrame]:
        return build_frames(self.chain, self._classifier)

    @property
    def scopes(self) -> List[ScopeKind]:
        return [frame.kind for frame in self.frames]

    @property
    def in_generated_instance(self) -> bool:
        return in_generated_instance_context(self.scopes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Context):
            return NotImplemented
        return self.scopes == other.scopes

    def __hash__(self) -> int:
        return hash(tuple(self.scopes))

    def __repr__(self) -> str:
        names = ", ".join(kind.value for kind in self.scopes)
        return f"Context([{names}])"


__all__ = [
    "Context",
    "build_frames",
    "build_stack",
    "chain_in_generated_instance_context",
    "in_generated_instance_context",
]
