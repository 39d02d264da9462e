from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Protocol

from .tree import TreeNode


logger = logging.getLogger(__name__)


class TraversalCallbacks(Protocol):
    def enter_rule(self, node: TreeNode) -> None: ...

    def exit_rule(self, node: TreeNode) -> None: ...

    def visit_terminal(self, leaf: TreeNode) -> None: ...

    def visit_error_node(self, leaf: TreeNode) -> None: ...


class Strategy(str, Enum):
    """How a tree is walked and which callbacks fire.

    FULL_*             enter_rule, exit_rule, visit_terminal, visit_error_node
    EXIT_ONLY_*        exit_rule only, in post-order
    ENTER_EXIT_ONLY_*  enter_rule and exit_rule, leaves are skipped

    *_RECURSIVE walks use the Python call stack and are bounded by the
    recursion limit; *_ITERATIVE walks keep an explicit frame stack and work
    for arbitrarily deep trees. Both produce the same callback sequence.
    """

    FULL_RECURSIVE = "full-recursive"
    FULL_ITERATIVE = "full-iterative"
    EXIT_ONLY_RECURSIVE = "exit-only-recursive"
    EXIT_ONLY_ITERATIVE = "exit-only-iterative"
    ENTER_EXIT_ONLY_RECURSIVE = "enter-exit-only-recursive"
    ENTER_EXIT_ONLY_ITERATIVE = "enter-exit-only-iterative"

    @property
    def recursive(self) -> bool:
        return self.value.endswith("-recursive")

    @property
    def enters(self) -> bool:
        return not self.value.startswith("exit-only")

    @property
    def visits_leaves(self) -> bool:
        return self.value.startswith("full")

    def walk(self, listener: TraversalCallbacks, root: TreeNode) -> None:
        if self.recursive:
            _walk_recursive(listener, root, enter=self.enters, leaves=self.visits_leaves)
        else:
            _walk_iterative(listener, root, enter=self.enters, leaves=self.visits_leaves)


DEFAULT_STRATEGY = Strategy.FULL_ITERATIVE


@dataclass(slots=True)
class TreeFrame:
    """Cursor over the children of one node during an iterative walk."""

    node: TreeNode
    child_count: int
    child_index: int = 0

    @classmethod
    def of(cls, node: TreeNode) -> "TreeFrame":
        return cls(node=node, child_count=len(node.children))

    @property
    def is_first(self) -> bool:
        return self.child_index == 0

    def next_child(self) -> TreeNode | None:
        if self.child_index >= self.child_count:
            return None
        child = self.node.children[self.child_index]
        self.child_index += 1
        return child


class ParseTreeListener:
    """No-op listener to subclass.

    `enter_rule`/`exit_rule` forward to `enter_<rule_name>`/`exit_<rule_name>`
    when the subclass defines them. A rule literally named `rule` has no
    specific callback; override `enter_rule`/`exit_rule` for it. Set the
    `strategy` class attribute to choose how `walk()` traverses trees for
    this listener.
    """

    strategy: ClassVar[Strategy] = DEFAULT_STRATEGY

    def enter_rule(self, node: TreeNode) -> None:
        self._dispatch("enter", node)

    def exit_rule(self, node: TreeNode) -> None:
        self._dispatch("exit", node)

    def _dispatch(self, event: str, node: TreeNode) -> None:
        name = getattr(node, "rule_name", "")
        # enter_rule/exit_rule would resolve to themselves
        if not name or name == "rule":
            return
        handler = getattr(self, f"{event}_{name}", None)
        if handler is not None:
            handler(node)

    def visit_terminal(self, leaf: TreeNode) -> None:
        pass

    def visit_error_node(self, leaf: TreeNode) -> None:
        pass


def walk(listener: TraversalCallbacks, root: TreeNode, strategy: Strategy | None = None) -> None:
    """Walk `root` depth-first, firing `listener` callbacks.

    Without an explicit `strategy` the listener's own `strategy` attribute is
    used, falling back to `Strategy.FULL_ITERATIVE`.
    """
    if strategy is None:
        strategy = getattr(listener, "strategy", None) or DEFAULT_STRATEGY
    logger.debug("walking %r with %s", root, strategy.value)
    strategy.walk(listener, root)


def _visit_leaf(listener: TraversalCallbacks, leaf: TreeNode) -> None:
    if getattr(leaf, "is_error", False):
        listener.visit_error_node(leaf)
    else:
        listener.visit_terminal(leaf)


def _walk_recursive(listener: TraversalCallbacks, node: TreeNode, *, enter: bool, leaves: bool) -> None:
    if not node.is_internal:
        if leaves:
            _visit_leaf(listener, node)
        return

    if enter:
        listener.enter_rule(node)
    for child in node.children:
        _walk_recursive(listener, child, enter=enter, leaves=leaves)
    listener.exit_rule(node)


def _walk_iterative(listener: TraversalCallbacks, root: TreeNode, *, enter: bool, leaves: bool) -> None:
    if not root.is_internal:
        if leaves:
            _visit_leaf(listener, root)
        return

    if enter:
        listener.enter_rule(root)
    stack = [TreeFrame.of(root)]

    while stack:
        frame = stack[-1]
        child = frame.next_child()
        if child is None:
            listener.exit_rule(frame.node)
            stack.pop()
        elif child.is_internal:
            # A frame is pushed exactly once, so entering here never repeats.
            if enter:
                listener.enter_rule(child)
            stack.append(TreeFrame.of(child))
        elif leaves:
            _visit_leaf(listener, child)
