from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from .tokens import Token


class TreeNode(Protocol):
    """Shape of a parse tree node as seen by the walkers."""

    @property
    def children(self) -> Sequence["TreeNode"]: ...

    @property
    def is_internal(self) -> bool: ...


@dataclass(eq=False, slots=True)
class RuleNode:
    """Internal node produced by a grammar rule."""

    rule_name: str
    children: list[RuleNode | TerminalNode | ErrorNode] = field(default_factory=list)
    start: Token | None = None
    stop: Token | None = None

    @property
    def is_internal(self) -> bool:
        return True

    def add(self, child: RuleNode | TerminalNode | ErrorNode) -> RuleNode | TerminalNode | ErrorNode:
        self.children.append(child)
        return child

    def __repr__(self) -> str:
        return f"RuleNode({self.rule_name!r}, children={len(self.children)})"


@dataclass(eq=False, frozen=True, slots=True)
class TerminalNode:
    symbol: Token

    @property
    def children(self) -> tuple[()]:
        return ()

    @property
    def is_internal(self) -> bool:
        return False

    @property
    def is_error(self) -> bool:
        return False


@dataclass(eq=False, frozen=True, slots=True)
class ErrorNode(TerminalNode):
    """Leaf for a token the parser consumed during error recovery."""

    @property
    def is_error(self) -> bool:
        return True
