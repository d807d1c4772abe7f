"""Syntax tree traversal.

Explicit-stack pre-order walk: no recursion limit on deep trees.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from prettiest.domain.model.node_kind import NodeKind

if TYPE_CHECKING:
    from prettiest.domain.model.syntax_node import SyntaxNode
    from prettiest.domain.model.violation import Violation
    from prettiest.domain.ports.visitor import VisitorProtocol


def walk(root: SyntaxNode) -> Iterator[SyntaxNode]:
    """Yield root and all descendants, parents before children, in source order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def visit_tree(root: SyntaxNode, visitor: VisitorProtocol) -> tuple[Violation, ...]:
    """Walk tree and dispatch nodes of interest to visitor callbacks.

    Args:
        root: Tree root
        visitor: Callback record

    Returns:
        Violations of all callbacks, in traversal order
    """
    violations: list[Violation] = []

    for node in walk(root):
        match node.kind:
            case NodeKind.CONSTRUCTOR:
                violations.extend(visitor.visit_constructor(node))
            case NodeKind.TRY_STATEMENT:
                violations.extend(visitor.visit_try_statement(node))
            case NodeKind.IF_STATEMENT:
                violations.extend(visitor.visit_if_statement(node))
            case _:
                pass

    return tuple(violations)
