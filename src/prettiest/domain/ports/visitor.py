"""Visitor protocol for syntax tree traversal.

The traversal dispatches each node of interest to one callback.
Nodes of other kinds are walked through but never reported.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from prettiest.domain.model.syntax_node import SyntaxNode
    from prettiest.domain.model.violation import Violation


class VisitorProtocol(Protocol):
    """Contract for rule visitors.

    One callback per dispatched node kind. Each returns the violations
    found for that node only (empty tuple if none).

    Example:
        class CountingVisitor:
            def __init__(self) -> None:
                self.seen = 0

            def visit_constructor(self, node: SyntaxNode) -> tuple[Violation, ...]:
                self.seen += 1
                return ()

            def visit_try_statement(self, node: SyntaxNode) -> tuple[Violation, ...]:
                return ()

            def visit_if_statement(self, node: SyntaxNode) -> tuple[Violation, ...]:
                return ()
    """

    def visit_constructor(self, node: SyntaxNode) -> tuple[Violation, ...]:
        """Check a constructor declaration."""
        ...

    def visit_try_statement(self, node: SyntaxNode) -> tuple[Violation, ...]:
        """Check a try/catch/finally statement."""
        ...

    def visit_if_statement(self, node: SyntaxNode) -> tuple[Violation, ...]:
        """Check an if/else statement."""
        ...
