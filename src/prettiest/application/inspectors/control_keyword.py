"""Placement of else/catch/finally keywords.

A continuation keyword must start its own line instead of following
the closing brace of the block before it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from prettiest.application.fixes import replacement
from prettiest.application.inspectors._base import BaseInspector
from prettiest.domain.model.enums import ViolationKind
from prettiest.domain.model.node_kind import TRY_BODY_KINDS, NodeKind

if TYPE_CHECKING:
    from prettiest.domain.model.syntax_node import SyntaxNode
    from prettiest.domain.model.violation import Violation

logger = logging.getLogger(__name__)

CONTROL_STATEMENTS_OWN_LINE_MESSAGE = "Control statements (else/catch/finally) should be on their own line."

# Characters of "} " preceding a keyword that are not indentation
KEYWORD_OFFSET = 2


def preceding_body(statement: SyntaxNode, target: SyntaxNode) -> SyntaxNode | None:
    """Nearest block or catch clause before target among statement's children.

    Args:
        statement: TRY_STATEMENT node
        target: Direct child of statement (catch clause or finally keyword)

    Returns:
        Preceding BLOCK/CATCH_CLAUSE child, or None if there is none
    """
    position = statement.index_of(target) - 1
    while position >= 0:
        candidate = statement.children[position]
        if candidate.kind in TRY_BODY_KINDS:
            return candidate
        position -= 1
    return None


class ControlKeywordInspector(BaseInspector):
    """Reports catch/finally/else keywords sharing a line with the preceding block."""

    kind = ViolationKind.CONTROL_STATEMENT_OWN_LINE

    def inspect_try_statement(self, statement: SyntaxNode) -> tuple[Violation, ...]:
        """Check catch clause and finally keyword of a try statement.

        The finally keyword token is checked, not the finally block.
        """
        violations: list[Violation] = []

        for kind in (NodeKind.CATCH_CLAUSE, NodeKind.FINALLY_KEYWORD):
            target = statement.first_child(kind)
            if target is None:
                continue

            previous = preceding_body(statement, target)
            if previous is None:
                logger.debug("No block before %s at offset %d, skipped", kind.name, target.start)
                continue

            violations.extend(self._check_same_line(previous, target))

        return tuple(violations)

    def inspect_if_statement(self, statement: SyntaxNode) -> tuple[Violation, ...]:
        """Check else keyword of an if statement.

        Statements without any braced block are exempt.
        """
        else_keyword = statement.first_child(NodeKind.ELSE_KEYWORD)
        if else_keyword is None:
            return ()

        if not statement.has_child(NodeKind.BLOCK):
            return ()

        index = statement.index_of(else_keyword)
        if index == 0:
            logger.debug("else keyword at offset %d has no predecessor, skipped", else_keyword.start)
            return ()

        return self._check_same_line(statement.children[index - 1], else_keyword)

    def _check_same_line(self, previous: SyntaxNode, target: SyntaxNode) -> tuple[Violation, ...]:
        """Report target if it starts on the line where previous ends.

        The fix replaces the single separator before target with a line
        break plus indentation. Without leading trivia it only inserts.
        """
        if not self._positions.are_on_same_line(previous, target):
            return ()

        count = self._positions.indent_level(target, offset=KEYWORD_OFFSET)
        fix = replacement(
            target.full_start,
            min(1, target.start - target.full_start),
            f"\n{self._config.indent(count)}",
        )
        return (self._violation(target, CONTROL_STATEMENTS_OWN_LINE_MESSAGE, fix),)
