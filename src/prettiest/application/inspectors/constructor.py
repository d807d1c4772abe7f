"""Constructor parameter layout inspector.

Constructors declaring properties through parameters (public/protected/
private modifiers) must list parameters one per line.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from prettiest.application.fixes import replace_node
from prettiest.application.inspectors._base import BaseInspector
from prettiest.domain.model.enums import ViolationKind
from prettiest.domain.model.node_kind import NodeKind

if TYPE_CHECKING:
    from prettiest.domain.model.syntax_node import SyntaxNode
    from prettiest.domain.model.violation import Violation

MULTILINE_CONSTRUCTOR_MESSAGE = "Constructors with property declarations should be multi-line."

# Comma and one space, unless a line break follows
_COMMA_RE = re.compile(r", (?!\n)")


def is_property_parameter(parameter: SyntaxNode) -> bool:
    """Check if parameter carries a visibility modifier."""
    modifiers = parameter.first_child(NodeKind.SYNTAX_LIST)
    if modifiers is None:
        return False
    return any(child.kind.is_visibility for child in modifiers.children)


class ConstructorInspector(BaseInspector):
    """Reports constructors mixing property parameters on one line."""

    kind = ViolationKind.MULTILINE_CONSTRUCTOR

    def inspect_constructor(self, node: SyntaxNode) -> tuple[Violation, ...]:
        """Check constructor declaration.

        Args:
            node: CONSTRUCTOR node

        Returns:
            At most one violation, replacing the whole parameter list
        """
        signature = node.first_child(NodeKind.SYNTAX_LIST)
        if signature is None:
            return ()

        if not self._requires_fix(node, signature):
            return ()

        text = self._multiline_text(node, signature)
        return (
            self._violation(
                signature,
                f"{MULTILINE_CONSTRUCTOR_MESSAGE}\n{text}",
                replace_node(signature, text),
            ),
        )

    def _requires_fix(self, node: SyntaxNode, signature: SyntaxNode) -> bool:
        """Find a parameter sharing its line with its predecessor once properties appear.

        The constructor's own line counts as the first predecessor.
        Stops at the first offending pair.
        """
        has_properties = False
        previous_line = self._positions.start_position(node).line

        for parameter in signature.children_of(NodeKind.PARAMETER):
            if is_property_parameter(parameter):
                has_properties = True

            line = self._positions.start_position(parameter).line
            if has_properties and line == previous_line:
                return True

            previous_line = line

        return False

    def _multiline_text(self, node: SyntaxNode, signature: SyntaxNode) -> str:
        """Parameter list rewritten one parameter per line."""
        count = self._positions.indent_level(node)
        inner = self._config.indent(count + 1)
        text = f"\n{inner}{signature.get_text(self._text)}\n{self._config.indent(count)}"
        return _COMMA_RE.sub(lambda _: f",\n{inner}", text)
