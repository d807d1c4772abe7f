"""Base class for node inspectors.

Inspectors are built per source file and hold only read-only state:
the source text, its PositionService and the invocation's RuleConfig.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prettiest.domain.model.violation import Violation

if TYPE_CHECKING:
    from prettiest.application.positions import PositionService
    from prettiest.domain.model.configuration import RuleConfig
    from prettiest.domain.model.enums import ViolationKind
    from prettiest.domain.model.fix import Fix
    from prettiest.domain.model.syntax_node import SyntaxNode


class BaseInspector:
    """Shared state and violation factory for inspectors.

    Concrete inspectors set `kind` and expose `inspect_*` methods
    returning a tuple of violations (empty if the node conforms).
    """

    kind: ViolationKind
    """Kind of violations this inspector reports."""

    def __init__(self, text: str, positions: PositionService, config: RuleConfig) -> None:
        """Initialize inspector.

        Args:
            text: Source text the tree was parsed from
            positions: Position service over the same text
            config: Indentation settings
        """
        self._text = text
        self._positions = positions
        self._config = config

    def _violation(self, node: SyntaxNode, message: str, fix: Fix | None) -> Violation:
        """Create violation located at node."""
        return Violation(
            kind=self.kind,
            message=message,
            node=node,
            start=self._positions.start_position(node),
            fix=fix,
        )
