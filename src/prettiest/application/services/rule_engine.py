"""Rule engine: one traversal per source file, dispatching to inspectors."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from prettiest.application.inspectors.constructor import ConstructorInspector
from prettiest.application.inspectors.control_keyword import ControlKeywordInspector
from prettiest.application.positions import PositionService
from prettiest.application.traversal import visit_tree
from prettiest.domain.model.configuration import RuleConfig

if TYPE_CHECKING:
    from prettiest.domain.model.source_file import SourceFile
    from prettiest.domain.model.syntax_node import SyntaxNode
    from prettiest.domain.model.violation import Violation

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InspectorVisitor:
    """VisitorProtocol implementation backed by the inspectors.

    Attributes:
        constructors: Checks constructor parameter layout
        control_keywords: Checks else/catch/finally placement
    """

    constructors: ConstructorInspector
    control_keywords: ControlKeywordInspector

    def visit_constructor(self, node: SyntaxNode) -> tuple[Violation, ...]:
        """Delegate to constructor inspector."""
        return self.constructors.inspect_constructor(node)

    def visit_try_statement(self, node: SyntaxNode) -> tuple[Violation, ...]:
        """Delegate to control keyword inspector."""
        return self.control_keywords.inspect_try_statement(node)

    def visit_if_statement(self, node: SyntaxNode) -> tuple[Violation, ...]:
        """Delegate to control keyword inspector."""
        return self.control_keywords.inspect_if_statement(node)


class RuleEngine:
    """Runs all checks over a source file.

    Holds only the immutable RuleConfig; everything derived from a file
    is built inside run() and discarded on return, so one engine may
    serve many files, including concurrently.
    """

    def __init__(self, config: RuleConfig | None = None) -> None:
        """Initialize engine.

        Args:
            config: Indentation settings. Uses defaults if None.
        """
        self._config = config or RuleConfig()

    @property
    def config(self) -> RuleConfig:
        """Resolved configuration."""
        return self._config

    def run(self, source: SourceFile) -> tuple[Violation, ...]:
        """Check source file.

        Args:
            source: Parsed source file

        Returns:
            Violations in traversal order (pre-order, source order)
        """
        positions = PositionService(source.text, self._config)
        visitor = InspectorVisitor(
            constructors=ConstructorInspector(source.text, positions, self._config),
            control_keywords=ControlKeywordInspector(source.text, positions, self._config),
        )

        violations = visit_tree(source.root, visitor)

        logger.debug("%s: %d violation(s)", source.file_name, len(violations))
        return violations
