"""Host-facing rule facade.

The host parses a file, wraps it in a SourceFile and calls apply()
(or check() for a LintResult). Rule arguments come from the host's
rule configuration, e.g. ["tabs"] or [2].
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, ClassVar, Self

from prettiest.application.inspectors.constructor import MULTILINE_CONSTRUCTOR_MESSAGE
from prettiest.application.inspectors.control_keyword import CONTROL_STATEMENTS_OWN_LINE_MESSAGE
from prettiest.application.services.rule_engine import RuleEngine
from prettiest.domain.model.configuration import OPTION_USE_TABS, RuleConfig
from prettiest.domain.model.lint_result import LintResult
from prettiest.domain.model.violation import RULE_NAME

if TYPE_CHECKING:
    from prettiest.domain.model.source_file import SourceFile
    from prettiest.domain.model.violation import Violation


class PrettiestRule:
    """Formatting rule: multi-line property constructors, own-line else/catch/finally.

    Example:
        rule = PrettiestRule.from_arguments(["tabs"])
        violations = rule.apply(source_file)
    """

    RULE_NAME: ClassVar[str] = RULE_NAME
    OPTION_USE_TABS: ClassVar[str] = OPTION_USE_TABS
    CONTROL_STATEMENTS_OWN_LINE_MESSAGE: ClassVar[str] = CONTROL_STATEMENTS_OWN_LINE_MESSAGE
    MULTILINE_CONSTRUCTOR_MESSAGE: ClassVar[str] = MULTILINE_CONSTRUCTOR_MESSAGE

    def __init__(self, config: RuleConfig | None = None) -> None:
        """Initialize rule.

        Args:
            config: Indentation settings. Uses defaults if None.
        """
        self._engine = RuleEngine(config)

    @classmethod
    def from_arguments(cls, arguments: Sequence[object] = ()) -> Self:
        """Create rule from host rule arguments.

        Raises:
            RuleOptionsError: If arguments are invalid
        """
        return cls(RuleConfig.from_arguments(arguments))

    @property
    def config(self) -> RuleConfig:
        """Resolved configuration."""
        return self._engine.config

    def apply(self, source: SourceFile) -> tuple[Violation, ...]:
        """Check source file and return violations in traversal order."""
        return self._engine.run(source)

    def check(self, source: SourceFile) -> LintResult:
        """Check source file and wrap violations for reporters."""
        return LintResult(file_name=source.file_name, violations=self.apply(source))
