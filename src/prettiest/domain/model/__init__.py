"""Domain model entities."""

from prettiest.domain.model.configuration import DEFAULT_INDENT_SIZE, OPTION_USE_TABS, RuleConfig
from prettiest.domain.model.enums import ViolationKind
from prettiest.domain.model.fix import Fix
from prettiest.domain.model.lint_result import LintResult
from prettiest.domain.model.node_kind import TRY_BODY_KINDS, VISIBILITY_KINDS, NodeKind
from prettiest.domain.model.position import LineAndCharacter
from prettiest.domain.model.source_file import SourceFile
from prettiest.domain.model.syntax_node import SyntaxNode
from prettiest.domain.model.violation import RULE_NAME, Violation

__all__ = [
    "DEFAULT_INDENT_SIZE",
    "OPTION_USE_TABS",
    "RULE_NAME",
    "TRY_BODY_KINDS",
    "VISIBILITY_KINDS",
    "Fix",
    "LineAndCharacter",
    "LintResult",
    "NodeKind",
    "RuleConfig",
    "SourceFile",
    "SyntaxNode",
    "Violation",
    "ViolationKind",
]
