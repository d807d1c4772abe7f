"""prettiest - formatting rule for constructor parameters and else/catch/finally placement."""

__version__ = "0.1.0"

from prettiest.application.fixes import apply_fixes
from prettiest.domain.model import (
    Fix,
    LintResult,
    NodeKind,
    RuleConfig,
    SourceFile,
    SyntaxNode,
    Violation,
    ViolationKind,
)
from prettiest.presentation.api.rule import PrettiestRule

__all__ = [
    "Fix",
    "LintResult",
    "NodeKind",
    "PrettiestRule",
    "RuleConfig",
    "SourceFile",
    "SyntaxNode",
    "Violation",
    "ViolationKind",
    "__version__",
    "apply_fixes",
]
