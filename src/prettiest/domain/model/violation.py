"""Rule violation entity."""

from dataclasses import dataclass

from prettiest.domain.model.enums import ViolationKind
from prettiest.domain.model.fix import Fix
from prettiest.domain.model.position import LineAndCharacter
from prettiest.domain.model.syntax_node import SyntaxNode

RULE_NAME = "prettiest"


@dataclass(frozen=True, slots=True)
class Violation:
    """Formatting violation with optional machine-applicable fix.

    Attributes:
        kind: Which check fired
        message: Human-readable message
        node: Offending node (host resolves its own location from it)
        start: Start position of node
        fix: Replacement resolving the violation, if any
    """

    kind: ViolationKind
    message: str
    node: SyntaxNode
    start: LineAndCharacter
    fix: Fix | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.message:
            raise ValueError("message must not be empty")

    @property
    def rule_name(self) -> str:
        """Name of the rule that produced this violation."""
        return RULE_NAME

    @property
    def fixable(self) -> bool:
        """Check if violation carries a fix."""
        return self.fix is not None

    def __str__(self) -> str:
        """Format violation for display."""
        headline = self.message.splitlines()[0]
        return f"{self.start} [{self.rule_name}] {headline}"
