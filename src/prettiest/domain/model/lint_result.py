"""Result of running the rule over one source file."""

from __future__ import annotations

from dataclasses import dataclass

from prettiest.domain.model.fix import Fix
from prettiest.domain.model.violation import Violation


@dataclass(frozen=True, slots=True)
class LintResult:
    """Violations found in one file, in traversal order.

    Attributes:
        file_name: Name of the checked file
        violations: All violations found
    """

    file_name: str
    violations: tuple[Violation, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.file_name:
            raise ValueError("file_name must not be empty")

    @property
    def passed(self) -> bool:
        """Check if file passed (no violations)."""
        return len(self.violations) == 0

    @property
    def violation_count(self) -> int:
        """Number of violations."""
        return len(self.violations)

    @property
    def fixable_count(self) -> int:
        """Number of violations carrying a fix."""
        return sum(1 for v in self.violations if v.fixable)

    @property
    def fixes(self) -> tuple[Fix, ...]:
        """Fixes of all fixable violations."""
        return tuple(v.fix for v in self.violations if v.fix is not None)

    @classmethod
    def empty(cls, file_name: str) -> LintResult:
        """Create passing result with no violations."""
        return cls(file_name=file_name, violations=())
