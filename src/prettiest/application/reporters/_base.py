"""Base reporter class for output formatting.

Provides default implementation of ReporterProtocol.
Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prettiest.domain.model.lint_result import LintResult
    from prettiest.domain.model.violation import Violation


def format_location(file_name: str, violation: Violation) -> str:
    """Format as file:line:column (one-based)."""
    return f"{file_name}:{violation.start}"


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    Example:
        class CountReporter(BaseReporter):
            def report(self, result: LintResult) -> None:
                print(f"{result.file_name}: {result.violation_count}")
    """

    @abstractmethod
    def report(self, result: LintResult) -> None:
        """Report lint results.

        Args:
            result: Violations found in one file
        """
