"""Reporter protocol for output formatting.

Hosts extend prettiest by implementing this Protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from prettiest.domain.model.lint_result import LintResult


class ReporterProtocol(Protocol):
    """Contract for reporters.

    prettiest provides PlainTextReporter, JSONReporter and ConsoleReporter.
    """

    def report(self, result: LintResult) -> None:
        """Report lint results.

        Implementation decides output format and destination.

        Args:
            result: Violations found in one file
        """
        ...
