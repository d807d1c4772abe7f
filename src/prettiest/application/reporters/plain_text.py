"""Plain text reporter using print().

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from prettiest.application.reporters._base import BaseReporter, format_location

if TYPE_CHECKING:
    from prettiest.domain.model.lint_result import LintResult


class PlainTextReporter(BaseReporter):
    """One line per violation, followed by a summary line.

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, result: LintResult) -> None:
        """Report lint results as plain text.

        Args:
            result: Violations found in one file
        """
        for violation in result.violations:
            headline = violation.message.splitlines()[0]
            marker = " (fixable)" if violation.fixable else ""
            self._write(
                f"{format_location(result.file_name, violation)}: "
                f"[{violation.rule_name}] {headline}{marker}"
            )

        status = "PASS" if result.passed else "FAIL"
        self._write(
            f"{result.file_name}: {result.violation_count} violation(s), "
            f"{result.fixable_count} fixable [{status}]"
        )

    def _write(self, text: str) -> None:
        """Write line to output."""
        print(text, file=self._output)
