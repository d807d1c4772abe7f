"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from prettiest.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from prettiest.domain.model.fix import Fix
    from prettiest.domain.model.lint_result import LintResult
    from prettiest.domain.model.violation import Violation


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Fixes are included verbatim so a host can apply them.
    Positions are one-based.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, result: LintResult) -> None:
        """Report lint results as JSON.

        Args:
            result: Violations found in one file
        """
        data = self._result_to_dict(result)
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")

    def _result_to_dict(self, result: LintResult) -> dict[str, object]:
        """Convert LintResult to JSON-serializable dict."""
        return {
            "file": result.file_name,
            "passed": result.passed,
            "summary": {
                "violation_count": result.violation_count,
                "fixable_count": result.fixable_count,
            },
            "violations": [self._violation_to_dict(v) for v in result.violations],
        }

    def _violation_to_dict(self, violation: Violation) -> dict[str, object]:
        """Convert Violation to JSON-serializable dict."""
        return {
            "rule": violation.rule_name,
            "kind": violation.kind.value,
            "message": violation.message,
            "line": violation.start.line + 1,
            "character": violation.start.character + 1,
            "fix": self._fix_to_dict(violation.fix) if violation.fix is not None else None,
        }

    def _fix_to_dict(self, fix: Fix) -> dict[str, object]:
        """Convert Fix to JSON-serializable dict."""
        return {
            "start_offset": fix.start_offset,
            "remove_width": fix.remove_width,
            "insert_text": fix.insert_text,
        }
