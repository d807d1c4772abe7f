"""Console reporter: LintResult → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from prettiest.domain.model.lint_result import LintResult
    from prettiest.domain.model.violation import Violation


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_fix_preview: Print the replacement text of each fix below the table.
        max_violations: Max violations to display. None = unlimited.
        width: Console width in characters.
    """

    show_fix_preview: bool = False
    max_violations: int | None = None
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_violations is not None and self.max_violations < 0:
            raise ValueError(f"max_violations must be >= 0, got {self.max_violations}")
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, result: LintResult) -> str:
        """Format lint result as rich formatted string.

        Args:
            result: Violations found in one file

        Returns:
            Formatted string with colors and a violations table.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        violations = result.violations
        if self._config.max_violations is not None:
            violations = violations[: self._config.max_violations]

        self._render_header(console, result)
        if violations:
            self._render_table(console, result.file_name, violations)
            if self._config.show_fix_preview:
                self._render_fixes(console, violations)

        return output.getvalue()

    def _render_header(self, console: Console, result: LintResult) -> None:
        """Render header with summary."""
        console.rule(f"[bold]{result.file_name}[/bold]")
        status = "[green]PASS[/green]" if result.passed else "[red]FAIL[/red]"
        console.print(
            f"[bold]Violations:[/bold] {result.violation_count} "
            f"([bold]fixable:[/bold] {result.fixable_count}) {status}"
        )

    def _render_table(
        self,
        console: Console,
        file_name: str,
        violations: tuple[Violation, ...],
    ) -> None:
        """Render violations as a table."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("Location", style="cyan")
        table.add_column("Kind", style="yellow")
        table.add_column("Message")
        table.add_column("Fix", justify="center")

        for violation in violations:
            table.add_row(
                f"{file_name}:{violation.start}",
                violation.kind.value,
                escape(violation.message.splitlines()[0]),
                "✓" if violation.fixable else "",
            )

        console.print(table)

    def _render_fixes(self, console: Console, violations: tuple[Violation, ...]) -> None:
        """Render replacement text of every fix."""
        for violation in violations:
            if violation.fix is None:
                continue
            console.print(f"[dim]{violation.start}[/dim] {escape(str(violation.fix))}", highlight=False)
