"""Rule configuration resolved from host arguments.

One instance per rule invocation. Immutable, no process-wide state.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from prettiest.domain.exceptions.options import RuleOptionsError

OPTION_USE_TABS = "tabs"
DEFAULT_INDENT_SIZE = 4


@dataclass(frozen=True, slots=True)
class RuleConfig:
    """Indentation settings for synthesized fix text.

    Attributes:
        use_tabs: Indent with one tab per level
        indent_size: Spaces per level when not using tabs (must be >= 1)
    """

    use_tabs: bool = False
    indent_size: int = DEFAULT_INDENT_SIZE

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.indent_size < 1:
            raise ValueError(f"indent_size must be >= 1, got {self.indent_size}")

    @property
    def indent_unit(self) -> str:
        """String for one indentation level."""
        return "\t" if self.use_tabs else " " * self.indent_size

    def indent(self, level: int) -> str:
        """Indentation string for given level."""
        if level < 0:
            raise ValueError(f"level must be >= 0, got {level}")
        return self.indent_unit * level

    @classmethod
    def from_arguments(cls, arguments: Sequence[object]) -> RuleConfig:
        """Build config from host rule arguments.

        Recognized arguments:
            "tabs": select tab indentation
            int: spaces per level (first one wins; 0 means default)

        Args:
            arguments: Rule arguments as configured in the host

        Returns:
            Resolved config

        Raises:
            RuleOptionsError: On unknown strings, negative sizes, or other types
        """
        use_tabs = False
        size: int | None = None

        for argument in arguments:
            # bool is an int subclass, reject it explicitly
            if isinstance(argument, bool):
                raise RuleOptionsError(argument, "expected 'tabs' or an indent size")
            if isinstance(argument, str):
                if argument != OPTION_USE_TABS:
                    raise RuleOptionsError(argument, f"unknown option, expected '{OPTION_USE_TABS}'")
                use_tabs = True
            elif isinstance(argument, int):
                if argument < 0:
                    raise RuleOptionsError(argument, "indent size must be >= 0")
                if size is None:
                    size = argument
            else:
                raise RuleOptionsError(argument, "expected 'tabs' or an indent size")

        return cls(use_tabs=use_tabs, indent_size=size or DEFAULT_INDENT_SIZE)
