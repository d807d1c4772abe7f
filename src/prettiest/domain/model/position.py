"""Line/character position value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class LineAndCharacter:
    """Zero-based position in source text.

    Attributes:
        line: Line index (0-based, must be >= 0)
        character: Column index (0-based, must be >= 0)
    """

    line: int
    character: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.line < 0:
            raise ValueError(f"line must be >= 0, got {self.line}")
        if self.character < 0:
            raise ValueError(f"character must be >= 0, got {self.character}")

    def __str__(self) -> str:
        """Format as one-based line:column."""
        return f"{self.line + 1}:{self.character + 1}"
