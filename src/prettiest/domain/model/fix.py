"""Text replacement value object."""

from dataclasses import dataclass

from prettiest.domain.exceptions.fix import FixApplicationError


@dataclass(frozen=True, slots=True)
class Fix:
    """Replace `remove_width` characters at `start_offset` with `insert_text`.

    Attributes:
        start_offset: Absolute offset where replacement starts (>= 0)
        remove_width: Number of characters removed (>= 0)
        insert_text: Text inserted in their place
    """

    start_offset: int
    remove_width: int
    insert_text: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.start_offset < 0:
            raise ValueError(f"start_offset must be >= 0, got {self.start_offset}")
        if self.remove_width < 0:
            raise ValueError(f"remove_width must be >= 0, got {self.remove_width}")

    @property
    def end_offset(self) -> int:
        """Offset one past the last removed character."""
        return self.start_offset + self.remove_width

    def apply(self, text: str) -> str:
        """Apply replacement to text.

        Raises:
            FixApplicationError: If removed span runs past end of text
        """
        if self.end_offset > len(text):
            raise FixApplicationError(self, f"span ends past end of text ({len(text)})")
        return text[: self.start_offset] + self.insert_text + text[self.end_offset :]

    def __str__(self) -> str:
        """Format as offset+width -> text."""
        return f"fix@{self.start_offset}+{self.remove_width} -> {self.insert_text!r}"
