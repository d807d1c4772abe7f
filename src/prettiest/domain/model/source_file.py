"""Source file aggregate handed over by the host."""

from dataclasses import dataclass

from prettiest.domain.model.syntax_node import SyntaxNode


@dataclass(frozen=True, slots=True)
class SourceFile:
    """Parsed source file.

    Attributes:
        file_name: Name used for reporting
        text: Raw source text
        root: Root of the syntax tree produced by the parser
    """

    file_name: str
    text: str
    root: SyntaxNode

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.file_name:
            raise ValueError("file_name must not be empty")
        if self.root.end > len(self.text):
            raise ValueError(
                f"root ends at {self.root.end}, past end of text ({len(self.text)})"
            )
