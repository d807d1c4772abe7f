"""Read-only syntax tree node."""

from __future__ import annotations

from dataclasses import dataclass

from prettiest.domain.model.node_kind import NodeKind


@dataclass(frozen=True, slots=True)
class SyntaxNode:
    """Node of a parsed source file.

    Offsets are absolute character offsets into the source text.
    The tree is owned by the parser; the rule never mutates it.

    Attributes:
        kind: Node kind tag
        full_start: Offset including leading trivia (whitespace, comments)
        start: Offset of the first non-trivia character
        end: Offset one past the last character
        children: Child nodes in source order
    """

    kind: NodeKind
    full_start: int
    start: int
    end: int
    children: tuple[SyntaxNode, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.full_start < 0:
            raise ValueError(f"full_start must be >= 0, got {self.full_start}")
        if self.start < self.full_start:
            raise ValueError(f"start ({self.start}) must be >= full_start ({self.full_start})")
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) must be >= start ({self.start})")

    @property
    def width(self) -> int:
        """Width without leading trivia."""
        return self.end - self.start

    @property
    def full_width(self) -> int:
        """Width including leading trivia."""
        return self.end - self.full_start

    def get_text(self, text: str) -> str:
        """Slice node text (without trivia) out of the source text."""
        return text[self.start : self.end]

    def first_child(self, kind: NodeKind) -> SyntaxNode | None:
        """First direct child of given kind, or None."""
        for child in self.children:
            if child.kind is kind:
                return child
        return None

    def children_of(self, kind: NodeKind) -> tuple[SyntaxNode, ...]:
        """All direct children of given kind."""
        return tuple(child for child in self.children if child.kind is kind)

    def has_child(self, kind: NodeKind) -> bool:
        """Check if any direct child has given kind."""
        return self.first_child(kind) is not None

    def index_of(self, child: SyntaxNode) -> int:
        """Position of child among direct children (identity match).

        Raises:
            ValueError: If child is not a direct child of this node
        """
        for i, candidate in enumerate(self.children):
            if candidate is child:
                return i
        raise ValueError(f"{child.kind.name} node is not a child of {self.kind.name} node")
