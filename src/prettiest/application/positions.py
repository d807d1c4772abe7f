"""Offset to line/column conversion and indentation levels.

Pure functions of the source text and the invocation's RuleConfig.
"""

from __future__ import annotations

import math
from bisect import bisect_right
from typing import TYPE_CHECKING

from prettiest.domain.model.position import LineAndCharacter

if TYPE_CHECKING:
    from prettiest.domain.model.configuration import RuleConfig
    from prettiest.domain.model.syntax_node import SyntaxNode

_LINE_BREAKS = frozenset({"\n", "\r", "\u2028", "\u2029"})


def compute_line_starts(text: str) -> tuple[int, ...]:
    """Offsets at which each line of text begins.

    Recognizes \\n, \\r\\n, \\r and the unicode line/paragraph separators.
    """
    starts = [0]
    pos = 0
    length = len(text)
    while pos < length:
        ch = text[pos]
        pos += 1
        if ch in _LINE_BREAKS:
            if ch == "\r" and pos < length and text[pos] == "\n":
                pos += 1
            starts.append(pos)
    return tuple(starts)


class PositionService:
    """Maps node offsets to positions and indentation levels.

    Built once per source file. Holds no mutable state.
    """

    def __init__(self, text: str, config: RuleConfig) -> None:
        """Initialize service.

        Args:
            text: Raw source text the node offsets refer to
            config: Indentation settings
        """
        self._text = text
        self._config = config
        self._line_starts = compute_line_starts(text)

    @property
    def line_starts(self) -> tuple[int, ...]:
        """Start offset of every line."""
        return self._line_starts

    def line_and_character_of(self, offset: int) -> LineAndCharacter:
        """Convert absolute offset to zero-based line/character.

        Raises:
            ValueError: If offset is outside the text (FAIL-FIRST)
        """
        if not 0 <= offset <= len(self._text):
            raise ValueError(f"offset {offset} outside text of length {len(self._text)}")
        line = bisect_right(self._line_starts, offset) - 1
        return LineAndCharacter(line=line, character=offset - self._line_starts[line])

    def start_position(self, node: SyntaxNode) -> LineAndCharacter:
        """Position of node's first non-trivia character."""
        return self.line_and_character_of(node.start)

    def end_position(self, node: SyntaxNode) -> LineAndCharacter:
        """Position of node's end offset."""
        return self.line_and_character_of(node.end)

    def are_on_same_line(self, node: SyntaxNode, next_node: SyntaxNode) -> bool:
        """Check if next_node starts on the line where node ends."""
        return self.end_position(node).line == self.start_position(next_node).line

    def indent_level(self, node: SyntaxNode, offset: int = 0) -> int:
        """Indentation level of node's line, measured from its column.

        Args:
            node: Node whose start column is measured
            offset: Leading characters to discount (e.g. 2 for "} ")

        Returns:
            Column itself when using tabs, else ceil(column / indent_size).
            Never negative.
        """
        column = max(self.start_position(node).character - offset, 0)
        if self._config.use_tabs:
            return column
        return math.ceil(column / self._config.indent_size)
