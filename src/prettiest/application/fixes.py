"""Fix construction and application."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from prettiest.domain.exceptions.fix import FixApplicationError
from prettiest.domain.model.fix import Fix

if TYPE_CHECKING:
    from prettiest.domain.model.syntax_node import SyntaxNode


def replacement(start_offset: int, remove_width: int, insert_text: str) -> Fix:
    """Create a replacement of `remove_width` chars at `start_offset`."""
    return Fix(start_offset=start_offset, remove_width=remove_width, insert_text=insert_text)


def replace_node(node: SyntaxNode, insert_text: str) -> Fix:
    """Replace node's text (without leading trivia)."""
    return replacement(node.start, node.width, insert_text)


def apply_fixes(text: str, fixes: Iterable[Fix]) -> str:
    """Apply non-overlapping fixes to text.

    Fixes are applied from the highest offset down so earlier offsets
    stay valid. Pure insertions at the same offset keep their order.

    Raises:
        FixApplicationError: If two fixes overlap or one runs past the text
    """
    ordered = sorted(fixes, key=lambda f: (f.start_offset, f.end_offset))

    for previous, current in zip(ordered, ordered[1:]):
        if current.start_offset < previous.end_offset:
            raise FixApplicationError(current, f"overlaps {previous}")

    result = text
    for fix in reversed(ordered):
        result = fix.apply(result)
    return result
