"""Syntax node kinds understood by the rule."""

from enum import Enum, auto


class NodeKind(Enum):
    """Closed set of node kinds the inspectors dispatch on.

    Anything the parser produces outside this set maps to OTHER.
    """

    SOURCE_FILE = auto()

    # Dispatch targets
    CONSTRUCTOR = auto()
    TRY_STATEMENT = auto()
    IF_STATEMENT = auto()

    # Generic list container (parameter list, modifier list)
    SYNTAX_LIST = auto()
    PARAMETER = auto()

    # Visibility modifiers
    PUBLIC_KEYWORD = auto()
    PROTECTED_KEYWORD = auto()
    PRIVATE_KEYWORD = auto()

    BLOCK = auto()
    CATCH_CLAUSE = auto()
    FINALLY_KEYWORD = auto()
    ELSE_KEYWORD = auto()

    OTHER = auto()

    @property
    def is_visibility(self) -> bool:
        """Check if kind is a public/protected/private modifier."""
        return self in VISIBILITY_KINDS


VISIBILITY_KINDS: frozenset[NodeKind] = frozenset(
    {
        NodeKind.PUBLIC_KEYWORD,
        NodeKind.PROTECTED_KEYWORD,
        NodeKind.PRIVATE_KEYWORD,
    }
)

# Kinds that can logically precede a catch/finally keyword in a try statement
TRY_BODY_KINDS: frozenset[NodeKind] = frozenset({NodeKind.BLOCK, NodeKind.CATCH_CLAUSE})
