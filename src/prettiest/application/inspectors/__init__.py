"""Node inspectors producing violations with fixes."""

from prettiest.application.inspectors._base import BaseInspector
from prettiest.application.inspectors.constructor import (
    MULTILINE_CONSTRUCTOR_MESSAGE,
    ConstructorInspector,
)
from prettiest.application.inspectors.control_keyword import (
    CONTROL_STATEMENTS_OWN_LINE_MESSAGE,
    ControlKeywordInspector,
)

__all__ = [
    "CONTROL_STATEMENTS_OWN_LINE_MESSAGE",
    "MULTILINE_CONSTRUCTOR_MESSAGE",
    "BaseInspector",
    "ConstructorInspector",
    "ControlKeywordInspector",
]
