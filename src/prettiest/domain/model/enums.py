"""Domain enumerations."""

from enum import Enum


class ViolationKind(Enum):
    """Kind of formatting violation."""

    MULTILINE_CONSTRUCTOR = "multiline-constructor"
    CONTROL_STATEMENT_OWN_LINE = "control-statement-own-line"
