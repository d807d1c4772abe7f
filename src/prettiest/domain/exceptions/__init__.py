"""Domain exceptions."""

from prettiest.domain.exceptions.base import PrettiestError
from prettiest.domain.exceptions.fix import FixApplicationError
from prettiest.domain.exceptions.options import RuleOptionsError

__all__ = [
    "PrettiestError",
    "RuleOptionsError",
    "FixApplicationError",
]
