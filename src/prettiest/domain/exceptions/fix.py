"""Fix application exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from prettiest.domain.exceptions.base import PrettiestError

if TYPE_CHECKING:
    from prettiest.domain.model.fix import Fix


class FixApplicationError(PrettiestError):
    """Fix cannot be applied to a text.

    Attributes:
        fix: Fix that failed
        reason: Why it failed
    """

    def __init__(self, fix: Fix, reason: str) -> None:
        if fix is None:
            raise TypeError("fix must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.fix = fix
        self.reason = reason
        super().__init__(f"Cannot apply {fix}: {reason}")
