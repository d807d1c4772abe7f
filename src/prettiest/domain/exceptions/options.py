"""Rule option exceptions."""

from prettiest.domain.exceptions.base import PrettiestError


class RuleOptionsError(PrettiestError):
    """Error in rule arguments supplied by the host.

    FAIL-FIRST: validates inputs immediately.

    Attributes:
        option: Offending argument, rendered with repr()
        reason: Why the argument is invalid (must not be empty)
    """

    def __init__(self, option: object, reason: str) -> None:
        if not reason:
            raise ValueError("reason must not be empty")

        self.option = option
        self.reason = reason
        super().__init__(f"Invalid rule argument {option!r}: {reason}")
