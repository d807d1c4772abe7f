"""Host-facing API.

Public exports:
    PrettiestRule: Rule facade (options, apply, check)
"""

from prettiest.presentation.api.rule import PrettiestRule

__all__ = ["PrettiestRule"]
