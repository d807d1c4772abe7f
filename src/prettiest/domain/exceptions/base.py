"""Base exceptions for prettiest domain."""


class PrettiestError(Exception):
    """Root exception for all prettiest errors.

    All domain exceptions inherit from this.
    Allows catching all prettiest-specific errors.
    """
