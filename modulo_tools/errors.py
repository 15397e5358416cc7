"""Exceptions raised by modulo_tools."""


class ModuloError(Exception):
    """Base exception for all modulo_tools errors."""

    pass


class PreconditionError(ModuloError, ValueError):
    """
    Raised when an input violates the contract of an operation.

    Covers an even (or non-positive) modulus handed to a Montgomery
    constructor and a negative exponent handed to an exponentiation.
    """

    pass


class WidthOverflowError(ModuloError, OverflowError):
    """
    Raised when a value does not fit the fixed-width container it must live in.

    For the fixed-width Montgomery contexts this means either the modulus is
    wider than the native word, or a wide product / REDC intermediate no
    longer fits the double-width container. Both indicate a modulus too
    large for the chosen specialization.

    The arbitrary-width context has no container; it passes `limit` (N * R)
    instead, the exclusive upper bound of a valid REDC input.
    """

    def __init__(self, value, bits, what="value", limit=None):
        self.value = value
        self.bits = bits
        self.limit = limit
        if limit is None:
            message = f"{what} {value} does not fit in an unsigned {bits}-bit container"
        else:
            message = f"{what} {value} is outside [0, {limit})"
        super().__init__(message)
