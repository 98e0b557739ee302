"""
Domain Errors

All failures raised by the household models are recoverable and
reported to the immediate caller. Nothing here aborts the process.
"""


class HouseholdError(Exception):
    """Base exception for household domain operations."""
    pass


class InvalidArgumentError(HouseholdError, ValueError):
    """An operation received arguments it cannot work with."""
    pass


class IllegalInitializationError(HouseholdError):
    """
    An entity could not be created because its invariant does not hold.

    NOTE: Not a ValueError on purpose. Pydantic wraps ValueErrors raised
    in validators into a ValidationError; this one must reach the caller
    as-is.
    """
    pass


class OutOfBoundsError(HouseholdError, IndexError):
    """An index-aligned sequence is shorter than required."""
    pass
