"""
Exceptions raised by kmassign.

Each error also derives from the matching built-in exception, so callers
that already catch ``ValueError`` or ``OverflowError`` keep working.
"""


class KMAssignError(Exception):
    """Base class for all kmassign errors."""


class InvalidInputError(KMAssignError, ValueError):
    """Cost matrix or option rejected before the algorithm runs."""


class NumericOverflowError(KMAssignError, OverflowError):
    """Costs cannot be processed exactly in 64-bit integers."""


class InternalError(KMAssignError, RuntimeError):
    """The step engine reached a state it should never reach."""
