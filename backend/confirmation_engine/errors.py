"""
Confirmation Engine - Exceptions

Validation problems and broken caller invariants are raised.
Eligibility failures and inventory overflow are NOT exceptions; they are
returned as HardStop values (see models.ssot).
"""
from typing import Iterable, List


class ConfirmationError(Exception):
    """Base class for all engine errors."""
    pass


class CaseValidationError(ConfirmationError, ValueError):
    """Raised when case data is malformed or out of range."""

    def __init__(self, errors: Iterable[str]):
        self.errors: List[str] = list(errors)
        super().__init__("; ".join(self.errors) or "Invalid case")


class PreconditionError(ConfirmationError):
    """Raised when a caller hands an engine data that breaks its invariants."""
    pass


class FieldMapError(ConfirmationError):
    """Raised when the field-id lookup table does not match what the code expects."""
    pass
