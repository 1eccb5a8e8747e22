"""
Custom exceptions for the ledger.

Ledger operations report failures as ``LedgerResult`` values; these exceptions
are raised only when a caller asks for the payload of a failed result.
"""

from typing import Optional, Any, Dict, Type

from .enums import ErrorCode


class EduLedgerException(Exception):
    """Base exception for all ledger errors."""

    def __init__(self, message: str, error_code: Optional[ErrorCode] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class DuplicateEntityError(EduLedgerException):
    """Raised when attempting to create a duplicate record."""
    pass


class ResourceNotFoundError(EduLedgerException):
    """Raised when a requested record is not found."""
    pass


class ValidationError(EduLedgerException):
    """Raised when an amount fails validation."""
    pass


class EligibilityError(EduLedgerException):
    """Raised when a scholarship is claimed before its eligibility date."""
    pass


class PaymentStateError(EduLedgerException):
    """Raised when a course payment is already completed."""
    pass


class AuthorizationError(EduLedgerException):
    """Raised when someone other than the assigned tutor acts on a payment."""
    pass


_EXCEPTIONS_BY_CODE: Dict[ErrorCode, Type[EduLedgerException]] = {
    ErrorCode.ALREADY_EXISTS: DuplicateEntityError,
    ErrorCode.NOT_FOUND: ResourceNotFoundError,
    ErrorCode.INVALID_AMOUNT: ValidationError,
    ErrorCode.NOT_ELIGIBLE: EligibilityError,
    ErrorCode.ALREADY_COMPLETED: PaymentStateError,
    ErrorCode.UNAUTHORIZED: AuthorizationError,
}


def exception_for(code: ErrorCode, message: str, details: Optional[Dict[str, Any]] = None) -> EduLedgerException:
    """Build the exception matching an error code."""
    return _EXCEPTIONS_BY_CODE[code](message, error_code=code, details=details)
