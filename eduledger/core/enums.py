"""
Enumerations and constants for the ledger.
"""

from enum import Enum


class ErrorCode(Enum):
    """Closed set of reasons a ledger operation can be rejected."""
    ALREADY_EXISTS = "AlreadyExists"
    NOT_FOUND = "NotFound"
    INVALID_AMOUNT = "InvalidAmount"
    NOT_ELIGIBLE = "NotEligible"
    ALREADY_COMPLETED = "AlreadyCompleted"
    UNAUTHORIZED = "Unauthorized"


class LedgerEventType(Enum):
    """Types of events recorded in the ledger's logs."""
    CERTIFICATE_ISSUED = "certificate_issued"
    SCHOLARSHIP_GRANTED = "scholarship_granted"
    PAYMENT_COMPLETED = "payment_completed"


class PaymentStatus(Enum):
    """Lifecycle of a course payment."""
    PENDING = "pending"
    COMPLETED = "completed"
