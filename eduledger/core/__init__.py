"""
Core module containing the ledger's records, results and error types.
"""

from .entities import *
from .events import *
from .exceptions import *
from .enums import *
from .results import *

__all__ = [
    # Entities
    "RecordKey",
    "Certificate",
    "Scholarship",
    "CoursePayment",
    "CertificateIssuedEvent",
    "ScholarshipGrantedEvent",
    "PaymentCompletedEvent",

    # Events
    "EventLog",
    "EventLogView",

    # Results
    "LedgerError",
    "LedgerResult",

    # Enums
    "ErrorCode",
    "LedgerEventType",
    "PaymentStatus",

    # Exceptions
    "EduLedgerException",
    "DuplicateEntityError",
    "ResourceNotFoundError",
    "ValidationError",
    "EligibilityError",
    "PaymentStateError",
    "AuthorizationError",
    "exception_for",
]
