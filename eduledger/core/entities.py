"""
Records held by the ledger and the events it publishes.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Tuple

from .enums import ErrorCode, LedgerEventType, PaymentStatus
from .exceptions import PaymentStateError


# (student, course_id)
RecordKey = Tuple[str, int]


@dataclass(frozen=True)
class Certificate:
    """A course certificate. Immutable once issued."""
    issuer: str
    issued_date: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Scholarship:
    """An unclaimed scholarship awaiting its eligibility height."""
    amount: int
    eligibility_date: int

    def is_eligible(self, current_height: int) -> bool:
        """Eligible from the eligibility height onwards, inclusive."""
        return self.eligibility_date <= current_height

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class CoursePayment:
    """Tuition held for a course until the assigned tutor marks it complete."""
    tutor: str
    amount: int
    is_completed: bool = False

    @property
    def status(self) -> PaymentStatus:
        return PaymentStatus.COMPLETED if self.is_completed else PaymentStatus.PENDING

    def complete(self) -> None:
        """Flip the payment to completed. Completion never reverses."""
        if self.is_completed:
            raise PaymentStateError("Course already completed", error_code=ErrorCode.ALREADY_COMPLETED)
        self.is_completed = True

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CertificateIssuedEvent:
    student: str
    course_id: int
    issuer: str

    event_type = LedgerEventType.CERTIFICATE_ISSUED

    def to_dict(self) -> Dict[str, Any]:
        return {'event_type': self.event_type.value, **asdict(self)}


@dataclass(frozen=True)
class ScholarshipGrantedEvent:
    student: str
    amount: int

    event_type = LedgerEventType.SCHOLARSHIP_GRANTED

    def to_dict(self) -> Dict[str, Any]:
        return {'event_type': self.event_type.value, **asdict(self)}


@dataclass(frozen=True)
class PaymentCompletedEvent:
    student: str
    course_id: int
    tutor: str
    amount: int

    event_type = LedgerEventType.PAYMENT_COMPLETED

    def to_dict(self) -> Dict[str, Any]:
        return {'event_type': self.event_type.value, **asdict(self)}
