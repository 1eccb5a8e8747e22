"""
In-memory ledger for certificates, scholarships and course payments.

Every operation is synchronous and returns a ``LedgerResult``; rejections are
values, not exceptions.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from ..core.entities import (
    Certificate, Scholarship, CoursePayment, RecordKey,
    CertificateIssuedEvent, ScholarshipGrantedEvent, PaymentCompletedEvent,
)
from ..core.enums import ErrorCode
from ..core.events import EventLog, EventLogView
from ..core.results import LedgerResult


logger = logging.getLogger(__name__)

CERTIFICATE_ISSUED = "Certificate issued successfully"
SCHOLARSHIP_GRANTED = "Scholarship granted successfully"
SCHOLARSHIP_CLAIMED = "Scholarship claimed successfully"
PAYMENT_REGISTERED = "Course payment registered successfully"
COURSE_COMPLETED = "Course marked as completed"

CERTIFICATE_EXISTS = "Certificate already exists"
CERTIFICATE_NOT_FOUND = "Certificate not found"
SCHOLARSHIP_NOT_FOUND = "Scholarship not found"
PAYMENT_NOT_FOUND = "Payment not found"
INVALID_AMOUNT = "Amount must be greater than 0"
NOT_ELIGIBLE = "Eligibility criteria not met"
ALREADY_COMPLETED = "Course already completed"
UNAUTHORIZED_TUTOR = "Only the assigned tutor can mark completion"


class MockLedger:
    """Stand-in for the on-chain education contract.

    Holds three independent record maps plus three append-only event logs.
    Certificates and course payments are keyed by ``(student, course_id)``;
    scholarships by student.
    """

    def __init__(self):
        self._certificates: Dict[RecordKey, Certificate] = {}
        self._scholarships: Dict[str, Scholarship] = {}
        self._course_payments: Dict[RecordKey, CoursePayment] = {}
        self._certificate_events: EventLog[CertificateIssuedEvent] = EventLog("certificates")
        self._scholarship_events: EventLog[ScholarshipGrantedEvent] = EventLog("scholarships")
        self._payment_events: EventLog[PaymentCompletedEvent] = EventLog("payments")

    def reset(self) -> None:
        """Drop every record and event."""
        self._certificates.clear()
        self._scholarships.clear()
        self._course_payments.clear()
        self._certificate_events._clear()
        self._scholarship_events._clear()
        self._payment_events._clear()
        logger.info("Ledger reset")

    # Certificates

    def issue_certificate(self, student: str, course_id: int, issuer: str, issued_date: int) -> LedgerResult:
        """Record a certificate. A (student, course) pair can hold only one."""
        key = (student, course_id)
        if key in self._certificates:
            logger.info("Rejected certificate for %s/%s: already exists", student, course_id)
            return LedgerResult.failure(ErrorCode.ALREADY_EXISTS, CERTIFICATE_EXISTS)

        self._certificates[key] = Certificate(issuer=issuer, issued_date=issued_date)
        logger.info("Issued certificate for %s/%s by %s", student, course_id, issuer)
        return LedgerResult.success(CERTIFICATE_ISSUED)

    def verify_certificate(self, student: str, course_id: int) -> LedgerResult:
        certificate = self._certificates.get((student, course_id))
        if certificate is None:
            logger.debug("No certificate for %s/%s", student, course_id)
            return LedgerResult.failure(ErrorCode.NOT_FOUND, CERTIFICATE_NOT_FOUND)
        return LedgerResult.success(certificate)

    # Scholarships

    def grant_scholarship(self, student: str, amount: int, eligibility_date: int) -> LedgerResult:
        """Grant a scholarship, replacing any unclaimed one for the student."""
        if amount <= 0:
            logger.info("Rejected scholarship for %s: amount %s", student, amount)
            return LedgerResult.failure(ErrorCode.INVALID_AMOUNT, INVALID_AMOUNT)

        self._scholarships[student] = Scholarship(amount=amount, eligibility_date=eligibility_date)
        self._scholarship_events.publish(ScholarshipGrantedEvent(student=student, amount=amount))
        logger.info("Granted scholarship of %s to %s, eligible at %s", amount, student, eligibility_date)
        return LedgerResult.success(SCHOLARSHIP_GRANTED)

    def claim_scholarship(self, student: str, current_height: int) -> LedgerResult:
        """Claim a scholarship once ``current_height`` reaches its eligibility date.

        A successful claim removes the scholarship, so it can be claimed once.
        """
        scholarship = self._scholarships.get(student)
        if scholarship is None:
            logger.info("Rejected claim for %s: no scholarship", student)
            return LedgerResult.failure(ErrorCode.NOT_FOUND, SCHOLARSHIP_NOT_FOUND)

        if not scholarship.is_eligible(current_height):
            logger.info("Rejected claim for %s: eligible at %s, height is %s",
                        student, scholarship.eligibility_date, current_height)
            return LedgerResult.failure(ErrorCode.NOT_ELIGIBLE, NOT_ELIGIBLE)

        del self._scholarships[student]
        logger.info("Scholarship of %s claimed by %s", scholarship.amount, student)
        return LedgerResult.success(SCHOLARSHIP_CLAIMED)

    # Course payments

    def register_course_payment(self, course_id: int, student: str, tutor: str, amount: int) -> LedgerResult:
        """Register a pending payment, replacing any existing one for the pair."""
        if amount <= 0:
            logger.info("Rejected payment for %s/%s: amount %s", student, course_id, amount)
            return LedgerResult.failure(ErrorCode.INVALID_AMOUNT, INVALID_AMOUNT)

        key = (student, course_id)
        if key in self._course_payments:
            logger.info("Overwriting payment record for %s/%s", student, course_id)
        self._course_payments[key] = CoursePayment(tutor=tutor, amount=amount)
        logger.info("Registered payment of %s for %s/%s with tutor %s", amount, student, course_id, tutor)
        return LedgerResult.success(PAYMENT_REGISTERED)

    def mark_course_complete(self, course_id: int, student: str, tutor: str) -> LedgerResult:
        """Complete a pending payment. Only the assigned tutor may do this."""
        payment = self._course_payments.get((student, course_id))
        if payment is None:
            logger.info("Rejected completion for %s/%s: no payment", student, course_id)
            return LedgerResult.failure(ErrorCode.NOT_FOUND, PAYMENT_NOT_FOUND)

        if payment.is_completed:
            logger.info("Rejected completion for %s/%s: already completed", student, course_id)
            return LedgerResult.failure(ErrorCode.ALREADY_COMPLETED, ALREADY_COMPLETED)

        if payment.tutor != tutor:
            logger.info("Rejected completion for %s/%s: %s is not the assigned tutor", student, course_id, tutor)
            return LedgerResult.failure(ErrorCode.UNAUTHORIZED, UNAUTHORIZED_TUTOR)

        payment.complete()
        self._payment_events.publish(PaymentCompletedEvent(
            student=student,
            course_id=course_id,
            tutor=tutor,
            amount=payment.amount
        ))
        logger.info("Course %s completed for %s by %s", course_id, student, tutor)
        return LedgerResult.success(COURSE_COMPLETED)

    # Read access

    def get_certificate(self, student: str, course_id: int) -> Optional[Certificate]:
        return self._certificates.get((student, course_id))

    def get_scholarship(self, student: str) -> Optional[Scholarship]:
        return self._scholarships.get(student)

    def has_scholarship(self, student: str) -> bool:
        return student in self._scholarships

    def get_course_payment(self, student: str, course_id: int) -> Optional[CoursePayment]:
        """Copy of the payment record; mutate only through ``mark_course_complete``."""
        payment = self._course_payments.get((student, course_id))
        if payment is None:
            return None
        return CoursePayment(tutor=payment.tutor, amount=payment.amount, is_completed=payment.is_completed)

    @property
    def certificate_events(self) -> EventLogView[CertificateIssuedEvent]:
        return EventLogView(self._certificate_events)

    @property
    def scholarship_events(self) -> EventLogView[ScholarshipGrantedEvent]:
        return EventLogView(self._scholarship_events)

    @property
    def payment_events(self) -> EventLogView[PaymentCompletedEvent]:
        return EventLogView(self._payment_events)

    def event_logs(self) -> Tuple[EventLogView, ...]:
        return (self.certificate_events, self.scholarship_events, self.payment_events)

    def get_statistics(self) -> Dict[str, Any]:
        """Record and event counts."""
        completed = sum(1 for p in self._course_payments.values() if p.is_completed)
        return {
            'certificates': len(self._certificates),
            'active_scholarships': len(self._scholarships),
            'pending_payments': len(self._course_payments) - completed,
            'completed_payments': completed,
            'events': {log.name: len(log) for log in self.event_logs()}
        }
