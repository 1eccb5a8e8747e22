import pytest

from eduledger.core.entities import Certificate, CoursePayment, ScholarshipGrantedEvent
from eduledger.core.enums import ErrorCode, PaymentStatus
from eduledger.core.events import EventLog
from eduledger.core.exceptions import (
    AuthorizationError, DuplicateEntityError, EduLedgerException, EligibilityError,
    PaymentStateError, ResourceNotFoundError, ValidationError, exception_for,
)
from eduledger.core.results import LedgerResult


def test_success_result():
    result = LedgerResult.success("done")

    assert result.is_ok and not result.is_err
    assert result.error_code is None
    assert result.message == "done"
    assert result.unwrap() == "done"


def test_certificate_payload_unwraps():
    certificate = Certificate(issuer="issuer1", issued_date=1672531200)

    assert LedgerResult.success(certificate).unwrap() is certificate


def test_failure_unwrap_raises_matching_exception():
    result = LedgerResult.failure(ErrorCode.NOT_ELIGIBLE, "Eligibility criteria not met")

    with pytest.raises(EligibilityError) as exc_info:
        result.unwrap()

    assert exc_info.value.error_code == ErrorCode.NOT_ELIGIBLE
    assert exc_info.value.message == "Eligibility criteria not met"


def test_result_requires_exactly_one_side():
    with pytest.raises(ValueError):
        LedgerResult()


@pytest.mark.parametrize("code, exc_type", [
    (ErrorCode.ALREADY_EXISTS, DuplicateEntityError),
    (ErrorCode.NOT_FOUND, ResourceNotFoundError),
    (ErrorCode.INVALID_AMOUNT, ValidationError),
    (ErrorCode.NOT_ELIGIBLE, EligibilityError),
    (ErrorCode.ALREADY_COMPLETED, PaymentStateError),
    (ErrorCode.UNAUTHORIZED, AuthorizationError),
])
def test_every_error_code_has_an_exception(code, exc_type):
    exc = exception_for(code, "boom")

    assert isinstance(exc, exc_type)
    assert isinstance(exc, EduLedgerException)
    assert exc.details == {}


def test_error_tags():
    assert [code.value for code in ErrorCode] == [
        "AlreadyExists", "NotFound", "InvalidAmount", "NotEligible", "AlreadyCompleted", "Unauthorized",
    ]


def test_course_payment_completion_is_one_way():
    payment = CoursePayment(tutor="tutor1", amount=1000)
    assert payment.status == PaymentStatus.PENDING

    payment.complete()
    assert payment.status == PaymentStatus.COMPLETED

    with pytest.raises(PaymentStateError):
        payment.complete()
    assert payment.is_completed is True


def test_certificate_is_immutable():
    certificate = Certificate(issuer="issuer1", issued_date=1)

    with pytest.raises(AttributeError):
        certificate.issuer = "someone else"


# --- EventLog ---

def test_event_log_preserves_order():
    log = EventLog("numbers")
    for n in range(5):
        log.publish(n)

    assert list(log.replay()) == [0, 1, 2, 3, 4]
    assert log.snapshot() == (0, 1, 2, 3, 4)
    assert len(log) == 5


def test_failing_subscriber_does_not_block_others():
    log = EventLog("numbers")
    seen = []

    def broken(event):
        raise RuntimeError("subscriber down")

    log.subscribe("broken", broken)
    log.subscribe("ok", seen.append)
    log.publish(1)

    assert seen == [1]
    assert log.snapshot() == (1,)


def test_unsubscribe():
    log = EventLog("numbers")
    seen = []
    log.subscribe("s", seen.append)
    log.unsubscribe("s")
    log.publish(1)

    assert seen == []


def test_event_dict_carries_event_type():
    event = ScholarshipGrantedEvent(student="student1", amount=5000)

    assert event.to_dict() == {"event_type": "scholarship_granted", "student": "student1", "amount": 5000}
