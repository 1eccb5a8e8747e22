"""
REST API over a MockLedger using FastAPI.
"""

import logging
from typing import Optional, Dict, Any, List
from datetime import datetime, timezone
from pydantic import BaseModel

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..core.enums import ErrorCode
from ..core.results import LedgerResult
from ..services import MockLedger


logger = logging.getLogger(__name__)

HTTP_STATUS_BY_CODE: Dict[ErrorCode, int] = {
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.ALREADY_EXISTS: 409,
    ErrorCode.ALREADY_COMPLETED: 409,
    ErrorCode.INVALID_AMOUNT: 400,
    ErrorCode.NOT_ELIGIBLE: 422,
    ErrorCode.UNAUTHORIZED: 403,
}


# Pydantic models for API
# Fields are left unconstrained so the ledger does its own validation.
class CertificateIssue(BaseModel):
    student: str
    course_id: int
    issuer: str
    issued_date: int


class ScholarshipGrant(BaseModel):
    student: str
    amount: int
    eligibility_date: int


class ScholarshipClaim(BaseModel):
    current_height: int


class CoursePaymentRegister(BaseModel):
    course_id: int
    student: str
    tutor: str
    amount: int


class CourseCompletion(BaseModel):
    tutor: str


class EduLedgerRestAPI:
    """REST API implementation for the ledger."""

    def __init__(self, ledger: MockLedger, title: str = "EduLedger API",
                 cors_origins: Optional[List[str]] = None):
        self._ledger = ledger

        self.app = FastAPI(
            title=title,
            description="In-memory ledger for certificates, scholarships and course payments",
            version=__version__,
            docs_url="/docs",
            redoc_url="/redoc"
        )

        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins or ["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        self._setup_routes()

    @property
    def ledger(self) -> MockLedger:
        return self._ledger

    def _setup_routes(self):
        """Setup API routes."""

        @self.app.get("/", response_model=Dict[str, str])
        async def root():
            return {
                "message": "EduLedger API",
                "version": __version__,
                "docs": "/docs"
            }

        @self.app.get("/health", response_model=Dict[str, str])
        async def health_check():
            return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}

        # Certificate endpoints
        @self.app.post("/certificates", status_code=status.HTTP_201_CREATED)
        async def issue_certificate(data: CertificateIssue):
            """Issue a certificate for a student and course."""
            return self._respond(self._ledger.issue_certificate(
                data.student, data.course_id, data.issuer, data.issued_date
            ))

        @self.app.get("/certificates/{student}/{course_id}")
        async def verify_certificate(student: str, course_id: int):
            """Verify a certificate."""
            return self._respond(self._ledger.verify_certificate(student, course_id))

        # Scholarship endpoints
        @self.app.post("/scholarships", status_code=status.HTTP_201_CREATED)
        async def grant_scholarship(data: ScholarshipGrant):
            return self._respond(self._ledger.grant_scholarship(
                data.student, data.amount, data.eligibility_date
            ))

        @self.app.post("/scholarships/{student}/claim")
        async def claim_scholarship(student: str, data: ScholarshipClaim):
            return self._respond(self._ledger.claim_scholarship(student, data.current_height))

        # Course payment endpoints
        @self.app.post("/course-payments", status_code=status.HTTP_201_CREATED)
        async def register_course_payment(data: CoursePaymentRegister):
            return self._respond(self._ledger.register_course_payment(
                data.course_id, data.student, data.tutor, data.amount
            ))

        @self.app.post("/course-payments/{student}/{course_id}/complete")
        async def mark_course_complete(student: str, course_id: int, data: CourseCompletion):
            """Mark a course complete on behalf of its tutor."""
            return self._respond(self._ledger.mark_course_complete(course_id, student, data.tutor))

        # Observer endpoints
        @self.app.get("/events/{log_name}", response_model=List[Dict[str, Any]])
        async def list_events(log_name: str, skip: int = 0, limit: int = 100):
            logs = {log.name: log for log in self._ledger.event_logs()}
            if log_name not in logs:
                raise HTTPException(status_code=404, detail=f"Unknown event log: {log_name}")
            events = logs[log_name].snapshot()[skip:skip + limit]
            return [event.to_dict() for event in events]

        @self.app.get("/statistics", response_model=Dict[str, Any])
        async def get_statistics():
            return self._ledger.get_statistics()

        @self.app.post("/reset", response_model=Dict[str, str])
        async def reset():
            self._ledger.reset()
            return {"status": "reset"}

    def _respond(self, result: LedgerResult) -> Dict[str, Any]:
        """Return the success body or raise the HTTP error for a rejection."""
        if result.is_ok:
            return result.to_dict()

        code = result.error_code
        logger.debug("Request rejected: %s (%s)", result.message, code.value)
        raise HTTPException(
            status_code=HTTP_STATUS_BY_CODE[code],
            detail={"code": code.value, "message": result.message}
        )
