"""
Tagged outcome returned by every ledger operation.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from .entities import Certificate
from .enums import ErrorCode
from .exceptions import exception_for


@dataclass(frozen=True)
class LedgerError:
    """Why an operation was rejected."""
    code: ErrorCode
    message: str


@dataclass(frozen=True)
class LedgerResult:
    """Either ``ok`` (a message or a certificate) or ``err``, never both.

    Callers check ``is_ok`` before touching the payload, or call ``unwrap()``
    to get the payload and let a failure surface as an exception.
    """
    ok: Optional[Union[str, Certificate]] = None
    err: Optional[LedgerError] = None

    def __post_init__(self):
        if (self.ok is None) == (self.err is None):
            raise ValueError("LedgerResult needs exactly one of ok or err")

    @classmethod
    def success(cls, payload: Union[str, Certificate]) -> "LedgerResult":
        return cls(ok=payload)

    @classmethod
    def failure(cls, code: ErrorCode, message: str) -> "LedgerResult":
        return cls(err=LedgerError(code, message))

    @property
    def is_ok(self) -> bool:
        return self.err is None

    @property
    def is_err(self) -> bool:
        return self.err is not None

    @property
    def error_code(self) -> Optional[ErrorCode]:
        return self.err.code if self.err else None

    @property
    def message(self) -> str:
        """Success message, or the error message on failure."""
        if self.err:
            return self.err.message
        if isinstance(self.ok, str):
            return self.ok
        return ""

    def unwrap(self) -> Union[str, Certificate]:
        """Return the payload, raising the matching ledger exception on failure."""
        if self.err:
            raise exception_for(self.err.code, self.err.message)
        return self.ok

    def to_dict(self) -> Dict[str, Any]:
        """Render as ``{"ok": {...}}`` or ``{"err": "..."}``."""
        if self.err:
            return {"err": self.err.message}
        if isinstance(self.ok, Certificate):
            return {"ok": self.ok.to_dict()}
        return {"ok": {"message": self.ok}}
