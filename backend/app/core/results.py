# app/core/results.py
"""
Tagged results returned by every core operation.

Services never raise for expected outcomes (duplicate user, wrong password,
missing device address ...). They return a Result whose code names the
category; the HTTP layer turns that code into a status and an envelope.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ResultCode(str, Enum):
    # success categories
    CREATED = "CREATED"
    UPDATED = "UPDATED"
    SUCCESS = "SUCCESS"
    SENT = "SENT"
    # failure categories
    VALIDATION_ERROR = "VALIDATION_ERROR"
    CONFLICT = "CONFLICT"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    NO_ADDRESS = "NO_ADDRESS"
    GATEWAY_FAILURE = "GATEWAY_FAILURE"
    INTERNAL_ERROR = "INTERNAL_ERROR"


SUCCESS_CODES = frozenset({
    ResultCode.CREATED,
    ResultCode.UPDATED,
    ResultCode.SUCCESS,
    ResultCode.SENT,
})


@dataclass(frozen=True)
class Result:
    """Outcome of a core operation: a category, a caller-safe message and optional data."""
    code: ResultCode
    message: str
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.code in SUCCESS_CODES

    @classmethod
    def validation_error(cls, message: str = "Missing fields") -> "Result":
        return cls(ResultCode.VALIDATION_ERROR, message)

    @classmethod
    def internal_error(cls) -> "Result":
        return cls(ResultCode.INTERNAL_ERROR, "Internal Server Error")


def missing(*values: Any) -> bool:
    """True when any required value is absent or empty."""
    return any(v is None or v == "" for v in values)
