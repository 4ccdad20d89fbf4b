from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AttendanceServiceError(DomainError):
    """Base for failures talking to the remote attendance service."""

    @property
    def http_status(self) -> int:
        return 503


class ServiceUnavailableError(AttendanceServiceError):
    """Raised when the remote service cannot be reached (connection, timeout)."""


class RemoteServiceError(AttendanceServiceError):
    """Raised when the remote service answers with a non-success status."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

    @property
    def http_status(self) -> int:
        # Client-side mistakes reported by the remote store are passed through.
        if self.status_code and 400 <= self.status_code < 500:
            return self.status_code
        return 502
