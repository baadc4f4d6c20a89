"""
Request-level errors and their HTTP mapping.
"""
from typing import Optional


class AnalysisError(Exception):
    """Error that ends a request with ``{"error": ..., "details": ...}``."""

    status_code = 500
    message = "Interner Serverfehler"

    def __init__(self, message: Optional[str] = None, details: Optional[str] = None):
        self.message = message or self.message
        self.details = details
        super().__init__(self.message)

    def to_payload(self) -> dict:
        payload = {"error": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class InvalidRequest(AnalysisError):
    status_code = 400
    message = "Kein Input erhalten"


class MissingCredential(AnalysisError):
    status_code = 500
    message = "API-Key fehlt"


class UnhandledInternal(AnalysisError):
    status_code = 500
    message = "Interner Serverfehler"


class UpstreamCallFailed(Exception):
    """The LLM provider errored or answered with a non-success status."""

    def __init__(self, reason: str, status_code: Optional[int] = None):
        self.reason = reason
        self.status_code = status_code
        super().__init__(reason)
