"""
Exception classes for the quiz grader.

Anything derived from QuizGraderError that reaches FastAPI is rendered as
{"success": false, "message": ...} with the error's status code.
"""
from typing import Any, Dict, Optional


class QuizGraderError(Exception):
    """Base exception for all grader errors."""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class MethodNotAllowedError(QuizGraderError):
    """Raised when the submit endpoint is hit with anything but POST."""

    status_code = 405

    def __init__(self, method: str):
        super().__init__("Only POST allowed", details={"method": method})


class SubmissionValidationError(QuizGraderError):
    """Raised when a submission is missing name, group or answers."""

    status_code = 400

    def __init__(self, missing: Optional[list] = None):
        super().__init__(
            "Missing name, group or answers",
            details={"missing": missing} if missing else None,
        )


class NotificationDeliveryError(QuizGraderError):
    """Raised when the messaging API cannot be reached or rejects a message."""

    status_code = 502

    def __init__(self, message: str, status_code: Optional[int] = None,
                 response_body: Optional[str] = None):
        super().__init__(message)
        self.api_status_code = status_code
        self.response_body = response_body
