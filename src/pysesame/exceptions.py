"""Custom exceptions for pysesame."""

from typing import Optional


class PySesameException(Exception):
    """Base class for pysesame exceptions."""


class InvalidArgumentError(PySesameException, ValueError):
    """Raised when a required identifier is missing, before any request is made."""


class RequestError(PySesameException):
    """Raised when the request could not be performed (connection, timeout)."""


class ApiError(PySesameException):
    """Raised when the API answers with a non-2xx status code."""

    def __init__(self, status_code: int, error_message: Optional[str] = None) -> None:
        """Initialize the API error."""
        self.status_code = status_code
        self.error_message = error_message or ""
        if self.error_message:
            super().__init__(
                f"Request failed: Status={status_code}, Error= {self.error_message}",
            )
        else:
            super().__init__(f"Request failed: Status={status_code} (no reason)")


class ParseError(PySesameException):
    """Raised when a successful response cannot be decoded."""
