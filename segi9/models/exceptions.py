from enum import Enum
from typing import Optional

from pydantic import BaseModel


class ErrorCategory(str, Enum):
    """Categories of plugin errors."""

    USER = "User"  # Bad item parameters or configuration values
    SYSTEM = "System"  # Network or remote endpoint problems


class ErrorContract(BaseModel):
    """Structured description of a failed operation."""

    code: str  # <Component>.<PascalCaseErrorCode>, e.g. Segi9.InvalidInput
    title: str
    detail: str
    category: ErrorCategory = ErrorCategory.USER


class Segi9Error(Exception):
    """Base exception for every classified plugin failure."""

    code = "Error"
    title = "Plugin error"
    category = ErrorCategory.USER

    def __init__(self, detail: str) -> None:
        self.error_info = ErrorContract(
            code=f"Segi9.{self.code}",
            title=self.title,
            detail=detail,
            category=self.category,
        )
        super().__init__(detail)

    @property
    def message(self) -> str:
        return self.error_info.detail


class InvalidInputError(Segi9Error):
    """Raised for bad item parameters, detected before any network call."""

    code = "InvalidInput"
    title = "Invalid input"


class ConfigurationRejectedError(Segi9Error):
    code = "ConfigurationRejected"
    title = "Configuration rejected"


class NetworkFailureError(Segi9Error):
    """The request could not be completed: DNS, connect, TLS or timeout."""

    code = "NetworkFailure"
    title = "Network failure"
    category = ErrorCategory.SYSTEM

    def __init__(self, url: str, cause: Optional[BaseException] = None) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"HTTP request to {url!r} failed: {cause}")


class ResponseReadError(Segi9Error):
    """Headers were received but the body could not be read in full."""

    code = "ResponseReadFailure"
    title = "Response read failure"
    category = ErrorCategory.SYSTEM

    def __init__(self, url: str, cause: Optional[BaseException] = None) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"failed to read response body from {url!r}: {cause}")
