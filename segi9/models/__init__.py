from .exceptions import (
    ConfigurationRejectedError,
    ErrorCategory,
    ErrorContract,
    InvalidInputError,
    NetworkFailureError,
    ResponseReadError,
    Segi9Error,
)
from .outcome import OutcomeStatus, RequestOutcome

__all__ = [
    "ConfigurationRejectedError",
    "ErrorCategory",
    "ErrorContract",
    "InvalidInputError",
    "NetworkFailureError",
    "OutcomeStatus",
    "RequestOutcome",
    "ResponseReadError",
    "Segi9Error",
]
