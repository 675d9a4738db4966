from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .exceptions import Segi9Error


class OutcomeStatus(str, Enum):
    SUCCESSFUL = "successful"
    FAULTED = "faulted"


class RequestOutcome(BaseModel):
    """Result of a single request: the raw body or a classified error."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    status: OutcomeStatus
    body: Optional[str] = None
    error: Optional[Segi9Error] = None

    @classmethod
    def success(cls, body: str) -> "RequestOutcome":
        # Not validated: the body may hold lone surrogates for undecodable bytes.
        return cls.model_construct(status=OutcomeStatus.SUCCESSFUL, body=body)

    @classmethod
    def failure(cls, error: Segi9Error) -> "RequestOutcome":
        return cls(status=OutcomeStatus.FAULTED, error=error)

    @property
    def ok(self) -> bool:
        return self.status == OutcomeStatus.SUCCESSFUL

    def unwrap(self) -> str:
        """Return the body, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.body or ""
