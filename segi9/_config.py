from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from ._utils.constants import DEFAULT_TIMEOUT


class Configuration(BaseModel):
    """Active plugin settings.

    Instances are frozen: the store swaps whole snapshots and never mutates one
    in place, so a reader holding a snapshot is unaffected by later changes.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    timeout: int = Field(default=DEFAULT_TIMEOUT, alias="Timeout")
    skip_verify: bool = Field(default=False, alias="SkipVerify")


class ConfigCandidate(BaseModel):
    """Configuration as delivered by the host, before defaults are applied."""

    model_config = ConfigDict(populate_by_name=True)

    timeout: Optional[int] = Field(default=None, alias="Timeout")
    skip_verify: Optional[bool] = Field(default=None, alias="SkipVerify")

    @classmethod
    def parse(cls, options: Any) -> "ConfigCandidate":
        """Convert a host options payload into a candidate.

        Raises:
            pydantic.ValidationError: If the payload cannot be decoded.
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(options)


class GlobalOptions(BaseModel):
    """Agent-wide settings shared by every plugin."""

    model_config = ConfigDict(populate_by_name=True)

    timeout: int = Field(default=0, alias="Timeout")
