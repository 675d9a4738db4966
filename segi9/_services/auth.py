import base64
from dataclasses import dataclass, field
from enum import Enum

from .._utils.constants import HEADER_AUTHORIZATION
from ..models.exceptions import InvalidInputError


class AuthMode(str, Enum):
    """Authentication schemes accepted in the auth_type item parameter."""

    NONE = "none"
    BASIC = "basic"
    BEARER = "bearer"


@dataclass(frozen=True)
class AuthDecision:
    """Credentials to attach to one outgoing request."""

    mode: AuthMode
    headers: dict[str, str] = field(default_factory=dict)


def normalize_auth_mode(value: str) -> str:
    """Trim and lower-case a raw auth mode; an empty value means ``none``."""
    return value.strip().lower() or AuthMode.NONE.value


def basic_auth_header(username: str, password: str) -> str:
    userpass = f"{username}:{password}".encode("utf-8")
    return f"Basic {base64.b64encode(userpass).decode('ascii')}"


def dispatch(mode: str, principal: str = "", secret: str = "") -> AuthDecision:
    """Decide which credentials to attach for the given auth mode.

    Args:
        mode: The auth mode, already trimmed and lower-cased by the caller.
        principal: The username (basic) or the token (bearer).
        secret: The password (basic only, may be empty).

    Returns:
        AuthDecision: The headers to set on the request.

    Raises:
        InvalidInputError: If the mode is not supported, or bearer is used
            without a token.
    """
    match mode:
        case "" | AuthMode.NONE:
            return AuthDecision(mode=AuthMode.NONE)
        case AuthMode.BASIC:
            return AuthDecision(
                mode=AuthMode.BASIC,
                headers={HEADER_AUTHORIZATION: basic_auth_header(principal, secret)},
            )
        case AuthMode.BEARER:
            if not principal:
                raise InvalidInputError(
                    "auth_type 'bearer' requires a token in the third parameter (user)"
                )
            return AuthDecision(
                mode=AuthMode.BEARER,
                headers={HEADER_AUTHORIZATION: f"Bearer {principal}"},
            )
        case _:
            raise InvalidInputError(
                f"unsupported auth_type {mode!r}; valid values are: none, basic, bearer"
            )
