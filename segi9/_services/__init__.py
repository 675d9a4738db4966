from .auth import AuthDecision, AuthMode, dispatch, normalize_auth_mode
from .config_service import ConfigStore, resolve_configuration, validate_config
from .request_executor import RequestExecutor

__all__ = [
    "AuthDecision",
    "AuthMode",
    "ConfigStore",
    "RequestExecutor",
    "dispatch",
    "normalize_auth_mode",
    "resolve_configuration",
    "validate_config",
]
