from ._logs import HostLogHandler, PersistentLogsHandler, setup_logging
from ._request_spec import RequestSpec
from ._ssl_context import create_ssl_context, get_httpx_client_kwargs
from ._user_agent import package_version, user_agent_value

__all__ = [
    "HostLogHandler",
    "PersistentLogsHandler",
    "RequestSpec",
    "create_ssl_context",
    "get_httpx_client_kwargs",
    "package_version",
    "setup_logging",
    "user_agent_value",
]
