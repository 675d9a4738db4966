import importlib.metadata

from .constants import USER_AGENT_PRODUCT


def package_version() -> str:
    try:
        return importlib.metadata.version("segi9-http")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def user_agent_value() -> str:
    return f"{USER_AGENT_PRODUCT}/{package_version()}"
