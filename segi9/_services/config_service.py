import threading
from logging import Logger, getLogger
from typing import Any, Optional

from pydantic import ValidationError

from .._config import ConfigCandidate, Configuration, GlobalOptions
from .._utils.constants import (
    DEFAULT_TIMEOUT,
    MAX_TIMEOUT,
    MIN_TIMEOUT,
    PLUGIN_NAME,
)
from ..models.exceptions import ConfigurationRejectedError


def _with_defaults(candidate: ConfigCandidate) -> Configuration:
    return Configuration(
        timeout=DEFAULT_TIMEOUT if candidate.timeout is None else candidate.timeout,
        skip_verify=bool(candidate.skip_verify),
    )


def resolve_configuration(
    candidate: ConfigCandidate, global_options: Optional[GlobalOptions] = None
) -> Configuration:
    """Apply defaults, the global timeout fallback and the range clamp."""
    config = _with_defaults(candidate)
    timeout = config.timeout

    if timeout == 0:
        if global_options is not None and global_options.timeout > 0:
            timeout = global_options.timeout
        else:
            timeout = DEFAULT_TIMEOUT

    timeout = min(max(timeout, MIN_TIMEOUT), MAX_TIMEOUT)

    return Configuration(timeout=timeout, skip_verify=config.skip_verify)


def validate_config(options: Any) -> Configuration:
    """Check a configuration payload without applying it.

    Safe to call before any configuration was ever committed; absent fields
    take the built-in defaults.

    Returns:
        Configuration: The accepted configuration.

    Raises:
        ConfigurationRejectedError: If the payload cannot be decoded or the
            timeout is outside the allowed range.
    """
    try:
        candidate = ConfigCandidate.parse(options)
    except ValidationError as e:
        raise ConfigurationRejectedError(
            f"failed to parse plugin configuration: {e}"
        ) from e

    config = _with_defaults(candidate)
    if config.timeout < MIN_TIMEOUT or config.timeout > MAX_TIMEOUT:
        raise ConfigurationRejectedError(
            f"Plugins.{PLUGIN_NAME}.Timeout: value {config.timeout} is out of "
            f"the allowed range [{MIN_TIMEOUT}..{MAX_TIMEOUT}]"
        )

    return config


class ConfigStore:
    """Holds the active configuration of the plugin.

    Readers get the current frozen snapshot and never wait on each other.
    Writers build the replacement outside the lock and only swap the reference
    under it, so a reader observes either the old or the new configuration,
    never a mix of both.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self._logger = logger or getLogger("segi9")
        self._lock = threading.Lock()
        self._config = Configuration()

    def read(self) -> Configuration:
        return self._config

    def replace(
        self, options: Any = None, global_options: Optional[GlobalOptions] = None
    ) -> Configuration:
        """Commit a new configuration.

        An undecodable payload is logged and the built-in defaults are
        committed instead. The timeout is always clamped into the valid range,
        even when the payload was not validated beforehand.
        """
        try:
            candidate = ConfigCandidate.parse(options)
        except ValidationError as e:
            self._logger.error(f"failed to parse plugin configuration: {e}")
            candidate = ConfigCandidate()

        config = resolve_configuration(candidate, global_options)

        with self._lock:
            self._config = config

        self._logger.info(
            f"configuration applied: Timeout={config.timeout}s "
            f"SkipVerify={config.skip_verify}"
        )
        return config
