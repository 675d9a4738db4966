from logging import Logger, getLogger
from typing import Any, Optional, Sequence

from ._config import Configuration, GlobalOptions
from ._services import ConfigStore, RequestExecutor, validate_config
from ._utils import RequestSpec
from ._utils.constants import ITEM_KEY, PLUGIN_NAME
from .models.exceptions import InvalidInputError
from .models.outcome import RequestOutcome


class Segi9Plugin:
    """Long-lived plugin serving ``segi9.http`` checks for a monitoring agent.

    The host agent drives the lifecycle: it calls ``start``/``stop`` around
    the process lifetime, ``validate`` and ``configure`` whenever the agent
    configuration changes, and ``export`` for every check, possibly from
    several threads at once.

    Item key signature::

        segi9.http[<url>, <auth_type>, <user_or_token>, <password>]

    ``auth_type`` is one of ``none`` (default), ``basic`` or ``bearer``. The
    raw HTTP response body is returned; item preprocessing on the agent side
    (JSONPath, regex, ...) takes it from there.
    """

    name = PLUGIN_NAME

    def __init__(
        self,
        store: Optional[ConfigStore] = None,
        executor: Optional[RequestExecutor] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self._logger = logger or getLogger("segi9")
        self._store = store or ConfigStore(logger=self._logger)
        self._executor = executor or RequestExecutor(
            self._store, logger=self._logger
        )

    @property
    def config(self) -> Configuration:
        return self._store.read()

    def start(self) -> None:
        self._logger.info(f"{self.name} HTTP plugin started")

    def stop(self) -> None:
        self._logger.info(f"{self.name} HTTP plugin stopped")

    def configure(
        self, global_options: Optional[GlobalOptions] = None, options: Any = None
    ) -> Configuration:
        """Apply a new plugin configuration delivered by the agent."""
        return self._store.replace(options, global_options)

    def validate(self, options: Any) -> None:
        """Reject a configuration before the agent commits it.

        Raises:
            ConfigurationRejectedError: If the options are not acceptable.
        """
        validate_config(options)

    def check(self, params: Sequence[str]) -> RequestOutcome:
        try:
            spec = RequestSpec.from_params(params)
        except InvalidInputError as e:
            self._logger.debug(f"invalid item parameters: {e}")
            return RequestOutcome.failure(e)

        self._logger.debug(
            f"export: key={ITEM_KEY} url={spec.url!r} auth={spec.auth_mode}"
        )
        return self._executor.execute(spec)

    def export(
        self, key: str, params: Sequence[str], context: Optional[Any] = None
    ) -> str:
        """Serve one check.

        Returns:
            str: The raw response body.

        Raises:
            Segi9Error: The classified failure, in place of a value.
        """
        if key != ITEM_KEY:
            raise InvalidInputError(f"unsupported key: {key!r}")

        return self.check(params).unwrap()
