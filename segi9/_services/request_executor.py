import threading
from logging import Logger, getLogger
from typing import Optional

from httpx import (
    BaseTransport,
    Client,
    InvalidURL,
    Request,
    RequestError,
    Response,
    StreamError,
)

from .._utils import RequestSpec, get_httpx_client_kwargs, user_agent_value
from .._utils.constants import DEFAULT_TIMEOUT, HEADER_ACCEPT, HEADER_USER_AGENT
from ..models.exceptions import (
    InvalidInputError,
    NetworkFailureError,
    ResponseReadError,
    Segi9Error,
)
from ..models.outcome import RequestOutcome
from .auth import AuthDecision, dispatch, normalize_auth_mode
from .config_service import ConfigStore


class DeadlineExceeded(Exception):
    def __init__(self, timeout: float) -> None:
        super().__init__(f"deadline of {timeout:g}s exceeded")


class _Exchange:
    """One request/response exchange, run on its own worker thread.

    The worker owns the client and closes it when the exchange ends, whether
    or not the caller is still waiting for it.
    """

    def __init__(self, client: Client, request: Request) -> None:
        self._client = client
        self._request = request
        self._cancelled = threading.Event()
        self.done = threading.Event()
        self.response: Optional[Response] = None
        self.body: Optional[bytes] = None
        self.send_error: Optional[RequestError] = None
        self.read_error: Optional[Exception] = None
        self.unexpected: Optional[Exception] = None

    def cancel(self) -> None:
        self._cancelled.set()

    def run(self) -> None:
        try:
            try:
                response = self._client.send(self._request, stream=True)
            except RequestError as e:
                self.send_error = e
                return

            self.response = response
            try:
                chunks = []
                for chunk in response.iter_bytes():
                    if self._cancelled.is_set():
                        return
                    chunks.append(chunk)
                self.body = b"".join(chunks)
            except (RequestError, StreamError) as e:
                self.read_error = e
            finally:
                response.close()
        except Exception as e:
            self.unexpected = e
        finally:
            self._client.close()
            self.done.set()


class RequestExecutor:
    """Performs one authenticated GET request per call.

    The configuration is read once at the start of each call. A fresh httpx
    client is built from that snapshot and closed when the call ends, so no
    client state is shared between calls or survives a reconfiguration.

    The configured timeout bounds the whole call, connection and body read
    included: httpx timeouts only apply per phase and per socket read, so the
    exchange runs on a worker thread and the caller stops waiting for it once
    the deadline passes.
    """

    def __init__(
        self,
        store: ConfigStore,
        logger: Optional[Logger] = None,
        transport: Optional[BaseTransport] = None,
    ) -> None:
        self._store = store
        self._logger = logger or getLogger("segi9")
        self._transport = transport

    def execute(self, spec: RequestSpec) -> RequestOutcome:
        """Fetch ``spec.url`` and return its raw body.

        Any HTTP status is a success; only input, transport and body read
        problems produce a failed outcome. Failures are handed back to the
        caller for reporting and only logged at DEBUG here.
        """
        try:
            return RequestOutcome.success(self._fetch(spec))
        except Segi9Error as e:
            self._logger.debug(f"request failed: {e}")
            return RequestOutcome.failure(e)

    def _fetch(self, spec: RequestSpec) -> str:
        url = spec.url.strip()
        if not url:
            raise InvalidInputError(
                "the first parameter (url) is required and cannot be empty"
            )

        config = self._store.read()
        timeout = config.timeout if config.timeout > 0 else DEFAULT_TIMEOUT

        auth = dispatch(
            normalize_auth_mode(spec.auth_mode), spec.principal, spec.secret
        )

        try:
            client_kwargs = get_httpx_client_kwargs(timeout, config.skip_verify)
        except OSError as e:
            # Unreadable CA bundle or certificate directory.
            raise NetworkFailureError(url, e) from e
        if self._transport is not None:
            client_kwargs["transport"] = self._transport

        client = Client(**client_kwargs)
        try:
            request = client.build_request("GET", url, headers=self._headers(auth))
        except (InvalidURL, UnicodeEncodeError) as e:
            client.close()
            raise InvalidInputError(
                f"failed to build HTTP request for {url!r}: {e}"
            ) from e

        self._logger.debug(
            f"-> GET {url} (timeout={timeout}s tls_skip={config.skip_verify})"
        )

        exchange = _Exchange(client, request)
        worker = threading.Thread(
            target=exchange.run, name="segi9-request", daemon=True
        )
        worker.start()

        if not exchange.done.wait(timeout):
            exchange.cancel()
            if exchange.response is None:
                raise NetworkFailureError(url, DeadlineExceeded(timeout))
            raise ResponseReadError(url, DeadlineExceeded(timeout))

        if exchange.unexpected is not None:
            raise exchange.unexpected
        if exchange.send_error is not None:
            raise NetworkFailureError(url, exchange.send_error) from exchange.send_error
        if exchange.read_error is not None:
            raise ResponseReadError(url, exchange.read_error) from exchange.read_error

        response = exchange.response
        body = exchange.body or b""
        self._logger.debug(
            f"<- {response.status_code} {response.reason_phrase} ({len(body)} bytes)"
        )
        # Bytes that do not decode are kept as lone surrogates, so
        # body.encode(encoding, "surrogateescape") gives back the original.
        return body.decode(response.encoding or "utf-8", errors="surrogateescape")

    def _headers(self, auth: AuthDecision) -> dict[str, str]:
        return {
            HEADER_USER_AGENT: user_agent_value(),
            HEADER_ACCEPT: "*/*",
            **auth.headers,
        }
