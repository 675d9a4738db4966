import logging
import sys
from typing import Callable, Optional, Tuple

logger: logging.Logger = logging.getLogger("segi9")

LOG_FORMAT = "[%(asctime)s - %(name)s:%(lineno)d - %(levelname)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

HostLogSink = Callable[[int, str], None]


class PersistentLogsHandler(logging.FileHandler):
    """A simple log handler that always writes to a single file without rotation."""

    def __init__(self, file: str):
        # Open file in append mode ('a'), so logs are not overwritten
        super().__init__(file, mode="a", encoding="utf8")


class HostLogHandler(logging.Handler):
    """Forwards log records to the logging facility of the host agent.

    The sink receives the numeric level and the formatted message, so the
    host decides how each level is rendered.
    """

    def __init__(self, sink: HostLogSink, level: int = logging.NOTSET):
        super().__init__(level)
        self._sink = sink

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._sink(record.levelno, self.format(record))
        except Exception:
            self.handleError(record)


def _stream_handler(
    log_file: Optional[str],
) -> Tuple[logging.Handler, Optional[OSError]]:
    if log_file:
        try:
            return PersistentLogsHandler(file=log_file), None
        except OSError as e:
            return logging.StreamHandler(sys.stderr), e
    return logging.StreamHandler(sys.stderr), None


def setup_logging(
    should_debug: Optional[bool] = None,
    log_file: Optional[str] = None,
    host_sink: Optional[HostLogSink] = None,
) -> logging.Handler:
    """Install the single log sink of the process on the ``segi9`` logger.

    With ``host_sink`` records go to the host agent, otherwise to ``log_file``
    when it can be opened, and to stderr in every other case. Calling it again
    replaces the previously installed sink.
    """
    handler: logging.Handler
    open_error: Optional[OSError] = None
    if host_sink is not None:
        handler = HostLogHandler(host_sink)
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler, open_error = _stream_handler(log_file)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATEFMT))

    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()

    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if should_debug else logging.INFO)
    logger.propagate = False

    if open_error is not None:
        logger.warning(
            f"Failed to open log file {log_file}: {open_error}. Logging to stderr."
        )
    return handler
