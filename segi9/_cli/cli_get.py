import logging
import os

import click
from dotenv import load_dotenv

from .._plugin import Segi9Plugin
from .._services import ConfigStore
from .._utils import setup_logging
from .._utils.constants import DEFAULT_TIMEOUT, ENV_LOG_FILE
from ._utils._console import ConsoleLogger

logger = logging.getLogger(__name__)
console = ConsoleLogger()

# Manual runs target test endpoints, often with self-signed certificates.
MANUAL_OPTIONS = {"Timeout": DEFAULT_TIMEOUT, "SkipVerify": True}


@click.command()
@click.argument("url")
@click.option(
    "--auth",
    "auth_type",
    default="none",
    show_default=True,
    help="Authentication type (none, basic, bearer).",
)
@click.option("--user", default="", help="Username (basic) or token (bearer).")
@click.option("--pass", "password", default="", help="Password (basic only).")
@click.option("--debug", is_flag=True, help="Log request details to stderr.")
def get(url: str, auth_type: str, user: str, password: str, debug: bool) -> None:
    """Run a single check against URL and print the response body."""
    load_dotenv(override=True)
    setup_logging(debug, log_file=os.environ.get(ENV_LOG_FILE))

    store = ConfigStore()
    store.replace(MANUAL_OPTIONS)
    plugin = Segi9Plugin(store=store)

    logger.info(f"Running in manual mode. URL: {url}")

    with console.spinner(f"GET {url} ..."):
        outcome = plugin.check([url, auth_type, user, password])

    if not outcome.ok:
        console.error(f"Error: {outcome.error}")

    # Undecodable body bytes go out exactly as received.
    click.echo(outcome.body.encode("utf-8", errors="surrogateescape"))


if __name__ == "__main__":
    get()
