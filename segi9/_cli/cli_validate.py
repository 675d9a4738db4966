from typing import Tuple

import click

from .._services import validate_config
from .._utils.constants import PLUGIN_NAME
from ..models.exceptions import ConfigurationRejectedError
from ._utils._console import ConsoleLogger

console = ConsoleLogger()

OPTION_PREFIX = f"Plugins.{PLUGIN_NAME}."


def _parse_options(options: Tuple[str, ...]) -> dict[str, str]:
    payload = {}
    for option in options:
        key, sep, value = option.partition("=")
        if not sep:
            console.error(f"Invalid option {option!r}, expected KEY=VALUE.")
        key = key.strip()
        if key.startswith(OPTION_PREFIX):
            key = key[len(OPTION_PREFIX) :]
        payload[key] = value.strip()
    return payload


@click.command()
@click.argument("options", nargs=-1)
def validate(options: Tuple[str, ...]) -> None:
    """Check plugin options, e.g. Timeout=15 SkipVerify=true.

    Keys may also be given in agent file form, e.g. Plugins.Segi9.Timeout=15.
    """
    try:
        config = validate_config(_parse_options(options))
    except ConfigurationRejectedError as e:
        console.error(str(e))
        return

    console.success(
        f"Configuration accepted: Timeout={config.timeout}s "
        f"SkipVerify={config.skip_verify}"
    )


if __name__ == "__main__":
    validate()
