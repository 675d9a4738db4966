import click

from .._utils import package_version
from .cli_get import get as get  # type: ignore
from .cli_validate import validate as validate  # type: ignore


@click.group()
@click.version_option(
    package_version(),
    prog_name="segi9-http",
    message="%(prog)s version %(version)s",
)
def cli() -> None:
    """Segi9 HTTP plugin tools."""


cli.add_command(get)
cli.add_command(validate)
