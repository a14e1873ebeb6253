"""testbridge CLI - tbridge command."""

import click

from testbridge import __version__
from testbridge.cli.check import check_command
from testbridge.cli.discover import discover_command
from testbridge.cli.run import run_command
from testbridge.config.loader import load_config
from testbridge.core.errors import ConfigError
from testbridge.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="tbridge")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """testbridge - discover and run CppUTest executables."""
    ctx.ensure_object(dict)
    try:
        config = load_config()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
    if verbose:
        config.logging.level = "DEBUG"
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = config
    configure_logging(config=config.logging)


cli.add_command(check_command, name="check")
cli.add_command(discover_command, name="discover")
cli.add_command(run_command, name="run")


if __name__ == "__main__":
    cli()
