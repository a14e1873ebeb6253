"""tbridge check command - detect compatible executables."""

from pathlib import Path

import click

from testbridge.core.errors import TestBridgeError
from testbridge.testing.signature import is_compatible


@click.command()
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.pass_context
def check_command(ctx: click.Context, paths: tuple[Path, ...]) -> None:
    """Report whether each PATH is a CppUTest executable.

    Exits with status 1 if any PATH is not compatible.
    """
    detection = ctx.obj["config"].detection
    all_compatible = True

    for path in paths:
        try:
            compatible = is_compatible(
                path,
                signature=detection.signature_bytes,
                chunk_size=detection.chunk_size,
            )
        except TestBridgeError as e:
            raise click.ClickException(str(e)) from e
        all_compatible = all_compatible and compatible
        click.echo(f"{path}: {'compatible' if compatible else 'not compatible'}")

    if not all_compatible:
        raise SystemExit(1)
