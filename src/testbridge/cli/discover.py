"""tbridge discover command - list test cases."""

import json
from pathlib import Path

import click

from testbridge.cli.utils import echo_message
from testbridge.testing.discovery import discover_sources
from testbridge.testing.models import TestCase


@click.command()
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def discover_command(ctx: click.Context, paths: tuple[Path, ...], as_json: bool) -> None:
    """List the test cases in each compatible PATH.

    Incompatible files are ignored. Errors are reported per file.
    """
    config = ctx.obj["config"]
    test_cases: list[TestCase] = []

    discover_sources(
        [str(p) for p in paths],
        echo_message,
        test_cases.append,
        config=config.discovery,
        detection=config.detection,
    )

    if as_json:
        click.echo(
            json.dumps(
                [
                    {"source": tc.source, "group": tc.group, "name": tc.name}
                    for tc in test_cases
                ],
                indent=2,
            )
        )
        return

    for test_case in test_cases:
        click.echo(test_case.full_name)
