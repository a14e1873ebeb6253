"""tbridge run command - discover and execute test cases."""

from __future__ import annotations

import json
import signal
from pathlib import Path
from types import FrameType

import click

from testbridge.cli.utils import ConsoleRecorder, console, echo_message
from testbridge.testing.execution import TestExecutor


@click.command()
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--timeout-ms",
    type=click.IntRange(min=1),
    default=None,
    help="Cancel the whole run after this many milliseconds",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def run_command(
    ctx: click.Context,
    paths: tuple[Path, ...],
    timeout_ms: int | None,
    as_json: bool,
) -> None:
    """Discover and run the tests in each compatible PATH.

    Ctrl-C cancels the run: the running executable is killed and its
    unreported tests are marked skipped. Exits with status 1 on any failure,
    error or cancellation.
    """
    config = ctx.obj["config"]
    recorder = ConsoleRecorder(quiet=as_json)

    with TestExecutor(config) as executor:
        if timeout_ms is not None:
            executor.signal.cancel_after_timeout(timeout_ms)

        def _on_interrupt(_signum: int, _frame: FrameType | None) -> None:
            console.print("[dim]Cancelling...[/dim]")
            executor.cancel()

        previous_handler = signal.signal(signal.SIGINT, _on_interrupt)
        try:
            summary = executor.run_sources([str(p) for p in paths], recorder, echo_message)
        finally:
            signal.signal(signal.SIGINT, previous_handler)
        cancelled = executor.signal.is_cancellation_requested

    if as_json:
        click.echo(
            json.dumps(
                {
                    "total": len(recorder.records),
                    "passed": summary.passed,
                    "failed": summary.failed,
                    "skipped": summary.skipped,
                    "cancelled": cancelled,
                    "errors": [
                        {"source": s.source, "error": str(s.error)} for s in summary.errors
                    ],
                    "results": recorder.records,
                },
                indent=2,
            )
        )
    else:
        console.rule()
        console.print(
            f"[green]{summary.passed} passed[/green], "
            f"[red]{summary.failed} failed[/red], "
            f"[yellow]{summary.skipped} skipped[/yellow]"
            + (" [dim](cancelled)[/dim]" if cancelled else "")
        )

    if not summary.succeeded or cancelled:
        raise SystemExit(1)
