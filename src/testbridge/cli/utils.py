"""CLI utilities: a console implementation of the host surface."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from rich.console import Console
from rich.markup import escape

from testbridge.testing.host import MessageLevel
from testbridge.testing.models import TestCase, TestOutcome, TestResult

console = Console(stderr=True, soft_wrap=True)

OUTCOME_MARKS = {
    TestOutcome.PASSED: "[green]✓[/green]",
    TestOutcome.FAILED: "[red]✗[/red]",
    TestOutcome.SKIPPED: "[yellow]-[/yellow]",
}

_LEVEL_STYLES = {
    MessageLevel.INFORMATIONAL: "dim",
    MessageLevel.WARNING: "yellow",
    MessageLevel.ERROR: "red",
}


def echo_message(level: MessageLevel, message: str) -> None:
    """Host logger writing to stderr."""
    prefix = "" if level is MessageLevel.INFORMATIONAL else f"{level.value.upper()}: "
    style = _LEVEL_STYLES[level]
    console.print(f"[{style}]{escape(prefix + message)}[/{style}]")


@dataclass
class ConsoleRecorder:
    """Execution recorder that prints outcomes and keeps them for JSON output."""

    quiet: bool = False
    records: list[dict[str, Any]] = field(default_factory=list)

    def record_start(self, test_case: TestCase) -> None:
        if not self.quiet:
            console.print(f"  [dim]{escape(test_case.full_name)} ...[/dim]")

    def record_end(self, test_case: TestCase, outcome: TestOutcome) -> None:
        self._record(test_case, outcome, None)

    def record_result(self, result: TestResult) -> None:
        self._record(result.test_case, result.outcome, result.error_message)

    def _record(self, test_case: TestCase, outcome: TestOutcome, message: str | None) -> None:
        self.records.append(
            {
                "source": test_case.source,
                "test": test_case.full_name,
                "outcome": outcome.value,
                "message": message,
            }
        )
        if self.quiet:
            return
        console.print(f"  {OUTCOME_MARKS[outcome]} {escape(test_case.full_name)}: {outcome.value}")
        if message:
            for line in message.splitlines():
                console.print(f"      {escape(line)}", highlight=False)
