"""Test adapter core: detection, discovery, execution and reconciliation."""

from testbridge.testing.cancel import CancelSignal
from testbridge.testing.discovery import discover_sources, discover_tests
from testbridge.testing.execution import TestExecutor, run_test_cases
from testbridge.testing.host import (
    DebuggerLauncher,
    DiscoverySink,
    ExecutionRecorder,
    MessageLevel,
    MessageLogger,
)
from testbridge.testing.models import (
    ReportRow,
    RunSummary,
    SourceRunSummary,
    TestCase,
    TestIdentifier,
    TestOutcome,
    TestResult,
)
from testbridge.testing.process import run_process, run_process_and_collect_output
from testbridge.testing.signature import is_compatible

__all__ = [
    "CancelSignal",
    "DebuggerLauncher",
    "DiscoverySink",
    "ExecutionRecorder",
    "MessageLevel",
    "MessageLogger",
    "ReportRow",
    "RunSummary",
    "SourceRunSummary",
    "TestCase",
    "TestExecutor",
    "TestIdentifier",
    "TestOutcome",
    "TestResult",
    "discover_sources",
    "discover_tests",
    "is_compatible",
    "run_process",
    "run_process_and_collect_output",
    "run_test_cases",
]
