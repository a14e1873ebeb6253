"""Core module exports."""

from testbridge.core.errors import (
    ConfigError,
    DiscoveryError,
    ErrorCode,
    ExecutableError,
    OperationCancelledError,
    ReportError,
    SignalDisposedError,
    TestBridgeError,
    UnknownTestCaseError,
)
from testbridge.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)

__all__ = [
    # Errors
    "TestBridgeError",
    "ConfigError",
    "DiscoveryError",
    "ErrorCode",
    "ExecutableError",
    "OperationCancelledError",
    "ReportError",
    "SignalDisposedError",
    "UnknownTestCaseError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
]
