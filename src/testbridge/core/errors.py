"""testbridge error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Executable I/O (open, read, spawn, attach)
- 4xxx: Discovery
- 5xxx: Reports and reconciliation
- 6xxx: Cancellation
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Executable I/O (3xxx)
    EXECUTABLE_READ_FAILED = 3001
    EXECUTABLE_SPAWN_FAILED = 3002
    EXECUTABLE_ATTACH_FAILED = 3003

    # Discovery (4xxx)
    DISCOVERY_UNSUPPORTED_NAME = 4001

    # Reports (5xxx)
    REPORT_PARSE_FAILED = 5001
    REPORT_UNKNOWN_TEST_CASE = 5002

    # Cancellation (6xxx)
    OPERATION_CANCELLED = 6001
    SIGNAL_DISPOSED = 6002


@dataclass(frozen=True, slots=True)
class TestBridgeError(Exception):
    """Base error with structured context for host-facing messages."""

    __test__ = False

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(TestBridgeError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class ExecutableError(TestBridgeError):
    """File or process access failures for a test executable."""

    @classmethod
    def read_failed(cls, path: str, reason: str) -> "ExecutableError":
        return cls(
            code=ErrorCode.EXECUTABLE_READ_FAILED,
            message=f"Cannot read {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def spawn_failed(cls, path: str, reason: str) -> "ExecutableError":
        return cls(
            code=ErrorCode.EXECUTABLE_SPAWN_FAILED,
            message=f"Cannot start {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def attach_failed(cls, pid: int, reason: str) -> "ExecutableError":
        return cls(
            code=ErrorCode.EXECUTABLE_ATTACH_FAILED,
            message=f"Cannot attach to process {pid}: {reason}",
            details={"pid": pid, "reason": reason},
        )


class DiscoveryError(TestBridgeError):
    """Unparseable test listing output."""

    @classmethod
    def unsupported_name(cls, name: str, source_name: str) -> "DiscoveryError":
        return cls(
            code=ErrorCode.DISCOVERY_UNSUPPORTED_NAME,
            message=f'Unsupported format of test name "{name}" reported by {source_name}',
            details={"name": name, "source": source_name},
        )


class ReportError(TestBridgeError):
    """Unreadable or malformed result report."""

    @classmethod
    def parse_failed(cls, path: str, reason: str) -> "ReportError":
        return cls(
            code=ErrorCode.REPORT_PARSE_FAILED,
            message=f"Failed to parse report {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class UnknownTestCaseError(TestBridgeError):
    """A report row names a test case that was never requested."""

    @classmethod
    def not_requested(cls, full_name: str, source: str) -> "UnknownTestCaseError":
        return cls(
            code=ErrorCode.REPORT_UNKNOWN_TEST_CASE,
            message=f"Report for {source} contains unrequested test case {full_name}",
            details={"test": full_name, "source": source},
        )


class OperationCancelledError(TestBridgeError):
    """A blocking operation was aborted by a cancellation signal."""

    @classmethod
    def requested(cls) -> "OperationCancelledError":
        return cls(
            code=ErrorCode.OPERATION_CANCELLED,
            message="The operation was cancelled",
        )


class SignalDisposedError(TestBridgeError):
    """A cancellation signal was used after teardown."""

    @classmethod
    def disposed(cls) -> "SignalDisposedError":
        return cls(
            code=ErrorCode.SIGNAL_DISPOSED,
            message="Cannot use a CancelSignal after it has been disposed",
        )

