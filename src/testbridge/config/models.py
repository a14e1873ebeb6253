"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (TESTBRIDGE__SECTION__KEY)
3. Repo YAML (.testbridge/config.yaml)
4. Global YAML (~/.config/testbridge/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    TESTBRIDGE__<SECTION>__<KEY>=<VALUE>

Examples:
    TESTBRIDGE__LOGGING__LEVEL=DEBUG
    TESTBRIDGE__DISCOVERY__TIMEOUT_MS=10000
    TESTBRIDGE__EXECUTION__TEMP_ROOT=/var/tmp/testbridge
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from testbridge.config.constants import (
    DETECTION_CHUNK_SIZE,
    DISCOVERY_TIMEOUT_MS,
    JUNIT_REPORT_ARGUMENT,
    KILL_WAIT_SEC,
    LIST_NAMES_ARGUMENT,
    REPORT_PATTERN,
    SIGNATURE,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        TESTBRIDGE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every poll-loop transition.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class DetectionConfig(BaseModel):
    """Executable detection configuration.

    Env vars:
        TESTBRIDGE__DETECTION__SIGNATURE: Marker string searched in executables
        TESTBRIDGE__DETECTION__CHUNK_SIZE: Read size for the streaming scan
    """

    signature: str = Field(
        default=SIGNATURE.decode("ascii"),
        description="ASCII marker whose presence identifies a compatible executable.",
    )
    chunk_size: int = Field(
        default=DETECTION_CHUNK_SIZE,
        description="Bytes read per chunk while scanning. "
        "TRADEOFF: Larger chunks mean fewer reads but more memory per scan.",
    )

    @field_validator("signature")
    @classmethod
    def validate_signature(cls, v: str) -> str:
        if not v:
            raise ValueError("Signature must not be empty")
        if not v.isascii():
            raise ValueError(f"Signature must be ASCII: {v!r}")
        return v

    @field_validator("chunk_size")
    @classmethod
    def validate_chunk_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"Chunk size must be positive, got {v}")
        return v

    @property
    def signature_bytes(self) -> bytes:
        return self.signature.encode("ascii")


class DiscoveryConfig(BaseModel):
    """Test discovery configuration.

    Env vars:
        TESTBRIDGE__DISCOVERY__TIMEOUT_MS: Time budget for listing one executable
        TESTBRIDGE__DISCOVERY__POLL_INTERVAL_MS: Output drain polling interval
    """

    list_argument: str = Field(
        default=LIST_NAMES_ARGUMENT,
        description="Argument that makes the executable print its test names.",
    )
    timeout_ms: int = Field(
        default=DISCOVERY_TIMEOUT_MS,
        description="Time budget for listing one executable. "
        "RISK: Too low fails discovery on slow or heavily loaded machines.",
    )
    poll_interval_ms: float = Field(
        default=1.0,
        description="How often the drain thread and cancellation are checked.",
    )

    @field_validator("timeout_ms")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"Timeout must be positive, got {v}")
        return v

    @field_validator("poll_interval_ms")
    @classmethod
    def validate_poll_interval(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"Poll interval must be positive, got {v}")
        return v


class ExecutionConfig(BaseModel):
    """Test execution configuration.

    Env vars:
        TESTBRIDGE__EXECUTION__POLL_INTERVAL_MS: Process exit polling interval
        TESTBRIDGE__EXECUTION__TEMP_ROOT: Parent directory for per-run working dirs
        TESTBRIDGE__EXECUTION__KILL_WAIT_SEC: Wait after killing a cancelled process
    """

    report_argument: str = Field(
        default=JUNIT_REPORT_ARGUMENT,
        description="Argument that makes the executable write JUnit XML reports.",
    )
    report_pattern: str = Field(
        default=REPORT_PATTERN,
        description="Glob matching report documents in the working directory.",
    )
    poll_interval_ms: float = Field(
        default=100.0,
        description="Process exit polling interval. "
        "TRADEOFF: Lower values react faster to cancellation but wake more often.",
    )
    temp_root: str | None = Field(
        default=None,
        description="Parent directory for per-run working directories. "
        "Default: the system temp directory.",
    )
    kill_wait_sec: float = Field(
        default=KILL_WAIT_SEC,
        description="How long to wait for a killed process to be reaped.",
    )

    @field_validator("poll_interval_ms")
    @classmethod
    def validate_poll_interval(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"Poll interval must be positive, got {v}")
        return v

    @field_validator("temp_root")
    @classmethod
    def validate_temp_root(cls, v: str | None) -> str | None:
        if v is None:
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"Temp root must be absolute path: {v}")
        return str(path)


class TestBridgeConfig(BaseModel):
    """Root configuration for testbridge.

    All settings can be configured via:
    1. Environment variables: TESTBRIDGE__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    __test__ = False

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    detection: DetectionConfig = Field(default_factory=DetectionConfig)
    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)
