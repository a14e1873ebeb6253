"""Config module exports."""

from testbridge.config.loader import load_config
from testbridge.config.models import (
    DetectionConfig,
    DiscoveryConfig,
    ExecutionConfig,
    LoggingConfig,
    LogOutputConfig,
    TestBridgeConfig,
)

__all__ = [
    "load_config",
    "TestBridgeConfig",
    "DetectionConfig",
    "DiscoveryConfig",
    "ExecutionConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
