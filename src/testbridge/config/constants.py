"""Configuration constants.

This module contains truly constant values that should NOT be user-configurable.
These are protocol constraints of the CppUTest command line and report format.

For configurable values, see models.py (DetectionConfig, ExecutionConfig, etc.).
"""

# =============================================================================
# Executable Detection
# =============================================================================

SIGNATURE = b"Thanks for using CppUTest."
"""Marker embedded in every CppUTest v4.0+ executable (no fixed offset)."""

DETECTION_CHUNK_SIZE = 4096
"""Default read size for the streaming signature scan."""

# =============================================================================
# Command Line Protocol
# =============================================================================
# Support for -ln was added in CppUTest v3.7.

LIST_NAMES_ARGUMENT = "-ln"
"""Prints all test names as space-separated Group.Case tokens."""

JUNIT_REPORT_ARGUMENT = "-ojunit"
"""Writes one JUnit XML document per test group into the working directory."""

REPORT_PATTERN = "*.xml"
"""Glob used to collect report documents from the working directory."""

TEST_NAME_SEPARATOR = "."
"""Separator between group and case name in listing output."""

# =============================================================================
# Reconciliation
# =============================================================================

DEFAULT_FAILURE_MESSAGE = "Test failed."
"""Used when a failure element carries no message attribute."""

RUN_DIR_PREFIX = "testbridge-"
"""Prefix for per-run working directories."""

# =============================================================================
# Internal Implementation Constants
# =============================================================================

DISCOVERY_TIMEOUT_MS = 5000
"""Default time budget for listing the tests of one executable."""

CANCEL_MONITOR_POLL_SEC = 0.001
"""Polling interval of the timeout monitor thread. Not configurable."""

KILL_WAIT_SEC = 2.0
"""Default wait for a killed process to be reaped."""
