"""Tests for CancelSignal."""

import threading
import time
from collections.abc import Callable

import pytest

from testbridge.core.errors import ErrorCode, OperationCancelledError, SignalDisposedError
from testbridge.testing.cancel import CancelSignal


def _wait_until(predicate: Callable[[], bool], timeout: float = 5.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return predicate()


class TestManualCancel:
    """cancel() and throw_if_cancellation_requested()."""

    def test_starts_active(self) -> None:
        with CancelSignal() as signal:
            assert signal.is_cancellation_requested is False
            signal.throw_if_cancellation_requested()

    def test_cancel_sets_state(self) -> None:
        with CancelSignal() as signal:
            signal.cancel()
            assert signal.is_cancellation_requested is True

    def test_cancel_is_idempotent(self) -> None:
        with CancelSignal() as signal:
            for _ in range(3):
                signal.cancel()
            assert signal.is_cancellation_requested is True

    def test_throw_after_cancel(self) -> None:
        with CancelSignal() as signal:
            signal.cancel()
            with pytest.raises(OperationCancelledError) as exc_info:
                signal.throw_if_cancellation_requested()
        assert exc_info.value.code == ErrorCode.OPERATION_CANCELLED

    def test_cancel_from_many_threads(self) -> None:
        with CancelSignal() as signal:
            threads = [threading.Thread(target=signal.cancel) for _ in range(8)]
            for t in threads:
                t.start()
            for t in threads:
                t.join()
            assert signal.is_cancellation_requested is True

    def test_wait_returns_early_on_cancel(self) -> None:
        with CancelSignal() as signal:
            timer = threading.Timer(0.05, signal.cancel)
            timer.start()
            start = time.monotonic()
            assert signal.wait(10.0) is True
            assert time.monotonic() - start < 5.0
            timer.join()

    def test_wait_times_out_when_active(self) -> None:
        with CancelSignal() as signal:
            assert signal.wait(0.01) is False


class TestCancelAfterTimeout:
    """cancel_after_timeout() monitor behavior."""

    def test_returns_self(self) -> None:
        signal = CancelSignal()
        try:
            assert signal.cancel_after_timeout(10_000) is signal
        finally:
            signal.dispose()

    def test_cancels_after_duration(self) -> None:
        with CancelSignal().cancel_after_timeout(20) as signal:
            assert _wait_until(lambda: signal.is_cancellation_requested)

    def test_not_cancelled_before_duration(self) -> None:
        with CancelSignal().cancel_after_timeout(60_000) as signal:
            time.sleep(0.05)
            assert signal.is_cancellation_requested is False

    def test_rearming_replaces_previous_timeout(self) -> None:
        with CancelSignal() as signal:
            signal.cancel_after_timeout(300)
            signal.cancel_after_timeout(60_000)
            time.sleep(0.5)
            assert signal.is_cancellation_requested is False

    def test_manual_cancel_after_timeout_fired_stays_cancelled(self) -> None:
        with CancelSignal().cancel_after_timeout(10) as signal:
            assert _wait_until(lambda: signal.is_cancellation_requested)
            signal.cancel()
            assert signal.is_cancellation_requested is True

    def test_rearming_after_cancel_does_not_revert(self) -> None:
        with CancelSignal() as signal:
            signal.cancel()
            signal.cancel_after_timeout(60_000)
            assert signal.is_cancellation_requested is True

    def test_dispose_stops_pending_timeout(self) -> None:
        signal = CancelSignal().cancel_after_timeout(300)
        signal.dispose()
        time.sleep(0.5)
        assert signal.is_cancellation_requested is False


class TestDispose:
    """Use after teardown."""

    def test_cancel_after_dispose_raises(self) -> None:
        signal = CancelSignal()
        signal.dispose()
        with pytest.raises(SignalDisposedError) as exc_info:
            signal.cancel()
        assert exc_info.value.code == ErrorCode.SIGNAL_DISPOSED

    def test_timeout_after_dispose_raises(self) -> None:
        signal = CancelSignal()
        signal.dispose()
        with pytest.raises(SignalDisposedError):
            signal.cancel_after_timeout(10)

    def test_state_readable_after_dispose(self) -> None:
        signal = CancelSignal()
        signal.cancel()
        signal.dispose()
        assert signal.is_cancellation_requested is True
        with pytest.raises(OperationCancelledError):
            signal.throw_if_cancellation_requested()

    def test_second_dispose_is_noop(self) -> None:
        signal = CancelSignal()
        signal.dispose()
        signal.dispose()
