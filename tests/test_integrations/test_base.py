"""Tests for integration base classes (src/integrations/base.py)."""

from unittest.mock import patch

import pytest

from src.core.exceptions import IntegrationError
from src.integrations.base import IntegrationBase, RateLimiter


class _Dummy(IntegrationBase):
    def health_check(self) -> bool:
        return True

    def is_configured(self) -> bool:
        return True


class TestWithRetry:
    """Exponential backoff."""

    def test_returns_first_success(self):
        assert _Dummy().with_retry(lambda: 42) == 42

    @patch("src.integrations.base.time.sleep")
    def test_retries_then_succeeds(self, mock_sleep):
        calls = []

        def flaky():
            calls.append(1)
            if len(calls) < 3:
                raise ConnectionError("flaky")
            return "ok"

        assert _Dummy().with_retry(flaky, max_retries=3, base_delay=1.0) == "ok"
        assert [c.args[0] for c in mock_sleep.call_args_list] == [1.0, 2.0]

    @patch("src.integrations.base.time.sleep")
    def test_raises_integration_error_when_exhausted(self, mock_sleep):
        def always_fails():
            raise ConnectionError("down")

        with pytest.raises(IntegrationError, match="after 2 attempts"):
            _Dummy().with_retry(always_fails, max_retries=1)

    def test_unlisted_exception_propagates(self):
        def boom():
            raise KeyError("x")

        with pytest.raises(KeyError):
            _Dummy().with_retry(boom, exceptions=(ConnectionError,))


class TestRateLimiter:
    """Sliding window."""

    @patch("src.integrations.base.time.sleep")
    def test_no_wait_under_limit(self, mock_sleep):
        limiter = RateLimiter(calls_per_minute=3)
        for _ in range(3):
            limiter.wait_if_needed()
        mock_sleep.assert_not_called()

    @patch("src.integrations.base.time.sleep")
    def test_waits_when_limit_reached(self, mock_sleep):
        limiter = RateLimiter(calls_per_minute=2)
        for _ in range(3):
            limiter.wait_if_needed()
        mock_sleep.assert_called_once()

    @patch("src.integrations.base.time.sleep")
    @patch("src.integrations.base.time.time")
    def test_old_calls_leave_window(self, mock_time, mock_sleep):
        limiter = RateLimiter(calls_per_minute=1)
        mock_time.return_value = 1000.0
        limiter.wait_if_needed()
        mock_time.return_value = 1061.0
        limiter.wait_if_needed()
        mock_sleep.assert_not_called()
