from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest

from resumekit.auth.exceptions import RateLimitedError
from resumekit.auth.guard import LoginGuard
from resumekit.auth.rate_limiter import LoginRateLimiter
from resumekit.auth.store import InMemoryRateLimitStore


def _guard(now: datetime) -> LoginGuard:
    return LoginGuard(LoginRateLimiter(InMemoryRateLimitStore(), now=now))


class TestLoginGuard:
    def test_success_resets_attempts(self, now: datetime) -> None:
        guard = _guard(now)
        guard.submit(lambda: False, now)
        assert guard.submit(lambda: True, now) is True
        assert guard.limiter.attempts == 0

    def test_failure_is_recorded(self, now: datetime) -> None:
        guard = _guard(now)
        assert guard.submit(lambda: False, now) is False
        assert guard.limiter.attempts == 1

    def test_locked_guard_never_calls_submission(self, now: datetime) -> None:
        guard = _guard(now)
        for _ in range(5):
            guard.submit(lambda: False, now)
        attempt = MagicMock(return_value=True)
        with pytest.raises(RateLimitedError):
            guard.submit(attempt, now + timedelta(minutes=1))
        attempt.assert_not_called()

    def test_submission_errors_propagate_without_counting(self, now: datetime) -> None:
        guard = _guard(now)
        attempt = MagicMock(side_effect=ConnectionError("offline"))
        with pytest.raises(ConnectionError):
            guard.submit(attempt, now)
        assert guard.limiter.attempts == 0
