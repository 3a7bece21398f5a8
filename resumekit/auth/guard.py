from collections.abc import Callable
from datetime import datetime

from resumekit.auth.rate_limiter import LoginRateLimiter


class LoginGuard:
    """Wraps credential submission with the login rate limiter."""

    def __init__(self, limiter: LoginRateLimiter) -> None:
        self._limiter = limiter

    @property
    def limiter(self) -> LoginRateLimiter:
        return self._limiter

    def submit(self, attempt: Callable[[], bool], now: datetime) -> bool:
        """Run ``attempt`` unless locked out and record its outcome.

        ``attempt`` returns ``True`` when the credentials were accepted.

        Raises:
            RateLimitedError: if locked out. ``attempt`` is not called.
        """
        self._limiter.check(now)
        if attempt():
            self._limiter.reset_on_success()
            return True
        self._limiter.record_failed_attempt(now)
        return False
