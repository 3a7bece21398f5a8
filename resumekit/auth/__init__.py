from resumekit.auth.exceptions import RateLimitedError
from resumekit.auth.guard import LoginGuard
from resumekit.auth.rate_limiter import LoginRateLimiter
from resumekit.auth.store import InMemoryRateLimitStore, JsonFileRateLimitStore, RateLimitStore

__all__ = [
    "InMemoryRateLimitStore",
    "JsonFileRateLimitStore",
    "LoginGuard",
    "LoginRateLimiter",
    "RateLimitStore",
    "RateLimitedError",
]
