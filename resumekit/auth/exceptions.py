class AuthError(Exception):
    """Base exception for login throttling errors."""


class RateLimitedError(AuthError):
    """Raised when a credential submission is attempted while locked out."""

    def __init__(self, remaining_minutes: int) -> None:
        super().__init__(
            f"Too many failed login attempts. Please try again in {remaining_minutes} minute(s)."
        )
        self.remaining_minutes = remaining_minutes


class MalformedRecordError(AuthError):
    """Raised when a persisted rate-limit record cannot be decoded."""
