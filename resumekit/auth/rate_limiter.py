"""Lockout state machine for repeated failed logins.

States:
- open: fewer than ``max_attempts`` failures in the current window.
- locked: ``max_attempts`` failures reached; ``locked_until`` is set.

An expired lockout and an elapsed attempt window both collapse back to an
empty open state. Both are evaluated lazily when the state is queried; there
is no background timer. Every mutation is written to the store at once.
"""

import math
from datetime import datetime, timedelta, timezone

from resumekit.auth.exceptions import MalformedRecordError, RateLimitedError
from resumekit.auth.models import RateLimitRecord
from resumekit.auth.store import JsonFileRateLimitStore, RateLimitStore
from resumekit.config.settings import Settings
from resumekit.logging.logger import Log

DEFAULT_STORAGE_KEY = "login_rate_limit"
DEFAULT_MAX_ATTEMPTS = 5
DEFAULT_LOCKOUT = timedelta(minutes=15)
DEFAULT_WINDOW = timedelta(minutes=5)


class LoginRateLimiter:
    def __init__(
        self,
        store: RateLimitStore,
        key: str = DEFAULT_STORAGE_KEY,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        lockout: timedelta = DEFAULT_LOCKOUT,
        window: timedelta = DEFAULT_WINDOW,
        now: datetime | None = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._store = store
        self._key = key
        self._max_attempts = max_attempts
        self._lockout = lockout
        self._window = window
        self._record = self._rehydrate(_as_utc(now or datetime.now(timezone.utc)))

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        store: RateLimitStore | None = None,
        now: datetime | None = None,
    ) -> "LoginRateLimiter":
        return cls(
            store or JsonFileRateLimitStore(settings.rate_limit_storage_path),
            key=settings.rate_limit_storage_key,
            max_attempts=settings.login_max_attempts,
            lockout=timedelta(minutes=settings.login_lockout_minutes),
            window=timedelta(minutes=settings.login_attempt_window_minutes),
            now=now,
        )

    @property
    def attempts(self) -> int:
        return self._record.attempts

    @property
    def locked_until(self) -> datetime | None:
        return self._record.locked_until

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def is_locked(self, now: datetime) -> bool:
        now = _as_utc(now)
        locked_until = self._record.locked_until
        if locked_until is not None:
            if now < locked_until:
                return True
            Log.info("Login lockout expired")
            self._reset()
            return False
        if self._record.attempts and self._window_elapsed(self._record, now):
            self._reset()
        return False

    def record_failed_attempt(self, now: datetime) -> None:
        """Count a failed login. Does nothing while a lockout is in effect."""
        now = _as_utc(now)
        if self.is_locked(now):
            return
        self._record.attempts += 1
        self._record.last_attempt = now
        if self._record.attempts >= self._max_attempts:
            self._record.locked_until = now + self._lockout
            Log.warning(
                f"Login locked after {self._record.attempts} failed attempts "
                f"until {self._record.locked_until.isoformat()}"
            )
        self._persist()

    def reset_on_success(self) -> None:
        self._reset()

    def remaining_attempts(self) -> int:
        return max(0, self._max_attempts - self._record.attempts)

    def remaining_lockout_minutes(self, now: datetime) -> int:
        now = _as_utc(now)
        locked_until = self._record.locked_until
        if locked_until is None or now >= locked_until:
            return 0
        return math.ceil((locked_until - now).total_seconds() / 60)

    def check(self, now: datetime) -> None:
        """Raise ``RateLimitedError`` if a login may not be attempted now."""
        now = _as_utc(now)
        if self.is_locked(now):
            raise RateLimitedError(self.remaining_lockout_minutes(now))

    def _rehydrate(self, now: datetime) -> RateLimitRecord:
        raw = self._store.get(self._key)
        if raw is None:
            return RateLimitRecord()
        try:
            record = self._restore_lockout(RateLimitRecord.from_json(raw))
        except MalformedRecordError as exc:
            Log.warning(f"Discarding stored rate-limit record: {exc}")
            self._store.clear(self._key)
            return RateLimitRecord()

        lockout_active = record.locked_until is not None and now < record.locked_until
        if not lockout_active and self._window_elapsed(record, now):
            self._store.clear(self._key)
            return RateLimitRecord()
        return record

    def _restore_lockout(self, record: RateLimitRecord) -> RateLimitRecord:
        """Re-derive a lockout the stored record reached but did not carry."""
        if record.locked_until is not None or record.attempts < self._max_attempts:
            return record
        if record.last_attempt is None:
            raise MalformedRecordError(
                f"{record.attempts} attempts stored without a lockout or last attempt"
            )
        record.locked_until = record.last_attempt + self._lockout
        Log.warning(f"Restored login lockout until {record.locked_until.isoformat()}")
        self._store.set(self._key, record.to_json())
        return record

    def _window_elapsed(self, record: RateLimitRecord, now: datetime) -> bool:
        if record.last_attempt is None:
            return True
        return now - record.last_attempt > self._window

    def _reset(self) -> None:
        self._record = RateLimitRecord()
        self._store.clear(self._key)

    def _persist(self) -> None:
        self._store.set(self._key, self._record.to_json())


def _as_utc(moment: datetime) -> datetime:
    """Naive datetimes are taken as local time, matching ``datetime.now()``."""
    return moment.astimezone(timezone.utc)
