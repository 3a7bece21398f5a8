"""Persisted login-throttling record.

Stored as ``{"attempts": int, "lockedUntil": ms | null, "lastAttempt": ms | null}``
with timestamps in epoch milliseconds.
"""

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from resumekit.auth.exceptions import MalformedRecordError


def to_epoch_ms(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


def from_epoch_ms(value: int) -> datetime:
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


@dataclass
class RateLimitRecord:
    attempts: int = 0
    locked_until: datetime | None = None
    last_attempt: datetime | None = None

    def to_json(self) -> str:
        return json.dumps(
            {
                "attempts": self.attempts,
                "lockedUntil": _ms_or_none(self.locked_until),
                "lastAttempt": _ms_or_none(self.last_attempt),
            }
        )

    @classmethod
    def from_json(cls, raw: str) -> "RateLimitRecord":
        """Decode a stored record.

        Raises:
            MalformedRecordError: if the payload is not a valid record.
        """
        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as exc:
            raise MalformedRecordError(f"Rate-limit record is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise MalformedRecordError("Rate-limit record must be an object")

        attempts = data.get("attempts", 0)
        if not _is_int(attempts) or attempts < 0:
            raise MalformedRecordError("'attempts' must be a non-negative integer")
        return cls(
            attempts=attempts,
            locked_until=_timestamp(data, "lockedUntil"),
            last_attempt=_timestamp(data, "lastAttempt"),
        )


def _ms_or_none(moment: datetime | None) -> int | None:
    return None if moment is None else to_epoch_ms(moment)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _timestamp(data: dict[str, Any], field: str) -> datetime | None:
    raw = data.get(field)
    if raw is None:
        return None
    if not _is_int(raw) and not isinstance(raw, float):
        raise MalformedRecordError(f"'{field}' must be a timestamp in milliseconds or null")
    try:
        return from_epoch_ms(int(raw))
    except (OverflowError, OSError, ValueError) as exc:
        raise MalformedRecordError(f"'{field}' is out of range") from exc
