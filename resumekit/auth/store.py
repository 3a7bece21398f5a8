import json
from abc import ABC, abstractmethod
from pathlib import Path

from resumekit.logging.logger import Log


class RateLimitStore(ABC):
    """Durable string storage addressed by key."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or ``None`` if the key is absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    @abstractmethod
    def clear(self, key: str) -> None:
        """Remove ``key``. Removing an absent key is not an error."""


class InMemoryRateLimitStore(RateLimitStore):
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def clear(self, key: str) -> None:
        self._values.pop(key, None)


class JsonFileRateLimitStore(RateLimitStore):
    """Keeps all keys in one JSON object on disk, rewritten on every change."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        values = self._read()
        values[key] = value
        self._write(values)

    def clear(self, key: str) -> None:
        values = self._read()
        if key in values:
            del values[key]
            self._write(values)

    def _read(self) -> dict[str, object]:
        if not self._path.is_file():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except ValueError:
            Log.warning(f"Ignoring unreadable rate-limit store at {self._path}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, values: dict[str, object]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(values), encoding="utf-8")
        tmp.replace(self._path)
