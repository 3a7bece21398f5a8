from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum


class DocumentFormat(Enum):
    """Extraction strategy selected for an upload."""

    PLAIN_TEXT = "plain_text"
    WORD_PROCESSOR_PACKAGE = "word_processor_package"
    LEGACY_WORD_DOC = "legacy_word_doc"
    PDF = "pdf"
    UNSUPPORTED = "unsupported"


class FailureKind(Enum):
    UNSUPPORTED_FORMAT = "unsupported_format"
    MALFORMED_PACKAGE = "malformed_package"
    MALFORMED_PDF = "malformed_pdf"
    AUTH_REQUIRED = "auth_required"
    TIMEOUT = "timeout"
    SERVER_ERROR = "server_error"
    EMPTY_RESULT = "empty_result"
    UNREACHABLE = "unreachable"


@dataclass(frozen=True)
class UploadedDocument:
    """A file as received from the user: raw bytes plus what the client declared."""

    content: bytes
    media_type: str
    filename: str


@dataclass(frozen=True)
class Credential:
    """Bearer token of the signed-in user."""

    token: str
    expires_at: datetime | None = None

    def is_active(self, now: datetime | None = None) -> bool:
        if not self.token:
            return False
        if self.expires_at is None:
            return True
        current = now if now is not None else datetime.now(timezone.utc)
        return current < self.expires_at


@dataclass(frozen=True)
class ExtractionSuccess:
    text: str


@dataclass(frozen=True)
class ExtractionFailure:
    kind: FailureKind
    message: str


ExtractionResult = ExtractionSuccess | ExtractionFailure
