from resumekit.extraction.models import FailureKind


class ExtractionError(Exception):
    """Base exception for all text extraction errors."""

    kind: FailureKind = FailureKind.SERVER_ERROR


class UnsupportedFormatError(ExtractionError):
    """Raised when the upload is of a type that cannot be extracted."""

    kind = FailureKind.UNSUPPORTED_FORMAT


class MalformedPackageError(ExtractionError):
    """Raised when a .docx upload is not a readable word-processor package."""

    kind = FailureKind.MALFORMED_PACKAGE


class PdfExtractionError(ExtractionError):
    """Raised when a local PDF engine cannot read the document."""

    kind = FailureKind.MALFORMED_PDF


class AuthRequiredError(ExtractionError):
    """Raised when remote extraction is requested without an active credential."""

    kind = FailureKind.AUTH_REQUIRED


class ExtractionTimeoutError(ExtractionError):
    """Raised when the remote call exceeds its deadline or is cancelled."""

    kind = FailureKind.TIMEOUT


class ServerError(ExtractionError):
    """Raised when the extraction service answers with a non-success status."""

    kind = FailureKind.SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class EmptyResultError(ExtractionError):
    """Raised when extraction succeeds but yields no text."""

    kind = FailureKind.EMPTY_RESULT


class UnreachableError(ExtractionError):
    """Raised when the extraction service cannot be reached over the network."""

    kind = FailureKind.UNREACHABLE
