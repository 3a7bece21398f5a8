from abc import ABC, abstractmethod
from dataclasses import dataclass

from resumekit.extraction.cancellation import CancellationToken
from resumekit.extraction.models import Credential, UploadedDocument


@dataclass(frozen=True)
class ExtractionContext:
    """Per-call inputs that only some extractors need."""

    credential: Credential | None = None
    cancel_token: CancellationToken | None = None


class BaseTextExtractor(ABC):
    """Contract for all text extraction handlers, one per document format."""

    @abstractmethod
    async def extract(self, document: UploadedDocument, context: ExtractionContext) -> str:
        """Extract plain text from an uploaded document.

        Args:
            document: The upload, consumed once.
            context: Credential and cancellation token for remote handlers.

        Returns:
            Extracted text.

        Raises:
            ExtractionError: if extraction fails for any reason.
        """
