from resumekit.extraction.base import BaseTextExtractor, ExtractionContext
from resumekit.extraction.exceptions import UnsupportedFormatError
from resumekit.extraction.models import UploadedDocument

LEGACY_DOC_MESSAGE = "Old .doc format is not supported. Please save as .docx or .pdf"


class RejectingExtractor(BaseTextExtractor):
    """Handler for formats that are recognized but never extracted."""

    def __init__(self, message: str | None = None) -> None:
        self._message = message

    async def extract(self, document: UploadedDocument, context: ExtractionContext) -> str:
        if self._message is not None:
            raise UnsupportedFormatError(self._message)
        raise UnsupportedFormatError(
            f"Unsupported file type: {document.media_type or document.filename}"
        )
