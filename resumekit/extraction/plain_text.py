from resumekit.extraction.base import BaseTextExtractor, ExtractionContext
from resumekit.extraction.models import UploadedDocument


class PlainTextExtractor(BaseTextExtractor):
    """Returns the decoded file content verbatim."""

    async def extract(self, document: UploadedDocument, context: ExtractionContext) -> str:
        return document.content.decode("utf-8-sig", errors="replace")
