import io

import pdfplumber

from resumekit.extraction.base import BaseTextExtractor, ExtractionContext
from resumekit.extraction.exceptions import EmptyResultError, PdfExtractionError
from resumekit.extraction.models import UploadedDocument


class PdfPlumberExtractor(BaseTextExtractor):
    """Extracts PDF text locally using pdfplumber."""

    async def extract(self, document: UploadedDocument, context: ExtractionContext) -> str:
        try:
            with pdfplumber.open(io.BytesIO(document.content)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc
        text = "\n".join(pages).strip()
        if not text:
            raise EmptyResultError("No text could be extracted from the PDF")
        return text
