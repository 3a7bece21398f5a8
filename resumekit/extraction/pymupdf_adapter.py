import pymupdf

from resumekit.extraction.base import BaseTextExtractor, ExtractionContext
from resumekit.extraction.exceptions import EmptyResultError, PdfExtractionError
from resumekit.extraction.models import UploadedDocument


class PyMuPdfExtractor(BaseTextExtractor):
    """Extracts PDF text locally using PyMuPDF."""

    async def extract(self, document: UploadedDocument, context: ExtractionContext) -> str:
        try:
            with pymupdf.open(stream=document.content, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc
        text = "\n".join(pages).strip()
        if not text:
            raise EmptyResultError("No text could be extracted from the PDF")
        return text
