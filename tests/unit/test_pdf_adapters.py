import asyncio

import pytest

from resumekit.extraction.base import BaseTextExtractor, ExtractionContext
from resumekit.extraction.exceptions import EmptyResultError, PdfExtractionError
from resumekit.extraction.models import UploadedDocument
from resumekit.extraction.pdfplumber_adapter import PdfPlumberExtractor
from resumekit.extraction.pymupdf_adapter import PyMuPdfExtractor

ADAPTERS = [PdfPlumberExtractor, PyMuPdfExtractor]


def _pdf(content: bytes) -> UploadedDocument:
    return UploadedDocument(content=content, media_type="application/pdf", filename="resume.pdf")


def _extract(adapter: BaseTextExtractor, content: bytes) -> str:
    return asyncio.run(adapter.extract(_pdf(content), ExtractionContext()))


@pytest.mark.parametrize("adapter_cls", ADAPTERS)
class TestLocalPdfExtractors:
    def test_extract_returns_text(self, adapter_cls: type[BaseTextExtractor], sample_pdf_bytes: bytes) -> None:
        result = _extract(adapter_cls(), sample_pdf_bytes)
        assert "Jane Doe Resume" in result

    def test_extract_multi_page(
        self, adapter_cls: type[BaseTextExtractor], multi_page_pdf_bytes: bytes
    ) -> None:
        result = _extract(adapter_cls(), multi_page_pdf_bytes)
        assert "Page one content" in result
        assert "Page two content" in result

    def test_extract_result_is_stripped(
        self, adapter_cls: type[BaseTextExtractor], sample_pdf_bytes: bytes
    ) -> None:
        result = _extract(adapter_cls(), sample_pdf_bytes)
        assert result == result.strip()

    def test_blank_pdf_is_empty_result(
        self, adapter_cls: type[BaseTextExtractor], empty_pdf_bytes: bytes
    ) -> None:
        with pytest.raises(EmptyResultError):
            _extract(adapter_cls(), empty_pdf_bytes)

    def test_invalid_bytes_raise(self, adapter_cls: type[BaseTextExtractor]) -> None:
        with pytest.raises(PdfExtractionError):
            _extract(adapter_cls(), b"not a pdf")
