import asyncio
from unittest.mock import patch

import pytest

from resumekit.extraction.base import BaseTextExtractor, ExtractionContext
from resumekit.extraction.classifier import FormatClassifier
from resumekit.extraction.docx_adapter import DocxExtractor
from resumekit.extraction.exceptions import ServerError
from resumekit.extraction.factory import ExtractorFactory, PdfExtractorFactory
from resumekit.extraction.models import (
    DocumentFormat,
    ExtractionFailure,
    ExtractionSuccess,
    FailureKind,
    UploadedDocument,
)
from resumekit.extraction.pdfplumber_adapter import PdfPlumberExtractor
from resumekit.extraction.plain_text import PlainTextExtractor
from resumekit.extraction.pymupdf_adapter import PyMuPdfExtractor
from resumekit.extraction.rejecting import LEGACY_DOC_MESSAGE, RejectingExtractor
from resumekit.extraction.remote_client import RemoteExtractionClient
from resumekit.extraction.service import DocumentExtractor


def _make_settings(pdf_engine: str):  # type: ignore[no-untyped-def]
    """Create a minimal Settings-like object for the factories."""
    with patch("resumekit.config.settings.Settings") as mock_cls:
        settings = mock_cls.return_value
        settings.pdf_engine = pdf_engine
        settings.extraction_endpoint = "https://functions.example.test/parse-pdf"
        settings.extraction_api_key = "anon-key"
        settings.extraction_timeout_seconds = 60
        return settings


class _FailingPdfExtractor(BaseTextExtractor):
    async def extract(self, document: UploadedDocument, context: ExtractionContext) -> str:
        raise ServerError("File is password protected", status_code=422)


def _extractor(pdf_handler: BaseTextExtractor) -> DocumentExtractor:
    return DocumentExtractor(
        classifier=FormatClassifier(),
        handlers={
            DocumentFormat.PLAIN_TEXT: PlainTextExtractor(),
            DocumentFormat.WORD_PROCESSOR_PACKAGE: DocxExtractor(),
            DocumentFormat.LEGACY_WORD_DOC: RejectingExtractor(LEGACY_DOC_MESSAGE),
            DocumentFormat.PDF: pdf_handler,
            DocumentFormat.UNSUPPORTED: RejectingExtractor(),
        },
    )


class TestDocumentExtractor:
    def test_plain_text_success(self) -> None:
        document = UploadedDocument(b"Jane Doe", "text/plain", "resume.txt")
        result = asyncio.run(_extractor(PdfPlumberExtractor()).extract(document))
        assert result == ExtractionSuccess(text="Jane Doe")

    def test_docx_success(self, docx_document: UploadedDocument) -> None:
        result = asyncio.run(_extractor(PdfPlumberExtractor()).extract(docx_document))
        assert isinstance(result, ExtractionSuccess)
        assert "Software Engineer" in result.text

    def test_legacy_doc_is_rejected_with_guidance(self) -> None:
        document = UploadedDocument(b"\xd0\xcf\x11\xe0", "application/msword", "old.doc")
        result = asyncio.run(_extractor(PdfPlumberExtractor()).extract(document))
        assert result == ExtractionFailure(FailureKind.UNSUPPORTED_FORMAT, LEGACY_DOC_MESSAGE)

    def test_unsupported_failure_names_type(self) -> None:
        document = UploadedDocument(b"GIF89a", "image/gif", "photo.gif")
        result = asyncio.run(_extractor(PdfPlumberExtractor()).extract(document))
        assert isinstance(result, ExtractionFailure)
        assert result.kind == FailureKind.UNSUPPORTED_FORMAT
        assert "image/gif" in result.message

    def test_malformed_docx_is_typed_failure(self) -> None:
        document = UploadedDocument(b"garbage", "", "resume.docx")
        result = asyncio.run(_extractor(PdfPlumberExtractor()).extract(document))
        assert isinstance(result, ExtractionFailure)
        assert result.kind == FailureKind.MALFORMED_PACKAGE

    def test_handler_errors_become_failures(self, pdf_document: UploadedDocument) -> None:
        result = asyncio.run(_extractor(_FailingPdfExtractor()).extract(pdf_document))
        assert result == ExtractionFailure(FailureKind.SERVER_ERROR, "File is password protected")

    def test_missing_handler_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="unsupported"):
            DocumentExtractor(
                classifier=FormatClassifier(),
                handlers={DocumentFormat.PLAIN_TEXT: PlainTextExtractor()},
            )


class TestPdfExtractorFactory:
    def test_creates_remote_client_by_default_engine(self) -> None:
        assert isinstance(PdfExtractorFactory.create(_make_settings("remote")), RemoteExtractionClient)

    def test_creates_pdfplumber_extractor(self) -> None:
        assert isinstance(PdfExtractorFactory.create(_make_settings("pdfplumber")), PdfPlumberExtractor)

    def test_creates_pymupdf_extractor(self) -> None:
        assert isinstance(PdfExtractorFactory.create(_make_settings("pymupdf")), PyMuPdfExtractor)

    def test_is_case_insensitive(self) -> None:
        assert isinstance(PdfExtractorFactory.create(_make_settings("PdfPlumber")), PdfPlumberExtractor)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            PdfExtractorFactory.create(_make_settings("unknown"))


class TestExtractorFactory:
    def test_wires_local_pdf_engine(self, pdf_document: UploadedDocument) -> None:
        extractor = ExtractorFactory.create(_make_settings("pdfplumber"))
        result = asyncio.run(extractor.extract(pdf_document))
        assert isinstance(result, ExtractionSuccess)
        assert "Jane Doe Resume" in result.text

    def test_remote_engine_requires_credential(self, pdf_document: UploadedDocument) -> None:
        extractor = ExtractorFactory.create(_make_settings("remote"))
        result = asyncio.run(extractor.extract(pdf_document))
        assert isinstance(result, ExtractionFailure)
        assert result.kind == FailureKind.AUTH_REQUIRED
