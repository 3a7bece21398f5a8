from resumekit.config.settings import Settings
from resumekit.extraction.base import BaseTextExtractor
from resumekit.extraction.classifier import FormatClassifier
from resumekit.extraction.docx_adapter import DocxExtractor
from resumekit.extraction.models import DocumentFormat
from resumekit.extraction.pdfplumber_adapter import PdfPlumberExtractor
from resumekit.extraction.plain_text import PlainTextExtractor
from resumekit.extraction.pymupdf_adapter import PyMuPdfExtractor
from resumekit.extraction.rejecting import LEGACY_DOC_MESSAGE, RejectingExtractor
from resumekit.extraction.remote_client import RemoteExtractionClient
from resumekit.extraction.service import DocumentExtractor


class PdfExtractorFactory:
    """Creates the PDF handler selected by ``pdf_engine``."""

    LOCAL_ENGINES: dict[str, type[BaseTextExtractor]] = {
        "pdfplumber": PdfPlumberExtractor,
        "pymupdf": PyMuPdfExtractor,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseTextExtractor:
        engine = settings.pdf_engine.lower()
        if engine == "remote":
            return RemoteExtractionClient(
                endpoint=settings.extraction_endpoint,
                api_key=settings.extraction_api_key,
                timeout_seconds=settings.extraction_timeout_seconds,
            )
        adapter_cls = cls.LOCAL_ENGINES.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. "
                f"Choose from: {['remote', *cls.LOCAL_ENGINES]}"
            )
        return adapter_cls()


class ExtractorFactory:
    """Wires one handler per document format."""

    @classmethod
    def create(cls, settings: Settings) -> DocumentExtractor:
        return DocumentExtractor(
            classifier=FormatClassifier(),
            handlers={
                DocumentFormat.PLAIN_TEXT: PlainTextExtractor(),
                DocumentFormat.WORD_PROCESSOR_PACKAGE: DocxExtractor(),
                DocumentFormat.LEGACY_WORD_DOC: RejectingExtractor(LEGACY_DOC_MESSAGE),
                DocumentFormat.PDF: PdfExtractorFactory.create(settings),
                DocumentFormat.UNSUPPORTED: RejectingExtractor(),
            },
        )
