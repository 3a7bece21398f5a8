from resumekit.extraction.factory import ExtractorFactory
from resumekit.extraction.models import (
    Credential,
    ExtractionFailure,
    ExtractionResult,
    ExtractionSuccess,
    UploadedDocument,
)
from resumekit.extraction.service import DocumentExtractor

__all__ = [
    "Credential",
    "DocumentExtractor",
    "ExtractionFailure",
    "ExtractionResult",
    "ExtractionSuccess",
    "ExtractorFactory",
    "UploadedDocument",
]
