from typing import ClassVar

from resumekit.extraction.models import DocumentFormat

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class FormatClassifier:
    """Selects an extraction strategy from a declared media type and filename.

    The media type wins when it is one we recognize. Otherwise (absent,
    ``application/octet-stream`` or anything unknown) the filename suffix is
    matched case-insensitively.
    """

    MEDIA_TYPES: ClassVar[dict[str, DocumentFormat]] = {
        "text/plain": DocumentFormat.PLAIN_TEXT,
        DOCX_MEDIA_TYPE: DocumentFormat.WORD_PROCESSOR_PACKAGE,
        "application/msword": DocumentFormat.LEGACY_WORD_DOC,
        "application/pdf": DocumentFormat.PDF,
    }

    SUFFIXES: ClassVar[dict[str, DocumentFormat]] = {
        ".txt": DocumentFormat.PLAIN_TEXT,
        ".docx": DocumentFormat.WORD_PROCESSOR_PACKAGE,
        ".doc": DocumentFormat.LEGACY_WORD_DOC,
        ".pdf": DocumentFormat.PDF,
    }

    def classify(self, media_type: str | None, filename: str | None) -> DocumentFormat:
        declared = self._normalize_media_type(media_type)
        fmt = self.MEDIA_TYPES.get(declared)
        if fmt is not None:
            return fmt
        return self._classify_by_suffix(filename or "")

    def _classify_by_suffix(self, filename: str) -> DocumentFormat:
        name = filename.strip().lower()
        for suffix, fmt in self.SUFFIXES.items():
            if name.endswith(suffix):
                return fmt
        return DocumentFormat.UNSUPPORTED

    @staticmethod
    def _normalize_media_type(media_type: str | None) -> str:
        if not media_type:
            return ""
        return media_type.split(";", 1)[0].strip().lower()


def supported_suffixes() -> str:
    """Value for a file picker's ``accept`` attribute."""
    return ".txt,.pdf,.docx"


def accepted_media_types() -> str:
    return f"text/plain,application/pdf,{DOCX_MEDIA_TYPE}"
