from resumekit.extraction.base import BaseTextExtractor, ExtractionContext
from resumekit.extraction.cancellation import CancellationToken
from resumekit.extraction.classifier import FormatClassifier
from resumekit.extraction.exceptions import ExtractionError
from resumekit.extraction.models import (
    Credential,
    DocumentFormat,
    ExtractionFailure,
    ExtractionResult,
    ExtractionSuccess,
    UploadedDocument,
)
from resumekit.logging.logger import Log


class DocumentExtractor:
    """Classifies an upload once and runs the handler registered for its format.

    Failures come back as ``ExtractionFailure``; nothing is retried.
    """

    def __init__(
        self,
        classifier: FormatClassifier,
        handlers: dict[DocumentFormat, BaseTextExtractor],
    ) -> None:
        missing = set(DocumentFormat) - set(handlers)
        if missing:
            names = sorted(fmt.value for fmt in missing)
            raise ValueError(f"No extraction handler registered for: {names}")
        self._classifier = classifier
        self._handlers = dict(handlers)

    async def extract(
        self,
        document: UploadedDocument,
        credential: Credential | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> ExtractionResult:
        fmt = self._classifier.classify(document.media_type, document.filename)
        Log.info(f"Extracting '{document.filename}' as {fmt.value}")
        context = ExtractionContext(credential=credential, cancel_token=cancel_token)
        try:
            text = await self._handlers[fmt].extract(document, context)
        except ExtractionError as exc:
            Log.warning(f"Extraction of '{document.filename}' failed ({exc.kind.value}): {exc}")
            return ExtractionFailure(kind=exc.kind, message=str(exc))
        Log.info(f"Extracted {len(text)} chars from '{document.filename}'")
        return ExtractionSuccess(text=text)
