import io
from collections.abc import Iterator
from typing import Any

import docx
from docx.table import Table
from docx.text.paragraph import Paragraph

from resumekit.extraction.base import BaseTextExtractor, ExtractionContext
from resumekit.extraction.exceptions import MalformedPackageError
from resumekit.extraction.models import UploadedDocument


class DocxExtractor(BaseTextExtractor):
    """Extracts raw paragraph text from a .docx package using python-docx."""

    async def extract(self, document: UploadedDocument, context: ExtractionContext) -> str:
        try:
            package = docx.Document(io.BytesIO(document.content))
        except Exception as exc:
            raise MalformedPackageError(
                f"Could not read word-processor package '{document.filename}': {exc}"
            ) from exc
        paragraphs = [text for text in self._iter_text(package) if text.strip()]
        return "\n\n".join(paragraphs)

    def _iter_text(self, container: Any) -> Iterator[str]:
        # Body order: paragraphs interleaved with tables.
        for block in container.iter_inner_content():
            if isinstance(block, Paragraph):
                yield block.text
            elif isinstance(block, Table):
                # Merged cells repeat once per grid column or row they span.
                seen: set[Any] = set()
                for row in block.rows:
                    for cell in row.cells:
                        if cell._tc in seen:
                            continue
                        seen.add(cell._tc)
                        yield from self._iter_text(cell)
