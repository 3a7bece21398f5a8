import asyncio
from pathlib import Path

from resumekit.logging.logger import Log
from resumekit.pdf.composer import PdfComposer
from resumekit.pdf.downloads import download_filename, save_pdf
from resumekit.pdf.models import PAGE_SIZE, PdfDocument, ResumeRenderRequest

ZOOM_MIN = 50
ZOOM_MAX = 200
ZOOM_STEP = 25
ZOOM_DEFAULT = 100
VIEWER_FRAGMENT = "#toolbar=0&navpanes=0"


def viewer_url(document_url: str) -> str:
    """Embed URL for a PDF viewer with its toolbar and side panes hidden."""
    return f"{document_url}{VIEWER_FRAGMENT}"


class PreviewViewport:
    """Zoom state of the preview. Zooming never recomposes the document."""

    def __init__(self) -> None:
        self.zoom = ZOOM_DEFAULT

    @property
    def can_zoom_in(self) -> bool:
        return self.zoom < ZOOM_MAX

    @property
    def can_zoom_out(self) -> bool:
        return self.zoom > ZOOM_MIN

    def zoom_in(self) -> int:
        self.zoom = min(self.zoom + ZOOM_STEP, ZOOM_MAX)
        return self.zoom

    def zoom_out(self) -> int:
        self.zoom = max(self.zoom - ZOOM_STEP, ZOOM_MIN)
        return self.zoom

    def reset(self) -> int:
        self.zoom = ZOOM_DEFAULT
        return self.zoom

    def display_size(self) -> tuple[float, float]:
        width, height = PAGE_SIZE
        return width * self.zoom / 100, height * self.zoom / 100


class PreviewSession:
    """Holds the document currently shown in a preview.

    Each ``refresh`` gets a generation number. The previous document is
    released as soon as a newer refresh starts, and a composition that
    finishes after a newer one was requested is discarded.
    """

    def __init__(self, composer: PdfComposer) -> None:
        self._composer = composer
        self._generation = 0
        self._document: PdfDocument | None = None
        self._request: ResumeRenderRequest | None = None
        self.viewport = PreviewViewport()

    @property
    def document(self) -> PdfDocument | None:
        return self._document

    @property
    def generation(self) -> int:
        return self._generation

    async def refresh(self, request: ResumeRenderRequest) -> PdfDocument | None:
        self._generation += 1
        generation = self._generation
        self._document = None
        self._request = request

        document = await self._compose(request)
        if generation != self._generation:
            Log.debug(f"Discarding stale preview generation {generation}")
            return None
        self._document = document
        return document

    async def download(
        self,
        directory: str | Path,
        request: ResumeRenderRequest | None = None,
    ) -> Path:
        request = request or self._request
        if request is None:
            raise ValueError("Nothing to download: no resume has been previewed")
        document = await self._compose(request)
        return save_pdf(document, directory, download_filename(request.full_name))

    def close(self) -> None:
        self._generation += 1
        self._document = None
        self._request = None
        self.viewport.reset()

    async def _compose(self, request: ResumeRenderRequest) -> PdfDocument:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._composer.compose, request)
