from resumekit.pdf.composer import PdfComposer
from resumekit.pdf.downloads import export_markdown
from resumekit.pdf.models import ContactInfo, PdfDocument, ResumeRenderRequest
from resumekit.pdf.preview import PreviewSession, PreviewViewport

__all__ = [
    "ContactInfo",
    "PdfComposer",
    "PdfDocument",
    "PreviewSession",
    "PreviewViewport",
    "ResumeRenderRequest",
    "export_markdown",
]
