import io

from reportlab.platypus import SimpleDocTemplate

from resumekit.logging.logger import Log
from resumekit.pdf.models import PAGE_SIZE, PdfDocument, ResumeRenderRequest
from resumekit.pdf.resume_parser import parse_resume
from resumekit.pdf.templates import THEMES, ResumeTemplate


class PdfComposer:
    """Composes resume Markdown into a paginated, styled PDF."""

    def __init__(self, template: str = "minimal") -> None:
        self._template = self._resolve(template)

    @property
    def template(self) -> str:
        return self._template.theme.name

    def compose(self, request: ResumeRenderRequest) -> PdfDocument:
        template = self._resolve(request.template) if request.template else self._template
        theme = template.theme
        resume = parse_resume(request.content)

        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=PAGE_SIZE,
            leftMargin=theme.margin,
            rightMargin=theme.margin,
            topMargin=theme.margin,
            bottomMargin=theme.margin,
            title=f"{request.full_name or 'Resume'} - Resume",
            author=request.full_name,
        )
        doc.build(template.build_story(request, resume))

        document = PdfDocument(content=buffer.getvalue(), page_count=doc.page)
        Log.info(
            f"Composed PDF: template={theme.name}, pages={document.page_count}, "
            f"bytes={len(document.content)}"
        )
        return document

    @staticmethod
    def _resolve(name: str) -> ResumeTemplate:
        theme = THEMES.get(name.lower())
        if theme is None:
            raise ValueError(f"Unknown template '{name}'. Choose from: {list(THEMES)}")
        return ResumeTemplate(theme)
