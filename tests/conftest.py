import io
from datetime import datetime, timezone

import docx
import pytest
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from resumekit.extraction.classifier import DOCX_MEDIA_TYPE
from resumekit.extraction.models import UploadedDocument


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.drawString(72, 720, "Jane Doe Resume")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    """Generate a .docx package with paragraphs and a table."""
    document = docx.Document()
    document.add_heading("Jane Doe", level=1)
    document.add_paragraph("Software Engineer")
    document.add_paragraph("")
    table = document.add_table(rows=1, cols=2)
    table.cell(0, 0).text = "Python"
    table.cell(0, 1).text = "Go"
    document.add_paragraph("Built data pipelines")
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def docx_document(sample_docx_bytes: bytes) -> UploadedDocument:
    return UploadedDocument(
        content=sample_docx_bytes,
        media_type=DOCX_MEDIA_TYPE,
        filename="resume.docx",
    )


@pytest.fixture()
def pdf_document(sample_pdf_bytes: bytes) -> UploadedDocument:
    return UploadedDocument(
        content=sample_pdf_bytes,
        media_type="application/pdf",
        filename="resume.pdf",
    )


@pytest.fixture()
def now() -> datetime:
    return datetime(2026, 1, 15, 9, 0, tzinfo=timezone.utc)


@pytest.fixture()
def sample_resume_markdown() -> str:
    return "\n".join(
        [
            "# Jane Doe",
            "",
            "## Professional Summary",
            "Engineer with ten years of experience building data platforms.",
            "",
            "## Experience",
            "### Senior Engineer | Acme Corp, Berlin | Jan 2020 - Present",
            "- Led a team of five engineers",
            "- Cut pipeline latency by 40%",
            "",
            "**Engineer** at Globex (2016 - 2019)",
            "- Built the billing service",
            "",
            "## Skills",
            "Python, SQL, Kubernetes; Terraform",
            "",
            "## Education",
            "### BSc Computer Science | TU Munich | 2012 - 2016",
            "",
            "## Certifications",
            "### AWS Solutions Architect | Amazon | 2021",
            "",
            "## Volunteering",
            "- Mentor at Code Club",
        ]
    )
