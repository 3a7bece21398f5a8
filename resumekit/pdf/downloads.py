from pathlib import Path

from resumekit.logging.logger import Log
from resumekit.pdf.models import PdfDocument

PDF_MEDIA_TYPE = "application/pdf"
MARKDOWN_MEDIA_TYPE = "text/markdown"
DEFAULT_MARKDOWN_FILENAME = "optimized-resume.md"


def download_filename(full_name: str) -> str:
    """``<full name>.pdf``, or ``resume.pdf`` when no name is known."""
    name = full_name.strip().replace("/", "-").replace("\\", "-")
    return f"{name or 'resume'}.pdf"


def save_pdf(document: PdfDocument, directory: str | Path, filename: str) -> Path:
    target = Path(directory) / filename
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(document.content)
    Log.info(f"Saved PDF to {target}")
    return target


def export_markdown(
    content: str,
    directory: str | Path,
    filename: str = DEFAULT_MARKDOWN_FILENAME,
) -> Path:
    target = Path(directory) / filename
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    Log.info(f"Exported Markdown to {target}")
    return target
