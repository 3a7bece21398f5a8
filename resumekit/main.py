import argparse
import asyncio
import sys
from pathlib import Path

from resumekit.config.settings import Settings
from resumekit.extraction import Credential, ExtractionFailure, ExtractorFactory
from resumekit.extraction.file_loader import FileLoader
from resumekit.logging.logger import Log
from resumekit.pdf import PdfComposer, ResumeRenderRequest
from resumekit.pdf.downloads import download_filename, save_pdf
from resumekit.sanitizer import ContentSanitizer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resumekit",
        description="Extract resume text and render it as safe HTML or a styled PDF.",
    )
    parser.add_argument("input", type=Path, help="Resume file (.txt, .docx or .pdf)")
    parser.add_argument("--pdf", dest="pdf_dir", type=Path, help="Write a PDF to this directory")
    parser.add_argument("--html", action="store_true", help="Print the sanitized HTML")
    parser.add_argument("--full-name", default="", help="Name shown in the PDF header")
    parser.add_argument("--target-role", default="", help="Role shown under the name")
    parser.add_argument("--template", default=None, help="PDF template (default from settings)")
    parser.add_argument("--token", default="", help="Bearer token for remote PDF extraction")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point: load file -> extract text -> print HTML and/or write PDF."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    document = FileLoader().load(args.input)
    extractor = ExtractorFactory.create(settings)
    credential = Credential(token=args.token) if args.token else None
    result = asyncio.run(extractor.extract(document, credential=credential))

    if isinstance(result, ExtractionFailure):
        print(f"Error: {result.message}", file=sys.stderr)
        return 1

    if args.html:
        print(ContentSanitizer(settings.sanitizer_base_url).render_html(result.text))
    if args.pdf_dir is not None:
        composer = PdfComposer(args.template or settings.pdf_template)
        request = ResumeRenderRequest(
            content=result.text,
            full_name=args.full_name,
            target_role=args.target_role,
        )
        path = save_pdf(composer.compose(request), args.pdf_dir, download_filename(args.full_name))
        print(path)
    if not args.html and args.pdf_dir is None:
        print(result.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
