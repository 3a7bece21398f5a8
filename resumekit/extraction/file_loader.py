import mimetypes
from pathlib import Path

from resumekit.extraction.classifier import DOCX_MEDIA_TYPE
from resumekit.extraction.models import UploadedDocument

mimetypes.add_type(DOCX_MEDIA_TYPE, ".docx")


class FileLoader:
    """Reads a file from disk into an ``UploadedDocument``."""

    def load(self, path: Path, media_type: str | None = None) -> UploadedDocument:
        """Read document bytes from disk.

        The media type is guessed from the filename unless given explicitly.

        Raises:
            FileNotFoundError: if the file does not exist.
        """
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        declared = media_type if media_type is not None else self._guess_media_type(path)
        return UploadedDocument(
            content=path.read_bytes(),
            media_type=declared,
            filename=path.name,
        )

    @staticmethod
    def _guess_media_type(path: Path) -> str:
        guessed, _ = mimetypes.guess_type(path.name)
        return guessed or ""
