import io
from dataclasses import dataclass

PAGE_SIZE: tuple[float, float] = (595, 842)


@dataclass(frozen=True)
class ContactInfo:
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin_url: str = ""


@dataclass(frozen=True)
class ResumeRenderRequest:
    """Everything needed to compose one resume PDF."""

    content: str
    full_name: str = ""
    target_role: str = ""
    contact_info: ContactInfo | None = None
    template: str | None = None


@dataclass(frozen=True)
class PdfDocument:
    """A composed PDF. Never mutated; a new request builds a new one."""

    content: bytes
    page_count: int
    page_size: tuple[float, float] = PAGE_SIZE

    def stream(self) -> io.BytesIO:
        return io.BytesIO(self.content)
