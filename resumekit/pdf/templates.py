from dataclasses import dataclass, field
from xml.sax.saxutils import escape, quoteattr

from reportlab.lib.colors import HexColor
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import Flowable, HRFlowable, KeepTogether, Paragraph, Spacer, Table, TableStyle

from resumekit.pdf.bullet_list import BulletBlock, BulletListStyle
from resumekit.pdf.models import PAGE_SIZE, ContactInfo, ResumeRenderRequest
from resumekit.pdf.resume_parser import ParsedResume, ResumeEntry, ResumeSection
from resumekit.sanitizer.urls import is_safe_url


@dataclass(frozen=True)
class TemplateTheme:
    """Colors, glyphs and spacing that distinguish one template from another."""

    name: str
    margin: float
    name_color: str
    role_color: str
    heading_color: str
    accent_color: str
    text_color: str
    muted_color: str
    header_background: str | None = None
    contact_color: str = "#555555"
    body_font_size: float = 10
    name_font_size: float = 24
    bullets: BulletListStyle = field(default_factory=BulletListStyle)


THEMES: dict[str, TemplateTheme] = {
    "classic": TemplateTheme(
        name="classic",
        margin=40,
        name_color="#1a1a1a",
        role_color="#666666",
        heading_color="#333333",
        accent_color="#333333",
        text_color="#444444",
        muted_color="#666666",
        body_font_size=11,
        bullets=BulletListStyle(
            symbol_color="#444444", text_color="#444444", font_size=11, line_height=1.5
        ),
    ),
    "modern": TemplateTheme(
        name="modern",
        margin=36,
        name_color="#1e3a5f",
        role_color="#3182ce",
        heading_color="#1e3a5f",
        accent_color="#3182ce",
        text_color="#4a5568",
        muted_color="#718096",
        body_font_size=9,
        name_font_size=20,
        bullets=BulletListStyle(
            symbol="›", symbol_color="#3182ce", text_color="#4a5568", font_size=9
        ),
    ),
    "executive": TemplateTheme(
        name="executive",
        margin=35,
        name_color="#ffffff",
        role_color="#c9a227",
        heading_color="#1a1a2e",
        accent_color="#c9a227",
        text_color="#4a4a4a",
        muted_color="#888888",
        header_background="#1a1a2e",
        contact_color="#ffffff",
        body_font_size=9,
        name_font_size=28,
        bullets=BulletListStyle(
            symbol_color="#c9a227", text_color="#4a4a4a", font_size=9
        ),
    ),
    "minimal": TemplateTheme(
        name="minimal",
        margin=72,
        name_color="#ffffff",
        role_color="#d4af37",
        heading_color="#1e3a5f",
        accent_color="#d4af37",
        text_color="#333333",
        muted_color="#666666",
        header_background="#1e3a5f",
        contact_color="#e8e8e8",
        bullets=BulletListStyle(
            symbol_color="#d4af37", text_color="#333333", font_size=10, line_height=1.5,
            indent_width=14,
        ),
    ),
}


def title_case(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in text.lower().split(" "))


class ResumeTemplate:
    """Builds the platypus story for one theme.

    Section headings travel with the first block that follows them, entry
    headers are kept together, and bullets come from ``BulletBlock``.
    """

    FONT = "Helvetica"
    BOLD_FONT = "Helvetica-Bold"
    ITALIC_FONT = "Helvetica-Oblique"

    def __init__(self, theme: TemplateTheme) -> None:
        self._theme = theme
        self._bullets = BulletBlock(theme.bullets, font_name=self.FONT)
        size = theme.body_font_size
        self._styles = {
            "name": self._style("name", self.BOLD_FONT, theme.name_font_size, theme.name_color,
                                leading=theme.name_font_size * 1.2, spaceAfter=6),
            "role": self._style("role", self.FONT, size + 1, theme.role_color, spaceAfter=8),
            "contact": self._style("contact", self.FONT, size - 1, theme.contact_color),
            "heading": self._style("heading", self.BOLD_FONT, size + 1, theme.heading_color,
                                   spaceBefore=12, spaceAfter=6),
            "body": self._style("body", self.FONT, size, theme.text_color, leading=size * 1.5),
            "entry_title": self._style("entry_title", self.BOLD_FONT, size + 1, theme.heading_color,
                                       spaceBefore=6, spaceAfter=2),
            "entry_org": self._style("entry_org", self.FONT, size, theme.text_color, spaceAfter=1),
            "entry_date": self._style("entry_date", self.ITALIC_FONT, size - 1, theme.muted_color,
                                      spaceAfter=2),
        }

    @property
    def theme(self) -> TemplateTheme:
        return self._theme

    @property
    def content_width(self) -> float:
        return PAGE_SIZE[0] - 2 * self._theme.margin

    def build_story(self, request: ResumeRenderRequest, resume: ParsedResume) -> list[Flowable]:
        story = self._header(request)
        summary = " ".join(resume.summary).strip()
        if summary:
            story += self._section("Professional Summary", [self._paragraph(summary, "body")])
        story += self._entries_section("Professional Experience", resume.experience)
        if resume.skills:
            story += self._section("Core Skills", [self._paragraph(" · ".join(resume.skills), "body")])
        story += self._entries_section("Education", resume.education)
        if resume.certifications:
            lines = [self._certification_line(entry) for entry in resume.certifications]
            story += self._section("Certifications", self._bullets.flowables(lines))
        story += self._entries_section("Key Projects", resume.projects)
        for section in resume.other:
            story += self._other_section(section)
        return story

    def _header(self, request: ResumeRenderRequest) -> list[Flowable]:
        rows: list[Flowable] = [self._paragraph(title_case(request.full_name.strip()) or "Your Name", "name")]
        if request.target_role:
            rows.append(self._paragraph(request.target_role, "role"))
        contact = self._contact_markup(request.contact_info)
        if contact:
            rows.append(Paragraph(contact, self._styles["contact"]))

        accent = HRFlowable(
            width="100%", thickness=3, color=HexColor(self._theme.accent_color),
            spaceBefore=0, spaceAfter=12,
        )
        if self._theme.header_background is None:
            return [*rows, Spacer(1, 4), accent]

        band = Table([[row] for row in rows], colWidths=[self.content_width])
        band.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, -1), HexColor(self._theme.header_background)),
                    ("LEFTPADDING", (0, 0), (-1, -1), 16),
                    ("RIGHTPADDING", (0, 0), (-1, -1), 16),
                    ("TOPPADDING", (0, 0), (-1, 0), 20),
                    ("BOTTOMPADDING", (0, -1), (-1, -1), 16),
                ]
            )
        )
        return [band, accent]

    def _contact_markup(self, contact_info: ContactInfo | None) -> str:
        if contact_info is None:
            return ""
        parts = [
            escape(part)
            for part in (contact_info.email, contact_info.phone, contact_info.location)
            if part
        ]
        url = contact_info.linkedin_url
        if url and is_safe_url(url):
            parts.append(
                f'<a href={quoteattr(url)} color="{self._theme.accent_color}">LinkedIn</a>'
            )
        return " | ".join(parts)

    def _section(self, title: str, content: list[Flowable]) -> list[Flowable]:
        if not content:
            return []
        # The heading stays with the first real block, not just a leading spacer.
        lead = 2 if isinstance(content[0], Spacer) and len(content) > 1 else 1
        # KeepTogether reports an oversized height on wrap, so nesting one
        # inside another always forces a frame break.
        kept: list[Flowable] = [self._heading(title)]
        for flowable in content[:lead]:
            kept += flowable._content if isinstance(flowable, KeepTogether) else [flowable]
        return [KeepTogether(kept), *content[lead:]]

    def _heading(self, title: str) -> Flowable:
        return Paragraph(escape(title.upper()), self._styles["heading"])

    def _entries_section(self, title: str, entries: list[ResumeEntry]) -> list[Flowable]:
        content: list[Flowable] = []
        for entry in entries:
            content += self._entry(entry)
        return self._section(title, content)

    def _entry(self, entry: ResumeEntry) -> list[Flowable]:
        header: list[Flowable] = [self._paragraph(entry.title, "entry_title")]
        org_line = " – ".join(part for part in (entry.organization, entry.location) if part)
        if org_line:
            header.append(self._paragraph(org_line, "entry_org"))
        if entry.date_range:
            header.append(self._paragraph(entry.date_range, "entry_date"))
        return [KeepTogether(header), *self._bullets.flowables(entry.bullets)]

    def _other_section(self, section: ResumeSection) -> list[Flowable]:
        content = self._bullets.flowables(section.content)
        if not section.title:
            return content
        return self._section(section.title, content)

    @staticmethod
    def _certification_line(entry: ResumeEntry) -> str:
        if entry.organization:
            return f"{entry.title} – {entry.organization}"
        return entry.title

    def _paragraph(self, text: str, style: str) -> Paragraph:
        return Paragraph(escape(text), self._styles[style])

    def _style(self, name: str, font: str, size: float, color: str, **kwargs: float) -> ParagraphStyle:
        kwargs.setdefault("leading", size * 1.3)
        return ParagraphStyle(
            name=f"{self._theme.name}-{name}",
            fontName=font,
            fontSize=size,
            textColor=HexColor(color),
            **kwargs,
        )
