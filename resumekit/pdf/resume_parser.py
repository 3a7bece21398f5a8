"""Splits resume Markdown into the sections the PDF templates lay out.

Recognized structure:
- ``# Name`` lines are skipped (the header comes from the render request).
- ``## Title`` starts a section; its category comes from keywords in the title.
- ``### ...`` lines and lines such as ``**Title** | Company | Date`` or
  ``Title at Company (Date)`` start an entry inside experience, education,
  certification and project sections.
- ``-``, ``*``, ``•`` and ``1.`` lines are bullets of the current entry.
"""

import re
from dataclasses import dataclass, field
from typing import ClassVar

MAX_SKILLS = 20
MAX_SKILL_LENGTH = 40

_MONTH = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|Jul(?:y)?"
    r"|Aug(?:ust)?|Sep(?:tember)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)

DATE_PATTERNS: list[re.Pattern[str]] = [
    re.compile(_MONTH + r"\s*\d{4}", re.IGNORECASE),
    re.compile(r"\d{1,2}/\d{4}"),
    re.compile(r"\d{4}\s*[-–—]\s*(?:Present|Current|\d{4})", re.IGNORECASE),
    re.compile(r"Present|Current", re.IGNORECASE),
]

ENTRY_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"^###?\s*(.+?)\s*\|\s*(.+?)\s*\|\s*(.+)$"),  # ### Title | Company | Date
    re.compile(r"^###?\s*(.+?)\s+at\s+(.+?)\s*\((.+)\)$"),  # ### Title at Company (Date)
    re.compile(r"^\*\*(.+?)\*\*\s*\|\s*(.+?)\s*\|\s*(.+)$"),  # **Title** | Company | Date
    re.compile(r"^\*\*(.+?)\*\*\s+at\s+(.+?)\s*\((.+)\)$"),  # **Title** at Company (Date)
    re.compile(r"^(.+?)\s*[-–—]\s*(.+?)\s*[-–—]\s*(.+)$"),  # Title - Company - Date
]

_BOLD_PREFIX = re.compile(r"^\*\*(.+?)\*\*")
_BULLET = re.compile(r"^(?:[-•*]\s+|\d+\.\s+)")
_SEPARATORS = re.compile(r"[|,\-–—]")
_SKILL_SEPARATORS = re.compile(r"[,;|•·]")

SECTION_KEYWORDS: list[tuple[str, tuple[str, ...]]] = [
    ("summary", ("summary", "objective", "profile", "about")),
    ("experience", ("experience", "work", "employment", "career")),
    ("education", ("education", "academic", "degree")),
    ("skills", ("skill", "competenc", "technical", "technologies", "tools")),
    ("certifications", ("certif", "license", "credential")),
    ("projects", ("project", "portfolio")),
]


@dataclass
class ResumeEntry:
    title: str
    organization: str = ""
    location: str | None = None
    date_range: str | None = None
    bullets: list[str] = field(default_factory=list)


@dataclass
class ResumeSection:
    title: str
    content: list[str] = field(default_factory=list)


@dataclass
class ParsedResume:
    summary: list[str] = field(default_factory=list)
    experience: list[ResumeEntry] = field(default_factory=list)
    education: list[ResumeEntry] = field(default_factory=list)
    skills: list[str] = field(default_factory=list)
    certifications: list[ResumeEntry] = field(default_factory=list)
    projects: list[ResumeEntry] = field(default_factory=list)
    other: list[ResumeSection] = field(default_factory=list)


def clean_text(text: str) -> str:
    text = text.replace("*", "")
    text = re.sub(r"^#+\s*", "", text)
    text = re.sub(r"^\s*[-•]\s*", "", text)
    return re.sub(r"\s+", " ", text).strip()


def extract_date(text: str) -> str | None:
    for pattern in DATE_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(0)
    return None


def is_bullet(line: str) -> bool:
    return bool(_BULLET.match(line.strip()))


def bullet_text(line: str) -> str:
    return re.sub(r"\s+", " ", _BULLET.sub("", line.strip(), count=1)).strip()


def parse_entry(line: str) -> ResumeEntry | None:
    """Parse an entry heading line, or return ``None`` if it is not one."""
    for pattern in ENTRY_PATTERNS:
        match = pattern.match(line)
        if match:
            title, organization, date_range = match.groups()
            org_parts = re.split(r",\s*", organization)
            location = clean_text(org_parts[1]) if len(org_parts) > 1 else ""
            return ResumeEntry(
                title=clean_text(title),
                organization=clean_text(org_parts[0]),
                location=location or None,
                date_range=clean_text(date_range),
            )

    bold = _BOLD_PREFIX.match(line)
    if bold:
        rest = line[bold.end():].strip()
        date_range = extract_date(rest)
        if date_range:
            rest = rest.replace(date_range, "", 1)
        return ResumeEntry(
            title=clean_text(bold.group(1)),
            organization=clean_text(_SEPARATORS.sub(" ", rest)),
            date_range=date_range,
        )
    return None


def categorize_section(title: str) -> str:
    lower = title.lower()
    for category, keywords in SECTION_KEYWORDS:
        if any(keyword in lower for keyword in keywords):
            return category
    return "other"


class _SectionBuilder:
    """Accumulates lines into a ``ParsedResume`` while walking the document."""

    ENTRY_CATEGORIES: ClassVar[frozenset[str]] = frozenset(
        {"experience", "education", "certifications", "projects"}
    )

    def __init__(self) -> None:
        self.result = ParsedResume()
        self._category = "other"
        self._section_title = ""
        self._entry: ResumeEntry | None = None
        self._other_lines: list[str] = []

    def start_section(self, title: str) -> None:
        self.flush()
        self._section_title = title
        self._category = categorize_section(title)

    def start_entry(self, entry: ResumeEntry) -> None:
        self._flush_entry()
        self._entry = entry

    def add_line(self, line: str) -> None:
        if self._category == "summary":
            text = clean_text(line)
            if text:
                self.result.summary.append(text)
        elif self._category == "skills":
            self._add_skills(line)
        elif self._category in self.ENTRY_CATEGORIES:
            self._add_entry_line(line)
        else:
            text = clean_text(line)
            if text:
                self._other_lines.append(text)

    def flush(self) -> None:
        self._flush_entry()
        if self._category == "other" and self._other_lines:
            self.result.other.append(ResumeSection(self._section_title, self._other_lines))
        self._other_lines = []

    def _add_skills(self, line: str) -> None:
        for part in _SKILL_SEPARATORS.split(line):
            skill = clean_text(part)
            if 0 < len(skill) < MAX_SKILL_LENGTH and skill not in self.result.skills:
                self.result.skills.append(skill)

    def _add_entry_line(self, line: str) -> None:
        if self._entry is not None and is_bullet(line):
            text = bullet_text(line)
            if text:
                self._entry.bullets.append(text)
            return

        entry = parse_entry(line)
        if entry is not None:
            self.start_entry(entry)
            return
        if self._entry is None:
            return

        text = clean_text(line)
        if not text:
            return
        if self._entry.organization:
            self._entry.bullets.append(text)
            return
        date_range = extract_date(text)
        if date_range and not self._entry.date_range:
            self._entry.date_range = date_range
            organization = clean_text(_SEPARATORS.sub(" ", text.replace(date_range, "", 1)))
            if organization:
                self._entry.organization = organization
        else:
            self._entry.organization = text

    def _flush_entry(self) -> None:
        if self._entry is None:
            return
        target = {
            "experience": self.result.experience,
            "education": self.result.education,
            "certifications": self.result.certifications,
            "projects": self.result.projects,
        }.get(self._category)
        if target is not None:
            target.append(self._entry)
        self._entry = None


def parse_resume(content: str) -> ParsedResume:
    """Parse resume Markdown into sections. Empty content gives empty sections."""
    builder = _SectionBuilder()
    if not content:
        return builder.result

    for raw_line in content.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        if line.startswith("# "):
            continue
        if line.startswith("## "):
            builder.start_section(clean_text(line[3:]))
            continue
        if line.startswith("### "):
            entry = parse_entry(line) or ResumeEntry(title=clean_text(line[4:]))
            builder.start_entry(entry)
            continue
        builder.add_line(line)

    builder.flush()
    builder.result.skills = builder.result.skills[:MAX_SKILLS]
    return builder.result
