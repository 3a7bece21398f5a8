import pytest

from resumekit.pdf.resume_parser import (
    MAX_SKILLS,
    ResumeEntry,
    ResumeSection,
    categorize_section,
    clean_text,
    extract_date,
    is_bullet,
    parse_entry,
    parse_resume,
)


class TestHelpers:
    def test_clean_text(self) -> None:
        assert clean_text("## **Senior**   Engineer ") == "Senior Engineer"

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Acme, Jan 2020 - Present", "Jan 2020"),
            ("03/2019 to 05/2021", "03/2019"),
            ("2016 - 2019", "2016 - 2019"),
            ("Present", "Present"),
            ("no date here", None),
        ],
    )
    def test_extract_date(self, text: str, expected: str | None) -> None:
        assert extract_date(text) == expected

    @pytest.mark.parametrize("line", ["- item", "* item", "• item", "1. item"])
    def test_is_bullet(self, line: str) -> None:
        assert is_bullet(line)

    def test_bold_text_is_not_bullet(self) -> None:
        assert not is_bullet("**Engineer** at Acme")

    @pytest.mark.parametrize(
        ("title", "category"),
        [
            ("Professional Summary", "summary"),
            ("Work History", "experience"),
            ("Education", "education"),
            ("Technical Skills", "skills"),
            ("Licenses & Certifications", "certifications"),
            ("Side Projects", "projects"),
            ("Volunteering", "other"),
        ],
    )
    def test_categorize_section(self, title: str, category: str) -> None:
        assert categorize_section(title) == category


class TestParseEntry:
    def test_pipe_separated_heading(self) -> None:
        entry = parse_entry("### Senior Engineer | Acme Corp, Berlin | Jan 2020 - Present")
        assert entry == ResumeEntry(
            title="Senior Engineer",
            organization="Acme Corp",
            location="Berlin",
            date_range="Jan 2020 - Present",
        )

    def test_bold_at_company(self) -> None:
        entry = parse_entry("**Engineer** at Globex (2016 - 2019)")
        assert entry == ResumeEntry(title="Engineer", organization="Globex", date_range="2016 - 2019")

    def test_bold_prefix_fallback(self) -> None:
        entry = parse_entry("**Data Analyst** Initech, Mar 2014")
        assert entry is not None
        assert entry.title == "Data Analyst"
        assert entry.organization == "Initech"

    def test_plain_sentence_is_not_entry(self) -> None:
        assert parse_entry("Responsible for stuff") is None


class TestParseResume:
    def test_empty_content(self) -> None:
        result = parse_resume("")
        assert result.experience == []
        assert result.other == []

    def test_sections(self, sample_resume_markdown: str) -> None:
        result = parse_resume(sample_resume_markdown)

        assert result.summary == ["Engineer with ten years of experience building data platforms."]
        assert [entry.title for entry in result.experience] == ["Senior Engineer", "Engineer"]
        assert result.experience[0].bullets == [
            "Led a team of five engineers",
            "Cut pipeline latency by 40%",
        ]
        assert result.experience[1].organization == "Globex"
        assert result.experience[1].bullets == ["Built the billing service"]
        assert result.skills == ["Python", "SQL", "Kubernetes", "Terraform"]
        assert [entry.title for entry in result.education] == ["BSc Computer Science"]
        assert result.certifications[0].organization == "Amazon"
        assert result.other == [ResumeSection("Volunteering", ["Mentor at Code Club"])]

    def test_content_before_first_heading_is_untitled_other(self) -> None:
        result = parse_resume("Open to relocation\n\n## Skills\nPython")
        assert result.other == [ResumeSection("", ["Open to relocation"])]
        assert result.skills == ["Python"]

    def test_organization_and_date_lines_under_heading(self) -> None:
        result = parse_resume("## Experience\n### Staff Engineer\nInitech\nMar 2018\n- Scaled the API")
        (entry,) = result.experience
        assert entry.title == "Staff Engineer"
        assert entry.organization == "Initech"
        assert entry.date_range is None
        assert entry.bullets == ["Mar 2018", "Scaled the API"]

    def test_date_line_before_organization(self) -> None:
        result = parse_resume("## Experience\n### Staff Engineer\nMar 2018 Initech\n- Scaled the API")
        (entry,) = result.experience
        assert entry.date_range == "Mar 2018"
        assert entry.organization == "Initech"
        assert entry.bullets == ["Scaled the API"]

    def test_skills_are_deduplicated_and_capped(self) -> None:
        skills = ", ".join(f"Skill{i}" for i in range(30))
        result = parse_resume(f"## Skills\n{skills}, Skill1\n{'x' * 60}")
        assert len(result.skills) == MAX_SKILLS
        assert result.skills[0] == "Skill0"
        assert result.skills.count("Skill1") == 1
