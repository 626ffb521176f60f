import nlp.parser as parser_module
from services.resume_schema import DEFAULT_SUMMARY

parse_resume_text = parser_module.parse_resume_text


SAMPLE_RESUME = """Karen Philips
Web Designer
karen.Philips@Example.com
+1 (555) 010-2024
Portland, OR 97201

P R O F I L E
Web designer with seven years of experience crafting responsive travel websites. Comfortable owning projects from wireframes to launch.

WORK EXPERIENCE
Web Designer, Expedia Group
Jan 2020 - Present
• Redesigned the hotel search results page for mobile users
• Worked as the web designer on the brand refresh
2016 - 2019
• Built landing pages for seasonal marketing campaigns
• Maintained the shared style guide and component kit

EDUCATION
Bachelor of Fine Arts, Rhode Island School of Design
2012 - 2016
• Graduated with honours in interaction design studies

SKILLS
WordPress (Intermediate)
Python, Java, SQL
Adobe Photoshop (Expert)
"""


def _without_ids(result):
    stripped = dict(result)
    for key in ("experiences", "education"):
        stripped[key] = [{k: v for k, v in entry.items() if k != "id"} for entry in result[key]]
    return stripped


def test_parse_resume_text_structure_and_content():
    result = parse_resume_text(SAMPLE_RESUME)

    assert set(result.keys()) == {"personal_info", "experiences", "education", "skills", "projects"}

    info = result["personal_info"]
    assert info["name"] == "Karen Philips"
    assert info["title"] == "Web Designer"
    assert info["email"] == "karen.philips@example.com"
    assert info["phone"] == "+1 (555) 010-2024"
    assert info["summary"] == [
        "Web designer with seven years of experience crafting responsive travel websites.",
        "Comfortable owning projects from wireframes to launch.",
    ]

    experiences = result["experiences"]
    assert len(experiences) == 2
    first = experiences[0]
    assert (first["title"], first["company"], first["period"]) == ("Web Designer", "Expedia Group", "Jan 2020 - Present")
    assert first["description"] == ["Redesigned the hotel search results page for mobile users"]
    assert experiences[1]["period"] == "2016 - 2019"
    assert len(experiences[1]["description"]) == 2

    all_bullets = " ".join(text for entry in experiences for text in entry["description"])
    assert "Graduated" not in all_bullets
    assert "as the web designer" not in all_bullets

    education = result["education"]
    assert len(education) == 1
    assert education[0]["degree"] == "Bachelor of Fine Arts"
    assert education[0]["institution"] == "Rhode Island School of Design"
    assert education[0]["year"] == "2012 - 2016"

    assert [(s["name"], s["proficiency"]) for s in result["skills"]] == [
        ("WordPress", "Intermediate"),
        ("Python", "Intermediate"),
        ("Java", "Intermediate"),
        ("SQL", "Intermediate"),
        ("Adobe Photoshop", "Expert"),
    ]
    assert result["projects"] == []


def test_entry_ids_are_integers():
    result = parse_resume_text(SAMPLE_RESUME)
    for entry in result["experiences"] + result["education"]:
        assert isinstance(entry["id"], int)


def test_parsing_is_repeatable_apart_from_ids():
    first = parse_resume_text(SAMPLE_RESUME)
    second = parse_resume_text(SAMPLE_RESUME)
    assert _without_ids(first) == _without_ids(second)


def test_empty_input_returns_placeholders():
    result = parse_resume_text("")

    info = result["personal_info"]
    assert (info["name"], info["title"], info["email"], info["phone"]) == ("", "", "", "")
    assert info["summary"] == [DEFAULT_SUMMARY]

    assert len(result["experiences"]) == 1
    assert result["experiences"][0]["title"] == ""
    assert result["experiences"][0]["description"] == [""]
    assert len(result["education"]) == 1
    assert result["education"][0]["degree"] == ""
    assert result["skills"] == [{"name": "", "proficiency": "Intermediate"}]
    assert result["projects"] == []


def test_none_and_garbage_input_do_not_raise():
    for raw in (None, "@@@ ### !!!", "\n\n\t\r\n", "x" * 5000):
        result = parse_resume_text(raw)
        assert result["experiences"]
        assert result["education"]
        assert result["skills"]
        assert result["projects"] == []


def test_internal_failure_returns_defaults(monkeypatch):
    def boom(lines):
        raise RuntimeError("extractor exploded")

    monkeypatch.setattr(parser_module, "extract_experience", boom)
    result = parse_resume_text(SAMPLE_RESUME)

    assert result["personal_info"]["name"] == ""
    assert result["personal_info"]["summary"] == [DEFAULT_SUMMARY]
    assert result["experiences"][0]["title"] == ""
    assert result["skills"] == [{"name": "", "proficiency": "Intermediate"}]


def test_contact_false_positives_are_ignored():
    text = """Rahul Sharma
Pune, Maharashtra 411001
Graduated in 2019
EXPERIENCE
Warehouse Supervisor
Bluedart Logistics
"""
    info = parse_resume_text(text)["personal_info"]
    assert info["name"] == "Rahul Sharma"
    assert info["phone"] == ""
    assert info["email"] == ""


def test_debug_logging_uses_parser_prefix(caplog):
    parser_module.set_debug(True)
    try:
        with caplog.at_level("DEBUG", logger="nlp"):
            parse_resume_text(SAMPLE_RESUME)
    finally:
        parser_module.set_debug(False)
    assert any(record.getMessage().startswith("[parser] extract_name:") for record in caplog.records)
