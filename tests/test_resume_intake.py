import services.resume_intake as intake_module
import services.settings as settings_module
from data_loader import PDF_CONTENT_NEEDS_MANUAL_INPUT, UNSUPPORTED_FILE_TYPE
from services.resume_intake import (
    STATUS_FAILED,
    STATUS_MANUAL_INPUT,
    STATUS_PARSED,
    STATUS_TOO_SHORT,
    STATUS_UNSUPPORTED,
    intake_resume_text,
)

RESUME_TEXT = """Jane Smith
jane.smith@example.com
EXPERIENCE
Product Designer, Northwind Traders
2019 - 2023
• Led the redesign of the supplier onboarding portal
SKILLS
Figma, Prototyping
"""


def test_sentinels_map_to_statuses():
    assert intake_resume_text(PDF_CONTENT_NEEDS_MANUAL_INPUT)["status"] == STATUS_MANUAL_INPUT
    outcome = intake_resume_text(UNSUPPORTED_FILE_TYPE)
    assert outcome["status"] == STATUS_UNSUPPORTED
    assert outcome["data"] is None
    assert outcome["message"]


def test_short_text_is_rejected():
    outcome = intake_resume_text("Jane Smith", min_length=100)
    assert outcome["status"] == STATUS_TOO_SHORT
    assert outcome["data"] is None
    assert intake_resume_text(None, min_length=1)["status"] == STATUS_TOO_SHORT


def test_parsed_outcome_carries_data():
    outcome = intake_resume_text(RESUME_TEXT, min_length=50)
    assert outcome["status"] == STATUS_PARSED
    data = outcome["data"]
    assert data["personal_info"]["email"] == "jane.smith@example.com"
    assert data["experiences"][0]["company"] == "Northwind Traders"
    assert [s["name"] for s in data["skills"]] == ["Figma", "Prototyping"]


def test_min_length_comes_from_environment(monkeypatch):
    monkeypatch.setenv("CVFORGE_MIN_TEXT_LENGTH", "5000")
    assert intake_resume_text(RESUME_TEXT)["status"] == STATUS_TOO_SHORT
    monkeypatch.setenv("CVFORGE_MIN_TEXT_LENGTH", "not-a-number")
    assert settings_module.min_text_length() == settings_module.DEFAULT_MIN_TEXT_LENGTH


def test_unexpected_parser_error_is_reported(monkeypatch):
    def boom(text):
        raise RuntimeError("parser crashed")

    monkeypatch.setattr(intake_module, "parse_resume_text", boom)
    outcome = intake_resume_text(RESUME_TEXT, min_length=10)
    assert outcome["status"] == STATUS_FAILED
    assert outcome["data"] is None


def test_debug_flag_from_environment(monkeypatch):
    monkeypatch.setenv("CVFORGE_PARSER_DEBUG", "true")
    assert settings_module.parser_debug_enabled()
    monkeypatch.setenv("CVFORGE_PARSER_DEBUG", "0")
    assert not settings_module.parser_debug_enabled()
