import json

from scripts.parse_resume import main

RESUME_TEXT = """Jane Smith
jane.smith@example.com
EXPERIENCE
Product Designer, Northwind Traders
2019 - 2023
• Led the redesign of the supplier onboarding portal
SKILLS
Figma, Prototyping
"""


def test_cli_writes_json(tmp_path, capsys):
    resume = tmp_path / "resume.txt"
    resume.write_text(RESUME_TEXT, encoding="utf-8")
    output = tmp_path / "out" / "parsed.json"

    assert main([str(resume), "--output", str(output), "--min-length", "20"]) == 0

    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["personal_info"]["name"] == "Jane Smith"
    assert "Wrote parsed resume" in capsys.readouterr().out


def test_cli_reports_manual_input_for_pdf(tmp_path, capsys):
    resume = tmp_path / "resume.pdf"
    resume.write_bytes(b"%PDF-1.4")

    assert main([str(resume)]) == 1
    assert "manual_input" in capsys.readouterr().err
