import json
from pathlib import Path

import nlp.parser as parser_module

parse_resume_text = parser_module.parse_resume_text


FIXTURE_PATH = Path(__file__).resolve().parent / "fixtures" / "resume_samples.json"


def test_resume_regressions():
    samples = json.loads(FIXTURE_PATH.read_text(encoding="utf-8"))
    for sample in samples:
        raw_text = sample["text"]
        expected = sample["expected"]

        result = parse_resume_text(raw_text)
        info = result["personal_info"]

        assert info["name"] == expected["name"], sample["id"]
        assert info["email"] == expected["email"], sample["id"]
        if "phone" in expected:
            assert info["phone"] == expected["phone"], sample["id"]
        if "title" in expected:
            assert info["title"] == expected["title"], sample["id"]
        if "summary_lines" in expected:
            assert len(info["summary"]) == expected["summary_lines"], sample["id"]

        experiences = result["experiences"]
        assert [e["title"] for e in experiences] == expected["experience_titles"], sample["id"]
        assert [e["company"] for e in experiences] == expected["experience_companies"], sample["id"]
        assert [e["period"] for e in experiences] == expected["experience_periods"], sample["id"]
        for entry in experiences:
            assert entry["description"] and all(entry["description"]), sample["id"]

        education = result["education"]
        assert [e["degree"] for e in education] == expected["education_degrees"], sample["id"]
        assert [e["institution"] for e in education] == expected["education_institutions"], sample["id"]
        for entry, gpa in zip(education, expected.get("education_gpas", [])):
            assert entry["gpa"] == gpa, sample["id"]

        names = [s["name"] for s in result["skills"]]
        assert names == expected["skills"], sample["id"]
        levels = {s["name"]: s["proficiency"] for s in result["skills"]}
        for name, level in expected.get("proficiencies", {}).items():
            assert levels[name] == level, sample["id"]

        assert result["projects"] == []
