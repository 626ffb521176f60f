# skills.py
# --- Skills section -> named skills with a proficiency level ---

import re
from typing import Dict, List, Optional, Tuple

from rapidfuzz import fuzz, process

from nlp.debug import debug
from nlp.heuristics import is_bullet, is_section_header, strip_bullet
from services.resume_schema import DEFAULT_PROFICIENCY, build_skill_entry

MAX_SKILLS = 15
CANONICAL_CUTOFF = 90

SKILL_HEADER_PHRASES = (
    "technical skills", "skills", "core competencies", "key skills",
    "professional skills", "competencies",
)
_INLINE_HEADER_RE = re.compile(
    r"^(?:technical skills|professional skills|key skills|core competencies|competencies|skills)\s*:\s*(.+)$",
    re.IGNORECASE,
)
_PROFICIENCY_RE = re.compile(r"^(.+?)\s*\(([^)]*)\)\s*$")

# Well-known spellings used to canonicalise extracted names.
SKILL_BANK = [
    "Python", "Java", "JavaScript", "TypeScript", "C++", "C#", "Go", "Rust", "Ruby", "PHP",
    "Kotlin", "Swift", "Scala", "HTML5", "HTML", "CSS", "Sass", "SQL", "NoSQL",
    "React", "React Native", "Angular", "Vue.js", "Node.js", "Express", "Next.js",
    "Django", "Flask", "FastAPI", "Spring Boot", ".NET", "GraphQL", "REST API", "Redux",
    "Bootstrap", "Tailwind CSS", "jQuery", "WordPress", "Shopify",
    "AWS", "Azure", "GCP", "Docker", "Kubernetes", "Terraform", "Jenkins", "Linux", "Git",
    "PostgreSQL", "MySQL", "MongoDB", "Redis", "Firebase", "Elasticsearch",
    "Pandas", "NumPy", "scikit-learn", "TensorFlow", "PyTorch", "Machine Learning",
    "Excel", "Power BI", "Tableau", "Jira", "Salesforce", "SAP",
    "Adobe Photoshop", "Adobe Illustrator", "Adobe XD", "Figma", "Sketch", "InVision",
    "Prototyping", "Wireframing", "User Research", "Usability Testing",
    "Interaction Design", "Visual Design", "Information Architecture",
    "Project Management", "Agile", "Scrum", "Time Management", "Communication",
    "Teamwork", "Problem Solving", "Leadership", "Customer Service",
]

_PROFICIENCY_HINTS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("expert", "master"), "Expert"),
    (("advanced", "senior"), "Advanced"),
    (("intermediate", "mid"), "Intermediate"),
    (("beginner", "junior", "basic"), "Beginner"),
)


def normalize_proficiency(text: str) -> str:
    lower = (text or "").lower()
    for hints, level in _PROFICIENCY_HINTS:
        if any(hint in lower for hint in hints):
            return level
    return DEFAULT_PROFICIENCY


def canonical_skill_name(name: str) -> str:
    """Return the known spelling of ``name`` when it is a near-exact match."""
    if not name:
        return name
    match = process.extractOne(
        name,
        SKILL_BANK,
        scorer=fuzz.ratio,
        processor=str.lower,
        score_cutoff=CANONICAL_CUTOFF,
    )
    return match[0] if match else name


def _is_skills_header(line: str) -> bool:
    lower = line.lower()
    return is_section_header(line) and any(phrase in lower for phrase in SKILL_HEADER_PHRASES)


def _is_exit_header(line: str) -> bool:
    lower = line.lower()
    return is_section_header(line) and "skill" not in lower and "competenc" not in lower


def _parse_item(text: str, max_length: int) -> Optional[Tuple[str, str]]:
    text = strip_bullet(text)
    match = _PROFICIENCY_RE.match(text)
    if match:
        name = match.group(1).strip()
        if name:
            return name, normalize_proficiency(match.group(2))
        return None
    if 2 <= len(text) <= max_length:
        return text, DEFAULT_PROFICIENCY
    return None


def parse_skill_line(line: str) -> List[Tuple[str, str]]:
    """Split one line of a skills section into (name, proficiency) pairs."""
    stripped = strip_bullet(line) if is_bullet(line) else line.strip()
    if not stripped:
        return []

    if _PROFICIENCY_RE.match(stripped) and "," not in stripped:
        parsed = _parse_item(stripped, 60)
        return [parsed] if parsed else []

    if "," in stripped:
        found = []
        for part in stripped.split(","):
            parsed = _parse_item(part.strip(), 50)
            if parsed:
                found.append(parsed)
        return found

    parsed = _parse_item(stripped, 50 if is_bullet(line) else 60)
    return [parsed] if parsed else []


def extract_skills(lines: List[str]) -> List[Dict[str, str]]:
    skills: List[Dict[str, str]] = []
    seen = set()
    inside = False

    def add(name: str, proficiency: str) -> None:
        canonical = canonical_skill_name(name)
        key = canonical.lower()
        if key in seen:
            return
        seen.add(key)
        skills.append(build_skill_entry(canonical, proficiency))

    for line in lines:
        if not inside:
            inline = _INLINE_HEADER_RE.match(line)
            if inline:
                # one-line list, often inside a job entry; the section proper comes later
                debug("skills_inline", line)
                for name, level in parse_skill_line(inline.group(1)):
                    add(name, level)
            elif _is_skills_header(line):
                inside = True
                debug("skills_section", line)
            continue

        if _is_exit_header(line):
            debug("skills_exit", line)
            break

        if is_section_header(line):
            continue

        inline = _INLINE_HEADER_RE.match(line)
        if inline:
            line = inline.group(1)

        for name, level in parse_skill_line(line):
            add(name, level)

    debug("extract_skills", f"found {len(skills)}")
    return skills[:MAX_SKILLS]
