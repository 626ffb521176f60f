"""Parse a plain-text resume into structured JSON.

Usage
-----

    python scripts/parse_resume.py resume.txt --output data/parsed_resume.json

Without ``--output`` the JSON is printed to stdout. PDF and Word files
are reported as needing pasted text instead of being parsed.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from data_loader import load_resume  # noqa: E402
from nlp.parser import set_debug  # noqa: E402
from services.resume_intake import STATUS_PARSED, intake_resume_text  # noqa: E402
from services.settings import parser_debug_enabled  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Parse a plain-text resume into structured JSON")
    parser.add_argument("resume", help="Path to the resume text file")
    parser.add_argument("--output", default=None, help="Destination JSON file (default: stdout)")
    parser.add_argument("--min-length", type=int, default=None, help="Reject text shorter than this")
    parser.add_argument("--debug", action="store_true", help="Print step-by-step parser output")
    args = parser.parse_args(argv)

    debug_on = args.debug or parser_debug_enabled()
    logging.basicConfig(level=logging.DEBUG if debug_on else logging.INFO, format="%(message)s")
    set_debug(debug_on)

    text = load_resume(args.resume)
    outcome = intake_resume_text(text, min_length=args.min_length)
    if outcome["status"] != STATUS_PARSED:
        print(f"{outcome['status']}: {outcome['message']}", file=sys.stderr)
        return 1

    payload = json.dumps(outcome["data"], indent=2, ensure_ascii=False)
    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(payload + "\n", encoding="utf-8")
        print(f"Wrote parsed resume to {output_path}")
    else:
        print(payload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
