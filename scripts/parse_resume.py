# scripts/parse_resume.py
#!/usr/bin/env python3
"""
CLI script to structure a resume with AI
Usage:
    python scripts/parse_resume.py --input resume.pdf --output resume.json
    python scripts/parse_resume.py --input resume.txt --score
    python scripts/parse_resume.py --input resume.txt --score --keywords "python,sql"
"""

import argparse
import logging
import sys
import json
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from resume_builder.importer import extract_text, ResumeImportError
from resume_builder.ats.scorer import calculate_ats_score
from resume_builder.ai.client import AITextClient
from resume_builder.ai.exceptions import AIError
from resume_builder.ai.resume_parser import ResumeParser
from service.config import load_ai_config

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description='Parse a resume into structured JSON')
    parser.add_argument(
        '--input',
        required=True,
        help='Resume file (.pdf or plain text)'
    )
    parser.add_argument(
        '--output',
        help='Output JSON file for parsed data'
    )
    parser.add_argument(
        '--score',
        action='store_true',
        help='Also run the ATS scorer on the parsed resume'
    )
    parser.add_argument(
        '--keywords',
        help='Comma separated target keywords for --score'
    )
    parser.add_argument(
        '--config',
        help='YAML file with an `ai:` section (defaults to environment settings)'
    )

    args = parser.parse_args()

    print(f"Parsing resume: {args.input}")

    try:
        text = extract_text(args.input, Path(args.input).read_bytes())
        client = AITextClient(load_ai_config(args.config))
        resume = ResumeParser(client).parse(text)
    except (OSError, ResumeImportError, AIError) as e:
        print(f"ERROR: Failed to parse resume: {e}")
        return 1

    print(f"✓ Parsed successfully")
    print(f"  Name: {resume.personal_info.full_name}")
    print(f"  Total bullets: {len(resume.all_bullets())}")
    print(f"  Experience entries: {len(resume.experience)}")
    print(f"  Education entries: {len(resume.education)}")
    print(f"  Skills: {len(resume.all_skills())}")

    if args.score:
        keywords = [k.strip() for k in (args.keywords or '').split(',') if k.strip()]
        report = calculate_ats_score(resume, keywords or None)
        print("\n=== ATS Score ===")
        print(f"  Score: {report.score}/100")
        print(f"  Keyword match: {report.keyword_match}%")
        for suggestion in report.suggestions:
            print(f"  - {suggestion}")

    if args.output:
        with open(args.output, 'w') as f:
            json.dump(resume.to_dict(), f, indent=2, ensure_ascii=False)
        print(f"\n✓ Resume data saved to: {args.output}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
