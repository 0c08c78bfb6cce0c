# scripts/score_resume.py
#!/usr/bin/env python3
"""
Score a resume against the ATS rubric

Usage:
    python scripts/score_resume.py --input resume.json
    python scripts/score_resume.py --input resume.json --keywords "python,react,aws"
    python scripts/score_resume.py --input resume.json --keywords-file keywords.txt --json
"""

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from resume_builder.models import Resume
from resume_builder.ats.scorer import calculate_ats_score


def load_keywords(args) -> list:
    keywords = []
    if args.keywords:
        keywords.extend(k.strip() for k in args.keywords.split(','))
    if args.keywords_file:
        with open(args.keywords_file, 'r') as f:
            keywords.extend(line.strip() for line in f)
    return [k for k in keywords if k]


def main():
    parser = argparse.ArgumentParser(description='Score a resume for ATS readiness')
    parser.add_argument('--input', required=True, help='Resume JSON file')
    parser.add_argument('--keywords', help='Comma separated target keywords')
    parser.add_argument('--keywords-file', help='File with one keyword per line')
    parser.add_argument('--json', action='store_true', help='Print the report as JSON')

    args = parser.parse_args()

    try:
        with open(args.input, 'r') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"ERROR: Failed to read resume: {e}")
        return 1

    # Accept both a bare resume and {"resume": {...}}
    if isinstance(data, dict) and isinstance(data.get('resume'), dict):
        data = data['resume']

    resume = Resume.from_dict(data)
    report = calculate_ats_score(resume, load_keywords(args) or None)

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
        return 0

    print("=" * 60)
    print(f"ATS Score: {report.score}/100")
    print("=" * 60)
    if report.keywords_evaluated:
        print(f"  Keyword match:   {report.keyword_match}%")
    else:
        print(f"  Keyword match:   {report.keyword_match}% (no keywords supplied)")
    print(f"  Formatting:      {report.formatting_score}/100")

    if report.missing_sections:
        print("\nMissing sections:")
        for section in report.missing_sections:
            print(f"  ✗ {section}")

    if report.suggestions:
        print("\nSuggestions:")
        for i, suggestion in enumerate(report.suggestions, 1):
            print(f"  {i}. {suggestion}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
