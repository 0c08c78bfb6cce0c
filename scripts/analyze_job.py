# scripts/analyze_job.py
#!/usr/bin/env python3
"""
Compare a job description with a resume using AI

Usage:
    python scripts/analyze_job.py --resume resume.json --jd job.txt
    python scripts/analyze_job.py --resume resume.json --jd job.txt --score --output analysis.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from resume_builder.models import Resume
from resume_builder.ats.scorer import calculate_ats_score
from resume_builder.ai.client import AITextClient
from resume_builder.ai.exceptions import AIError
from resume_builder.ai.job_analyzer import JobAnalyzer
from service.config import load_ai_config

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description='Analyze a job description against a resume')
    parser.add_argument('--resume', required=True, help='Resume JSON file')
    parser.add_argument('--jd', required=True, help='Job description text file')
    parser.add_argument('--score', action='store_true',
                        help='Score the resume against the required keywords found')
    parser.add_argument('--output', help='Save the analysis as JSON')
    parser.add_argument('--config', help='YAML file with an `ai:` section')

    args = parser.parse_args()

    with open(args.resume, 'r') as f:
        resume = Resume.from_dict(json.load(f))
    with open(args.jd, 'r') as f:
        jd_text = f.read()

    try:
        analyzer = JobAnalyzer(AITextClient(load_ai_config(args.config)))
        analysis = analyzer.analyze(jd_text, resume)
    except AIError as e:
        logger.error(f"Error: {e}")
        return 2

    print("=" * 70)
    print(f"Job: {analysis.job_title or 'Unknown'}"
          + (f" at {analysis.company}" if analysis.company else ""))
    print(f"Keyword match: {analysis.keyword_match_percentage}%")
    print("=" * 70)

    if analysis.matched_keywords:
        print(f"\n✓ Matched: {', '.join(analysis.matched_keywords)}")
    if analysis.missing_keywords:
        print(f"✗ Missing: {', '.join(analysis.missing_keywords)}")

    if analysis.suggestions:
        print("\nSuggestions:")
        for s in analysis.suggestions:
            print(f"  - Add '{s.keyword}' to {s.where or 'your resume'}: {s.reason}")

    if analysis.bullet_improvements:
        print("\nBullet improvements:")
        for b in analysis.bullet_improvements:
            print(f"  Original: {b.original}")
            print(f"  Improved: {b.improved}")
            print()

    if analysis.summary_recommendation:
        print(f"Suggested summary:\n  {analysis.summary_recommendation}")

    if args.score and analysis.required_keywords:
        report = calculate_ats_score(resume, analysis.required_keywords)
        print(f"\nATS Score with job keywords: {report.score}/100, "
              f"{report.keyword_match}% keyword match")

    if args.output:
        with open(args.output, 'w') as f:
            json.dump(analysis.to_dict(), f, indent=2, ensure_ascii=False)
        print(f"\n✓ Analysis saved to: {args.output}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
