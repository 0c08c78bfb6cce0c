# scripts/suggest_bullets.py
#!/usr/bin/env python3
"""
Suggest resume bullets using AI

Usage:
    python scripts/suggest_bullets.py --position "Backend Engineer" --company Acme
    python scripts/suggest_bullets.py --resume resume.json --index 0
"""

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from resume_builder.models import Resume
from resume_builder.ai.client import AITextClient
from resume_builder.ai.exceptions import AIError
from resume_builder.ai.bullet_suggester import BulletSuggester
from service.config import load_ai_config

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description='Suggest resume bullets using AI'
    )

    parser.add_argument('--position', help='Job title')
    parser.add_argument('--company', help='Employer name')
    parser.add_argument('--resume', help='Resume JSON; take position and bullets from an experience entry')
    parser.add_argument('--index', type=int, default=0, help='Experience entry to use with --resume')
    parser.add_argument('--config', help='YAML file with an `ai:` section')

    args = parser.parse_args()

    position, company, existing = args.position, args.company, []

    if args.resume:
        with open(args.resume, 'r') as f:
            resume = Resume.from_dict(json.load(f))
        if args.index >= len(resume.experience):
            logger.error(f"Resume has {len(resume.experience)} experience entries")
            return 1
        entry = resume.experience[args.index]
        position = position or entry.position
        company = company or entry.company
        existing = entry.bullets

    if not position:
        logger.error("A position is required (--position or --resume)")
        return 1

    try:
        suggester = BulletSuggester(AITextClient(load_ai_config(args.config)))
        bullets = suggester.suggest(position, company, existing)
    except AIError as e:
        logger.error(f"Error: {e}")
        return 2

    print("\n" + "=" * 80)
    print(f"{'BULLET SUGGESTIONS':^80}")
    print(f"{(position + ' @ ' + (company or 'a company')):^80}")
    print("=" * 80)
    print()

    for i, bullet in enumerate(bullets, 1):
        print(f"{i}. {bullet}")

    print(f"\n✓ Suggested {len(bullets)} bullets")
    return 0


if __name__ == '__main__':
    sys.exit(main())
