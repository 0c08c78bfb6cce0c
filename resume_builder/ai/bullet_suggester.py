# resume_builder/ai/bullet_suggester.py
import logging
from typing import List, Optional

from resume_builder.ai.client import AITextClient
from resume_builder.ai.exceptions import InvalidRequestError
from resume_builder.ai.parsing import clean_bullet_lines
from resume_builder.ai.prompts import suggest_bullets_prompts

logger = logging.getLogger(__name__)


class BulletSuggester:
    """
    Suggest experience bullets for a role
    """

    FEATURE = 'suggest_bullets'

    def __init__(
        self,
        client: AITextClient,
        max_bullets: int = 5
    ):
        """
        Args:
            client: Shared AI text client
            max_bullets: Upper bound on returned bullets
        """
        self.client = client
        self.model = client.config.resolved_model(self.FEATURE)
        self.max_bullets = max_bullets

    def suggest(
        self,
        position: str,
        company: Optional[str] = None,
        existing_bullets: Optional[List[str]] = None
    ) -> List[str]:
        """
        Generate bullet suggestions

        Args:
            position: Job title the bullets are for
            company: Employer name, if known
            existing_bullets: Bullets already written, used as context

        Returns:
            Cleaned bullet texts, at most max_bullets
        """
        if not position or not position.strip():
            raise InvalidRequestError('Position is required')

        existing = [b.strip() for b in existing_bullets or [] if b and b.strip()]

        logger.info(f"Generating bullets for: {position} at {company or 'a company'}")

        system_prompt, user_prompt = suggest_bullets_prompts(position.strip(), company, existing)
        content = self.client.generate_text(system_prompt, user_prompt, model=self.model)

        # Lead-in lines such as "Here are 5 bullets:" are not bullets
        bullets = [
            b for b in clean_bullet_lines(content)
            if b not in existing and not b.endswith(':')
        ]
        bullets = bullets[:self.max_bullets]

        logger.info(f"Generated {len(bullets)} bullets")
        return bullets
