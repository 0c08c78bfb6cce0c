# resume_builder/ai/skill_suggester.py
import logging
from typing import List

from resume_builder.models import DEFAULT_TITLE, Resume, SkillCategory, generate_id
from resume_builder.ai.client import AITextClient
from resume_builder.ai.parsing import parse_json_response
from resume_builder.ai.prompts import suggest_skills_prompts

logger = logging.getLogger(__name__)


class SkillSuggester:
    """
    Suggest skill categories that complement a resume
    """

    FEATURE = 'suggest_skills'

    # Entries of each section sent as context
    CONTEXT_ENTRIES = 6

    def __init__(self, client: AITextClient):
        self.client = client
        self.model = client.config.resolved_model(self.FEATURE)

    def suggest(self, resume: Resume) -> List[SkillCategory]:
        """
        Suggest new skills for a resume

        Skills already on the resume are dropped from the suggestions
        (case-insensitive), as are categories left with no items.
        """
        existing = resume.all_skills()
        target_role = self._infer_role(resume)

        context = {
            'title': resume.title,
            'summary': resume.personal_info.summary,
            'experience': [
                {'position': e.position, 'company': e.company, 'bullets': e.bullets}
                for e in resume.experience[:self.CONTEXT_ENTRIES]
            ],
            'projects': [
                {'name': p.name, 'technologies': p.technologies, 'bullets': p.bullets}
                for p in resume.projects[:self.CONTEXT_ENTRIES]
            ],
            'existingSkills': existing,
        }

        logger.info(f"Suggesting skills for role: {target_role or 'Unknown'}")

        system_prompt, user_prompt = suggest_skills_prompts(target_role, context)
        content = self.client.generate_text(system_prompt, user_prompt, model=self.model)
        data = parse_json_response(content)

        raw_skills = data.get('skills')
        if not isinstance(raw_skills, list):
            return []

        seen = {skill.lower() for skill in existing}
        categories = []
        for entry in raw_skills:
            if not isinstance(entry, dict):
                continue
            category = SkillCategory.from_dict(entry)
            items = []
            for item in category.items:
                item = item.strip()
                if item and item.lower() not in seen:
                    seen.add(item.lower())
                    items.append(item)
            if items:
                category.items = items
                # The editor keys list entries by id
                category.id = category.id or generate_id()
                categories.append(category)

        logger.info(f"Suggested {sum(len(c.items) for c in categories)} skills in {len(categories)} categories")
        return categories

    @staticmethod
    def _infer_role(resume: Resume) -> str:
        """Resume title, else the first listed position"""
        title = (resume.title or '').strip()
        if title and title != DEFAULT_TITLE:
            return title
        if resume.experience:
            return resume.experience[0].position.strip()
        return ''
