# resume_builder/ats/scorer.py
import logging
import math
import re
from typing import List, Optional, Sequence

from resume_builder.models import Resume
from resume_builder.ats.models import ScoreReport

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (12.5 -> 13)"""
    return int(math.floor(value + 0.5))


class ATSScorer:
    """
    Fixed-rubric ATS score for a resume

    Sections are evaluated in a fixed order and each check adds points,
    a missing-section entry or a suggestion. There is no early exit.
    """

    ACTION_VERBS = (
        'led', 'developed', 'managed', 'created', 'implemented', 'increased',
        'decreased', 'improved', 'designed', 'built', 'achieved', 'delivered',
        'launched',
    )

    # Percentages, dollar amounts and "10+" style counts
    METRICS_PATTERN = re.compile(r'\d+%|\$\d+|\d+\+', re.ASCII)

    MAX_SCORE = 100
    MAX_SUGGESTIONS = 5
    MIN_SUMMARY_LENGTH = 50
    MISSING_TITLE_PENALTY = 20

    # Placeholder keyword match when no keywords are supplied
    DEFAULT_KEYWORD_MATCH = 75

    def score_resume(
        self,
        resume: Resume,
        keywords: Optional[Sequence[str]] = None
    ) -> ScoreReport:
        """
        Score a resume against the rubric

        Args:
            resume: Resume to score (not modified)
            keywords: Optional target keywords, matched case-insensitively
                against the serialized resume

        Returns:
            ScoreReport
        """
        missing_sections: List[str] = []
        suggestions: List[str] = []

        score = 0
        score += self._score_personal_info(resume, missing_sections, suggestions)
        score += self._score_experience(resume, missing_sections, suggestions)
        score += self._score_education(resume, missing_sections, suggestions)
        score += self._score_skills(resume, missing_sections, suggestions)
        score += self._score_projects(resume, suggestions)

        formatting_score = self._score_formatting(resume, suggestions)

        if keywords:
            keyword_match = self._keyword_match(resume, keywords)
            score += round_half_up(keyword_match / 10)
            keywords_evaluated = True
        else:
            keyword_match = self.DEFAULT_KEYWORD_MATCH
            keywords_evaluated = False

        report = ScoreReport(
            score=min(score, self.MAX_SCORE),
            keyword_match=keyword_match,
            missing_sections=missing_sections,
            suggestions=suggestions[:self.MAX_SUGGESTIONS],
            formatting_score=formatting_score,
            keywords_evaluated=keywords_evaluated,
        )

        logger.debug(f"ATS Score: {report.score}/100, keyword match {report.keyword_match}%")
        return report

    def _score_personal_info(
        self,
        resume: Resume,
        missing_sections: List[str],
        suggestions: List[str]
    ) -> int:
        """Contact details and summary (max 20)"""
        info = resume.personal_info
        points = 0

        if info.full_name:
            points += 5
        else:
            missing_sections.append('Full Name')

        if info.email:
            points += 5
        else:
            missing_sections.append('Email')

        if info.phone:
            points += 5
        else:
            missing_sections.append('Phone')

        if info.location:
            points += 3

        if info.summary and len(info.summary) > self.MIN_SUMMARY_LENGTH:
            points += 2
        else:
            suggestions.append('Add a professional summary (50+ characters)')

        return points

    def _score_experience(
        self,
        resume: Resume,
        missing_sections: List[str],
        suggestions: List[str]
    ) -> int:
        """Experience entries, bullet count, action verbs and metrics (max 30)"""
        if not resume.experience:
            missing_sections.append('Work Experience')
            suggestions.append('Add work experience to improve your resume')
            return 0

        points = 10
        bullets = resume.all_bullets()

        total_bullets = len([b for b in bullets if b.strip()])
        if total_bullets >= 6:
            points += 10
        elif total_bullets >= 3:
            points += 5
        else:
            suggestions.append('Add more bullet points to your experience (aim for 3-5 per role)')

        bullet_text = ' '.join(bullets).lower()

        if any(verb in bullet_text for verb in self.ACTION_VERBS):
            points += 5
        else:
            suggestions.append('Use strong action verbs (Led, Developed, Managed, etc.)')

        if self.METRICS_PATTERN.search(bullet_text):
            points += 5
        else:
            suggestions.append('Add quantifiable achievements (e.g., "increased sales by 25%")')

        return points

    def _score_education(
        self,
        resume: Resume,
        missing_sections: List[str],
        suggestions: List[str]
    ) -> int:
        """Education presence and completeness of the first entry (max 15)"""
        if not resume.education:
            missing_sections.append('Education')
            suggestions.append('Add your educational background')
            return 0

        points = 10
        first = resume.education[0]
        if first.degree and first.field_of_study:
            points += 5
        return points

    def _score_skills(
        self,
        resume: Resume,
        missing_sections: List[str],
        suggestions: List[str]
    ) -> int:
        """Skills section and number of listed skills (max 15)"""
        if not resume.skills:
            missing_sections.append('Skills')
            suggestions.append('Add a skills section with relevant technical and soft skills')
            return 0

        points = 8
        total_skills = sum(len(category.items) for category in resume.skills)
        if total_skills >= 10:
            points += 7
        elif total_skills >= 5:
            points += 4
        else:
            suggestions.append('Add more skills (aim for 10+)')
        return points

    def _score_projects(self, resume: Resume, suggestions: List[str]) -> int:
        """Projects are optional; never reported as missing (max 10)"""
        if not resume.projects:
            suggestions.append('Consider adding projects to showcase your work')
            return 0

        points = 5
        if any(project.technologies for project in resume.projects):
            points += 5
        return points

    def _score_formatting(self, resume: Resume, suggestions: List[str]) -> int:
        """Structural defects, independent of the main score"""
        formatting_score = 100
        if any(not exp.position for exp in resume.experience):
            formatting_score -= self.MISSING_TITLE_PENALTY
            suggestions.append('Ensure all positions have job titles')
        return formatting_score

    def _keyword_match(self, resume: Resume, keywords: Sequence[str]) -> int:
        """Percentage of keywords found verbatim in the serialized resume"""
        resume_text = resume.to_json_text().lower()
        matched = [kw for kw in keywords if kw.lower() in resume_text]
        logger.debug(f"Matched {len(matched)}/{len(keywords)} keywords")
        return round_half_up(len(matched) / len(keywords) * 100)


def calculate_ats_score(
    resume: Resume,
    keywords: Optional[Sequence[str]] = None
) -> ScoreReport:
    """Score a resume with the default rubric"""
    return ATSScorer().score_resume(resume, keywords)
