# resume_builder/ai/models.py
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any


def _strings(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if isinstance(v, (str, int, float)) and str(v).strip()]


@dataclass
class KeywordSuggestion:
    """Where and why to add a keyword"""
    keyword: str
    type: str = "add_skill"        # "add_skill", "add_to_experience", ...
    reason: str = ""
    where: str = ""                # "skills", "experience", "summary"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.type,
            'keyword': self.keyword,
            'reason': self.reason,
            'where': self.where,
        }


@dataclass
class BulletImprovement:
    """AI rewrite of an existing bullet"""
    original: str
    improved: str
    added_keywords: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'original': self.original,
            'improved': self.improved,
            'addedKeywords': list(self.added_keywords),
        }


@dataclass
class JobAnalysis:
    """Job description compared against a resume"""
    job_title: str = ""
    company: Optional[str] = None
    required_keywords: List[str] = field(default_factory=list)
    matched_keywords: List[str] = field(default_factory=list)
    missing_keywords: List[str] = field(default_factory=list)
    keyword_match_percentage: int = 0
    suggestions: List[KeywordSuggestion] = field(default_factory=list)
    bullet_improvements: List[BulletImprovement] = field(default_factory=list)
    summary_recommendation: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'JobAnalysis':
        """Build from model output, skipping malformed entries"""
        suggestions = [
            KeywordSuggestion(
                keyword=str(s['keyword']),
                type=str(s.get('type') or 'add_skill'),
                reason=str(s.get('reason') or ''),
                where=str(s.get('where') or ''),
            )
            for s in data.get('suggestions') or []
            if isinstance(s, dict) and s.get('keyword')
        ]
        improvements = [
            BulletImprovement(
                original=str(b.get('original') or ''),
                improved=str(b['improved']),
                added_keywords=_strings(b.get('addedKeywords')),
            )
            for b in data.get('bulletImprovements') or []
            if isinstance(b, dict) and b.get('improved')
        ]

        percentage = data.get('keywordMatchPercentage')
        try:
            percentage = max(0, min(100, int(round(float(percentage)))))
        except (TypeError, ValueError):
            percentage = 0

        return cls(
            job_title=str(data.get('jobTitle') or ''),
            company=str(data['company']) if data.get('company') else None,
            required_keywords=_strings(data.get('requiredKeywords')),
            matched_keywords=_strings(data.get('matchedKeywords')),
            missing_keywords=_strings(data.get('missingKeywords')),
            keyword_match_percentage=percentage,
            suggestions=suggestions,
            bullet_improvements=improvements,
            summary_recommendation=str(data.get('summaryRecommendation') or ''),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'jobTitle': self.job_title,
            'company': self.company,
            'requiredKeywords': list(self.required_keywords),
            'matchedKeywords': list(self.matched_keywords),
            'missingKeywords': list(self.missing_keywords),
            'keywordMatchPercentage': self.keyword_match_percentage,
            'suggestions': [s.to_dict() for s in self.suggestions],
            'bulletImprovements': [b.to_dict() for b in self.bullet_improvements],
            'summaryRecommendation': self.summary_recommendation,
        }
