# resume_builder/ats/models.py
from dataclasses import dataclass, field
from typing import List, Dict, Any


@dataclass
class ScoreReport:
    """ATS scoring result for one resume"""
    score: int                     # 0-100
    keyword_match: int             # 0-100
    missing_sections: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)
    formatting_score: int = 100

    # False when no keywords were supplied and keyword_match is the placeholder
    keywords_evaluated: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': self.score,
            'keywordMatch': self.keyword_match,
            'missingSections': list(self.missing_sections),
            'suggestions': list(self.suggestions),
            'formattingScore': self.formatting_score,
            'keywordsEvaluated': self.keywords_evaluated,
        }
