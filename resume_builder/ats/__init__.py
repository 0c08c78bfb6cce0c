"""
ATS (Applicant Tracking System) scoring
"""

from resume_builder.ats.models import ScoreReport
from resume_builder.ats.scorer import ATSScorer, calculate_ats_score

__all__ = [
    'ScoreReport',
    'ATSScorer',
    'calculate_ats_score',
]
