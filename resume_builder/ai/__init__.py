"""
AI-powered resume content features
"""

from resume_builder.ai.client import AITextClient
from resume_builder.ai.exceptions import (
    AIError, AIConfigurationError, AIProviderError, CreditsExhaustedError,
    InvalidAIResponseError, InvalidRequestError, ModelNotFoundError,
    RateLimitError
)
from resume_builder.ai.resume_parser import ResumeParser
from resume_builder.ai.bullet_suggester import BulletSuggester
from resume_builder.ai.skill_suggester import SkillSuggester
from resume_builder.ai.job_analyzer import JobAnalyzer
from resume_builder.ai.models import JobAnalysis, KeywordSuggestion, BulletImprovement

__all__ = [
    'AITextClient',
    'AIError',
    'AIConfigurationError',
    'AIProviderError',
    'CreditsExhaustedError',
    'InvalidAIResponseError',
    'InvalidRequestError',
    'ModelNotFoundError',
    'RateLimitError',
    'ResumeParser',
    'BulletSuggester',
    'SkillSuggester',
    'JobAnalyzer',
    'JobAnalysis',
    'KeywordSuggestion',
    'BulletImprovement',
]
