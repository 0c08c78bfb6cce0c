# resume_builder/ai/job_analyzer.py
import logging

from resume_builder.models import Resume
from resume_builder.ai.client import AITextClient
from resume_builder.ai.exceptions import InvalidRequestError
from resume_builder.ai.models import JobAnalysis
from resume_builder.ai.parsing import parse_json_response
from resume_builder.ai.prompts import analyze_job_prompts

logger = logging.getLogger(__name__)


class JobAnalyzer:
    """
    Compare a job description with a resume and suggest keyword changes
    """

    FEATURE = 'analyze_job'

    def __init__(self, client: AITextClient):
        self.client = client
        self.model = client.config.resolved_model(self.FEATURE)

    def analyze(self, job_description: str, resume: Resume) -> JobAnalysis:
        """
        Analyze a job description against a resume

        Args:
            job_description: Job posting text
            resume: Resume to compare

        Returns:
            JobAnalysis with keywords, suggestions and bullet rewrites
        """
        if not job_description or not job_description.strip():
            raise InvalidRequestError('Job description is required')

        logger.info(f"Analyzing job description, length: {len(job_description)}")

        system_prompt, user_prompt = analyze_job_prompts(job_description, resume.to_dict())
        content = self.client.generate_text(system_prompt, user_prompt, model=self.model)
        analysis = JobAnalysis.from_dict(parse_json_response(content))

        logger.info(
            f"Job analysis complete: {analysis.job_title or 'unknown title'}, "
            f"{analysis.keyword_match_percentage}% keyword match"
        )
        return analysis
