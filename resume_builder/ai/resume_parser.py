# resume_builder/ai/resume_parser.py
import logging

from resume_builder.models import Resume
from resume_builder.ai.client import AITextClient
from resume_builder.ai.exceptions import InvalidRequestError
from resume_builder.ai.parsing import parse_json_response
from resume_builder.ai.prompts import parse_resume_prompts

logger = logging.getLogger(__name__)


class ResumeParser:
    """
    Turn free resume text into a structured Resume using the AI proxy
    """

    FEATURE = 'parse_resume'

    def __init__(self, client: AITextClient):
        self.client = client
        self.model = client.config.resolved_model(self.FEATURE)

    def parse(self, resume_text: str) -> Resume:
        """
        Parse resume text

        Args:
            resume_text: Plain text of a resume (pasted or extracted from a file)

        Returns:
            Resume built from the model's JSON

        Raises:
            InvalidRequestError: If the text is empty
            InvalidAIResponseError: If the model output is not a JSON object
        """
        if not resume_text or not resume_text.strip():
            raise InvalidRequestError('Resume text is required')

        logger.info(f"Parsing resume text, length: {len(resume_text)}")

        system_prompt, user_prompt = parse_resume_prompts(resume_text)
        content = self.client.generate_text(system_prompt, user_prompt, model=self.model)
        logger.debug(f"Parsed resume content: {content[:500]}")

        resume = Resume.from_dict(parse_json_response(content))
        logger.info(f"Parsed resume: {resume!r}")
        return resume
