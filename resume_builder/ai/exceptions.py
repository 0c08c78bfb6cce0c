# resume_builder/ai/exceptions.py
from typing import List, Optional


class AIError(RuntimeError):
    """Base error for AI features; carries an HTTP-like status"""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class AIConfigurationError(AIError):
    """Raised when the proxy is missing an API key or has an unknown provider"""


class InvalidRequestError(AIError):
    """Raised when a feature is called without its required input"""

    status_code = 400


class AIProviderError(AIError):
    """Raised when the upstream provider returns a failure"""

    status_code = 502

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body_excerpt: str = ""
    ):
        super().__init__(message, status_code)
        self.body_excerpt = body_excerpt


class RateLimitError(AIProviderError):
    """Raised when 429 responses outlast the retry budget"""

    status_code = 429


class CreditsExhaustedError(AIProviderError):
    """Raised when the provider reports the account has no credit left"""

    status_code = 402


class ModelNotFoundError(AIProviderError):
    """Raised when the configured model does not exist upstream"""

    status_code = 404

    def __init__(
        self,
        message: str,
        model: str,
        available_models: Optional[List[str]] = None,
        body_excerpt: str = ""
    ):
        super().__init__(message, body_excerpt=body_excerpt)
        self.model = model
        self.available_models = available_models or []


class InvalidAIResponseError(AIError):
    """Raised when model output cannot be parsed as the expected JSON"""

    status_code = 502
