# resume_builder/ai/providers.py
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from resume_builder.config import AIConfig
from resume_builder.ai.exceptions import AIConfigurationError

logger = logging.getLogger(__name__)


class Provider(ABC):
    """Request and response shapes for one family of text-completion APIs"""

    name = ''

    def __init__(self, config: AIConfig):
        self.config = config

    @abstractmethod
    def build_request(
        self,
        system_prompt: str,
        user_prompt: str,
        model: str
    ) -> Tuple[str, Dict[str, str], Dict[str, Any]]:
        """Return (url, headers, json payload) for a completion call"""
        pass

    @abstractmethod
    def extract_text(self, data: Dict[str, Any]) -> str:
        """Pull the assistant text out of a successful response body"""
        pass

    @abstractmethod
    def models_request(self, model: str) -> Tuple[str, Dict[str, str]]:
        """Return (url, headers) for the model listing endpoint"""
        pass

    @abstractmethod
    def parse_models(self, data: Dict[str, Any]) -> List[str]:
        pass


class OpenAIProvider(Provider):
    """OpenAI-compatible chat completions"""

    name = 'openai'

    def _headers(self) -> Dict[str, str]:
        return {
            'Authorization': f'Bearer {self.config.api_key}',
            'Content-Type': 'application/json',
        }

    def build_request(self, system_prompt, user_prompt, model):
        payload = {
            'model': model,
            'messages': [
                {'role': 'system', 'content': system_prompt},
                {'role': 'user', 'content': user_prompt},
            ],
        }
        return self.config.resolved_base_url(model), self._headers(), payload

    def extract_text(self, data):
        choices = data.get('choices') or [{}]
        message = choices[0].get('message') or {}
        return (message.get('content') or '').strip()

    def models_request(self, model):
        url = self.config.resolved_base_url(model)
        if url.endswith('/chat/completions'):
            url = url[:-len('/chat/completions')]
        return f"{url.rstrip('/')}/models", self._headers()

    def parse_models(self, data):
        return [m['id'] for m in data.get('data', []) if isinstance(m, dict) and m.get('id')]


class OpenRouterProvider(OpenAIProvider):
    """OpenRouter: chat completions plus attribution headers"""

    name = 'openrouter'

    def _headers(self) -> Dict[str, str]:
        headers = super()._headers()
        if self.config.app_url:
            headers['HTTP-Referer'] = self.config.app_url
        headers['X-Title'] = self.config.app_name
        return headers


class GeminiProvider(Provider):
    """Google generateContent API"""

    name = 'gemini'

    MODELS_URL = 'https://generativelanguage.googleapis.com/v1beta/models'

    def _headers(self) -> Dict[str, str]:
        return {
            'Content-Type': 'application/json',
            'x-goog-api-key': self.config.api_key or '',
        }

    def build_request(self, system_prompt, user_prompt, model):
        payload = {
            'system_instruction': {'parts': [{'text': system_prompt}]},
            'contents': [{'role': 'user', 'parts': [{'text': user_prompt}]}],
        }
        return self.config.resolved_base_url(model), self._headers(), payload

    def extract_text(self, data):
        candidates = data.get('candidates') or [{}]
        parts = (candidates[0].get('content') or {}).get('parts') or []
        return ''.join(
            p['text'] for p in parts if isinstance(p, dict) and isinstance(p.get('text'), str)
        ).strip()

    def models_request(self, model):
        return self.MODELS_URL, self._headers()

    def parse_models(self, data):
        # Names come back as "models/gemini-1.5-flash"
        names = []
        for m in data.get('models', []):
            name = m.get('name', '') if isinstance(m, dict) else ''
            if name:
                names.append(name.split('/', 1)[-1])
        return names


PROVIDERS = {
    OpenAIProvider.name: OpenAIProvider,
    OpenRouterProvider.name: OpenRouterProvider,
    GeminiProvider.name: GeminiProvider,
}


def get_provider(config: AIConfig, name: Optional[str] = None) -> Provider:
    """Instantiate the provider selected by the config"""
    name = name or config.provider
    provider_cls = PROVIDERS.get(name)
    if provider_cls is None:
        raise AIConfigurationError(
            f"Unknown AI provider '{name}'. Choose one of: {', '.join(sorted(PROVIDERS))}"
        )
    return provider_cls(config)
