# resume_builder/ai/client.py
import logging
import random
import time
from typing import Callable, List, Optional

import requests
from tenacity import (
    RetryCallState,
    Retrying,
    before_sleep_log,
    retry_if_result,
    stop_after_attempt,
    wait_exponential
)
from urllib3.exceptions import InvalidHeader
from urllib3.util.retry import Retry

from resume_builder.config import AIConfig
from resume_builder.ai.exceptions import (
    AIConfigurationError, AIProviderError, CreditsExhaustedError,
    ModelNotFoundError, RateLimitError
)
from resume_builder.ai.providers import Provider, get_provider

logger = logging.getLogger(__name__)

# Upstream error bodies are cut to this many characters in messages and logs
ERROR_EXCERPT_LENGTH = 300


def _excerpt(text: str) -> str:
    text = (text or '').strip()
    if len(text) > ERROR_EXCERPT_LENGTH:
        return text[:ERROR_EXCERPT_LENGTH] + '...'
    return text


def _is_rate_limited(response: requests.Response) -> bool:
    return response.status_code == 429


def _last_response(retry_state: RetryCallState) -> requests.Response:
    """Hand the final 429 back to the caller instead of raising RetryError"""
    return retry_state.outcome.result()


class AITextClient:
    """
    Text-completion client shared by every AI feature

    One outbound request per call, plus bounded retries on 429. All
    settings come from the AIConfig passed in.
    """

    def __init__(
        self,
        config: AIConfig,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
        jitter: Callable[[], float] = random.random
    ):
        """
        Initialize client

        Args:
            config: Provider, key, endpoint, model and retry settings
            session: HTTP session (a new one if None)
            sleep: Called with the backoff delay in seconds
            jitter: Returns a float in [0, 1) added to each backoff delay
        """
        self.config = config
        self.session = session or requests.Session()
        self._sleep = sleep
        self._jitter = jitter

    @property
    def provider(self) -> Provider:
        return get_provider(self.config)

    def generate_text(
        self,
        system_prompt: str,
        user_prompt: str,
        model: Optional[str] = None
    ) -> str:
        """
        Generate text from a system and user prompt

        Args:
            system_prompt: System instruction
            user_prompt: User prompt
            model: Model override (config default if None)

        Returns:
            Assistant text, stripped

        Raises:
            AIConfigurationError: No API key or unknown provider
            RateLimitError: Still rate limited after all retries
            CreditsExhaustedError: Provider reports no remaining credit
            ModelNotFoundError: Model unknown upstream
            AIProviderError: Any other upstream or network failure
        """
        if not self.config.api_key:
            raise AIConfigurationError('AI_API_KEY is not configured')

        provider = self.provider
        model = model or self.config.resolved_model()
        url, headers, payload = provider.build_request(system_prompt, user_prompt, model)

        response = self._retrying()(self._post, url, headers, payload)

        if response.ok:
            try:
                data = response.json()
            except ValueError as e:
                raise AIProviderError(
                    'AI request failed: provider returned a non-JSON body',
                    body_excerpt=_excerpt(response.text)
                ) from e
            text = provider.extract_text(data)
            logger.info(f"AI response from {provider.name}/{model}: {len(text)} chars")
            return text

        self._raise_for_status(response, provider, model)

    def list_models(self, model: Optional[str] = None) -> List[str]:
        """
        List model names offered by the configured provider

        Raises:
            AIProviderError: If the listing request fails
        """
        provider = self.provider
        url, headers = provider.models_request(model or self.config.resolved_model())
        try:
            response = self.session.get(url, headers=headers, timeout=self.config.timeout)
        except requests.RequestException as e:
            raise AIProviderError(f'Model listing failed: {e}') from e

        if not response.ok:
            raise AIProviderError(
                f'Model listing failed with status {response.status_code}',
                status_code=response.status_code,
                body_excerpt=_excerpt(response.text)
            )
        return provider.parse_models(response.json())

    def _post(self, url, headers, payload) -> requests.Response:
        try:
            return self.session.post(
                url,
                headers=headers,
                json=payload,
                timeout=self.config.timeout
            )
        except requests.Timeout as e:
            logger.error(f"AI request timed out after {self.config.timeout}s")
            raise AIProviderError('AI request timed out', status_code=504) from e
        except requests.RequestException as e:
            logger.error(f"AI request failed: {e}")
            raise AIProviderError(f'AI request failed: {e}') from e

    def _retrying(self) -> Retrying:
        """Retry policy for completion calls: 429 only, max_retries times"""
        return Retrying(
            stop=stop_after_attempt(self.config.max_retries + 1),
            wait=self._retry_wait,
            retry=retry_if_result(_is_rate_limited),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            retry_error_callback=_last_response,
            sleep=self._sleep,
        )

    def _retry_wait(self, retry_state: RetryCallState) -> float:
        """
        Seconds to wait before the next attempt, never above retry_max_delay

        A Retry-After header on the 429 wins over the exponential backoff.
        """
        cap = self.config.retry_max_delay
        response = retry_state.outcome.result()
        server_delay = self._parse_retry_after(response.headers.get('Retry-After'))
        if server_delay is not None:
            return min(server_delay, cap)

        base = self.config.retry_base_delay
        backoff = wait_exponential(multiplier=base, max=cap)(retry_state)
        return min(backoff + self._jitter() * base / 2, cap)

    @staticmethod
    def _parse_retry_after(value: Optional[str]) -> Optional[float]:
        """Retry-After is either delta-seconds or an HTTP date"""
        if not value:
            return None
        try:
            return float(Retry().parse_retry_after(value))
        except InvalidHeader:
            logger.debug(f"Ignoring Retry-After header: {value!r}")
            return None

    def _raise_for_status(self, response: requests.Response, provider: Provider, model: str):
        status = response.status_code
        body = _excerpt(response.text)
        logger.error(f"AI request error: {status} {body}")

        if status == 429:
            raise RateLimitError(
                'AI quota/rate limit exceeded. Please check your plan/billing and try again.',
                body_excerpt=body
            )
        if status == 402:
            raise CreditsExhaustedError(
                'AI credits exhausted. Please add funds.',
                body_excerpt=body
            )
        if status == 404:
            available = self._available_models(model)
            message = f"AI model '{model}' was not found for provider '{provider.name}'."
            if available:
                message += f" Available models include: {', '.join(available[:10])}"
            raise ModelNotFoundError(message, model=model, available_models=available, body_excerpt=body)

        raise AIProviderError(
            f'AI request failed ({status}): {body}' if body else f'AI request failed ({status})',
            status_code=status if status >= 400 else 502,
            body_excerpt=body
        )

    def _available_models(self, model: str) -> List[str]:
        """Model listing for the 404 message; empty when the listing fails too"""
        try:
            return self.list_models(model)
        except (AIProviderError, ValueError) as e:
            logger.warning(f"Could not list AI models: {e}")
            return []
