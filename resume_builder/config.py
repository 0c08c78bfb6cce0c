# resume_builder/config.py
from dataclasses import dataclass, field, fields
from typing import Dict, Optional, Any
import yaml


# Provider defaults: base URL template and model name
PROVIDER_DEFAULTS: Dict[str, Dict[str, str]] = {
    'openai': {
        'base_url': 'https://api.openai.com/v1/chat/completions',
        'model': 'gpt-4o-mini',
    },
    'openrouter': {
        'base_url': 'https://openrouter.ai/api/v1/chat/completions',
        'model': 'openai/gpt-4o-mini',
    },
    'gemini': {
        'base_url': 'https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent',
        'model': 'gemini-1.5-flash',
    },
}

# Features that may pin their own model
FEATURES = ('parse_resume', 'suggest_bullets', 'suggest_skills', 'analyze_job')


@dataclass
class AIConfig:
    """Settings for the AI text proxy, built once at startup"""

    provider: str = 'openai'
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    model: Optional[str] = None

    # HTTP
    timeout: float = 60.0

    # Rate-limit retries (seconds)
    max_retries: int = 2
    retry_base_delay: float = 0.7
    retry_max_delay: float = 2.6

    # Sent to providers that attribute traffic (openrouter)
    app_url: Optional[str] = None
    app_name: str = 'Resume Builder'

    # Per-feature model overrides, e.g. {'suggest_bullets': 'gpt-4o-mini'}
    feature_models: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        self.provider = (self.provider or 'openai').strip().lower()
        self.feature_models = {
            name: model for name, model in (self.feature_models or {}).items() if model
        }

    @property
    def defaults(self) -> Dict[str, str]:
        return PROVIDER_DEFAULTS.get(self.provider, PROVIDER_DEFAULTS['openai'])

    def resolved_model(self, feature: Optional[str] = None) -> str:
        """Model for a feature: feature override, then global override, then provider default"""
        if feature and self.feature_models.get(feature):
            return self.feature_models[feature]
        return self.model or self.defaults['model']

    def resolved_base_url(self, model: str) -> str:
        """Endpoint for a model; the gemini default embeds the model name"""
        return self.base_url or self.defaults['base_url'].format(model=model)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AIConfig':
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in (data or {}).items() if k in known})

    @classmethod
    def from_yaml(cls, path: str) -> 'AIConfig':
        """Load configuration from the `ai` section of a YAML file"""
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}
        return cls.from_dict(data.get('ai', {}))
