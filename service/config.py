# service/config.py

from dataclasses import replace
from pydantic_settings import BaseSettings
from typing import List, Optional

from resume_builder.config import AIConfig

# Settings field -> AIConfig attribute
AI_CONFIG_FIELDS = {
    "ai_provider": "provider",
    "ai_api_key": "api_key",
    "ai_base_url": "base_url",
    "ai_model": "model",
    "ai_timeout": "timeout",
    "ai_max_retries": "max_retries",
    "ai_retry_base_delay": "retry_base_delay",
    "ai_retry_max_delay": "retry_max_delay",
    "ai_app_url": "app_url",
    "app_name": "app_name",
}

FEATURE_MODEL_FIELDS = {
    "ai_model_parse_resume": "parse_resume",
    "ai_model_suggest_bullets": "suggest_bullets",
    "ai_model_suggest_skills": "suggest_skills",
    "ai_model_analyze_job": "analyze_job",
}


class Settings(BaseSettings):
    """Service configuration, read from the environment and .env"""

    # App settings
    app_name: str = "Resume Builder API"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Comma separated, "*" for any origin
    cors_origins: str = "*"

    # AI provider: openai, openrouter or gemini
    ai_provider: str = "openai"
    ai_api_key: Optional[str] = None
    ai_base_url: Optional[str] = None
    ai_model: Optional[str] = None

    # YAML file with an `ai:` section; environment values win over it
    ai_config_file: Optional[str] = None

    ai_timeout: float = 60.0
    ai_max_retries: int = 2
    ai_retry_base_delay: float = 0.7
    ai_retry_max_delay: float = 2.6
    ai_app_url: Optional[str] = None

    # Per-feature model overrides
    ai_model_parse_resume: Optional[str] = None
    ai_model_suggest_bullets: Optional[str] = None
    ai_model_suggest_skills: Optional[str] = None
    ai_model_analyze_job: Optional[str] = None

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    def ai_config(self) -> AIConfig:
        """
        Build the AI proxy configuration

        With ai_config_file set, the YAML file is the base and only settings
        given explicitly (environment or .env) override it.
        """
        if self.ai_config_file:
            base = AIConfig.from_yaml(self.ai_config_file)
            explicit = self.model_fields_set
        else:
            base = AIConfig()
            explicit = set(type(self).model_fields)

        overrides = {
            attr: getattr(self, setting)
            for setting, attr in AI_CONFIG_FIELDS.items()
            if setting in explicit and getattr(self, setting) is not None
        }

        feature_models = dict(base.feature_models)
        for setting, feature in FEATURE_MODEL_FIELDS.items():
            if getattr(self, setting):
                feature_models[feature] = getattr(self, setting)

        return replace(base, feature_models=feature_models, **overrides)


settings = Settings()


def load_ai_config(path: Optional[str] = None) -> AIConfig:
    """AI config from a YAML file, or from the environment settings"""
    if path:
        return AIConfig.from_yaml(path)
    return settings.ai_config()
