"""
Configuration settings for the triage gateway.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development.

Clients never read settings directly: ``Settings.provider_configs()`` turns
them into immutable ``ProviderConfig`` objects that are passed to each
client constructor at start-up.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from triage_gateway.models.llm_models import MAX_COMPLETION_TOKENS, MAX_TEMPERATURE


DEFAULT_PROMPT_TEMPLATES_DIR = Path(__file__).parent / "prompts"


class OperationParams(BaseModel):
    """Sampling parameters for one gateway operation."""
    model_config = ConfigDict(frozen=True)

    temperature: float = Field(..., ge=0.0, le=MAX_TEMPERATURE)
    max_tokens: int = Field(..., ge=1, le=MAX_COMPLETION_TOKENS)


class ProviderConfig(BaseModel):
    """
    Immutable configuration of one provider backend.

    Created once at process start and shared by reference for the process
    lifetime.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Provider identifier, reported as result source")
    base_url: str = Field(..., description="Base URL of the OpenAI-compatible API")
    api_key: str = Field(default="", repr=False)
    model: str
    prompt_set: str = Field(..., description="Subdirectory of the prompt templates dir")
    classify: OperationParams = OperationParams(temperature=0.4, max_tokens=300)
    summarize: OperationParams = OperationParams(temperature=0.5, max_tokens=700)
    timeout: float = Field(default=30.0, gt=0)
    extra_headers: dict[str, str] = Field(default_factory=dict)

    @property
    def completions_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/chat/completions"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Application ===
    APP_NAME: str = "Email Triage Gateway"
    APP_VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    # === Provider A: Together ===
    TOGETHER_API_KEY: str = ""
    TOGETHER_BASE_URL: str = "https://api.together.xyz/v1"
    TOGETHER_MODEL: str = "meta-llama/Llama-3.3-70B-Instruct-Turbo-Free"

    # === Provider B: OpenRouter ===
    OPENROUTER_API_KEY: str = ""
    OPENROUTER_BASE_URL: str = "https://openrouter.ai/api/v1"
    OPENROUTER_MODEL: str = "deepseek/deepseek-v3-base:free"
    OPENROUTER_REFERER: Optional[str] = None  # Sent as HTTP-Referer for OpenRouter rankings
    OPENROUTER_TITLE: Optional[str] = None  # Sent as X-Title

    # === LLM Generation Parameters ===
    # Bounded like the request model, so bad values fail at start-up
    CLASSIFY_TEMPERATURE: float = Field(default=0.4, ge=0.0, le=MAX_TEMPERATURE)
    CLASSIFY_MAX_TOKENS: int = Field(default=300, ge=1, le=MAX_COMPLETION_TOKENS)
    SUMMARY_TEMPERATURE: float = Field(default=0.5, ge=0.0, le=MAX_TEMPERATURE)
    SUMMARY_MAX_TOKENS: int = Field(default=700, ge=1, le=MAX_COMPLETION_TOKENS)

    # === Input Processing ===
    BODY_TRUNCATION_LIMIT: int = 2000  # chars, summarization prompts only

    # === Transport ===
    PROVIDER_TIMEOUT: float = 30.0  # seconds, per provider call

    # === Prompts ===
    PROMPT_TEMPLATES_DIR: Optional[Path] = None  # None = templates shipped with the package

    @property
    def prompt_templates_dir(self) -> Path:
        return self.PROMPT_TEMPLATES_DIR or DEFAULT_PROMPT_TEMPLATES_DIR

    def _operation_params(self) -> dict[str, OperationParams]:
        return {
            "classify": OperationParams(
                temperature=self.CLASSIFY_TEMPERATURE, max_tokens=self.CLASSIFY_MAX_TOKENS
            ),
            "summarize": OperationParams(
                temperature=self.SUMMARY_TEMPERATURE, max_tokens=self.SUMMARY_MAX_TOKENS
            ),
        }

    def provider_configs(self) -> tuple[ProviderConfig, ProviderConfig]:
        """
        Build (primary, secondary) provider configs.

        Returns:
            Tuple of Together config (primary) and OpenRouter config (secondary)
        """
        params = self._operation_params()

        openrouter_headers: dict[str, str] = {}
        if self.OPENROUTER_REFERER:
            openrouter_headers["HTTP-Referer"] = self.OPENROUTER_REFERER
        if self.OPENROUTER_TITLE:
            openrouter_headers["X-Title"] = self.OPENROUTER_TITLE

        together = ProviderConfig(
            name="together",
            base_url=self.TOGETHER_BASE_URL,
            api_key=self.TOGETHER_API_KEY,
            model=self.TOGETHER_MODEL,
            prompt_set="together",
            timeout=self.PROVIDER_TIMEOUT,
            **params,
        )
        openrouter = ProviderConfig(
            name="openrouter",
            base_url=self.OPENROUTER_BASE_URL,
            api_key=self.OPENROUTER_API_KEY,
            model=self.OPENROUTER_MODEL,
            prompt_set="openrouter",
            timeout=self.PROVIDER_TIMEOUT,
            extra_headers=openrouter_headers,
            **params,
        )
        return together, openrouter
