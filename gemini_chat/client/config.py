"""Gemini client configuration with environment variable loading.

Pydantic-based configuration for the Gemini generateContent client.
The API key is sent as a query parameter, so presence is the only check.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from gemini_chat.models.schemas import GenerationConfig

# Load environment variables from .env file
load_dotenv()

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.0-flash"


class GeminiConfig(BaseModel):
    """Configuration for the Gemini API client.

    Attributes:
        api_key: API key passed in the request URL.
        base_url: API base URL including the version segment.
        model_name: Model identifier used in the endpoint path.
        timeout: Request timeout in seconds.
        temperature: Optional sampling temperature.
        top_p: Optional nucleus sampling threshold.
        top_k: Optional top-k sampling limit.
        max_output_tokens: Optional cap on generated tokens.
    """

    # Env-sourced defaults go through the same validators as explicit values.
    model_config = ConfigDict(validate_default=True)

    api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY", ""),
        description="API key for the Generative Language API",
    )
    base_url: str = Field(
        default_factory=lambda: os.getenv("GEMINI_BASE_URL") or DEFAULT_BASE_URL,
        description="API base URL",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL") or DEFAULT_MODEL,
        description="Model to use",
    )
    timeout: float = Field(
        default_factory=lambda: os.getenv("GEMINI_TIMEOUT") or "60",
        gt=0.0,
        description="Request timeout in seconds",
    )
    temperature: float | None = Field(default=None, ge=0.0, le=2.0)
    top_p: float | None = Field(default=None, ge=0.0, le=1.0)
    top_k: int | None = Field(default=None, ge=1)
    max_output_tokens: int | None = Field(default=None, ge=1)

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError("GEMINI_API_KEY is required. Set it in the environment or .env")
        return v.strip()

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def endpoint(self) -> str:
        """Full generateContent URL for the configured model."""
        return f"{self.base_url}/models/{self.model_name}:generateContent"

    def generation_config(self) -> GenerationConfig:
        """Build the generationConfig sent with every request."""
        return GenerationConfig(
            temperature=self.temperature,
            top_p=self.top_p,
            top_k=self.top_k,
            max_output_tokens=self.max_output_tokens,
        )


def get_gemini_config() -> GeminiConfig:
    """Create client configuration from environment.

    Returns:
        Configured GeminiConfig instance.

    Raises:
        ValidationError: If GEMINI_API_KEY is not set.
    """
    return GeminiConfig()
