from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from pathlib import Path
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings for the bus route optimizer."""

    # General settings
    APP_NAME: str = "Bus Route Optimizer"
    ENVIRONMENT: str = Field(default="development")

    # Debugging and logging
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")
    LOG_JSON: bool = Field(default=True)
    LOG_CONFIG_PATH: Optional[Path] = Field(default=None)

    # Generative model settings
    GEMINI_API_KEY: Optional[str] = Field(default=None)
    GEMINI_MODEL: str = Field(default="gemini-1.5-flash")
    LLM_TEMPERATURE: float = Field(default=0.3, ge=0.0, le=2.0)
    LLM_MAX_OUTPUT_TOKENS: int = Field(default=2048, gt=0)
    LLM_TIMEOUT_SECONDS: float = Field(default=20.0, gt=0)

    # HTTP settings
    ALLOWED_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://127.0.0.1:3000"]
    )

    # Monitoring settings
    METRICS_ENABLED: bool = Field(default=True)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",
        case_sensitive=False,
    )

    @property
    def model_configured(self) -> bool:
        """True when a Gemini credential is available."""
        return bool(self.GEMINI_API_KEY and self.GEMINI_API_KEY.strip())

    @property
    def llm_settings(self):
        """Get generative model settings as a dictionary."""
        return {
            "model": self.GEMINI_MODEL,
            "temperature": self.LLM_TEMPERATURE,
            "max_output_tokens": self.LLM_MAX_OUTPUT_TOKENS,
            "timeout": self.LLM_TIMEOUT_SECONDS,
        }
