from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    max_segments: int = Field(default=5, ge=1)
    rate_limit_capacity: int = Field(default=10, ge=1)
    rate_limit_window_seconds: float = Field(default=60.0, gt=0)

    upload_tmp_dir: str | None = None
    max_upload_bytes: int = Field(default=10 * 1024 * 1024, ge=1)

    rewrite_provider: str = "openai"
    rewrite_max_tokens: int = 150
    rewrite_temperature: float = 0.7

    rewrite_openai_api_key: str = ""
    rewrite_openai_model_name: str = "gpt-4o-mini"
    rewrite_openai_timeout_seconds: int = 30

    rewrite_gemini_api_key: str = ""
    rewrite_gemini_model_name: str = "gemini-1.5-flash"
    rewrite_gemini_timeout_seconds: int = 30

    rewrite_openai_compatible_api_key: str = ""
    rewrite_openai_compatible_model_name: str = ""
    rewrite_openai_compatible_base_url: str = ""
    rewrite_openai_compatible_timeout_seconds: int = 30

    speech_provider: str = "deepgram"

    speech_deepgram_api_key: str = ""
    speech_deepgram_model_name: str = "aura-asteria-en"
    speech_deepgram_base_url: str = "https://api.deepgram.com/v1"
    speech_deepgram_timeout_seconds: int = 30

    speech_openai_api_key: str = ""
    speech_openai_model_name: str = "tts-1"
    speech_openai_voice: str = "alloy"
    speech_openai_timeout_seconds: int = 30
