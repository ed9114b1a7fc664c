from typing import ClassVar

from narrato.config.settings import Settings
from narrato.narration.client_base import BaseRewriteClient
from narrato.narration.example_client_adapter import ExampleClientAdapter
from narrato.narration.narrator import Narrator
from narrato.narration.openai_client_adapter import OpenAIClientAdapter
from narrato.rate_limiting.rate_limiter import FixedWindowRateLimiter


class RewriteClientFactory:
    """Creates the configured generative rewrite client."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseRewriteClient | None:
        """Create a rewrite client, or None when rewriting is disabled."""
        provider = settings.rewrite_provider.lower()
        if provider == "none":
            return None
        if provider == "example":
            return ExampleClientAdapter()
        if provider == "openai":
            return OpenAIClientAdapter(
                api_key=settings.rewrite_openai_api_key,
                model=settings.rewrite_openai_model_name,
                timeout_seconds=settings.rewrite_openai_timeout_seconds,
                max_tokens=settings.rewrite_max_tokens,
                temperature=settings.rewrite_temperature,
            )
        if provider == "gemini":
            return OpenAIClientAdapter(
                api_key=settings.rewrite_gemini_api_key,
                model=settings.rewrite_gemini_model_name,
                timeout_seconds=settings.rewrite_gemini_timeout_seconds,
                base_url=cls.OPENAI_COMPATIBLE_BASE_URLS["gemini"],
                max_tokens=settings.rewrite_max_tokens,
                temperature=settings.rewrite_temperature,
            )
        if provider == "openai_compatible":
            base_url = settings.rewrite_openai_compatible_base_url.strip()
            if not base_url:
                raise ValueError(
                    "rewrite_openai_compatible_base_url is required for "
                    "rewrite_provider=openai_compatible"
                )
            return OpenAIClientAdapter(
                api_key=settings.rewrite_openai_compatible_api_key,
                model=settings.rewrite_openai_compatible_model_name,
                timeout_seconds=settings.rewrite_openai_compatible_timeout_seconds,
                base_url=base_url,
                max_tokens=settings.rewrite_max_tokens,
                temperature=settings.rewrite_temperature,
            )
        supported = ["none", "example", "openai", "gemini", "openai_compatible"]
        raise ValueError(f"Unknown rewrite provider '{provider}'. Choose from: {supported}")


def build_narrator(settings: Settings, rate_limiter: FixedWindowRateLimiter) -> Narrator:
    """Build a Narrator sharing the process-wide rate limiter."""
    return Narrator(client=RewriteClientFactory.create(settings), rate_limiter=rate_limiter)
