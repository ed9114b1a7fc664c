import httpx
import openai

from narrato.narration.client_base import BaseRewriteClient
from narrato.narration.exceptions import RewriteError, RewriteNetworkError

SYSTEM_PROMPT = (
    "You are a helpful assistant that rewrites presentation content "
    "for specific audiences."
)


class OpenAIClientAdapter(BaseRewriteClient):
    """Rewrite client built on the OpenAI-compatible chat completions API."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        base_url: str | None = None,
        max_tokens: int = 150,
        temperature: float = 0.7,
        system_prompt: str = SYSTEM_PROMPT,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature
        self._system_prompt = system_prompt

    def generate(self, prompt: str) -> str:
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                max_tokens=self._max_tokens,
                temperature=self._temperature,
                messages=[
                    {"role": "system", "content": self._system_prompt},
                    {"role": "user", "content": prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise RewriteNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise RewriteNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise RewriteError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None or not content.strip():
            raise RewriteError("AI returned empty response")
        return content.strip()
