"""Audience-tailored narration with a rate-limited AI path and offline fallback."""

from pathlib import Path

from narrato.logging.logger import Log
from narrato.narration.client_base import BaseRewriteClient
from narrato.narration.fallback import fallback_rewrite
from narrato.narration.models import Attempted, FellBack, NarrationResult, RewriteOutcome
from narrato.narration.prompt_loader import load_prompt_template, render_prompt
from narrato.rate_limiting.rate_limiter import FixedWindowRateLimiter
from narrato.segmentation.models import Segment


class Narrator:
    """Rewrites one segment for an audience. Never raises on rewrite failure.

    With no client configured every segment takes the fallback path without
    touching the rate limiter.
    """

    def __init__(
        self,
        *,
        client: BaseRewriteClient | None,
        rate_limiter: FixedWindowRateLimiter,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._client = client
        self._rate_limiter = rate_limiter
        self._prompt_template = load_prompt_template(prompt_template_path)

    def rewrite(self, segment: Segment, audience: str) -> NarrationResult:
        outcome = self.resolve(segment.text, audience)
        return NarrationResult(
            segment_index=segment.index,
            original_text=segment.text,
            rewritten_text=outcome.text,
            used_fallback=isinstance(outcome, FellBack),
        )

    def resolve(self, text: str, audience: str) -> RewriteOutcome:
        """Run the AI path and report which branch produced the narration."""
        if self._client is None:
            return FellBack(fallback_rewrite(text, audience), "no rewrite provider configured")
        try:
            self._rate_limiter.try_acquire()
            prompt = self.build_prompt(text, audience)
            Log.debug(f"Narration prompt:\n{prompt}")
            rewritten = self._client.generate(prompt).strip()
            if not rewritten:
                raise ValueError("AI returned blank narration")
        except Exception as exc:
            Log.warning(f"AI processing failed, using fallback: {exc}")
            return FellBack(fallback_rewrite(text, audience), str(exc))
        Log.debug(f"AI raw response:\n{rewritten}")
        return Attempted(rewritten)

    def build_prompt(self, text: str, audience: str) -> str:
        return render_prompt(self._prompt_template, audience, text)
