from dataclasses import dataclass


@dataclass(frozen=True)
class Attempted:
    """The generative rewrite succeeded."""

    text: str


@dataclass(frozen=True)
class FellBack:
    """The deterministic fallback produced the narration."""

    text: str
    reason: str


RewriteOutcome = Attempted | FellBack


@dataclass(frozen=True)
class NarrationResult:
    """Rewritten narration for one segment. used_fallback marks degraded quality."""

    segment_index: int
    original_text: str
    rewritten_text: str
    used_fallback: bool
