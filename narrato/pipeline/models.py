from dataclasses import dataclass, field

from narrato.synthesis.models import AudioArtifact


@dataclass(frozen=True)
class SlideOutcome:
    """Fully processed slide. slide_number is 1-based among successes."""

    slide_number: int
    original_text: str
    rewritten_text: str
    audio: AudioArtifact
    used_fallback: bool


@dataclass(frozen=True)
class PipelineReport:
    """Terminal output of one orchestrator run."""

    outcomes: list[SlideOutcome] = field(default_factory=list)
    total_processed: int = 0
    total_available: int = 0
    truncation_note: str | None = None
