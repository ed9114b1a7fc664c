import threading

from narrato.config.settings import Settings
from narrato.logging.logger import Log
from narrato.narration.factory import build_narrator
from narrato.pipeline.models import PipelineReport
from narrato.pipeline.pipeline import PipelineContext, PipelineStep
from narrato.pipeline.steps import AssembleStep, BudgetCapStep, ProcessSegmentsStep, SegmentStep
from narrato.rate_limiting.rate_limiter import FixedWindowRateLimiter
from narrato.segmentation.models import Document
from narrato.segmentation.segmenter import Segmenter
from narrato.synthesis.factory import build_synthesizer


class Orchestrator:
    """Runs the narration pipeline for one document.

    Pipeline: segment -> cap -> (narrate -> synthesize) per segment -> assemble.
    Segmentation errors propagate unchanged. Synthesis errors drop single
    segments, and a ProcessingError is raised only when none survive.
    """

    def __init__(self, steps: list[PipelineStep], default_max_segments: int = 5) -> None:
        self._steps = steps
        self._default_max_segments = default_max_segments

    def run(
        self,
        document: Document,
        audience: str,
        max_segments: int | None = None,
        cancel_event: threading.Event | None = None,
    ) -> PipelineReport:
        limit = self._default_max_segments if max_segments is None else max_segments
        if limit < 1:
            raise ValueError("max_segments must be at least 1")
        context = PipelineContext(
            document=document,
            audience=audience,
            max_segments=limit,
            cancel_event=cancel_event,
        )
        for step in self._steps:
            Log.info(f"Pipeline stage: {step.name}")
            context = step.run(context)
        if context.report is None:
            raise RuntimeError("Pipeline finished without assembling a report")
        Log.info(
            f"Narrated {len(context.report.outcomes)} of "
            f"{context.report.total_processed} processed segments "
            f"({context.report.total_available} available)"
        )
        return context.report

    def close(self) -> None:
        for step in self._steps:
            step.close()


def build_orchestrator(
    settings: Settings,
    rate_limiter: FixedWindowRateLimiter,
) -> Orchestrator:
    """Build an Orchestrator with all configured adapters."""
    steps: list[PipelineStep] = [
        SegmentStep(Segmenter()),
        BudgetCapStep(),
        ProcessSegmentsStep(build_narrator(settings, rate_limiter), build_synthesizer(settings)),
        AssembleStep(),
    ]
    return Orchestrator(steps, default_max_segments=settings.max_segments)
