from narrato.logging.logger import Log
from narrato.narration.narrator import Narrator
from narrato.pipeline.exceptions import PipelineCancelledError, ProcessingError
from narrato.pipeline.models import PipelineReport, SlideOutcome
from narrato.pipeline.pipeline import PipelineContext, PipelineStep
from narrato.segmentation.segmenter import Segmenter
from narrato.synthesis.exceptions import SynthesisError
from narrato.synthesis.synthesizer import Synthesizer


def truncation_note(processed: int, available: int) -> str | None:
    if processed >= available:
        return None
    return f"Showing first {processed} of {available} slides due to rate limits."


class SegmentStep(PipelineStep):
    name = "segmenting"

    def __init__(self, segmenter: Segmenter) -> None:
        self._segmenter = segmenter

    def run(self, context: PipelineContext) -> PipelineContext:
        context.segments = self._segmenter.segment(context.document)
        return context


class BudgetCapStep(PipelineStep):
    name = "budget_cap"

    def run(self, context: PipelineContext) -> PipelineContext:
        context.selected = context.segments[: context.max_segments]
        if len(context.selected) < len(context.segments):
            Log.info(
                f"Capping run at {len(context.selected)} of "
                f"{len(context.segments)} segments"
            )
        return context


class ProcessSegmentsStep(PipelineStep):
    """Narrates then synthesizes each selected segment in document order.

    A segment whose synthesis fails is dropped and the run continues.
    """

    name = "processing"

    def __init__(self, narrator: Narrator, synthesizer: Synthesizer) -> None:
        self._narrator = narrator
        self._synthesizer = synthesizer

    def run(self, context: PipelineContext) -> PipelineContext:
        total = len(context.selected)
        for position, segment in enumerate(context.selected, start=1):
            self._raise_if_cancelled(context, f"before segment {position} of {total}")
            Log.info(f"Narrating segment {position}/{total} (index {segment.index})")
            narration = self._narrator.rewrite(segment, context.audience)
            try:
                audio = self._synthesizer.synthesize(narration.rewritten_text)
            except SynthesisError as exc:
                Log.warning(f"Dropping segment {segment.index}: {exc}")
                context.failures.append((segment.index, exc))
                continue
            context.collected.append((narration, audio))
        self._raise_if_cancelled(context, "after the last segment")
        return context

    def close(self) -> None:
        self._synthesizer.close()

    @staticmethod
    def _raise_if_cancelled(context: PipelineContext, where: str) -> None:
        if context.cancelled:
            context.collected.clear()
            raise PipelineCancelledError(f"Run cancelled {where}")


class AssembleStep(PipelineStep):
    name = "assembling"

    def run(self, context: PipelineContext) -> PipelineContext:
        if not context.collected:
            last_cause = context.failures[-1][1] if context.failures else None
            raise ProcessingError(
                f"Error processing file: speech synthesis failed for all "
                f"{len(context.failures)} segments (last error: {last_cause})"
            ) from last_cause
        ordered = sorted(context.collected, key=lambda pair: pair[0].segment_index)
        outcomes = [
            SlideOutcome(
                slide_number=number,
                original_text=narration.original_text,
                rewritten_text=narration.rewritten_text,
                audio=audio,
                used_fallback=narration.used_fallback,
            )
            for number, (narration, audio) in enumerate(ordered, start=1)
        ]
        processed = len(context.selected)
        available = len(context.segments)
        context.report = PipelineReport(
            outcomes=outcomes,
            total_processed=processed,
            total_available=available,
            truncation_note=truncation_note(processed, available),
        )
        return context
