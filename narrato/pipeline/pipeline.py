import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from narrato.narration.models import NarrationResult
from narrato.pipeline.models import PipelineReport
from narrato.segmentation.models import Document, Segment
from narrato.synthesis.models import AudioArtifact


@dataclass(slots=True)
class PipelineContext:
    document: Document
    audience: str
    max_segments: int
    cancel_event: threading.Event | None = None
    segments: list[Segment] = field(default_factory=list)
    selected: list[Segment] = field(default_factory=list)
    collected: list[tuple[NarrationResult, AudioArtifact]] = field(default_factory=list)
    failures: list[tuple[int, Exception]] = field(default_factory=list)
    report: PipelineReport | None = None

    @property
    def cancelled(self) -> bool:
        return self.cancel_event is not None and self.cancel_event.is_set()


class PipelineStep(ABC):
    name: str = "step"

    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError

    def close(self) -> None:
        """Release resources held by the step's collaborators."""
