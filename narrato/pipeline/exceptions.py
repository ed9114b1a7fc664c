class PipelineError(Exception):
    """Base exception for request-level pipeline failures."""


class ProcessingError(PipelineError):
    """Raised when no segment survives synthesis."""


class PipelineCancelledError(PipelineError):
    """Raised when the caller cancels a run before it completes."""
