class SynthesisError(Exception):
    """Raised when speech synthesis fails for a narration."""


class SynthesisNetworkError(SynthesisError):
    """Raised when the speech provider call fails due to network/infrastructure issues."""
