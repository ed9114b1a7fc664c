class RewriteError(Exception):
    """Raised when the generative rewrite fails."""


class RewriteNetworkError(RewriteError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
