class RateLimitedError(Exception):
    """Raised when the rewrite budget for the current window is spent."""

    def __init__(self, retry_after_seconds: int) -> None:
        super().__init__(
            f"Rate limit exceeded. Please wait {retry_after_seconds} seconds "
            "before trying again."
        )
        self.retry_after_seconds = retry_after_seconds
