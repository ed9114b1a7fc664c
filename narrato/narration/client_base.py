from abc import ABC, abstractmethod


class BaseRewriteClient(ABC):
    """Contract for provider-specific generative rewrite clients."""

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """Return the provider's completion for the prompt as plain text.

        Raises:
            RewriteError: on empty or malformed responses.
            RewriteNetworkError: on provider, connection or timeout failures.
        """
