"""Offline rewrite client.

Use this module as a reference when implementing new provider adapters.
Implement BaseRewriteClient and register the provider in RewriteClientFactory.
"""

from typing import ClassVar

from narrato.narration.client_base import BaseRewriteClient


class ExampleClientAdapter(BaseRewriteClient):
    """Returns a fixed narration without any network calls."""

    DEFAULT_RESPONSE: ClassVar[str] = (
        "Here is the key idea of this slide. Keep it in mind as we move on."
    )

    def generate(self, prompt: str) -> str:
        _ = prompt
        return self.DEFAULT_RESPONSE
