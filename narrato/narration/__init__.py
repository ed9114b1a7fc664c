from narrato.narration.client_base import BaseRewriteClient
from narrato.narration.factory import RewriteClientFactory, build_narrator
from narrato.narration.models import Attempted, FellBack, NarrationResult
from narrato.narration.narrator import Narrator

__all__ = [
    "Attempted",
    "BaseRewriteClient",
    "FellBack",
    "NarrationResult",
    "Narrator",
    "RewriteClientFactory",
    "build_narrator",
]
