from abc import ABC, abstractmethod

from narrato.synthesis.models import SpeechAudio, VoiceConfig


class BaseSpeechClient(ABC):
    """Contract for provider-specific text-to-speech clients."""

    @abstractmethod
    def synthesize(self, text: str, voice: VoiceConfig) -> SpeechAudio:
        """Convert text to encoded audio.

        Args:
            text: Narration text to speak.
            voice: Model/voice identifier, encoding and container to request.

        Returns:
            SpeechAudio with the encoded bytes and the provider's mime type.

        Raises:
            SynthesisError: on empty or unusable responses.
            SynthesisNetworkError: on provider, connection or timeout failures.
        """

    def close(self) -> None:
        """Release transport resources. Clients without any keep this no-op."""
