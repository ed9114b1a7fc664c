from narrato.logging.logger import Log
from narrato.synthesis.client_base import BaseSpeechClient
from narrato.synthesis.exceptions import SynthesisError
from narrato.synthesis.models import WAV_MIME_TYPE, AudioArtifact, VoiceConfig


class Synthesizer:
    """Converts narration text to WAV audio. Failures are never masked."""

    def __init__(self, *, client: BaseSpeechClient, voice: VoiceConfig) -> None:
        self._client = client
        self._voice = voice

    def synthesize(self, text: str) -> AudioArtifact:
        """Synthesize narration audio.

        Raises:
            SynthesisError: on any provider error or empty audio.
        """
        try:
            audio = self._client.synthesize(text, self._voice)
        except SynthesisError:
            raise
        except Exception as exc:
            raise SynthesisError(f"Speech synthesis failed: {exc}") from exc
        if not audio.audio_bytes:
            raise SynthesisError("Speech synthesis returned empty audio")
        Log.debug(f"Synthesized {len(audio.audio_bytes)} audio bytes ({audio.mime_type})")
        return AudioArtifact(encoded_bytes=audio.audio_bytes, mime_type=WAV_MIME_TYPE)

    def close(self) -> None:
        self._client.close()
