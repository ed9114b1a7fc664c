import httpx
import openai

from narrato.synthesis.client_base import BaseSpeechClient
from narrato.synthesis.exceptions import SynthesisError, SynthesisNetworkError
from narrato.synthesis.models import WAV_MIME_TYPE, SpeechAudio, VoiceConfig


class OpenAISpeechAdapter(BaseSpeechClient):
    """Speech client built on the OpenAI audio.speech API."""

    def __init__(self, *, api_key: str, timeout_seconds: int) -> None:
        self._client = openai.OpenAI(api_key=api_key, timeout=timeout_seconds)

    def synthesize(self, text: str, voice: VoiceConfig) -> SpeechAudio:
        try:
            response = self._client.audio.speech.create(
                model=voice.model,
                voice=voice.voice,
                input=text,
                response_format=voice.container,
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise SynthesisNetworkError(f"OpenAI TTS network error: {exc}") from exc
        except openai.APIError as exc:
            raise SynthesisNetworkError(f"OpenAI TTS API error: {exc}") from exc

        audio = response.content
        if not audio:
            raise SynthesisError("OpenAI TTS returned empty audio")
        return SpeechAudio(audio_bytes=audio, mime_type=WAV_MIME_TYPE)

    def close(self) -> None:
        self._client.close()
