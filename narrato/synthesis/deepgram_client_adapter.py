import httpx

from narrato.synthesis.client_base import BaseSpeechClient
from narrato.synthesis.exceptions import SynthesisError, SynthesisNetworkError
from narrato.synthesis.models import WAV_MIME_TYPE, SpeechAudio, VoiceConfig


class DeepgramClientAdapter(BaseSpeechClient):
    """Speech client for the Deepgram Aura REST endpoint."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str = "https://api.deepgram.com/v1",
        http_client: httpx.Client | None = None,
    ) -> None:
        self._client = http_client or httpx.Client(
            base_url=base_url,
            timeout=timeout_seconds,
            headers={"Authorization": f"Token {api_key}"},
        )

    def synthesize(self, text: str, voice: VoiceConfig) -> SpeechAudio:
        params = {
            "model": voice.model,
            "encoding": voice.encoding,
            "container": voice.container,
        }
        try:
            response = self._client.post("/speak", params=params, json={"text": text})
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise SynthesisNetworkError(
                f"Deepgram TTS error: HTTP {exc.response.status_code}: {exc.response.text}"
            ) from exc
        except httpx.HTTPError as exc:
            raise SynthesisNetworkError(f"Deepgram TTS network error: {exc}") from exc

        if not response.content:
            raise SynthesisError("Deepgram TTS returned empty audio")
        mime_type = response.headers.get("content-type", WAV_MIME_TYPE).split(";")[0]
        return SpeechAudio(audio_bytes=response.content, mime_type=mime_type)

    def close(self) -> None:
        self._client.close()
