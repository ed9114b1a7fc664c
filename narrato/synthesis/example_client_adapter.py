"""Offline speech client producing silent WAV audio."""

import io
import wave

from narrato.synthesis.client_base import BaseSpeechClient
from narrato.synthesis.models import WAV_MIME_TYPE, SpeechAudio, VoiceConfig


class ExampleSpeechAdapter(BaseSpeechClient):
    """Emits 16-bit mono silence, a tenth of a second per word."""

    SAMPLE_RATE = 16000

    def synthesize(self, text: str, voice: VoiceConfig) -> SpeechAudio:
        _ = voice
        frames = max(1, len(text.split())) * self.SAMPLE_RATE // 10
        buf = io.BytesIO()
        with wave.open(buf, "wb") as wav:
            wav.setnchannels(1)
            wav.setsampwidth(2)
            wav.setframerate(self.SAMPLE_RATE)
            wav.writeframes(b"\x00\x00" * frames)
        return SpeechAudio(audio_bytes=buf.getvalue(), mime_type=WAV_MIME_TYPE)
