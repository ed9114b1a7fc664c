from dataclasses import dataclass

WAV_MIME_TYPE = "audio/wav"


@dataclass(frozen=True)
class VoiceConfig:
    """Fixed voice request sent to the speech provider."""

    model: str
    voice: str = ""
    encoding: str = "linear16"
    container: str = "wav"


@dataclass(frozen=True)
class SpeechAudio:
    """Raw provider output."""

    audio_bytes: bytes
    mime_type: str


@dataclass(frozen=True)
class AudioArtifact:
    """Encoded narration audio for one slide."""

    encoded_bytes: bytes
    mime_type: str = WAV_MIME_TYPE
