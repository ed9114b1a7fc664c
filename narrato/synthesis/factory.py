from narrato.config.settings import Settings
from narrato.synthesis.client_base import BaseSpeechClient
from narrato.synthesis.deepgram_client_adapter import DeepgramClientAdapter
from narrato.synthesis.example_client_adapter import ExampleSpeechAdapter
from narrato.synthesis.models import VoiceConfig
from narrato.synthesis.openai_speech_adapter import OpenAISpeechAdapter
from narrato.synthesis.synthesizer import Synthesizer


class SpeechClientFactory:
    """Creates the configured speech client and its fixed voice."""

    @classmethod
    def create(cls, settings: Settings) -> tuple[BaseSpeechClient, VoiceConfig]:
        provider = settings.speech_provider.lower()
        if provider == "deepgram":
            client: BaseSpeechClient = DeepgramClientAdapter(
                api_key=settings.speech_deepgram_api_key,
                timeout_seconds=settings.speech_deepgram_timeout_seconds,
                base_url=settings.speech_deepgram_base_url,
            )
            return client, VoiceConfig(model=settings.speech_deepgram_model_name)
        if provider == "openai":
            client = OpenAISpeechAdapter(
                api_key=settings.speech_openai_api_key,
                timeout_seconds=settings.speech_openai_timeout_seconds,
            )
            return client, VoiceConfig(
                model=settings.speech_openai_model_name,
                voice=settings.speech_openai_voice,
            )
        if provider == "example":
            return ExampleSpeechAdapter(), VoiceConfig(model="example")
        raise ValueError(
            f"Unknown speech provider '{provider}'. "
            f"Choose from: {['deepgram', 'openai', 'example']}"
        )


def build_synthesizer(settings: Settings) -> Synthesizer:
    client, voice = SpeechClientFactory.create(settings)
    return Synthesizer(client=client, voice=voice)
