"""Tests for SpeechClientFactory."""

from unittest.mock import patch

import pytest

from narrato.config.settings import Settings
from narrato.synthesis.example_client_adapter import ExampleSpeechAdapter
from narrato.synthesis.factory import SpeechClientFactory, build_synthesizer
from narrato.synthesis.models import VoiceConfig
from narrato.synthesis.synthesizer import Synthesizer


class TestSpeechClientFactory:
    def test_deepgram_uses_fixed_wav_voice(self) -> None:
        settings = Settings(
            speech_provider="deepgram",
            speech_deepgram_api_key="dg",
            speech_deepgram_timeout_seconds=9,
        )
        with patch("narrato.synthesis.factory.DeepgramClientAdapter") as mock_adapter:
            _client, voice = SpeechClientFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="dg",
            timeout_seconds=9,
            base_url="https://api.deepgram.com/v1",
        )
        assert voice == VoiceConfig(model="aura-asteria-en", encoding="linear16", container="wav")

    def test_openai_voice(self) -> None:
        settings = Settings(speech_provider="OpenAI", speech_openai_api_key="k")
        with patch("narrato.synthesis.factory.OpenAISpeechAdapter") as mock_adapter:
            _client, voice = SpeechClientFactory.create(settings)
        mock_adapter.assert_called_once_with(api_key="k", timeout_seconds=30)
        assert voice.model == "tts-1"
        assert voice.voice == "alloy"
        assert voice.container == "wav"

    def test_example_provider(self) -> None:
        client, _voice = SpeechClientFactory.create(Settings(speech_provider="example"))
        assert isinstance(client, ExampleSpeechAdapter)

    def test_unknown_provider_raises_value_error(self) -> None:
        with pytest.raises(ValueError, match="Unknown speech provider"):
            SpeechClientFactory.create(Settings(speech_provider="speechify"))


class TestBuildSynthesizer:
    def test_builds_working_synthesizer(self) -> None:
        synthesizer = build_synthesizer(Settings(speech_provider="example"))
        assert isinstance(synthesizer, Synthesizer)
        assert synthesizer.synthesize("Hello").mime_type == "audio/wav"
