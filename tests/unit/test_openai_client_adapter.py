from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from narrato.narration.exceptions import RewriteError, RewriteNetworkError
from narrato.narration.openai_client_adapter import SYSTEM_PROMPT, OpenAIClientAdapter


def _make_mock_response(content: str | None) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    return response


def _make_adapter(mock_client: MagicMock) -> OpenAIClientAdapter:
    with patch(
        "narrato.narration.openai_client_adapter.openai.OpenAI",
        return_value=mock_client,
    ):
        return OpenAIClientAdapter(
            api_key="k",
            model="gpt-4o-mini",
            timeout_seconds=30,
            max_tokens=150,
        )


class TestOpenAIClientAdapter:
    def test_returns_stripped_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response(" Narration. ")
        adapter = _make_adapter(mock_client)
        assert adapter.generate("prompt") == "Narration."

    def test_sends_system_and_user_messages(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("ok")
        adapter = _make_adapter(mock_client)
        adapter.generate("the prompt")
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["max_tokens"] == 150
        assert kwargs["messages"] == [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": "the prompt"},
        ]

    def test_passes_timeout_and_base_url_to_sdk(self) -> None:
        with patch("narrato.narration.openai_client_adapter.openai.OpenAI") as mock_cls:
            OpenAIClientAdapter(
                api_key="k",
                model="m",
                timeout_seconds=12,
                base_url="https://example.com/v1",
            )
        mock_cls.assert_called_once_with(
            api_key="k",
            timeout=12,
            base_url="https://example.com/v1",
        )

    def test_raises_error_for_empty_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response(None)
        adapter = _make_adapter(mock_client)
        with pytest.raises(RewriteError, match="empty response"):
            adapter.generate("prompt")

    def test_raises_error_for_no_choices(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = MagicMock(choices=[])
        adapter = _make_adapter(mock_client)
        with pytest.raises(RewriteError, match="no choices"):
            adapter.generate("prompt")

    def test_raises_network_error_on_connection_failure(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIConnectionError(
            request=MagicMock()
        )
        adapter = _make_adapter(mock_client)
        with pytest.raises(RewriteNetworkError, match="network error"):
            adapter.generate("prompt")

    def test_raises_network_error_on_timeout(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = httpx.TimeoutException("timeout")
        adapter = _make_adapter(mock_client)
        with pytest.raises(RewriteNetworkError, match="network error"):
            adapter.generate("prompt")

    def test_raises_network_error_on_api_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIError(
            message="server error",
            request=MagicMock(),
            body=None,
        )
        adapter = _make_adapter(mock_client)
        with pytest.raises(RewriteNetworkError, match="API error"):
            adapter.generate("prompt")
