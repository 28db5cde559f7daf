"""
Tests for the Ollama text-generation provider.

These tests verify:
1. Successful generation returns the stripped reply text
2. Ollama ResponseError is properly caught and wrapped as ProviderError
3. Model availability is checked (and pulled) at construction
"""

import pytest
from unittest.mock import MagicMock, patch


class TestOllamaProvider:
    """Tests for OllamaProvider."""

    @pytest.fixture
    def mock_ollama_client(self):
        """Create a mock Ollama client."""
        client = MagicMock()
        mock_model = MagicMock()
        mock_model.model = "llama3:latest"
        client.list.return_value.models = [mock_model]
        return client

    @pytest.fixture
    def provider_with_mock_client(self, mock_ollama_client):
        """Create an OllamaProvider with a mocked client."""
        with patch('ats_analyzer.agent.providers.ollama.ollama.Client', return_value=mock_ollama_client):
            from ats_analyzer.agent.providers.ollama import OllamaProvider
            provider = OllamaProvider(model_name="llama3", opts={"temperature": 0.1, "max_tokens": 800})
            return provider, mock_ollama_client

    def test_installed_model_is_not_pulled(self, provider_with_mock_client):
        """A model listed as installed (with a tag suffix) is not pulled again."""
        _, mock_client = provider_with_mock_client
        mock_client.pull.assert_not_called()

    def test_missing_model_is_pulled(self):
        client = MagicMock()
        client.list.return_value.models = []

        with patch('ats_analyzer.agent.providers.ollama.ollama.Client', return_value=client):
            from ats_analyzer.agent.providers.ollama import OllamaProvider
            OllamaProvider(model_name="mistral")

        client.pull.assert_called_once_with("mistral")

    def test_unavailable_model_raises_provider_error(self):
        from ats_analyzer.agent.exceptions import ProviderError

        client = MagicMock()
        client.list.return_value.models = []
        client.pull.side_effect = Exception("Connection refused")

        with patch('ats_analyzer.agent.providers.ollama.ollama.Client', return_value=client):
            from ats_analyzer.agent.providers.ollama import OllamaProvider

            with pytest.raises(ProviderError) as exc_info:
                OllamaProvider(model_name="mistral")

        assert "ollama pull mistral" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_generate_success_returns_text(self, provider_with_mock_client):
        provider, mock_client = provider_with_mock_client
        mock_client.generate.return_value = {"response": '  {"ats_score": 64}  '}

        result = await provider("prompt text")

        assert result == '{"ats_score": 64}'
        kwargs = mock_client.generate.call_args.kwargs
        assert kwargs["model"] == "llama3"
        assert kwargs["options"] == {"temperature": 0.1, "num_predict": 800}

    @pytest.mark.asyncio
    async def test_generate_wraps_response_error(self, provider_with_mock_client):
        """Ollama ResponseError is wrapped as ProviderError."""
        provider, mock_client = provider_with_mock_client

        from ollama._types import ResponseError
        from ats_analyzer.agent.exceptions import ProviderError

        mock_client.generate.side_effect = ResponseError(
            "model runner has unexpectedly stopped",
            status_code=500
        )

        with pytest.raises(ProviderError) as exc_info:
            await provider("prompt text")

        assert "unexpectedly stopped" in str(exc_info.value)
