"""Tests for the generative backend client."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from clio_archive.config import GenAISettings
from clio_archive.exceptions import ConfigurationError, UpstreamError
from clio_archive.providers import GenerationClient
from clio_archive.research.prompts import build_project_request, build_source_search_request


def _sdk_client(text: str | None = "{}", error: Exception | None = None) -> MagicMock:
    client = MagicMock()
    if error is not None:
        client.aio.models.generate_content = AsyncMock(side_effect=error)
    else:
        client.aio.models.generate_content = AsyncMock(return_value=MagicMock(text=text))
    return client


class TestMissingCredential:
    async def test_fails_before_network(self):
        """No credential: ConfigurationError, and the SDK client is never created."""
        factory = MagicMock()
        client = GenerationClient(api_key=None, model="gemini-test", client_factory=factory)

        with pytest.raises(ConfigurationError, match="GEMINI_API_KEY"):
            await client.generate(build_source_search_request("x"))
        factory.assert_not_called()

    def test_construction_does_not_fail(self):
        GenerationClient(api_key=None, model="gemini-test")

    async def test_from_settings(self, monkeypatch):
        for var in ("CLIO_GENAI_API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY"):
            monkeypatch.delenv(var, raising=False)
        client = GenerationClient.from_settings(GenAISettings())
        with pytest.raises(ConfigurationError):
            await client.generate(build_source_search_request("x"))


class TestLazyHandle:
    async def test_created_once(self):
        sdk = _sdk_client('{"summary": "ok", "sources": []}')
        factory = MagicMock(return_value=sdk)
        client = GenerationClient(api_key="test-key", model="gemini-test", client_factory=factory)

        await client.generate(build_source_search_request("a"))
        await client.generate(build_source_search_request("b"))

        factory.assert_called_once_with("test-key")
        assert sdk.aio.models.generate_content.await_count == 2

    async def test_factory_failure_is_configuration_error(self):
        factory = MagicMock(side_effect=ValueError("bad key format"))
        client = GenerationClient(api_key="test-key", model="gemini-test", client_factory=factory)

        with pytest.raises(ConfigurationError, match="bad key format"):
            await client.generate(build_source_search_request("a"))


class TestGenerate:
    async def test_returns_raw_text(self):
        sdk = _sdk_client('{"summary": "ok", "sources": []}')
        client = GenerationClient(api_key="k", model="gemini-test", client_factory=lambda _: sdk)

        text = await client.generate(build_source_search_request("Tratado de Tordesilhas"))

        assert text == '{"summary": "ok", "sources": []}'
        kwargs = sdk.aio.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-test"
        assert "Tratado de Tordesilhas" in kwargs["contents"]

    async def test_web_search_tool_attached(self):
        sdk = _sdk_client()
        client = GenerationClient(api_key="k", model="m", client_factory=lambda _: sdk)

        await client.generate(build_source_search_request("x"))

        config = sdk.aio.models.generate_content.call_args.kwargs["config"]
        assert config.response_mime_type == "application/json"
        assert config.tools is not None
        assert config.tools[0].google_search is not None

    async def test_no_tools_for_project(self):
        sdk = _sdk_client()
        client = GenerationClient(api_key="k", model="m", client_factory=lambda _: sdk)

        await client.generate(build_project_request("x"))

        config = sdk.aio.models.generate_content.call_args.kwargs["config"]
        assert not config.tools
        assert config.response_schema is not None

    async def test_missing_text_is_empty_string(self):
        sdk = _sdk_client(text=None)
        client = GenerationClient(api_key="k", model="m", client_factory=lambda _: sdk)

        assert await client.generate(build_project_request("x")) == ""

    async def test_sdk_error_is_upstream_error(self):
        sdk = _sdk_client(error=RuntimeError("quota exceeded"))
        client = GenerationClient(api_key="k", model="m", client_factory=lambda _: sdk)

        with pytest.raises(UpstreamError, match="quota exceeded") as exc_info:
            await client.generate(build_source_search_request("x"))
        assert exc_info.value.task == "search"
        assert isinstance(exc_info.value.__cause__, RuntimeError)
