"""Generative backend client built on the Google Gen AI SDK."""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Optional, Protocol

from .config import STANDARD_ENV_VAR_NAMES, GenAISettings
from .exceptions import ConfigurationError, UpstreamError
from .research.prompts import GenerationRequest

if TYPE_CHECKING:
    from google import genai

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    """Anything that turns a built request into raw response text."""

    async def generate(self, request: GenerationRequest) -> str: ...


def get_genai_client(api_key: str) -> "genai.Client":
    """Create a Gen AI SDK client for the Gemini API."""
    from google import genai

    return genai.Client(api_key=api_key)


class GenerationClient:
    """Lazily-initialized handle to the generative backend.

    The SDK client is created on the first `generate` call, so a missing
    credential only fails code paths that actually need the backend.
    No retries are performed; every call is a single upstream request.
    """

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        client_factory: Callable[[str], "genai.Client"] = get_genai_client,
    ):
        self.model = model
        self._api_key = api_key
        self._client_factory = client_factory
        self._client: Optional["genai.Client"] = None

    @classmethod
    def from_settings(cls, genai_settings: GenAISettings) -> "GenerationClient":
        return cls(api_key=genai_settings.get_api_key(), model=genai_settings.model_name)

    def _get_client(self) -> "genai.Client":
        if self._client is None:
            if not self._api_key:
                names = " or ".join(STANDARD_ENV_VAR_NAMES)
                raise ConfigurationError(f"API key required for the generative backend. Set {names} or CLIO_GENAI_API_KEY.")
            try:
                self._client = self._client_factory(self._api_key)
            except Exception as e:
                raise ConfigurationError(f"Failed to initialize generative backend client: {e}") from e
        return self._client

    def _build_config(self, request: GenerationRequest):
        from google.genai import types

        tools = [types.Tool(google_search=types.GoogleSearch())] if request.use_web_search else None
        return types.GenerateContentConfig(
            system_instruction=request.instruction,
            response_mime_type="application/json",
            response_schema=request.schema,
            tools=tools,
        )

    async def generate(self, request: GenerationRequest) -> str:
        """Send one request and return the raw response text.

        Raises:
            ConfigurationError: If the credential is missing (before any network I/O)
            UpstreamError: If the backend call fails for any reason
        """
        client = self._get_client()
        task = request.kind.value

        try:
            config = self._build_config(request)
            response = await client.aio.models.generate_content(
                model=self.model,
                contents=request.contents,
                config=config,
            )
        except Exception as e:
            logger.error(f"Generation failed for task '{task}': {type(e).__name__}: {e}")
            raise UpstreamError(task, f"{type(e).__name__}: {e}") from e

        return response.text or ""
