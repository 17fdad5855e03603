"""Research assistant: build the request, call the backend, parse the answer."""

import logging
from collections import Counter
from typing import TYPE_CHECKING
from uuid import uuid4

from ..exceptions import MalformedResponseError, UpstreamError
from ..observability import bind_request_context, clear_request_context, get_request_logger
from .models import ResearchProject, SearchResult, Source
from .parser import parse_response
from .prompts import TaskKind, build_request

if TYPE_CHECKING:
    from ..providers import TextGenerator

logger = logging.getLogger(__name__)


class ResearchAssistant:
    """Runs the three generation tasks against an injected backend.

    Concurrent requests are not coalesced. Each task keeps a counter of
    initiated requests, and only the most recently initiated request of a
    task may update `latest(kind)`. Older responses that complete later are
    still returned to their caller but are never applied.
    """

    def __init__(self, generator: "TextGenerator"):
        self.generator = generator
        self._initiated: Counter[TaskKind] = Counter()
        self._latest: dict[TaskKind, SearchResult | list[Source] | ResearchProject] = {}

    def latest(self, kind: TaskKind) -> SearchResult | list[Source] | ResearchProject | None:
        """Result of the most recently initiated request of `kind` that succeeded.

        Served to MCP clients by the `latest_result` tool.
        """
        return self._latest.get(kind)

    def is_current(self, kind: TaskKind, ticket: int) -> bool:
        return self._initiated[kind] == ticket

    async def _run(self, kind: TaskKind, subject: str | None = None):
        self._initiated[kind] += 1
        ticket = self._initiated[kind]
        request_id = str(uuid4())[:8]
        bind_request_context(request_id, kind.value)
        request_logger = get_request_logger()

        try:
            request = build_request(kind, subject)
            request_logger.info("generation_started", ticket=ticket, web_search=request.use_web_search)

            raw_text = await self.generator.generate(request)
            try:
                result = parse_response(kind, raw_text)
            except MalformedResponseError as e:
                request_logger.warning("malformed_response", reason=e.reason, excerpt=e.excerpt)
                raise

            if self.is_current(kind, ticket):
                self._latest[kind] = result
            else:
                logger.info(f"Discarding stale {kind.value} result (ticket {ticket}, latest {self._initiated[kind]})")
            request_logger.info("generation_completed", ticket=ticket)
            return result
        finally:
            clear_request_context()

    async def search(self, query: str) -> SearchResult:
        """Find citable sources for a free-text historical query.

        Raises:
            ValueError: If the query is blank
            ConfigurationError, UpstreamError, MalformedResponseError
        """
        if not query or not query.strip():
            raise ValueError("Query must not be empty")
        return await self._run(TaskKind.SEARCH, query.strip())

    async def generate_project(self, theme: str) -> ResearchProject:
        """Generate a full research proposal for a theme.

        Raises:
            ValueError: If the theme is blank
            ConfigurationError, UpstreamError, MalformedResponseError
        """
        if not theme or not theme.strip():
            raise ValueError("Theme must not be empty")
        return await self._run(TaskKind.PROJECT, theme.strip())

    async def get_historiography_articles(self) -> list[Source]:
        """Load the curated methodology references.

        This is a secondary feature: backend and decode failures produce an
        empty list instead of an error. A missing credential still raises
        ConfigurationError.
        """
        try:
            return await self._run(TaskKind.GUIDE_ARTICLES)
        except (UpstreamError, MalformedResponseError) as e:
            logger.warning(f"Guide articles unavailable, returning empty list: {e}")
            return []
