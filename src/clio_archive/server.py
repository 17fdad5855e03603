"""MCP server exposing the research assistant and saved collection as tools."""

import json
import logging
import sys
import time
from typing import Any


def _configure_stdio_logging() -> None:
    """Configure logging for stdio MCP mode - all logs MUST go to stderr.

    In stdio mode, stdout is reserved exclusively for JSON-RPC messages.
    """
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))

    root = logging.getLogger()
    root.handlers = [stderr_handler]
    root.setLevel(logging.WARNING)

    for logger_name in ["httpx", "httpcore", "google_genai", "google", "asyncio"]:
        dep_logger = logging.getLogger(logger_name)
        dep_logger.setLevel(logging.WARNING)
        dep_logger.handlers = [stderr_handler]
        dep_logger.propagate = False


_configure_stdio_logging()

# ruff: noqa: E402 - Intentional late imports after logging configuration
from fastmcp import FastMCP
from pydantic import ValidationError

from .catalog import ACADEMIC_WORK_TYPES
from .citation import CitationClipboard
from .collection import SavedCollection
from .config import settings
from .exceptions import ClioArchiveError
from .observability import setup_structured_logging
from .providers import GenerationClient
from .research import ResearchAssistant, Source, TaskKind

logger = logging.getLogger("clio_archive")
logger.setLevel(getattr(logging, settings.server.logging_level.upper()))

_server_start_time = time.time()


def _dump(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2)


def serve(
    assistant: ResearchAssistant | None = None,
    collection: SavedCollection | None = None,
    clipboard: CitationClipboard | None = None,
) -> FastMCP:
    """Create and configure the MCP server.

    Components default to ones built from settings. The backend client is
    created lazily, so the server starts even without a credential.
    """
    setup_structured_logging(settings.server.logging_level)

    server = FastMCP("clio_archive")

    if assistant is None:
        assistant = ResearchAssistant(GenerationClient.from_settings(settings.genai))
    if collection is None:
        collection = SavedCollection.from_settings(settings.storage)
    if clipboard is None:
        clipboard = CitationClipboard(window=settings.citation.copied_window_seconds)

    @server.tool()
    async def search_sources(query: str) -> str:
        """
        Find citable historiographical sources for a free-text query.

        Args:
            query: Historical subject, e.g. "Tratado de Tordesilhas"

        Returns:
            JSON object with `summary` and an ordered `sources` list. Each source
            carries title, url, description, type and, when available, author,
            date, institution, socialContext and an ABNT citation.
        """
        try:
            result = await assistant.search(query)
        except ValueError as e:
            return f"Error: {e}"
        except ClioArchiveError as e:
            logger.error(f"search_sources failed: {e}")
            return f"Error: {e.user_message}"
        return _dump(result.to_wire())

    @server.tool()
    async def load_guide() -> str:
        """
        Load 4-5 curated references on historiographical methodology.

        Returns:
            JSON list of sources. An empty list means no guide is available right now.
        """
        try:
            articles = await assistant.get_historiography_articles()
        except ClioArchiveError as e:
            logger.error(f"load_guide failed: {e}")
            return f"Error: {e.user_message}"
        return _dump([a.to_wire() for a in articles])

    @server.tool()
    async def generate_project(theme: str) -> str:
        """
        Generate a structured research project for a theme.

        Args:
            theme: Research theme

        Returns:
            JSON object with title, theme, problem, objectives (general, specifics),
            justification, methodology, theoreticalFramework and expectedResults.
        """
        try:
            project = await assistant.generate_project(theme)
        except ValueError as e:
            return f"Error: {e}"
        except ClioArchiveError as e:
            logger.error(f"generate_project failed: {e}")
            return f"Error: {e.user_message}"
        return _dump(project.to_wire())

    @server.tool()
    async def latest_result(task: str) -> str:
        """
        Return the result of the most recently started request for a task.

        When several requests for the same task overlap, only the last one
        started is kept here, whatever order they finish in.

        Args:
            task: One of "search", "guide_articles" or "project"

        Returns:
            JSON result for the task, or null when none has completed yet.
        """
        try:
            kind = TaskKind(task)
        except ValueError:
            return f"Error: unknown task {task!r}"
        result = assistant.latest(kind)
        if result is None:
            return _dump(None)
        if isinstance(result, list):
            return _dump([s.to_wire() for s in result])
        return _dump(result.to_wire())

    @server.tool()
    async def toggle_save(source: dict[str, Any]) -> str:
        """
        Save a source, or remove it if the same entry is already saved.

        Sources are identified by URL. If a saved entry has the same URL but
        different content (for example a fresh search result with an updated
        description), the saved entry is replaced by the new one and stays
        saved; call again with the same object to remove it.

        Args:
            source: Source object as returned by search_sources or load_guide

        Returns:
            JSON object with `url`, `saved` (state after the call) and `count`.
        """
        try:
            parsed = Source.model_validate(source)
        except ValidationError as e:
            return f"Error: invalid source ({e.error_count()} error(s))"

        try:
            saved = collection.toggle(parsed)
        except ClioArchiveError as e:
            logger.error(f"toggle_save could not persist: {e}")
            return f"Error: {e.user_message}"
        return _dump({"url": parsed.url, "saved": saved, "count": len(collection)})

    @server.tool()
    async def list_saved() -> str:
        """
        List saved sources in the order they were saved.

        Returns:
            JSON list of sources.
        """
        return _dump([s.to_wire() for s in collection.sources])

    @server.tool()
    async def copy_citation(text: str, copy_id: str) -> str:
        """
        Copy a citation and mark the item as copied for a short window.

        Args:
            text: Citation text
            copy_id: Identifier of the item being copied (e.g. "res-0", "saved-2")

        Returns:
            JSON object with the copied `text` and the current `copiedId`.
        """
        clipboard.copy_citation(text, copy_id)
        return _dump({"text": text, "copiedId": clipboard.copied_id})

    @server.tool()
    async def academic_work_types() -> str:
        """
        List common academic work types with a short description and reference link.

        Returns:
            JSON list of {title, description, link}.
        """
        return _dump([w.to_dict() for w in ACADEMIC_WORK_TYPES])

    @server.tool()
    async def health_check() -> str:
        """
        Health check with configuration status.

        Returns:
            JSON object with server status, model, credential presence and saved count.
        """
        return _dump(
            {
                "status": "healthy",
                "uptime_seconds": round(time.time() - _server_start_time, 1),
                "model": settings.genai.model_name,
                "credential_configured": settings.genai.get_api_key() is not None,
                "saved_sources": len(collection),
            }
        )

    return server


def main() -> None:
    """Entry point for MCP server."""
    transport = settings.server.transport
    server_instance = serve()

    if transport == "stdio":
        logger.info(f"Starting ClioArchive MCP server (model: {settings.genai.model_name}, transport: stdio)")
        server_instance.run(transport="stdio")
    elif transport in ("streamable-http", "sse"):
        logger.info(f"Starting ClioArchive MCP server (model: {settings.genai.model_name}, transport: {transport})")
        logger.info(f"HTTP server at http://{settings.server.host}:{settings.server.port}/mcp")
        server_instance.run(transport=transport, host=settings.server.host, port=settings.server.port)
    else:
        raise ValueError(f"Unknown transport: {transport}")


if __name__ == "__main__":
    main()
