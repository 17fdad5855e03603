"""Decode raw backend text into typed research results.

Pure and deterministic: the same raw text always yields the same result or
the same MalformedResponseError. No other exception type leaves this module.
"""

import json
import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ..exceptions import MalformedResponseError
from .models import ResearchProject, SearchResult, Source
from .prompts import TaskKind

logger = logging.getLogger(__name__)

_SOURCE_LIST = TypeAdapter(list[Source])


def _strip_code_fence(text: str) -> str:
    """Remove a surrounding markdown code block, if any."""
    if not text.startswith("```"):
        return text
    body = text[3:]
    if body.startswith("json"):
        body = body[4:]
    return body.rsplit("```", 1)[0].strip() if "```" in body else body.strip()


def decode_json(kind: TaskKind, raw_text: str | None) -> Any:
    """Decode raw text as JSON, raising MalformedResponseError on failure.

    The text is decoded as-is first; a surrounding code fence is only
    stripped when that fails.
    """
    if raw_text is None or not raw_text.strip():
        raise MalformedResponseError(kind.value, "empty response", raw_text)

    stripped = raw_text.strip()
    try:
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            if not stripped.startswith("```"):
                raise
            return json.loads(_strip_code_fence(stripped))
    except json.JSONDecodeError as e:
        raise MalformedResponseError(kind.value, f"invalid JSON: {e.msg}", raw_text) from e
    except RecursionError as e:
        raise MalformedResponseError(kind.value, "invalid JSON: nesting too deep", raw_text) from e


def _describe(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    return f"{location}: {first['msg']}"


def parse_search_result(raw_text: str | None) -> SearchResult:
    """Parse a source-search response. An empty source list is a valid result."""
    data = decode_json(TaskKind.SEARCH, raw_text)
    try:
        return SearchResult.model_validate(data)
    except ValidationError as e:
        raise MalformedResponseError(TaskKind.SEARCH.value, f"unexpected shape ({_describe(e)})", raw_text) from e


def parse_guide_articles(raw_text: str | None) -> list[Source]:
    """Parse a curated-articles response into a list of sources.

    Accepts a bare JSON array, or an object wrapping it under ``sources``.
    """
    data = decode_json(TaskKind.GUIDE_ARTICLES, raw_text)
    if isinstance(data, dict) and "sources" in data:
        data = data["sources"]
    try:
        return _SOURCE_LIST.validate_python(data)
    except ValidationError as e:
        raise MalformedResponseError(TaskKind.GUIDE_ARTICLES.value, f"unexpected shape ({_describe(e)})", raw_text) from e


def parse_research_project(raw_text: str | None) -> ResearchProject:
    """Parse a research-project response. Partial projects are failures."""
    data = decode_json(TaskKind.PROJECT, raw_text)
    try:
        return ResearchProject.model_validate(data)
    except ValidationError as e:
        raise MalformedResponseError(TaskKind.PROJECT.value, f"unexpected shape ({_describe(e)})", raw_text) from e


_PARSERS = {
    TaskKind.SEARCH: parse_search_result,
    TaskKind.GUIDE_ARTICLES: parse_guide_articles,
    TaskKind.PROJECT: parse_research_project,
}


def parse_response(kind: TaskKind, raw_text: str | None) -> SearchResult | list[Source] | ResearchProject:
    """Parse raw text for the given task.

    Raises:
        MalformedResponseError: If the text is not JSON or lacks required fields
    """
    return _PARSERS[kind](raw_text)
