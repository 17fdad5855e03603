"""Structured historiographical retrieval: prompts, schemas, parsing and orchestration."""

from .assistant import ResearchAssistant
from .models import ResearchObjectives, ResearchProject, SearchResult, Source, SourceType
from .parser import parse_response
from .prompts import GenerationRequest, TaskKind, build_request

__all__ = [
    "GenerationRequest",
    "ResearchAssistant",
    "ResearchObjectives",
    "ResearchProject",
    "SearchResult",
    "Source",
    "SourceType",
    "TaskKind",
    "build_request",
    "parse_response",
]
