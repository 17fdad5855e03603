"""Output-shape descriptors sent to the generative backend.

These follow the OpenAPI subset accepted as ``response_schema`` by Gemini.
They bias the output format but guarantee nothing; decoded output is checked
again in ``parser``.
"""

from typing import Any

from .models import SOURCE_TYPE_VALUES

_STRING = {"type": "STRING"}

SOURCE_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "title": _STRING,
        "author": {"type": "STRING", "description": "Apenas se confirmado."},
        "date": {"type": "STRING", "description": "Apenas se confirmada."},
        "institution": {"type": "STRING", "description": "Instituição mantenedora, apenas se confirmada."},
        "url": {"type": "STRING", "description": "Link direto para o conteúdo, nunca a página inicial do site."},
        "description": {"type": "STRING", "description": "Importância historiográfica da fonte."},
        "socialContext": {
            "type": "STRING",
            "description": "O que a fonte revela sobre a vida cotidiana e a longa duração.",
        },
        "type": {"type": "STRING", "enum": list(SOURCE_TYPE_VALUES)},
        "citation": {"type": "STRING", "description": "Citação completa em formato ABNT (NBR 6023)."},
    },
    "required": ["title", "url", "description", "type"],
}

SEARCH_RESULT_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "summary": {
            "type": "STRING",
            "description": "Resumo da disponibilidade e do contexto das fontes; deve declarar quando a evidência é insuficiente.",
        },
        "sources": {"type": "ARRAY", "items": SOURCE_SCHEMA},
    },
    "required": ["summary", "sources"],
}

GUIDE_ARTICLES_SCHEMA: dict[str, Any] = {
    "type": "ARRAY",
    "items": SOURCE_SCHEMA,
}

RESEARCH_PROJECT_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "title": _STRING,
        "theme": _STRING,
        "problem": _STRING,
        "objectives": {
            "type": "OBJECT",
            "properties": {
                "general": _STRING,
                "specifics": {"type": "ARRAY", "items": _STRING},
            },
            "required": ["general", "specifics"],
        },
        "justification": _STRING,
        "methodology": _STRING,
        "theoreticalFramework": _STRING,
        "expectedResults": _STRING,
    },
    "required": [
        "title",
        "theme",
        "problem",
        "objectives",
        "justification",
        "methodology",
        "theoreticalFramework",
        "expectedResults",
    ],
}
