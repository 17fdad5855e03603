"""Pytest configuration and shared fixtures for clio-archive tests."""

import json

import pytest

from clio_archive.research.prompts import GenerationRequest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "e2e: End-to-end tests requiring a real Gemini API key")


class FakeGenerator:
    """Test double for the generative backend: returns canned text, records requests."""

    def __init__(self, *responses: str | Exception):
        self.responses = list(responses)
        self.requests: list[GenerationRequest] = []

    async def generate(self, request: GenerationRequest) -> str:
        self.requests.append(request)
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        return response


def make_source(url: str = "https://bdlb.bn.gov.br/acervo/handle/20.500.12156.3/123", **overrides) -> dict:
    source = {
        "title": "Tratado de Tordesilhas",
        "author": "Coroas de Portugal e Castela",
        "date": "1494",
        "institution": "Arquivo Nacional da Torre do Tombo",
        "url": url,
        "description": "Acordo que dividiu as terras descobertas fora da Europa.",
        "type": "document",
        "citation": "PORTUGAL; CASTELA. Tratado de Tordesilhas. Tordesilhas, 1494.",
    }
    source.update(overrides)
    return source


@pytest.fixture
def source_data() -> dict:
    return make_source()


@pytest.fixture
def search_payload(source_data) -> str:
    return json.dumps({"summary": "Fontes primárias sobre o tratado.", "sources": [source_data]})


@pytest.fixture
def project_payload() -> str:
    return json.dumps(
        {
            "title": "A Revolta da Vacina e o cotidiano carioca",
            "theme": "Revolta da Vacina",
            "problem": "Como a população pobre do Rio de Janeiro reagiu à vacinação obrigatória em 1904?",
            "objectives": {
                "general": "Analisar a revolta a partir da imprensa popular.",
                "specifics": ["Mapear jornais de 1904", "Identificar os grupos envolvidos"],
            },
            "justification": "Tema relevante para a história social da saúde.",
            "methodology": "Análise de periódicos da Hemeroteca Digital.",
            "theoreticalFramework": "História social inglesa (E. P. Thompson).",
            "expectedResults": "Compreensão das motivações populares.",
        }
    )
