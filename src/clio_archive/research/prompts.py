"""Prompts and request building for the three generation tasks."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .schemas import GUIDE_ARTICLES_SCHEMA, RESEARCH_PROJECT_SCHEMA, SEARCH_RESULT_SCHEMA


class TaskKind(str, Enum):
    """Generation tasks supported by the research core."""

    SEARCH = "search"
    GUIDE_ARTICLES = "guide_articles"
    PROJECT = "project"


@dataclass(frozen=True, slots=True)
class GenerationRequest:
    """Everything the generative backend needs for one call."""

    kind: TaskKind
    instruction: str
    contents: str
    schema: dict[str, Any]
    use_web_search: bool


# Rules shared by the grounded tasks. They are part of the request contract.
_SOURCE_RULES = """Regras obrigatórias:
- Cada URL deve ser verificável e apontar diretamente para o conteúdo citado (documento, página do acervo, artigo). Nunca use a página inicial de um site ou de uma instituição.
- Se não for possível verificar um dado (autor, data, instituição), omita o campo em vez de inventá-lo.
- Não fabrique fontes, títulos ou links.
- Gere a citação completa seguindo rigorosamente as normas da ABNT (NBR 6023).
- Classifique o tipo de fonte usando apenas: document, image, book, article, archive, newspaper, literature, letter, oral_history."""

SOURCE_SEARCH_SYSTEM_PROMPT = f"""Você é um assistente especializado em pesquisa historiográfica.
Sua tarefa é encontrar fontes históricas primárias e secundárias (documentos, livros, artigos, acervos digitais, jornais, cartas, literatura de época e história oral) baseadas na consulta do usuário.

Para cada fonte encontrada, você deve:
1. Identificar o título, autor (se disponível), data, instituição mantenedora e URL.
2. Fornecer uma breve descrição da importância historiográfica da fonte.
3. Quando pertinente, indicar em socialContext o que a fonte revela sobre a vida cotidiana e os processos de longa duração.
4. Gerar a citação completa em formato ABNT.
5. Classificar o tipo de fonte.

{_SOURCE_RULES}
- Se não for possível reunir um conjunto coerente de fontes, retorne a lista de fontes vazia e declare explicitamente no resumo que a evidência disponível é insuficiente.

Retorne os dados em formato JSON estruturado."""

GUIDE_ARTICLES_SYSTEM_PROMPT = f"""Você é um orientador de pesquisa em História.
Sua tarefa é indicar de 4 a 5 obras de referência sobre metodologia historiográfica (crítica de fontes, história social, micro-história, longa duração, uso de arquivos e acervos digitais) que ajudem estudantes a iniciar uma pesquisa.

Para cada referência, informe título, autor, data, instituição, URL, descrição da sua relevância metodológica, tipo e citação ABNT.

{_SOURCE_RULES}

Retorne apenas uma lista JSON de referências."""

PROJECT_SYSTEM_PROMPT = """Você é um orientador acadêmico em História.
Sua tarefa é elaborar um projeto de pesquisa completo a partir do tema informado, contendo: título, tema, problema de pesquisa, objetivo geral, objetivos específicos, justificativa, metodologia, referencial teórico e resultados esperados.

Regras obrigatórias:
- Todos os campos devem ser preenchidos.
- Não invente autores, obras ou dados. Cite apenas autores e obras amplamente reconhecidos na historiografia.
- Se o tema for obscuro, ambíguo ou tiver pouca documentação conhecida, explicite essa limitação na justificativa e na metodologia, em vez de preencher lacunas com informações fabricadas.

Retorne os dados em formato JSON estruturado."""


def build_source_search_request(query: str) -> GenerationRequest:
    """Build the grounded source-search request. The query is embedded verbatim."""
    return GenerationRequest(
        kind=TaskKind.SEARCH,
        instruction=SOURCE_SEARCH_SYSTEM_PROMPT,
        contents=f"Pesquise fontes históricas sobre: {query}",
        schema=SEARCH_RESULT_SCHEMA,
        use_web_search=True,
    )


def build_guide_articles_request() -> GenerationRequest:
    """Build the curated methodology-references request."""
    return GenerationRequest(
        kind=TaskKind.GUIDE_ARTICLES,
        instruction=GUIDE_ARTICLES_SYSTEM_PROMPT,
        contents="Indique de 4 a 5 referências essenciais sobre metodologia da pesquisa historiográfica.",
        schema=GUIDE_ARTICLES_SCHEMA,
        use_web_search=True,
    )


def build_project_request(theme: str) -> GenerationRequest:
    """Build the research-project request. No web search is used."""
    return GenerationRequest(
        kind=TaskKind.PROJECT,
        instruction=PROJECT_SYSTEM_PROMPT,
        contents=f"Elabore um projeto de pesquisa sobre o tema: {theme}",
        schema=RESEARCH_PROJECT_SCHEMA,
        use_web_search=False,
    )


def build_request(kind: TaskKind, subject: str | None = None) -> GenerationRequest:
    """Build the request for any task.

    Args:
        kind: Which task to build for
        subject: The query (SEARCH) or theme (PROJECT); ignored for GUIDE_ARTICLES

    Returns:
        The instruction, contents, schema and web-search flag for the task
    """
    match kind:
        case TaskKind.SEARCH:
            return build_source_search_request(subject or "")
        case TaskKind.GUIDE_ARTICLES:
            return build_guide_articles_request()
        case TaskKind.PROJECT:
            return build_project_request(subject or "")
        case _:
            raise ValueError(f"Unsupported task: {kind}")
