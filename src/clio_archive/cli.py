"""CLI interface for the ClioArchive research assistant."""

import asyncio
import json

import typer

from .catalog import ACADEMIC_WORK_TYPES
from .config import settings
from .exceptions import ClioArchiveError
from .providers import GenerationClient
from .research import ResearchAssistant

app = typer.Typer(help="Historiographical source search and research projects powered by Gemini")


def _assistant() -> ResearchAssistant:
    return ResearchAssistant(GenerationClient.from_settings(settings.genai))


def _print_json(data) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


@app.command()
def search(query: str = typer.Argument(..., help="Historical subject to find sources for")) -> None:
    """Find citable sources for a historical query."""
    try:
        result = asyncio.run(_assistant().search(query))
    except (ValueError, ClioArchiveError) as e:
        typer.echo(f"Error: {getattr(e, 'user_message', e)}", err=True)
        raise typer.Exit(code=1) from e

    print(result.summary)
    print()
    for i, source in enumerate(result.sources, start=1):
        print(f"{i}. [{source.type}] {source.title}")
        print(f"   {source.url}")
        if source.citation:
            print(f"   {source.citation}")


@app.command()
def guide() -> None:
    """List curated references on historiographical methodology."""
    try:
        articles = asyncio.run(_assistant().get_historiography_articles())
    except ClioArchiveError as e:
        typer.echo(f"Error: {e.user_message}", err=True)
        raise typer.Exit(code=1) from e

    if not articles:
        print("No guide available right now.")
        return
    _print_json([a.to_wire() for a in articles])


@app.command()
def project(theme: str = typer.Argument(..., help="Research theme")) -> None:
    """Generate a structured research project for a theme."""
    try:
        result = asyncio.run(_assistant().generate_project(theme))
    except (ValueError, ClioArchiveError) as e:
        typer.echo(f"Error: {getattr(e, 'user_message', e)}", err=True)
        raise typer.Exit(code=1) from e

    _print_json(result.to_wire())


@app.command()
def saved() -> None:
    """List saved sources."""
    from .collection import SavedCollection

    collection = SavedCollection.from_settings(settings.storage)
    print(f"{len(collection)} saved source(s)")
    for source in collection.sources:
        print(f"- {source.title} <{source.url}>")


@app.command("work-types")
def work_types() -> None:
    """List common academic work types."""
    for work in ACADEMIC_WORK_TYPES:
        print(f"{work.title}\n  {work.description}\n  {work.link}\n")


@app.command()
def config() -> None:
    """Show current configuration."""
    print(f"Model: {settings.genai.model_name}")
    print(f"Credential: {'configured' if settings.genai.get_api_key() else '(missing)'}")
    print(f"Storage: {settings.storage.get_path()}")
    print(f"Storage key: {settings.storage.saved_sources_key}")
    print(f"Transport: {settings.server.transport}")


@app.command()
def server() -> None:
    """Run the MCP server."""
    from .server import main

    main()


if __name__ == "__main__":
    app()
