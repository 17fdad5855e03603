"""Data models for historiographical research results.

Wire format is camelCase (``socialContext``, ``theoreticalFramework``) so that
decoded backend output and persisted collections share one shape.
"""

from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SourceType(str, Enum):
    """Kinds of historiographical sources."""

    DOCUMENT = "document"
    IMAGE = "image"
    BOOK = "book"
    ARTICLE = "article"
    ARCHIVE = "archive"
    NEWSPAPER = "newspaper"
    LITERATURE = "literature"
    LETTER = "letter"
    ORAL_HISTORY = "oral_history"


SOURCE_TYPE_VALUES: tuple[str, ...] = tuple(t.value for t in SourceType)


class WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        """Dump using camelCase keys, omitting absent optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Source(WireModel):
    """A single historiographical reference."""

    title: str
    author: str | None = None
    date: str | None = None
    institution: str | None = None
    url: str
    description: str
    social_context: str | None = None
    # Kept as the raw string so unknown kinds still decode; see `kind`.
    type: str
    citation: str | None = Field(default=None, validation_alias=AliasChoices("citation", "abntCitation"))

    @property
    def kind(self) -> SourceType | None:
        """The enumerated source type, or None when the backend sent an unknown one."""
        try:
            return SourceType(self.type)
        except ValueError:
            return None


class SearchResult(WireModel):
    """A query's summary plus its ordered sources."""

    summary: str
    sources: list[Source]


class ResearchObjectives(WireModel):
    general: str
    specifics: list[str]


class ResearchProject(WireModel):
    """A structured academic research proposal."""

    title: str
    theme: str
    problem: str
    objectives: ResearchObjectives
    justification: str
    methodology: str
    theoretical_framework: str
    expected_results: str
