"""Tests for citation formatting and the timed copied marker."""

from clio_archive.catalog import ACADEMIC_WORK_TYPES
from clio_archive.citation import CitationClipboard, format_citation
from clio_archive.research.models import Source

from conftest import make_source


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


class TestFormatCitation:
    def test_uses_provided_citation(self):
        source = Source.model_validate(make_source())
        assert format_citation(source) == "PORTUGAL; CASTELA. Tratado de Tordesilhas. Tordesilhas, 1494."

    def test_fallback_from_fields(self):
        source = Source.model_validate(
            make_source(
                citation=None,
                author="Gilberto Freyre",
                title="Casa-grande & senzala",
                institution="Maia & Schmidt",
                date="1933",
                url="https://example.org/casa-grande",
            )
        )
        assert format_citation(source) == (
            "FREYRE, Gilberto. Casa-grande & senzala. Maia & Schmidt, 1933. Disponível em: <https://example.org/casa-grande>."
        )

    def test_fallback_minimal(self):
        source = Source.model_validate(
            make_source(citation="  ", author=None, institution=None, date=None, title="Carta de Caminha", url="https://example.org/carta")
        )
        assert format_citation(source) == "Carta de Caminha. Disponível em: <https://example.org/carta>."


class TestCitationClipboard:
    def test_idle_initially(self):
        assert CitationClipboard().copied_id is None

    def test_copy_sets_marker_and_writes(self):
        written: list[str] = []
        clipboard = CitationClipboard(writer=written.append)

        clipboard.copy_citation("FREYRE, Gilberto.", "res-0")

        assert written == ["FREYRE, Gilberto."]
        assert clipboard.copied_id == "res-0"
        assert clipboard.is_copied("res-0")
        assert clipboard.text == "FREYRE, Gilberto."

    def test_marker_reverts_after_window(self):
        clock = FakeClock()
        clipboard = CitationClipboard(window=2.0, clock=clock)

        clipboard.copy_citation("a", "res-0")
        clock.now += 1.9
        assert clipboard.copied_id == "res-0"
        clock.now += 0.1
        assert clipboard.copied_id is None

    def test_newest_copy_resets_timer(self):
        clock = FakeClock()
        clipboard = CitationClipboard(window=2.0, clock=clock)

        clipboard.copy_citation("a", "res-0")
        clock.now += 1.5
        clipboard.copy_citation("b", "saved-1")
        clock.now += 1.5

        assert clipboard.copied_id == "saved-1"
        assert not clipboard.is_copied("res-0")
        clock.now += 0.5
        assert clipboard.copied_id is None


class TestCatalog:
    def test_nine_work_types(self):
        assert len(ACADEMIC_WORK_TYPES) == 9
        assert all(w.link.startswith("https://") for w in ACADEMIC_WORK_TYPES)
        assert ACADEMIC_WORK_TYPES[5].to_dict()["title"] == "Projeto de Pesquisa"

    def test_descriptions_are_complete(self):
        project = ACADEMIC_WORK_TYPES[5]
        assert project.description == (
            "Documento que delineia o planejamento de uma pesquisa a ser realizada. Deve conter o problema, "
            "objetivos, justificativa, fundamentação teórica, metodologia e cronograma."
        )
        assert ACADEMIC_WORK_TYPES[-1].description.endswith("inédita para o conhecimento científico.")
