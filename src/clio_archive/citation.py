"""Citation formatting and a clipboard with a timed "copied" marker."""

import logging
import time
from collections.abc import Callable

from .research.models import Source

logger = logging.getLogger(__name__)

DEFAULT_COPIED_WINDOW = 2.0


def format_citation(source: Source) -> str:
    """Return the source's citation, or a best-effort ABNT-style reference.

    Example fallback: ``FREYRE, Gilberto. Casa-grande & senzala. Global, 1933. Disponível em: <https://...>.``
    """
    if source.citation and source.citation.strip():
        return source.citation.strip()

    parts: list[str] = []
    if source.author:
        names = source.author.strip().split()
        if len(names) > 1:
            parts.append(f"{names[-1].upper()}, {' '.join(names[:-1])}.")
        else:
            parts.append(f"{source.author.strip().upper()}.")
    parts.append(f"{source.title.strip().rstrip('.')}.")

    publication = ", ".join(p.strip() for p in (source.institution, source.date) if p and p.strip())
    if publication:
        parts.append(f"{publication}.")
    parts.append(f"Disponível em: <{source.url}>.")
    return " ".join(parts)


class CitationClipboard:
    """Copies citation text and remembers which item was copied last.

    `copied_id` equals the last copied id for `window` seconds, then reverts
    to None. A new copy replaces the marker and restarts the window.
    """

    def __init__(
        self,
        writer: Callable[[str], None] | None = None,
        window: float = DEFAULT_COPIED_WINDOW,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.writer = writer
        self.window = window
        self._clock = clock
        self._copied_id: str | None = None
        self._copied_at: float = 0.0
        self.text: str | None = None

    def copy_citation(self, text: str, copy_id: str) -> None:
        if self.writer is not None:
            self.writer(text)
        self.text = text
        self._copied_id = copy_id
        self._copied_at = self._clock()
        logger.debug(f"Copied citation for {copy_id}")

    @property
    def copied_id(self) -> str | None:
        if self._copied_id is None:
            return None
        if self._clock() - self._copied_at >= self.window:
            self._copied_id = None
        return self._copied_id

    def is_copied(self, copy_id: str) -> bool:
        return self.copied_id == copy_id
