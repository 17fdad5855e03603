"""Custom exceptions for the ClioArchive research core."""

EXCERPT_LIMIT = 200


def excerpt(text: str | None, limit: int = EXCERPT_LIMIT) -> str:
    """Return at most `limit` characters of `text`, marking truncation."""
    if not text:
        return ""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


class ClioArchiveError(Exception):
    """Base exception for ClioArchive errors."""

    user_message = "Ocorreu um erro inesperado. Tente novamente."


class ConfigurationError(ClioArchiveError):
    """Raised when the generative backend credential is missing."""

    user_message = "Serviço indisponível: a chave de acesso ao modelo não está configurada."


class UpstreamError(ClioArchiveError):
    """Raised when the call to the generative backend itself fails."""

    user_message = "Ocorreu um erro ao consultar o serviço. Tente novamente."

    def __init__(self, task: str, message: str):
        self.task = task
        super().__init__(f"[{task}] {message}")


class MalformedResponseError(ClioArchiveError):
    """Raised when backend output cannot be decoded into the expected shape.

    Only a bounded excerpt of the raw text is kept.
    """

    user_message = "Ocorreu um erro ao processar a resposta. Tente novamente."

    def __init__(self, task: str, reason: str, raw_text: str | None = None):
        self.task = task
        self.reason = reason
        self.excerpt = excerpt(raw_text)
        super().__init__(f"[{task}] {reason} (excerpt: {self.excerpt!r})")


class PersistenceError(ClioArchiveError):
    """Raised when the saved collection cannot be written to storage.

    The in-memory collection already reflects the attempted change.
    """

    user_message = "Não foi possível salvar o acervo neste dispositivo; as alterações valem apenas para esta sessão."
