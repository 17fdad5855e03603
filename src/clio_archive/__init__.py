"""ClioArchive: historiographical research assistant core."""

from .config import settings
from .exceptions import ClioArchiveError, ConfigurationError, MalformedResponseError, PersistenceError, UpstreamError
from .providers import GenerationClient

__all__ = [
    "settings",
    "GenerationClient",
    "ClioArchiveError",
    "ConfigurationError",
    "MalformedResponseError",
    "PersistenceError",
    "UpstreamError",
]
