"""Configuration management using Pydantic settings with optional file persistence."""

import json
import os
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- Paths ---

APP_NAME = "clio-archive"


def get_config_dir() -> Path:
    """Get the configuration directory (e.g. ~/.config/clio-archive)."""
    if os.name == "nt":
        base = Path(os.environ.get("APPDATA", Path.home() / ".config")).expanduser()
    else:
        base = Path("~/.config").expanduser()

    path = base / APP_NAME
    path.mkdir(parents=True, exist_ok=True)
    return path


CONFIG_FILE = get_config_dir() / "config.json"


def load_config_file() -> dict[str, Any]:
    """Load settings from the JSON config file if it exists."""
    if not CONFIG_FILE.exists():
        return {}

    try:
        text = CONFIG_FILE.read_text(encoding="utf-8")
        if not text.strip():
            return {}
        return json.loads(text)
    except (OSError, ValueError):
        return {}


def save_config_file(config_data: dict[str, Any]) -> None:
    """Save settings to the JSON config file."""
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(config_data, indent=2), encoding="utf-8")


# Standard environment variable names for the Gemini credential (first match wins)
STANDARD_ENV_VAR_NAMES: list[str] = ["GEMINI_API_KEY", "GOOGLE_API_KEY"]

DEFAULT_MODEL = "gemini-3-flash-preview"
SAVED_SOURCES_KEY = "clio_saved_sources"


class GenAISettings(BaseSettings):
    """Generative backend configuration."""

    model_config = SettingsConfigDict(env_prefix="CLIO_GENAI_")

    model_name: str = Field(default=DEFAULT_MODEL)
    api_key: Optional[SecretStr] = Field(default=None, description="Generic API key override (highest priority)")

    def get_api_key(self) -> Optional[str]:
        """Resolve the credential with priority: generic override > standard names.

        Priority order:
        1. CLIO_GENAI_API_KEY (generic override)
        2. GEMINI_API_KEY
        3. GOOGLE_API_KEY

        Returns:
            The resolved API key or None if not found. A missing key is only
            an error once a generation call is attempted.
        """
        if self.api_key:
            return self.api_key.get_secret_value()

        for var_name in STANDARD_ENV_VAR_NAMES:
            key = os.environ.get(var_name)
            if key:
                return key

        return None


class StorageSettings(BaseSettings):
    """Persisted client storage configuration."""

    model_config = SettingsConfigDict(env_prefix="CLIO_STORAGE_")

    path: Optional[str] = Field(default=None, description="Storage file (default: <config dir>/storage.json)")
    saved_sources_key: str = Field(default=SAVED_SOURCES_KEY, description="Namespace key for the saved collection")

    def get_path(self) -> Path:
        """Get the storage file path."""
        if self.path:
            return Path(self.path).expanduser()
        return get_config_dir() / "storage.json"


class CitationSettings(BaseSettings):
    """Citation clipboard configuration."""

    model_config = SettingsConfigDict(env_prefix="CLIO_CITATION_")

    copied_window_seconds: float = Field(default=2.0, description="How long the copied marker stays set")


TransportType = Literal["stdio", "streamable-http", "sse"]


class ServerSettings(BaseSettings):
    """Server configuration."""

    model_config = SettingsConfigDict(env_prefix="CLIO_SERVER_")

    logging_level: str = Field(default="INFO")
    transport: TransportType = Field(default="stdio", description="MCP transport: stdio, streamable-http, or sse")
    host: str = Field(default="127.0.0.1", description="Host for HTTP transports")
    port: int = Field(default=8484, description="Port for HTTP transports")


class AppSettings(BaseSettings):
    """Root application settings.

    Priority: Environment Variables > Config File > Defaults
    """

    model_config = SettingsConfigDict(env_prefix="CLIO_", extra="ignore")

    genai: GenAISettings = Field(default_factory=GenAISettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    citation: CitationSettings = Field(default_factory=CitationSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)

    def save(self) -> Path:
        """Save current configuration to file (excluding secrets)."""
        data = self.model_dump(mode="json", exclude_none=True)
        if "genai" in data and "api_key" in data["genai"]:
            del data["genai"]["api_key"]
        save_config_file(data)
        return CONFIG_FILE


def _load_settings() -> AppSettings:
    """Load settings with file config as base, env vars overlay."""
    file_data = load_config_file()
    return AppSettings(**file_data)


settings = _load_settings()
