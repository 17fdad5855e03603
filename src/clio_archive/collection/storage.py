"""Key/value client storage persisted as a single JSON file."""

import json
import logging
import os
import tempfile
from pathlib import Path

from ..exceptions import PersistenceError

logger = logging.getLogger(__name__)


def _atomic_write_text(path: Path, content: str) -> None:
    """Atomically write text to `path` using temp + fsync + os.replace."""
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.tmp.", dir=path.parent)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
    except BaseException:
        try:
            tmp_path.unlink(missing_ok=True)
        except OSError:
            pass
        raise


class JsonFileStorage:
    """String values stored under namespace keys in one JSON file.

    Other keys in the file are preserved on write.
    """

    def __init__(self, path: Path):
        self.path = Path(path).expanduser()

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, ValueError) as e:
            logger.warning(f"Unreadable storage file {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring storage file {self.path}: expected an object, got {type(data).__name__}")
            return {}
        return data

    def get_item(self, key: str) -> str | None:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        """Write `value` under `key`.

        Raises:
            PersistenceError: If the file cannot be written
        """
        data = self._read_all()
        data[key] = value
        try:
            _atomic_write_text(self.path, json.dumps(data, ensure_ascii=False, indent=2))
        except OSError as e:
            raise PersistenceError(f"Failed to write {key!r} to {self.path}: {e}") from e
