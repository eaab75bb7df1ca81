"""JSON-file storage -- the on-disk analogue of a browser's localStorage."""

import json
from pathlib import Path
from typing import Dict, Optional

from hacker_stories.exceptions import StorageError
from hacker_stories.storage.base import Storage
from hacker_stories.utils.config import settings
from hacker_stories.utils.logger import get_logger

log = get_logger(__name__)


class FileStorage(Storage):
    """Keeps every key in one JSON object file.

    The file is re-read on each ``get`` so that values written by another
    process are observed; ``set`` rewrites the whole file (last write wins).
    """

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path or settings.storage_path).expanduser()

    def get(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        data = self._load(repair=True)
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
            tmp.replace(self.path)
        except OSError as exc:
            raise StorageError(f"Cannot write {self.path}: {exc}") from exc
        log.debug("Stored %s in %s", key, self.path)

    def _load(self, repair: bool = False) -> Dict[str, str]:
        """Read the file.  With *repair*, corrupt content is dropped so a write can replace it."""
        if not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise StorageError(f"Cannot read {self.path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            if repair:
                log.warning("Overwriting corrupt storage file %s: %s", self.path, exc)
                return {}
            raise StorageError(f"Corrupt storage file {self.path}: {exc}") from exc
        if not isinstance(raw, dict):
            if repair:
                log.warning("Overwriting storage file %s: not a JSON object", self.path)
                return {}
            raise StorageError(f"Storage file {self.path} does not hold a JSON object")
        return raw
