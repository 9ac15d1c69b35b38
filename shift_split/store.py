"""
Key-value JSON store for the name pool. Other keys in the file are left alone.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict

from .errors import NameStoreError
from .names import NamePool

logger = logging.getLogger(__name__)

DEFAULT_KEY = "names"


def _json_dump(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=2, ensure_ascii=False)


def _json_load(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


class NameStore:
    """Persist a NamePool under one key of a JSON file."""

    def __init__(self, path: Path, key: str = DEFAULT_KEY):
        self.path = Path(path)
        self.key = key

    def _read_all(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = _json_load(self.path)
        except (ValueError, OSError) as e:
            raise NameStoreError(f"Name store {self.path} is unreadable: {e}")
        if not isinstance(data, dict):
            raise NameStoreError(f"Name store {self.path} must hold a JSON object")
        return data

    def load(self) -> NamePool:
        """Stored pool, or an empty one if the file or key is missing."""
        records = self._read_all().get(self.key) or []
        if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
            raise NameStoreError(f"Name store {self.path}[{self.key}] must be a list of name records")
        pool = NamePool.from_records(records)
        logger.debug("Loaded %d names from %s[%s]", len(pool), self.path, self.key)
        return pool

    def save(self, pool: NamePool) -> None:
        data = self._read_all()
        data[self.key] = pool.to_records()
        _json_dump(self.path, data)
        logger.info("Saved %d names to %s[%s]", len(pool), self.path, self.key)
