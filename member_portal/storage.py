"""
Key/value stores for client-held state.

MemoryStore lives as long as the process (session scope); JSONFileStore
persists to disk (local scope).
"""
import json
import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


class MemoryStore:
    def __init__(self, initial=None):
        self._data = dict(initial or {})

    def get(self, key, default=None):
        return self._data.get(key, default)

    def set(self, key, value):
        self._data[key] = value

    def remove(self, key):
        self._data.pop(key, None)

    def clear(self):
        self._data.clear()


class JSONFileStore(MemoryStore):
    """MemoryStore that writes itself to a JSON file on every change"""

    def __init__(self, path):
        self.path = Path(path)
        super().__init__(self._load())

    def _load(self):
        if not self.path.exists():
            return {}
        try:
            return json.loads(self.path.read_text(encoding='utf-8'))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable client state at {self.path}: {e}")
            return {}

    def _flush(self):
        """Write to a temp file beside the target, then swap it in"""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f'.{self.path.name}.', suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(self._data, f)
            os.replace(tmp_name, self.path)
        except Exception:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def set(self, key, value):
        super().set(key, value)
        self._flush()

    def remove(self, key):
        super().remove(key)
        self._flush()

    def clear(self):
        super().clear()
        self._flush()
