# circussync/core/preferences.py
"""
Local key/value preferences kept in one JSON file.

Reads and writes raise OSError / ValueError; callers decide whether a
failure matters.
"""

import json
from pathlib import Path

from circussync.core.config import get_settings


class PreferenceFile:
    def __init__(self, path: str | Path | None = None):
        self.path = Path(path or get_settings().PREFERENCES_PATH)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return data

    def get(self, key: str) -> str | None:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
