
"""Key/value settings providers for the few values the game persists"""
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

log = logging.getLogger(__name__)


class SettingsError(Exception):
    """Raised when settings cannot be written."""


def default_settings_path() -> Path:
    override = os.getenv("LETETRIS_SETTINGS")
    if override:
        return Path(override)
    return Path.home() / ".letetris" / "settings.json"


class MemorySettings:
    def __init__(self, values: Optional[Dict[str, Any]] = None):
        self.values: Dict[str, Any] = dict(values or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.values[key] = value


class JsonSettings(MemorySettings):
    """Settings stored as one JSON object, rewritten on every change."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else default_settings_path()
        super().__init__(self._load())

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            log.warning("ignoring unreadable settings file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            log.warning("ignoring settings file %s: expected an object", self.path)
            return {}
        return data

    def set(self, key: str, value: Any) -> None:
        super().set(key, value)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(self.values, indent=2), encoding="utf-8")
        except OSError as e:
            raise SettingsError(f"cannot write {self.path}: {e}") from e
        log.debug("saved %s=%r to %s", key, value, self.path)
