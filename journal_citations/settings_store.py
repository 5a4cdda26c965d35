from __future__ import annotations

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)


class SettingsStore(ABC):
    """Per-journal plugin settings, keyed by (plugin, journal_id, name)."""

    @abstractmethod
    def get(self, plugin: str, journal_id: int, name: str) -> Any:
        raise NotImplementedError

    @abstractmethod
    def set(self, plugin: str, journal_id: int, name: str, value: Any) -> None:
        raise NotImplementedError


@dataclass
class MemorySettingsStore(SettingsStore):
    data: dict[tuple[str, int, str], Any] = field(default_factory=dict)

    def get(self, plugin: str, journal_id: int, name: str) -> Any:
        return self.data.get((plugin, int(journal_id), name))

    def set(self, plugin: str, journal_id: int, name: str, value: Any) -> None:
        self.data[(plugin, int(journal_id), name)] = value


@dataclass
class JsonSettingsStore(SettingsStore):
    """Settings kept in a single JSON file.

    Layout: {"<plugin>": {"<journal_id>": {"<name>": value}}}.
    A missing file reads as empty; writes replace the file atomically.
    """

    path: Path

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        obj = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(obj, dict):
            raise ValueError(f"Settings file must hold a JSON object: {self.path}")
        return obj

    def get(self, plugin: str, journal_id: int, name: str) -> Any:
        return self._load().get(plugin, {}).get(str(journal_id), {}).get(name)

    def set(self, plugin: str, journal_id: int, name: str, value: Any) -> None:
        obj = self._load()
        obj.setdefault(plugin, {}).setdefault(str(journal_id), {})[name] = value

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=self.path.name, suffix=".tmp", dir=str(self.path.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(obj, f, indent=2, ensure_ascii=False, sort_keys=True)
                f.write("\n")
            os.replace(tmp, self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise
        log.debug("saved setting %s/%s/%s to %s", plugin, journal_id, name, self.path)
