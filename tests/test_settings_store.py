from __future__ import annotations

import json
from pathlib import Path

import pytest

from journal_citations.settings_store import JsonSettingsStore, MemorySettingsStore


def test_json_store_missing_file_reads_empty(tmp_path: Path) -> None:
    store = JsonSettingsStore(tmp_path / "settings.json")
    assert store.get("AbntCitationPlugin", 1, "location") is None


def test_json_store_persists_per_journal(tmp_path: Path) -> None:
    p = tmp_path / "sub" / "settings.json"
    store = JsonSettingsStore(p)
    store.set("AbntCitationPlugin", 1, "location", {"pt_BR": "Curitiba"})
    store.set("AbntCitationPlugin", 2, "location", {"en_US": "Vancouver"})

    again = JsonSettingsStore(p)
    assert again.get("AbntCitationPlugin", 1, "location") == {"pt_BR": "Curitiba"}
    assert again.get("AbntCitationPlugin", 2, "location") == {"en_US": "Vancouver"}
    assert json.loads(p.read_text(encoding="utf-8"))["AbntCitationPlugin"]["1"]["location"]["pt_BR"] == "Curitiba"
    assert [x.name for x in p.parent.iterdir()] == ["settings.json"]


def test_json_store_rejects_non_object(tmp_path: Path) -> None:
    p = tmp_path / "settings.json"
    p.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        JsonSettingsStore(p).get("x", 1, "y")


def test_memory_store() -> None:
    store = MemorySettingsStore()
    store.set("P", 3, "k", "v")
    assert store.get("P", 3, "k") == "v"
    assert store.get("P", 4, "k") is None
