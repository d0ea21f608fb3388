"""Small file-backed stores: bookmarks, rule packs, session templates and recents."""

from __future__ import annotations

import json
from os import PathLike
from pathlib import Path
from typing import Any, Iterable, Union

from missionx.domain import IncidentBookmark
from missionx.scenarios import discover_json_files

StrPath = Union[str, "PathLike[str]"]

DEFAULT_RECENT_SESSIONS = "assets/workspaces/recent_sessions.txt"


def example_bookmarks() -> list[IncidentBookmark]:
    """The built-in sample incident bookmarks."""
    return [
        IncidentBookmark(45, "warning", "Route review", "Possible overlap near handoff checkpoint"),
        IncidentBookmark(95, "note", "Pause and inspect", "Operator manually inspected relay alignment"),
    ]


def load_json_object(path: StrPath) -> dict[str, Any]:
    """The top-level JSON object in ``path``, or an empty dict if unreadable or not an object."""
    try:
        raw = Path(path).read_bytes()
        value = json.loads(raw)
    except (OSError, ValueError):
        return {}
    return value if isinstance(value, dict) else {}


def discover_rule_packs(directory: StrPath) -> list[str]:
    """Names of the rule-pack JSON files in ``directory``, sorted by name."""
    return discover_json_files(directory)


class RecentSessionStore:
    """A plain-text list of recently opened session paths, one per line."""

    def __init__(self, path: StrPath = DEFAULT_RECENT_SESSIONS) -> None:
        self.path = Path(path)

    def load(self) -> list[str]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError:
            return []
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return lines

    def save(self, paths: Iterable[str]) -> None:
        with self.path.open("w", encoding="utf-8") as stream:
            stream.writelines(f"{p}\n" for p in paths)