"""Persisted workspace preferences and their JSON storage."""

from __future__ import annotations

import base64
import binascii
import json
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Any, Union

StrPath = Union[str, "PathLike[str]"]


@dataclass
class WorkspaceState:
    last_scenario_path: str = ""
    active_overlay_profile: str = "dark-ops"
    hidden_panels: list[str] = field(default_factory=list)
    playback_rate: float = 1.0
    follow_selection: bool = True
    show_threat_rings: bool = True
    window_geometry: bytes = b""
    window_state: bytes = b""


def _parse_object(raw: bytes) -> dict[str, Any]:
    try:
        value = json.loads(raw)
    except ValueError:
        return {}
    return value if isinstance(value, dict) else {}


def _string(obj: dict[str, Any], key: str, default: str = "") -> str:
    value = obj.get(key)
    return value if isinstance(value, str) else default


def _number(obj: dict[str, Any], key: str, default: float) -> float:
    value = obj.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    return float(value)


def _flag(obj: dict[str, Any], key: str, default: bool) -> bool:
    value = obj.get(key)
    return value if isinstance(value, bool) else default


def _decode(text: str) -> bytes:
    try:
        return base64.b64decode(text.encode("ascii", "ignore"))
    except (binascii.Error, ValueError):
        return b""


def save_workspace(path: StrPath, state: WorkspaceState) -> None:
    """Write ``state`` as indented JSON; raises OSError if the file cannot be written."""
    document = {
        "lastScenarioPath": state.last_scenario_path,
        "activeOverlayProfile": state.active_overlay_profile,
        "playbackRate": state.playback_rate,
        "followSelection": state.follow_selection,
        "showThreatRings": state.show_threat_rings,
        "windowGeometry": base64.b64encode(state.window_geometry).decode("ascii"),
        "windowState": base64.b64encode(state.window_state).decode("ascii"),
    }
    text = json.dumps(document, indent=4, sort_keys=True) + "\n"
    Path(path).write_text(text, encoding="utf-8")


def load_workspace(path: StrPath) -> WorkspaceState:
    """Read a workspace file; missing or mistyped values fall back to defaults."""
    obj = _parse_object(Path(path).read_bytes())
    return WorkspaceState(
        last_scenario_path=_string(obj, "lastScenarioPath"),
        active_overlay_profile=_string(obj, "activeOverlayProfile", "dark-ops"),
        playback_rate=_number(obj, "playbackRate", 1.0),
        follow_selection=_flag(obj, "followSelection", True),
        show_threat_rings=_flag(obj, "showThreatRings", True),
        window_geometry=_decode(_string(obj, "windowGeometry")),
        window_state=_decode(_string(obj, "windowState")),
    )