"""Loading scenarios from JSON documents and discovering scenario files."""

from __future__ import annotations

import json
from os import PathLike
from pathlib import Path
from typing import Any, Union

from missionx.domain import Mission, Point, Route, RoutePoint, Scenario, TrackState

StrPath = Union[str, "PathLike[str]"]


def _object(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _array(obj: dict[str, Any], key: str) -> list[Any]:
    value = obj.get(key)
    return value if isinstance(value, list) else []


def _string(obj: dict[str, Any], key: str, default: str = "") -> str:
    value = obj.get(key)
    return value if isinstance(value, str) else default


def _number(obj: dict[str, Any], key: str, default: float = 0.0) -> float:
    value = obj.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    return float(value)


def _parse_route(obj: dict[str, Any]) -> Route:
    points = [
        RoutePoint(
            position=Point(_number(p, "x"), _number(p, "y")),
            eta_seconds=_number(p, "etaSeconds"),
        )
        for p in map(_object, _array(obj, "points"))
    ]
    return Route(entity_id=_string(obj, "entityId"), label=_string(obj, "label"), points=points)


def _parse_mission(obj: dict[str, Any]) -> Mission:
    return Mission(
        id=_string(obj, "id"),
        title=_string(obj, "title"),
        objective=_string(obj, "objective"),
        area_name=_string(obj, "areaName"),
        routes=[_parse_route(_object(r)) for r in _array(obj, "routes")],
    )


def _parse_track(obj: dict[str, Any]) -> TrackState:
    return TrackState(
        id=_string(obj, "id"),
        display_name=_string(obj, "displayName"),
        type=_string(obj, "type"),
        position=Point(_number(obj, "x"), _number(obj, "y")),
        velocity=Point(_number(obj, "vx"), _number(obj, "vy")),
        heading_deg=_number(obj, "headingDeg"),
        confidence=_number(obj, "confidence", 1.0),
        status=_string(obj, "status", "nominal"),
        health=_string(obj, "health", "green"),
    )


def parse_scenario(data: Any) -> Scenario:
    """Build a scenario from a decoded JSON document; unknown shapes yield empty fields."""
    obj = _object(data)
    return Scenario(
        id=_string(obj, "id"),
        name=_string(obj, "name"),
        summary=_string(obj, "summary"),
        missions=[_parse_mission(_object(m)) for m in _array(obj, "missions")],
        initial_tracks=[_parse_track(_object(t)) for t in _array(obj, "tracks")],
    )


def load_scenario(path: StrPath) -> Scenario:
    """Load a scenario file; an unreadable file yields a placeholder scenario naming it."""
    try:
        raw = Path(path).read_bytes()
    except OSError:
        return Scenario(name="Failed to load scenario", summary=str(path))
    try:
        data = json.loads(raw)
    except ValueError:
        data = {}
    return parse_scenario(data)


def discover_json_files(directory: StrPath) -> list[str]:
    """Names of the visible ``*.json`` files in ``directory``, sorted by name."""
    try:
        entries = list(Path(directory).iterdir())
    except OSError:
        return []
    return sorted(
        entry.name
        for entry in entries
        if not entry.name.startswith(".")
        and entry.name.lower().endswith(".json")
        and entry.is_file()
    )