"""Presentation helpers that turn domain data into rows, lines and colours."""

from __future__ import annotations

from typing import Iterable, Optional

from missionx.domain import Alert, IncidentBookmark, Route, Scenario, TrackState
from missionx.journal import JournalEntry

TRACK_HEADERS = ("Track", "Type", "Status", "Health", "Confidence", "Position")
BOOKMARK_COLUMNS = 3
PLANNER_HEADERS = ("Waypoint", "ETA (s)")
DEFAULT_SCENARIO_DIRECTORY = "assets/scenarios"


def track_row(track: TrackState) -> tuple[str, str, str, str, str, str]:
    """The track-table cells for ``track``, in the order of TRACK_HEADERS."""
    return (
        track.display_name,
        track.type,
        track.status,
        track.health,
        f"{track.confidence:.2f}",
        f"({track.position.x:.1f}, {track.position.y:.1f})",
    )


def track_health_color(track: TrackState) -> Optional[tuple[int, int, int]]:
    """Foreground colour of the health cell, or None for the default colour."""
    if track.health == "red":
        return (255, 0, 0)
    if track.health == "amber":
        return (255, 190, 64)
    return None


def track_marker_color(track: TrackState) -> str:
    """Fill colour of a track's map marker."""
    if track.health == "red":
        return "#ff8f8f"
    if track.health == "amber":
        return "#ffd27d"
    return "#90e39a"


def bookmark_row(bookmark: IncidentBookmark) -> tuple[int, str, str]:
    return (bookmark.timestamp_seconds, bookmark.category, bookmark.title)


def format_alert(alert: Alert) -> str:
    return f"[{alert.severity}] {alert.source} — {alert.message}"


def format_bookmark(bookmark: IncidentBookmark) -> str:
    return f"[{bookmark.timestamp_seconds}s] {bookmark.category} - {bookmark.title}"


def format_journal_entry(entry: JournalEntry) -> str:
    return f"{entry.iso_timestamp()} [{entry.category}] {entry.message}"


def health_counts(tracks: Iterable[TrackState]) -> dict[str, int]:
    """Tracks per health level; anything not red or amber counts as green."""
    counts = {"green": 0, "amber": 0, "red": 0}
    for track in tracks:
        key = track.health if track.health in ("red", "amber") else "green"
        counts[key] += 1
    return counts


def health_summary(tracks: Iterable[TrackState]) -> list[str]:
    counts = health_counts(tracks)
    return [f"{level.capitalize()}: {counts[level]}" for level in ("green", "amber", "red")]


def inspector_lines(scenario: Scenario) -> list[str]:
    lines = [
        f"Scenario: {scenario.name}",
        f"Summary: {scenario.summary}",
        f"Missions: {len(scenario.missions)}",
        f"Tracks: {len(scenario.initial_tracks)}",
    ]
    lines += [f"- {m.title}: {m.objective}" for m in scenario.missions]
    return lines


def route_summary(routes: Iterable[Route]) -> list[str]:
    """One ``label:index|eta`` line per waypoint of every route."""
    return [
        f"{route.label}:{index}|{point.eta_seconds:.0f}"
        for route in routes
        for index, point in enumerate(route.points)
    ]


def planner_rows(lines: Iterable[str]) -> list[tuple[str, str]]:
    """Split route-summary lines into waypoint and ETA cells."""
    rows = []
    for line in lines:
        parts = line.split("|")
        rows.append((parts[0], parts[1] if len(parts) > 1 else ""))
    return rows


def validation_messages(messages: Iterable[str]) -> list[str]:
    listed = list(messages)
    return listed or ["No validation issues."]


def scenario_browser_entries(
    files: Iterable[str], directory: str = DEFAULT_SCENARIO_DIRECTORY
) -> list[tuple[str, str]]:
    """Pairs of display name and the path opened when the entry is chosen."""
    base = directory.rstrip("/")
    return [(name, f"{base}/{name}") for name in files]