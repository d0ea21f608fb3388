"""The operator workbench: ties the controller to its panels and the command line."""

from __future__ import annotations

import argparse
import sys
from contextlib import suppress
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Optional, Sequence, Union

from missionx.controller import ApplicationController
from missionx.domain import IncidentBookmark, Route, TrackState
from missionx.views import (
    format_alert,
    format_bookmark,
    format_journal_entry,
    health_summary,
    inspector_lines,
    planner_rows,
    route_summary,
    scenario_browser_entries,
    track_row,
    validation_messages,
)
from missionx.workspace import WorkspaceState

StrPath = Union[str, "PathLike[str]"]

SCENARIO_DIRECTORY = Path("assets/scenarios")
DEFAULT_SCENARIO = SCENARIO_DIRECTORY / "convoy_guard.json"
WORKSPACE_FILE = Path("assets/workspaces/default_workspace.json")
DEFAULT_EXPORT_PATH = "artifacts/example_reports/debrief.md"
RULE_PACKS = ("balanced_ops.json", "aggressive_monitoring.json")
RECENT_SESSIONS = (
    "assets/scenarios/convoy_guard.json",
    "assets/scenarios/border_relay.json",
    "assets/scenarios/urban_response.json",
)
MIN_PLAYBACK_RATE = 0.25
MAX_PLAYBACK_RATE = 8.0
READY_SUMMARY = "Ready | No incident selected | Rule pack: balanced_ops"
PANEL_BOOKMARKS = (
    IncidentBookmark(45, "warning", "Route review", "Possible overlap"),
    IncidentBookmark(95, "note", "Pause and inspect", "Manual review marker"),
)


@dataclass
class View:
    """What every panel of the workbench currently shows."""

    summary: str = READY_SUMMARY
    tracks: list[TrackState] = field(default_factory=list)
    routes: list[Route] = field(default_factory=list)
    track_rows: list[tuple[str, str, str, str, str, str]] = field(default_factory=list)
    inspector: list[str] = field(default_factory=list)
    alerts: list[str] = field(default_factory=list)
    health: list[str] = field(default_factory=list)
    event_log: list[str] = field(default_factory=list)
    planner: list[tuple[str, str]] = field(default_factory=list)
    validation: list[str] = field(default_factory=list)
    bookmarks: list[str] = field(default_factory=list)


class Workbench:
    """The operator's session, rooted at a directory holding the ``assets`` tree."""

    def __init__(self, root: StrPath = ".") -> None:
        self.root = Path(root)
        self.controller = ApplicationController()
        self.view = View()
        self.status = ""
        self.restore_workspace_state()
        files = self.controller.discover_scenario_files(self.root / SCENARIO_DIRECTORY)
        self.scenario_entries = scenario_browser_entries(
            files, str(self.root / SCENARIO_DIRECTORY)
        )
        self.open_scenario(DEFAULT_SCENARIO)
        self.view.summary = READY_SUMMARY
        self.status = "Ready"

    def _resolve(self, path: StrPath) -> Path:
        candidate = Path(path)
        return candidate if candidate.is_absolute() else self.root / candidate

    def open_scenario(self, path: StrPath) -> View:
        """Open a scenario (relative paths are taken from the root) and refresh the panels."""
        self.controller.open_scenario(self._resolve(path))
        warnings = len(self.controller.validation_errors)
        if warnings:
            self.status = f"Scenario loaded with {warnings} validation warnings"
        else:
            self.status = "Scenario loaded"
        return self.refresh()

    def refresh(self) -> View:
        """Recompute every panel from the controller's state."""
        controller = self.controller
        scenario = controller.scenario
        routes = list(scenario.missions[0].routes) if scenario.missions else []
        tracks = controller.engine.tracks
        self.view = View(
            summary=(
                f"Scenario: {scenario.name} | Tracks: {len(tracks)} "
                f"| Alerts: {len(controller.alerts)}"
            ),
            tracks=list(tracks),
            routes=routes,
            track_rows=[track_row(track) for track in tracks],
            inspector=inspector_lines(scenario),
            alerts=[format_alert(alert) for alert in controller.alerts],
            health=health_summary(tracks),
            event_log=[format_journal_entry(entry) for entry in controller.journal],
            planner=planner_rows(route_summary(routes)),
            validation=validation_messages(controller.validation_errors),
            bookmarks=[format_bookmark(bookmark) for bookmark in PANEL_BOOKMARKS],
        )
        return self.view

    def step(self) -> View:
        """Advance the simulation by one tick."""
        self.controller.step()
        return self.refresh()

    def apply_settings(
        self, follow_selection: bool, show_threat_rings: bool, playback_rate: float
    ) -> View:
        """Apply the settings form; the playback rate must lie within the allowed range."""
        if not MIN_PLAYBACK_RATE <= playback_rate <= MAX_PLAYBACK_RATE:
            raise ValueError(
                f"playback rate {playback_rate} outside "
                f"{MIN_PLAYBACK_RATE}..{MAX_PLAYBACK_RATE}"
            )
        workspace = self.controller.workspace
        workspace.follow_selection = follow_selection
        workspace.show_threat_rings = show_threat_rings
        self.controller.set_playback_rate(playback_rate)
        return self.refresh()

    def export_debrief(self, output_path: StrPath = DEFAULT_EXPORT_PATH) -> Path:
        """Write the debrief report; raises OSError if it cannot be written."""
        target = self._resolve(output_path)
        self.controller.export_debrief(target)
        self.status = "Debrief exported"
        return target

    def save_workspace_state(self) -> Path:
        """Store the workspace preferences; raises OSError if they cannot be written."""
        target = self.root / WORKSPACE_FILE
        self.controller.save_workspace(target)
        return target

    def restore_workspace_state(self) -> Optional[WorkspaceState]:
        """Load stored preferences if present; returns them, or None if there are none."""
        try:
            return self.controller.load_workspace(self.root / WORKSPACE_FILE)
        except OSError:
            return None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="missionx", description="Run a mission scenario and report on it."
    )
    parser.add_argument("--root", default=".", help="directory holding the assets tree")
    parser.add_argument("--scenario", help="scenario file to open instead of the default")
    parser.add_argument("--steps", type=int, default=0, help="simulation ticks to run")
    parser.add_argument("--rate", type=float, help="playback rate")
    parser.add_argument("--export", help="write a debrief report to this path")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.steps < 0:
        parser.error("--steps must not be negative")

    bench = Workbench(args.root)
    if args.scenario:
        bench.open_scenario(args.scenario)
    if args.rate is not None:
        workspace = bench.controller.workspace
        try:
            bench.apply_settings(workspace.follow_selection, workspace.show_threat_rings, args.rate)
        except ValueError as exc:
            parser.error(str(exc))
    for _ in range(args.steps):
        bench.step()
    if args.export:
        try:
            bench.export_debrief(args.export)
        except OSError as exc:
            print(f"missionx: cannot export debrief: {exc}", file=sys.stderr)
            return 1

    print(bench.view.summary)
    print(bench.status)
    for line in bench.view.health + bench.view.alerts + bench.view.validation:
        print(line)

    with suppress(OSError):
        bench.save_workspace_state()
    return 0


if __name__ == "__main__":
    sys.exit(main())