"""Coordinates scenario loading, simulation, alerts, workspace and reports."""

from __future__ import annotations

from os import PathLike
from typing import Union

from missionx.domain import Alert, Scenario
from missionx.journal import EventJournal
from missionx.report import export_debrief
from missionx.rules import evaluate_alerts, validate_scenario
from missionx.scenarios import discover_json_files, load_scenario
from missionx.simulation import SimulationEngine
from missionx.workspace import WorkspaceState, load_workspace, save_workspace

StrPath = Union[str, "PathLike[str]"]


class ApplicationController:
    """The application's state and the operations the user interface drives."""

    def __init__(self) -> None:
        self.workspace = WorkspaceState()
        self.scenario = Scenario()
        self.journal = EventJournal()
        self.engine = SimulationEngine(self.journal)
        self.alerts: list[Alert] = []
        self.validation_errors: list[str] = []

    def discover_scenario_files(self, directory: StrPath) -> list[str]:
        return discover_json_files(directory)

    def open_scenario(self, path: StrPath) -> Scenario:
        """Load, validate and start playback of the scenario at ``path``."""
        self.scenario = load_scenario(path)
        self.validation_errors = validate_scenario(self.scenario)
        self.workspace.last_scenario_path = str(path)
        self.engine.load_scenario(self.scenario)
        self.journal.append("scenario", f"Opened scenario from {path}")
        for error in self.validation_errors:
            self.journal.append("validation", error)
        self._refresh_alerts()
        return self.scenario

    def save_workspace(self, path: StrPath) -> None:
        save_workspace(path, self.workspace)

    def load_workspace(self, path: StrPath) -> WorkspaceState:
        """Replace the workspace with the one stored at ``path``; raises OSError if unreadable."""
        loaded = load_workspace(path)
        loaded.hidden_panels = self.workspace.hidden_panels
        self.workspace = loaded
        self.journal.append("workspace", f"Loaded workspace {path}")
        return loaded

    def export_debrief(self, output_path: StrPath) -> None:
        export_debrief(self.scenario, self.alerts, self.journal.entries, output_path)

    def start(self) -> None:
        self.engine.start()

    def pause(self) -> None:
        self.engine.pause()

    def step(self) -> None:
        self.engine.step()
        self._refresh_alerts()

    def set_playback_rate(self, rate: float) -> None:
        self.workspace.playback_rate = rate
        self.engine.scheduler.rate = rate

    def _refresh_alerts(self) -> None:
        self.alerts = evaluate_alerts(self.scenario)