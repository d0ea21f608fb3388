"""Time-stepped playback of scenario tracks and simple threat grading."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from missionx.domain import Scenario, TrackState
from missionx.journal import EventJournal

MINIMUM_CONFIDENCE = 0.55
CONFIDENCE_DECAY_PER_TICK = 0.001


@dataclass
class TimelineScheduler:
    """Holds the playback rate that scales each simulation step."""

    rate: float = 1.0


class SimulationEngine:
    """Advances copies of a scenario's initial tracks one tick at a time."""

    def __init__(self, journal: EventJournal) -> None:
        self.journal = journal
        self.scheduler = TimelineScheduler()
        self._scenario: Optional[Scenario] = None
        self._tracks: list[TrackState] = []
        self._running = False
        self._tick = 0

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def tick(self) -> int:
        return self._tick

    @property
    def tracks(self) -> list[TrackState]:
        return self._tracks

    def load_scenario(self, scenario: Scenario) -> None:
        """Reset playback to the scenario's initial tracks."""
        self._scenario = scenario
        self._tracks = [replace(track) for track in scenario.initial_tracks]
        self._tick = 0
        self._running = False
        self.journal.append("scenario", f"Loaded scenario '{scenario.name}'")

    def start(self) -> None:
        self._running = True
        self.journal.append("timeline", "Playback started")

    def pause(self) -> None:
        self._running = False
        self.journal.append("timeline", "Playback paused")

    def step(self) -> None:
        """Move every track by its velocity scaled by the playback rate."""
        if self._scenario is None:
            return
        self._tick += 1
        rate = self.scheduler.rate
        for track in self._tracks:
            track.position = track.position + track.velocity.scaled(rate)
            track.confidence = max(MINIMUM_CONFIDENCE, track.confidence - CONFIDENCE_DECAY_PER_TICK)
        self.journal.append("tick", f"Advanced simulation to tick {self._tick}")


def classify_threat_distance(distance_meters: float) -> str:
    """Grade a separation distance as critical, warning or low."""
    if distance_meters < 80.0:
        return "critical"
    if distance_meters < 180.0:
        return "warning"
    return "low"