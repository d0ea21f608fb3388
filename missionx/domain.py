"""Core value types describing scenarios, missions, tracks and operator artefacts."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    """A two-dimensional position or velocity in map units."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def scaled(self, factor: float) -> Point:
        """Return this point with both coordinates multiplied by ``factor``."""
        return Point(self.x * factor, self.y * factor)


@dataclass
class Alert:
    severity: str
    source: str
    message: str


@dataclass
class IncidentBookmark:
    timestamp_seconds: int = 0
    category: str = ""
    title: str = ""
    details: str = ""


@dataclass
class RoutePoint:
    position: Point = field(default_factory=Point)
    eta_seconds: float = 0.0


@dataclass
class Route:
    entity_id: str = ""
    label: str = ""
    points: list[RoutePoint] = field(default_factory=list)


@dataclass
class Mission:
    id: str = ""
    title: str = ""
    objective: str = ""
    area_name: str = ""
    routes: list[Route] = field(default_factory=list)


@dataclass
class TrackState:
    id: str = ""
    display_name: str = ""
    type: str = ""
    position: Point = field(default_factory=Point)
    velocity: Point = field(default_factory=Point)
    heading_deg: float = 0.0
    confidence: float = 1.0
    status: str = "nominal"
    health: str = "green"


@dataclass
class Scenario:
    id: str = ""
    name: str = ""
    summary: str = ""
    missions: list[Mission] = field(default_factory=list)
    initial_tracks: list[TrackState] = field(default_factory=list)


@dataclass
class OperatorNote:
    timestamp_seconds: int = 0
    author: str = ""
    text: str = ""
    tag: str = ""


@dataclass
class OverlayProfile:
    name: str = ""
    show_labels: bool = True
    show_threat_rings: bool = True
    show_routes: bool = True
    show_breadcrumbs: bool = True


@dataclass
class PlatformHealth:
    entity_id: str = ""
    state: str = ""
    summary: str = ""


@dataclass
class SessionSummary:
    scenario_path: str = ""
    rule_pack: str = ""
    started_at: str = ""


@dataclass
class ValidationIssue:
    severity: str = ""
    message: str = ""


@dataclass
class Zone:
    id: str = ""
    label: str = ""
    type: str = ""