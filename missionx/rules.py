"""Alert rules and structural validation applied to scenarios."""

from __future__ import annotations

from missionx.domain import Alert, Scenario


def evaluate_alerts(scenario: Scenario) -> list[Alert]:
    """At most one alert per track, by order of severity."""
    alerts = []
    for track in scenario.initial_tracks:
        if track.health == "red":
            alerts.append(
                Alert(
                    "critical",
                    track.display_name,
                    "Platform health is red. Immediate operator review required.",
                )
            )
        elif track.confidence < 0.75:
            alerts.append(
                Alert("warning", track.display_name, "Track confidence is below nominal threshold.")
            )
        elif track.status in ("delayed", "watch"):
            alerts.append(
                Alert("info", track.display_name, "Track status requires continued monitoring.")
            )
    return alerts


def validate_scenario(scenario: Scenario) -> list[str]:
    """Messages describing every structural problem in ``scenario``."""
    errors = []
    if not scenario.name.strip():
        errors.append("Scenario name must not be empty.")
    if not scenario.missions:
        errors.append("At least one mission must be defined.")
    if not scenario.initial_tracks:
        errors.append("At least one track must be defined.")
    for mission in scenario.missions:
        if not mission.title.strip():
            errors.append("Mission title must not be empty.")
        errors.extend(
            f"Route '{route.label}' must contain at least two points."
            for route in mission.routes
            if len(route.points) < 2
        )
    return errors