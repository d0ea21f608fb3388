"""Markdown debrief reports summarising a scenario run."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Iterable, Union

from missionx.domain import Alert, Scenario
from missionx.journal import JournalEntry

StrPath = Union[str, "PathLike[str]"]


def render_debrief(
    scenario: Scenario,
    alerts: Iterable[Alert],
    journal_entries: Iterable[JournalEntry],
) -> str:
    """The debrief document as Markdown text."""
    lines = [
        "# Mission Debrief",
        "",
        "## Scenario",
        f"- Name: {scenario.name}",
        f"- Summary: {scenario.summary}",
        "",
        "## Missions",
    ]
    lines += [f"- **{m.title}** — {m.objective}" for m in scenario.missions]
    lines += ["", "## Active Tracks"]
    lines += [
        f"- {t.display_name} ({t.type}), status={t.status}, "
        f"confidence={t.confidence:g}, health={t.health}"
        for t in scenario.initial_tracks
    ]
    lines += ["", "## Alerts"]
    alert_lines = [f"- [{a.severity}] {a.source}: {a.message}" for a in alerts]
    lines += alert_lines or ["- No alerts generated."]
    lines += ["", "## Event Journal"]
    lines += [f"- {e.iso_timestamp()} [{e.category}] {e.message}" for e in journal_entries]
    return "\n".join(lines) + "\n"


def export_debrief(
    scenario: Scenario,
    alerts: Iterable[Alert],
    journal_entries: Iterable[JournalEntry],
    output_path: StrPath,
) -> None:
    """Write the debrief to ``output_path``; raises OSError if it cannot be written."""
    text = render_debrief(scenario, alerts, journal_entries)
    Path(output_path).write_text(text, encoding="utf-8")