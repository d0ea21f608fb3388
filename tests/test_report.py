from datetime import datetime

import pytest

from missionx.domain import Alert, Mission, Scenario, TrackState
from missionx.journal import JournalEntry
from missionx.report import export_debrief, render_debrief


def _scenario():
    return Scenario(
        name="Convoy Guard",
        summary="Escort",
        missions=[Mission(title="Escort", objective="Protect convoy")],
        initial_tracks=[
            TrackState(display_name="Lead", type="ground", status="watch", confidence=0.5, health="amber")
        ],
    )


def test_header_and_scenario_section():
    text = render_debrief(_scenario(), [], [])
    lines = text.splitlines()
    assert lines[0] == "# Mission Debrief"
    assert "- Name: Convoy Guard" in lines
    assert "- Summary: Escort" in lines


def test_mission_and_track_lines():
    lines = render_debrief(_scenario(), [], []).splitlines()
    assert "- **Escort** — Protect convoy" in lines
    assert "- Lead (ground), status=watch, confidence=0.5, health=amber" in lines


def test_no_alerts_placeholder():
    text = render_debrief(_scenario(), [], [])
    assert "- No alerts generated." in text.splitlines()


def test_alert_lines_replace_placeholder():
    alerts = [Alert("critical", "Lead", "Check it")]
    lines = render_debrief(_scenario(), alerts, []).splitlines()
    assert "- [critical] Lead: Check it" in lines
    assert "- No alerts generated." not in lines


def test_journal_lines_use_iso_timestamp():
    entry = JournalEntry(datetime(2024, 5, 6, 7, 8, 9), "tick", "Advanced")
    lines = render_debrief(_scenario(), [], [entry]).splitlines()
    assert lines[-1] == f"- {entry.iso_timestamp()} [tick] Advanced"


def test_sections_in_order():
    text = render_debrief(_scenario(), [], [])
    positions = [text.index(h) for h in ["## Scenario", "## Missions", "## Active Tracks", "## Alerts", "## Event Journal"]]
    assert positions == sorted(positions)


def test_export_writes_rendered_text(tmp_path):
    path = tmp_path / "debrief.md"
    alerts = [Alert("info", "Lead", "Watch")]
    export_debrief(_scenario(), alerts, [], path)
    assert path.read_text(encoding="utf-8") == render_debrief(_scenario(), alerts, [])


def test_export_to_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        export_debrief(_scenario(), [], [], tmp_path / "missing" / "debrief.md")