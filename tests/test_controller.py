import json

import pytest

from missionx.controller import ApplicationController


def _write_scenario(path, tracks=None, missions=None, name="Convoy"):
    document = {
        "id": "s1",
        "name": name,
        "summary": "Escort run",
        "missions": missions
        if missions is not None
        else [
            {
                "id": "m1",
                "title": "Escort",
                "objective": "Keep the convoy moving",
                "routes": [
                    {"label": "R1", "points": [{"x": 0, "y": 0, "etaSeconds": 0}, {"x": 5, "y": 5, "etaSeconds": 30}]}
                ],
            }
        ],
        "tracks": tracks
        if tracks is not None
        else [{"id": "t1", "displayName": "Lead", "x": 1, "y": 1, "vx": 1, "vy": 0, "health": "red"}],
    }
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


def test_open_scenario_loads_and_logs(tmp_path):
    path = _write_scenario(tmp_path / "convoy.json")
    controller = ApplicationController()
    scenario = controller.open_scenario(path)
    assert scenario.name == "Convoy"
    assert controller.scenario is scenario
    assert controller.validation_errors == []
    assert controller.workspace.last_scenario_path == str(path)
    messages = [e.message for e in controller.journal]
    assert f"Opened scenario from {path}" in messages
    assert len(controller.engine.tracks) == 1


def test_open_scenario_computes_alerts(tmp_path):
    controller = ApplicationController()
    controller.open_scenario(_write_scenario(tmp_path / "c.json"))
    assert [a.severity for a in controller.alerts] == ["critical"]
    assert controller.alerts[0].source == "Lead"


def test_open_scenario_logs_validation_errors(tmp_path):
    path = _write_scenario(tmp_path / "bad.json", missions=[], tracks=[], name=" ")
    controller = ApplicationController()
    controller.open_scenario(path)
    assert "At least one mission must be defined." in controller.validation_errors
    logged = [e.message for e in controller.journal if e.category == "validation"]
    assert logged == controller.validation_errors


def test_open_missing_scenario_gives_placeholder(tmp_path):
    controller = ApplicationController()
    missing = tmp_path / "missing.json"
    controller.open_scenario(missing)
    assert controller.scenario.name == "Failed to load scenario"
    assert controller.scenario.summary == str(missing)


def test_step_advances_engine(tmp_path):
    controller = ApplicationController()
    controller.open_scenario(_write_scenario(tmp_path / "c.json"))
    before = controller.engine.tracks[0].position
    controller.step()
    after = controller.engine.tracks[0].position
    assert after == before + controller.engine.tracks[0].velocity
    assert controller.journal.entries[-1].category == "tick"


def test_start_and_pause(tmp_path):
    controller = ApplicationController()
    controller.start()
    assert controller.engine.is_running
    controller.pause()
    assert not controller.engine.is_running


def test_set_playback_rate():
    controller = ApplicationController()
    controller.set_playback_rate(2.5)
    assert controller.workspace.playback_rate == 2.5
    assert controller.engine.scheduler.rate == 2.5


def test_workspace_round_trip(tmp_path):
    controller = ApplicationController()
    controller.workspace.follow_selection = False
    controller.workspace.window_geometry = b"\x01\x02geo"
    controller.set_playback_rate(4.0)
    path = tmp_path / "ws.json"
    controller.save_workspace(path)

    other = ApplicationController()
    loaded = other.load_workspace(path)
    assert loaded is other.workspace
    assert loaded.follow_selection is False
    assert loaded.playback_rate == 4.0
    assert loaded.window_geometry == b"\x01\x02geo"
    assert other.journal.entries[-1].message == f"Loaded workspace {path}"


def test_load_missing_workspace_raises(tmp_path):
    controller = ApplicationController()
    with pytest.raises(FileNotFoundError):
        controller.load_workspace(tmp_path / "none.json")
    assert len(controller.journal) == 0


def test_export_debrief(tmp_path):
    controller = ApplicationController()
    controller.open_scenario(_write_scenario(tmp_path / "c.json"))
    out = tmp_path / "debrief.md"
    controller.export_debrief(out)
    text = out.read_text(encoding="utf-8")
    assert text.startswith("# Mission Debrief")
    assert "- Name: Convoy" in text
    assert "[critical] Lead: Platform health is red." in text


def test_discover_scenario_files(tmp_path):
    (tmp_path / "b.json").write_text("{}")
    (tmp_path / "a.json").write_text("{}")
    (tmp_path / "notes.txt").write_text("x")
    controller = ApplicationController()
    assert controller.discover_scenario_files(tmp_path) == ["a.json", "b.json"]