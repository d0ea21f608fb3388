# missionx

A mission control workbench for loading operational scenarios, checking them
for problems, raising alerts on track state, stepping a simple track
simulation and writing a Markdown debrief of the session.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides the `missionx` command:

```
missionx --help
missionx --root . --steps 10 --rate 2 --export debrief.md
```

Options:

- `--root DIR`: directory holding the `assets` tree (default `.`).
- `--scenario PATH`: scenario to open instead of the default
  `assets/scenarios/convoy_guard.json`. Relative paths are taken from the root.
- `--steps N`: number of simulation ticks to run (must not be negative).
- `--rate R`: playback rate, between 0.25 and 8.0.
- `--export PATH`: write a Markdown debrief to this path (relative to the
  root). The command exits with status 1 if the file cannot be written.

On start the command loads `assets/workspaces/default_workspace.json` under
the root if it exists, and opens the default scenario. It then prints the
summary line, the status line, the health counts, the alerts and the
validation messages, and finally saves the workspace preferences back to
`assets/workspaces/default_workspace.json` (silently skipped if that cannot
be written).

If a scenario file cannot be read, a placeholder scenario named
"Failed to load scenario" is used, whose summary is the path; its validation
messages then say what is missing.

## Scenario files

Scenarios are JSON documents. Every key is optional; missing or mistyped
values fall back to empty strings, zero, or the defaults shown below.

```json
{
  "id": "convoy-guard",
  "name": "Convoy Guard",
  "summary": "Escort a supply convoy through the valley corridor.",
  "missions": [
    {
      "id": "m1",
      "title": "Escort",
      "objective": "Keep the convoy inside the corridor",
      "areaName": "Valley",
      "routes": [
        {
          "entityId": "t1",
          "label": "Alpha",
          "points": [
            {"x": 10, "y": 20, "etaSeconds": 0},
            {"x": 110, "y": 60, "etaSeconds": 45}
          ]
        }
      ]
    }
  ],
  "tracks": [
    {
      "id": "t1",
      "displayName": "Convoy Lead",
      "type": "ground",
      "x": 10, "y": 20, "vx": 1.5, "vy": 0.5,
      "headingDeg": 90,
      "confidence": 1.0,
      "status": "nominal",
      "health": "green"
    }
  ]
}
```

Track defaults are `confidence` 1.0, `status` "nominal" and `health` "green".

`missionx.scenarios` provides `parse_scenario(data)` for an already decoded
document, `load_scenario(path)` for a file, and `discover_json_files(directory)`,
which lists the visible `*.json` files of a directory sorted by name.

## Library use

```python
from missionx.scenarios import load_scenario
from missionx.rules import evaluate_alerts, validate_scenario
from missionx.report import export_debrief
from missionx.journal import EventJournal

scenario = load_scenario("assets/scenarios/convoy_guard.json")

for problem in validate_scenario(scenario):
    print("validation:", problem)

alerts = evaluate_alerts(scenario)
for alert in alerts:
    print(alert.severity, alert.source, alert.message)

journal = EventJournal()
journal.append("scenario", "Reviewed convoy guard")
export_debrief(scenario, alerts, list(journal), "debrief.md")
```

`render_debrief` in `missionx.report` returns the same Markdown as a string.

### Controller and workbench

`ApplicationController` in `missionx.controller` ties the pieces together:
`open_scenario(path)` loads and validates a scenario, feeds it to the
simulation engine and records what happened in the event journal;
`start()`, `pause()` and `step()` drive the simulation;
`set_playback_rate(rate)` scales track movement per step;
`save_workspace(path)` and `load_workspace(path)` keep preferences; and
`export_debrief(output_path)` writes the report.

`Workbench` in `missionx.app` wraps a controller rooted at a directory and
keeps a `view` with the text each panel shows: summary, track table rows,
inspector lines, alerts, health counts, event log, planner waypoints,
validation messages and bookmarks. `refresh()` recomputes it; `step()`,
`open_scenario(path)` and `apply_settings(follow_selection,
show_threat_rings, playback_rate)` refresh it too. `apply_settings` raises
`ValueError` for a rate outside 0.25..8.0.

The formatting helpers behind these panels live in `missionx.views`
(`track_row`, `track_marker_color`, `health_summary`, `route_summary`,
`planner_rows` and others).

### Alert rules

Each track yields at most one alert, checked in this order:

| Condition                          | Severity   |
|------------------------------------|------------|
| health is `red`                    | `critical` |
| confidence below 0.75              | `warning`  |
| status is `delayed` or `watch`     | `info`     |

### Validation

A scenario is reported when its name is blank, when it has no missions or no
tracks, when a mission title is blank, or when a route has fewer than two
points.

### Simulation

Each step moves every track by its velocity times the playback rate and
lowers its confidence by 0.001, never below 0.55. Alerts are evaluated on
the scenario's initial tracks, not on the simulated copies.
`classify_threat_distance` in `missionx.simulation` grades a distance in
metres as `critical` (under 80), `warning` (under 180) or `low`.

### Workspaces

`save_workspace(path, state)` and `load_workspace(path)` in
`missionx.workspace` keep a `WorkspaceState` in a JSON file: the last
scenario path, overlay profile, playback rate, display toggles and the
window geometry and state as base64 text.

### Other stores

`missionx.stores` holds `example_bookmarks()`, `load_json_object(path)`,
`discover_rule_packs(directory)` and `RecentSessionStore`, a plain-text list
of session paths, one per line (by default
`assets/workspaces/recent_sessions.txt`).

## What it does not do

There is no graphical window and no map drawing: the workbench works out
what each panel would show, as text and colour names, and the command prints
part of it. Rule-pack files can be listed and read as JSON, but the alert
rules are fixed and do not change with them.