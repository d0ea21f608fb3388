import pytest

from missionx.domain import Point, Scenario, TrackState
from missionx.journal import EventJournal
from missionx.simulation import SimulationEngine, TimelineScheduler, classify_threat_distance


def _scenario():
    return Scenario(
        name="Alpha",
        initial_tracks=[
            TrackState(id="t1", position=Point(1.0, 2.0), velocity=Point(3.0, -4.0), confidence=1.0),
            TrackState(id="t2", position=Point(0.0, 0.0), velocity=Point(0.5, 0.5), confidence=0.55),
        ],
    )


@pytest.mark.parametrize(
    "distance, expected",
    [(0.0, "critical"), (79.9, "critical"), (80.0, "warning"), (179.9, "warning"), (180.0, "low")],
)
def test_classify_threat_distance(distance, expected):
    assert classify_threat_distance(distance) == expected


def test_scheduler_default_rate():
    assert TimelineScheduler().rate == 1.0


def test_step_without_scenario_does_nothing():
    journal = EventJournal()
    engine = SimulationEngine(journal)
    engine.step()
    assert len(journal) == 0
    assert engine.tick == 0


def test_load_scenario_logs_and_resets():
    journal = EventJournal()
    engine = SimulationEngine(journal)
    engine.start()
    scenario = _scenario()
    engine.load_scenario(scenario)
    assert not engine.is_running
    assert engine.tick == 0
    last = journal.entries[-1]
    assert last.category == "scenario"
    assert last.message == f"Loaded scenario '{scenario.name}'"
    assert engine.tracks == scenario.initial_tracks


def test_start_and_pause():
    journal = EventJournal()
    engine = SimulationEngine(journal)
    engine.start()
    assert engine.is_running
    engine.pause()
    assert not engine.is_running
    assert [e.message for e in journal] == ["Playback started", "Playback paused"]


def test_step_moves_tracks_by_scaled_velocity():
    journal = EventJournal()
    engine = SimulationEngine(journal)
    scenario = _scenario()
    engine.load_scenario(scenario)
    engine.scheduler.rate = 2.0
    before = [t.position for t in engine.tracks]
    engine.step()
    for start, track in zip(before, engine.tracks):
        assert track.position == start + track.velocity.scaled(2.0)


def test_step_does_not_touch_initial_tracks():
    engine = SimulationEngine(EventJournal())
    scenario = _scenario()
    engine.load_scenario(scenario)
    engine.step()
    assert scenario.initial_tracks[0].position == Point(1.0, 2.0)
    assert scenario.initial_tracks[0].confidence == 1.0


def test_confidence_decays_with_floor():
    engine = SimulationEngine(EventJournal())
    engine.load_scenario(_scenario())
    engine.step()
    assert engine.tracks[0].confidence == pytest.approx(1.0 - 0.001)
    assert engine.tracks[1].confidence == 0.55


def test_step_logs_tick_number():
    journal = EventJournal()
    engine = SimulationEngine(journal)
    engine.load_scenario(_scenario())
    engine.step()
    engine.step()
    assert engine.tick == 2
    assert journal.entries[-1].category == "tick"
    assert journal.entries[-1].message == "Advanced simulation to tick 2"