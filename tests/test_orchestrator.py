from __future__ import annotations

from cube_core.config import Config
from cube_core.orchestrator import (
    CUBE_COMPLETED,
    CUBE_RESET,
    CUBE_SCRAMBLED,
    MOVE_EXECUTED,
    MOVE_UNDONE,
    SOLUTION_FINISHED,
    SOLUTION_READY,
    SOLUTION_STEP,
    SOLUTION_STOPPED,
    CubeSession,
)
from cube_core.scramble import ScrambleGenerator


def _session_with_log(seed: int = 10):
    session = CubeSession(config=Config(seed=seed))
    events = []
    session.subscribe(events.append)
    return session, events


def test_scramble_resets_history_and_counters():
    session, events = _session_with_log()
    session.execute_move("R")
    event = session.scramble(difficulty="easy")

    assert event.kind == CUBE_SCRAMBLED
    assert len(event.payload["scramble"]) == 12
    assert session.is_scrambled
    assert session.move_count == 0
    assert session.cube.get_move_history() == []
    assert events[-1] is event


def test_practice_scramble_kind():
    session, _ = _session_with_log()
    event = session.scramble(kind="pll-practice")
    assert {m[0] for m in event.payload["scramble"]} <= {"R", "L", "U"}
    assert event.payload["kind"] == "pll-practice"


def test_moves_and_undo_emit_events():
    session, events = _session_with_log()
    assert session.execute_move("x") is None
    assert session.undo() is None
    assert events == []

    moved = session.execute_move("f'")
    assert moved.kind == MOVE_EXECUTED
    assert moved.move == "F'"
    assert moved.move_count == 1

    undone = session.undo()
    assert undone.kind == MOVE_UNDONE
    assert undone.move == "F'"
    assert undone.payload["reverse"] == "F"
    assert undone.move_count == 0
    assert undone.completed
    assert [e.kind for e in events] == [MOVE_EXECUTED, MOVE_UNDONE]


def test_reversing_a_scramble_completes_the_cube():
    session, events = _session_with_log(seed=3)
    session.scramble(length=8, difficulty="medium")
    for move in ScrambleGenerator.generate_reverse_scramble(session.current_scramble):
        session.execute_move(move)

    assert session.cube.is_completed
    assert events[-1].kind == CUBE_COMPLETED
    assert not session.is_scrambled
    assert session.move_count == 8


def test_completion_event_needs_a_scramble():
    session, events = _session_with_log()
    session.execute_move("R")
    session.execute_move("R'")
    assert CUBE_COMPLETED not in [e.kind for e in events]


def test_reset_event():
    session, events = _session_with_log()
    session.scramble()
    event = session.reset()
    assert event.kind == CUBE_RESET
    assert event.completed
    assert not session.is_scrambled
    assert session.current_scramble == []


def test_failing_listener_does_not_break_the_session(caplog):
    session, events = _session_with_log()

    def broken(event):
        raise RuntimeError("listener bug")

    session.subscribe(broken)
    with caplog.at_level("ERROR"):
        assert session.execute_move("U") is not None
    assert "listener failed" in caplog.text
    assert events[-1].kind == MOVE_EXECUTED

    session.unsubscribe(broken)
    session.unsubscribe(broken)
    session.execute_move("U")
    assert len(events) == 2


def test_no_solution_for_a_complete_cube():
    session, events = _session_with_log()
    assert session.request_solution() is None
    assert session.step_solution() is None
    assert session.play_solution() is None
    assert events == []


def test_solution_playback_step_by_step():
    session, events = _session_with_log(seed=4)
    session.scramble(difficulty="hard")
    ready = session.request_solution()
    assert ready.kind == SOLUTION_READY
    total = len(ready.payload["moves"])

    if total:
        step = session.step_solution()
        assert step.kind == SOLUTION_STEP
        assert step.payload == {"step": 1, "total": total}
        done, remaining = session.solution_progress()
        assert done == ready.payload["moves"][:1]
        assert remaining == ready.payload["moves"][1:]

        stopped = session.stop_solution()
        assert stopped.kind == SOLUTION_STOPPED
        assert session.stop_solution() is None

    finished = session.play_solution()
    assert finished.kind == SOLUTION_FINISHED
    assert finished.payload["solved"] == session.cube.is_completed
    assert finished.payload["outcome"] == ready.payload["outcome"]
    assert session.cube.get_move_history() == ready.payload["moves"]
    assert session.solution_progress() == ([], [])


def test_play_solution_requests_one_when_needed():
    session, _ = _session_with_log(seed=6)
    session.scramble()
    finished = session.play_solution()
    assert finished.kind == SOLUTION_FINISHED
    assert session.playback is None


def test_game_state_snapshot():
    session, _ = _session_with_log()
    session.scramble(length=5)
    session.execute_move("B2")
    state = session.get_game_state()
    assert state["move_count"] == 1
    assert state["is_scrambled"] is True
    assert len(state["current_scramble"]) == 5
    assert state["move_history"] == ["B2"]
    assert set(state["facelets"]) == {"U", "D", "R", "L", "F", "B"}
    assert state["solution"]["showing"] is False

    original = state["facelets"]["U"][0]
    state["facelets"]["U"][0] = "purple"
    assert session.cube.sticker("U", 0) == original


def test_sessions_with_the_same_seed_scramble_alike(config):
    first = CubeSession(config=config).scramble()
    second = CubeSession(config=config).scramble()
    assert first.payload["scramble"] == second.payload["scramble"]


def test_scramble_payload_carries_difficulty_and_kind():
    session, events = _session_with_log(seed=1)
    event = session.scramble(difficulty="hard")
    assert event.kind == CUBE_SCRAMBLED
    assert event.payload["difficulty"] == "hard"
    assert event.payload["kind"] is None
    assert len(event.payload["scramble"]) == 25
    assert [e.kind for e in events] == [CUBE_SCRAMBLED]


def test_undo_is_blocked_while_a_solution_plays():
    session, events = _session_with_log(seed=2)
    session.apply_scramble(["R", "U"])
    ready = session.request_solution()
    assert len(ready.payload["moves"]) >= 2

    session.step_solution()
    session.step_solution()
    history = session.cube.get_move_history()
    assert session.undo() is None
    assert session.cube.get_move_history() == history
    assert session.solution_progress()[0] == history

    session.stop_solution()
    undone = session.undo()
    assert undone.kind == MOVE_UNDONE
    assert session.playback is None
    assert session.solution_progress() == ([], [])
