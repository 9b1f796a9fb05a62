import pytest

from inkreplay.playback.replay import create_replay
from inkreplay.playback.trace_utils import (
    BRUSH_SIZE_CHANGE, COLOR_CHANGE, CURSOR_MOVEMENT, close_trace, validate_trace
)


def stroke(y, start_time, pressure=1.0):
    times = [start_time + 50 * i for i in range(4)]
    xs = [5, 20, 35, 50]
    events = [{"time": t, "x": x, "y": y, "pressure": pressure} for t, x in zip(times, xs)]
    events.append({"time": times[-1] + 50, "x": 50, "y": y, "pressure": 0})
    return events


@pytest.fixture
def two_strokes():
    raw = stroke(15, 0) + [
        {"type": BRUSH_SIZE_CHANGE, "time": 400, "size": 10},
        {"type": COLOR_CHANGE, "time": 400, "color": "#ff0000"},
    ] + stroke(35, 500)
    events, _ = validate_trace(raw)
    return close_trace(events)


def test_replay_draws_every_stroke(two_strokes):
    session = create_replay(two_strokes, 64, 48, fps=30)

    frames = list(session.frames())

    assert session.finished
    assert len(frames) >= session.estimated_frames()
    assert len(session.board.paths) == 2
    final = frames[-1]
    assert (final[15, 25] < 128).all()
    assert (final[0, 0] == 255).all()


def test_trace_events_change_brush_and_color(two_strokes):
    session = create_replay(two_strokes, 64, 48, fps=30)
    list(session.frames())

    first, second = session.board.paths
    assert first.color == (0, 0, 0)
    assert second.color == (0, 0, 255)
    assert session.simulator.brush_size == 10
    # the red stroke crosses the lower half of the board
    assert tuple(session.board.canvas[35, 30]) != (255, 255, 255)


def test_hold_adds_frames_after_the_drawing(two_strokes):
    plain = list(create_replay(two_strokes, 64, 48, fps=30).frames())
    held = list(create_replay(two_strokes, 64, 48, fps=30).frames(hold_seconds=1.0))

    assert len(held) == len(plain) + 30
    assert (held[-1] == plain[-1]).all()


def test_converge_mode_replay(two_strokes):
    session = create_replay(two_strokes, 64, 48, fps=30, slow_simulation=False)

    list(session.frames())

    assert len(session.board.paths) == 2


def test_pause_freezes_and_resume_continues(two_strokes):
    session = create_replay(two_strokes, 64, 48, fps=30)
    for _ in range(4):
        session.step()
    clock = session.now
    open_path = session.simulator.path

    session.pause()
    assert list(session.frames()) == []
    session.step()
    assert session.now == clock
    assert session.simulator.path is open_path

    session.resume()
    list(session.frames())
    assert session.finished
    assert session.board.paths[0] is open_path


def test_empty_trace_only_holds():
    session = create_replay([], 16, 16, fps=10)

    frames = list(session.frames(hold_seconds=0.5))

    assert len(frames) == 5
    assert session.board.paths == []


def test_invalid_fps_is_rejected():
    with pytest.raises(ValueError):
        create_replay([], 16, 16, fps=0)


@pytest.mark.parametrize("brush_size", [20, 30])
def test_large_brushes_stay_on_the_trace(brush_size, capsys):
    xs = range(40, 201, 20)
    raw = [{"time": 50 * i, "x": x, "y": 80, "pressure": 1.0} for i, x in enumerate(xs)]
    raw.append({"time": 50 * len(xs), "x": 200, "y": 80, "pressure": 0})
    events, _ = validate_trace(raw)
    session = create_replay(events, 240, 160, brush_size=brush_size, slow_simulation=True, fps=30)

    positions = []
    while not session.finished:
        session.step()
        if session.simulator.tip.is_active:
            positions.append(session.simulator.tip.position)

    assert positions
    assert all(40 - brush_size <= p.x <= 200 + brush_size for p in positions)
    assert all(abs(p.y - 80) <= brush_size for p in positions)
    assert len(session.board.paths) == 1

    canvas = session.board.canvas
    assert (canvas[:80 - brush_size] == 255).all()
    assert (canvas[80 + brush_size:] == 255).all()
    assert (canvas[80, 120] < 128).all()
    assert "Simulation tick failed" not in capsys.readouterr().err


def test_bad_style_events_do_not_stop_the_replay(capsys):
    events = stroke(20, 0) + [
        {"type": BRUSH_SIZE_CHANGE, "time": 300, "size": -4},
        {"type": COLOR_CHANGE, "time": 300, "color": "not a color"},
    ]
    events = [dict(event, type=event.get("type", CURSOR_MOVEMENT)) for event in events]
    session = create_replay(events, 64, 48, fps=30)
    session.simulator.strict = False

    list(session.frames())

    assert session.finished
    assert len(session.board.paths) == 1
    assert session.simulator.brush_size != -4
    assert session.board.color == (0, 0, 0)
    err = capsys.readouterr().err
    assert "Brush size change skipped" in err
    assert "Color change skipped" in err
