import numpy as np
import pytest

from inkreplay.drawing.vector import Vector2
from inkreplay.render.board import Board, parse_color
from inkreplay.render.canvas_path import CanvasPath


@pytest.mark.parametrize("value, expected", [
    ("#ff8800", (0, 136, 255)),
    ("00ff00", (0, 255, 0)),
    ("#fff", (255, 255, 255)),
    ([10, 20, 30], (30, 20, 10)),
])
def test_parse_color(value, expected):
    assert parse_color(value) == expected


@pytest.mark.parametrize("value", ["#12345", "#gggggg", [1, 2], [0, 0, 300], None])
def test_parse_color_rejects_garbage(value):
    with pytest.raises(ValueError):
        parse_color(value)


def test_segment_is_filled_between_edges():
    canvas = np.full((50, 50, 3), 255, dtype=np.uint8)
    path = CanvasPath(canvas, (0, 0, 0))

    path.start_path(Vector2(10, 25), 3)
    path.init_path(Vector2(10, 20), Vector2(10, 30))
    path.extend_path(Vector2(40, 20), Vector2(40, 30))

    # nothing is rendered before draw()
    assert (canvas[25, 25] == 255).all()

    path.draw()

    assert (canvas[25, 25] == 0).all()
    assert (canvas[25, 40] == 0).all()
    assert (canvas[5, 5] == 255).all()
    assert (canvas[45, 25] == 255).all()
    assert path.pending == []


def test_start_path_leaves_a_dot():
    canvas = np.full((20, 20, 3), 255, dtype=np.uint8)
    path = CanvasPath(canvas, (255, 0, 0))

    path.start_path(Vector2(10, 10), 4)

    assert tuple(canvas[10, 10]) == (255, 0, 0)
    assert (canvas[0, 0] == 255).all()


def test_board_paths_use_the_current_color():
    board = Board(30, 20)
    first = board.create_path()
    board.set_color("#0000ff")
    second = board.create_path()

    assert board.canvas.shape == (20, 30, 3)
    assert first.color == (0, 0, 0)
    assert second.color == (255, 0, 0)
    assert second.canvas is board.canvas


def test_board_collects_and_clears():
    board = Board(10, 10)
    path = board.create_path()
    path.start_path(Vector2(5, 5), 3)
    board.collect(path)

    snapshot = board.snapshot()
    assert board.paths == [path]
    assert (snapshot[5, 5] == 0).all()

    board.clear()
    assert board.paths == []
    assert (board.canvas == 255).all()
    assert (snapshot[5, 5] == 0).all()


def test_board_rejects_empty_canvas():
    with pytest.raises(ValueError):
        Board(0, 10)
