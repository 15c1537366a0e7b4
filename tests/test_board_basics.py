# tests/test_board_basics.py
import pytest
from godojo.goban_model import Board, OccupiedPoint, OutOfBounds, Point, Stone
from godojo.game_session import Session


def test_play_on_empty():
    s = Session(size=19)
    view = s.play(0, 0)
    assert view.board.get((0, 0)) is Stone.BLACK
    assert view.board.count(Stone.BLACK) == 1
    assert view.board.count(Stone.WHITE) == 0
    assert view.to_move is Stone.WHITE
    assert view.move_number == 1


def test_play_on_occupied_raises():
    s = Session(size=5)
    s.play(0, 0)
    with pytest.raises(OccupiedPoint):
        s.play(0, 0)


def test_board_is_never_mutated():
    b = Board(5)
    b2 = b.place((2, 2), Stone.BLACK)
    assert b.get((2, 2)) is None
    assert b2.get((2, 2)) is Stone.BLACK
    b3 = b2.remove([(2, 2)])
    assert b3 == b
    assert b2.get((2, 2)) is Stone.BLACK


def test_get_off_board_raises():
    b = Board(3)
    with pytest.raises(OutOfBounds):
        b.get((3, 0))
    with pytest.raises(OutOfBounds):
        b.get((0, -1))


def test_invalid_size():
    with pytest.raises(ValueError):
        Board(0)
    with pytest.raises(ValueError):
        Board(3, cells=[None] * 8)


def test_neighbors_on_edge_and_corner():
    b = Board(3)
    assert set(b.neighbors((0, 0))) == {Point(1, 0), Point(0, 1)}
    assert len(list(b.neighbors((1, 1)))) == 4
    assert len(list(b.neighbors((0, 1)))) == 3


def test_text_format():
    b = Board.from_text("""
        B..
        .W.
        ..B
    """)
    assert b.size == 3
    assert b.get((0, 0)) is Stone.BLACK
    assert b.get((1, 1)) is Stone.WHITE
    assert b.to_text() == "B..\n.W.\n..B"
    assert b.empty_points()[0] == Point(0, 1)
    assert len(b.empty_points()) == 6
    assert not b.is_full()


def test_text_format_rejects_garbage():
    with pytest.raises(ValueError):
        Board.from_text("B.\n.X")
    with pytest.raises(ValueError):
        Board.from_text("B..\n..")
    with pytest.raises(ValueError):
        Board.from_text("")


def test_single_point_board():
    b = Board(1)
    assert list(b.neighbors((0, 0))) == []
    assert b.empty_points() == [Point(0, 0)]
