# tests/test_suicide_and_merge.py
import pytest
from godojo.goban_model import Board, Rejection, Stone, Suicide, find_group
from godojo.game_session import Session
from godojo.move_resolver import resolve


def test_simple_suicide_forbidden():
    s = Session(size=3)
    # surround corner (0,0) so that W cannot play there
    s.play(0, 1)
    s.play(2, 2)
    s.play(1, 0)
    with pytest.raises(Suicide):
        s.play(0, 0)
    assert s.to_move is Stone.WHITE
    assert s.board.get((0, 0)) is None


def test_surrounded_point_rejected_and_board_unchanged():
    b = Board(19).with_stones({
        (4, 5): Stone.WHITE, (6, 5): Stone.WHITE,
        (5, 4): Stone.WHITE, (5, 6): Stone.WHITE,
    })
    result = resolve(b, (5, 5), Stone.BLACK)
    assert result.rejection is Rejection.SUICIDE
    assert not result.accepted
    assert result.board is b
    assert result.captured == 0
    with pytest.raises(Suicide):
        result.raise_for_rejection()


def test_session_reports_suicide_as_value():
    board = Board(19).with_stones({
        (4, 5): Stone.WHITE, (6, 5): Stone.WHITE,
        (5, 4): Stone.WHITE, (5, 6): Stone.WHITE,
    })
    s = Session.from_position(board)
    view = s.place(5, 5)
    assert view.rejection is Rejection.SUICIDE
    assert view.message == Rejection.SUICIDE.value
    assert view.board == board
    assert view.to_move is Stone.BLACK
    assert view.move_number == 0


def test_filling_own_last_liberty_is_suicide():
    b = Board.from_text("""
        .BW..
        BW...
        W....
        .....
        .....
    """)
    result = resolve(b, (0, 0), Stone.BLACK)
    assert result.rejection is Rejection.SUICIDE
    assert result.board is b


def test_capture_overrides_suicide():
    # (0,0) has no liberty of its own but takes the white stone at (0,1)
    b = Board.from_text("""
        .WB
        WBB
        .BB
    """)
    result = resolve(b, (0, 0), Stone.BLACK)
    assert result.accepted
    assert result.captured == 1
    assert result.board.get((0, 0)) is Stone.BLACK
    assert result.board.get((1, 0)) is Stone.WHITE
    _, libs = find_group(result.board, (0, 0))
    assert libs == {(0, 1)}


def test_merge_prevents_suicide():
    s = Session(size=5)
    # two white stones get connected by a move that still has liberties
    s.play(0, 1)
    s.play(1, 0)
    s.play(2, 2)
    s.play(1, 2)
    s.pass_turn()
    s.play(1, 1)
    assert s.board.get((1, 1)) is Stone.WHITE
