# game_session.py
# Game state machine: turn order, capture tallies, game end, undo.
import logging
from enum import Enum
from typing import Dict, List, NamedTuple, Optional

from godojo.goban_model import Board, Point, Rejection, Stone, REJECTION_ERRORS
from godojo.move_resolver import resolve
from godojo.notation import MAX_LABELLED_SIZE, point_to_label
from godojo.settings import DEFAULT_RULES

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


class SessionView(NamedTuple):
    """What the presentation layer needs after each call."""
    board: Board
    to_move: Stone
    captures: Dict[Stone, int]
    stone_counts: Dict[Stone, int]
    status: GameStatus
    winner: Optional[Stone]
    move_number: int
    rejection: Optional[Rejection] = None
    message: Optional[str] = None

    @property
    def is_over(self) -> bool:
        return self.status is GameStatus.FINISHED

    @property
    def is_draw(self) -> bool:
        return self.is_over and self.winner is None


def _label(point, size):
    if size <= MAX_LABELLED_SIZE:
        return point_to_label(point, size)
    return str(tuple(point))


class Session:
    """
    One game. Starts with an empty board and Black to move. Every accepted
    move, pass or resignation pushes a snapshot so undo() can step back.
    A finished game ignores place, pass and resign.
    """

    def __init__(self, size: Optional[int] = None):
        self.size = DEFAULT_RULES['board_size'] if size is None else size
        self.board = Board(self.size)
        self.to_move = Stone.BLACK
        self.captures = {Stone.BLACK: 0, Stone.WHITE: 0}
        self.status = GameStatus.IN_PROGRESS
        self.winner: Optional[Stone] = None
        self.move_number = 0
        self.message: Optional[str] = None
        self._history: List[dict] = []  # stack of states for undo
        self._push_history_snapshot()

    @classmethod
    def from_position(cls, board: Board, to_move: Stone = Stone.BLACK,
                      captures: Optional[Dict[Stone, int]] = None) -> "Session":
        """
        Start from a set-up position (handicap stones, a problem diagram, ...).
        Stones are taken as given, no captures are resolved. A full board
        ends the game straight away.
        """
        session = cls(board.size)
        session.board = board
        session.to_move = to_move
        if captures:
            for stone, count in captures.items():
                if count < 0:
                    raise ValueError(f"Capture count for {stone.name} must not be negative")
                session.captures[stone] = count
        if board.is_full():
            session.message = session._finish_on_full_board()
        session._history = []
        session._push_history_snapshot()
        return session

    @property
    def is_over(self) -> bool:
        return self.status is GameStatus.FINISHED

    # --- history ---
    def _push_history_snapshot(self):
        self._history.append({
            'board': self.board,
            'to_move': self.to_move,
            'captures': dict(self.captures),
            'status': self.status,
            'winner': self.winner,
            'move_number': self.move_number,
        })

    def undo(self) -> "Session":
        """
        Return a new session one step back, the way reset() does; this one
        keeps its board and tallies. A finished game or a session with
        nothing to undo returns itself.
        """
        if self.is_over or len(self._history) <= 1:
            return self
        prior = Session(self.size)
        prior._history = self._history[:-1]
        prev = prior._history[-1]
        prior.board = prev['board']
        prior.to_move = prev['to_move']
        prior.captures = dict(prev['captures'])
        prior.status = prev['status']
        prior.winner = prev['winner']
        prior.move_number = prev['move_number']
        prior.message = f"Move undone. {prior.to_move.title} to play."
        return prior

    def view(self, rejection: Optional[Rejection] = None, message: Optional[str] = None) -> SessionView:
        return SessionView(
            board=self.board,
            to_move=self.to_move,
            captures=dict(self.captures),
            stone_counts={s: self.board.count(s) for s in Stone},
            status=self.status,
            winner=self.winner,
            move_number=self.move_number,
            rejection=rejection,
            message=message if message is not None else self.message,
        )

    # --- transitions ---
    def place(self, row: int, col: int) -> SessionView:
        """Try to place the current player's stone; illegal moves come back as view.rejection."""
        if self.is_over:
            return self.view(message="The game is over.")
        mover = self.to_move
        result = resolve(self.board, (row, col), mover)
        if not result.accepted:
            logger.debug("%s at %s rejected: %s", mover.name, (row, col), result.rejection.name)
            return self.view(rejection=result.rejection, message=result.rejection.value)

        self.board = result.board
        self.captures[mover] += result.captured
        self.move_number += 1
        message = f"{mover.title} played {_label(Point(row, col), self.size)}."
        if result.captured:
            message = f"{message[:-1]}, capturing {result.captured} stone(s)."
        # a legal placement always leaves an empty point; the check mirrors from_position
        if self.board.is_full():
            message = self._finish_on_full_board()
        else:
            self.to_move = mover.opponent
        self.message = message
        self._push_history_snapshot()
        return self.view()

    def play(self, row: int, col: int) -> SessionView:
        """Like place() but raises the matching IllegalMove subclass on rejection."""
        view = self.place(row, col)
        if view.rejection is not None:
            raise REJECTION_ERRORS[view.rejection]()
        return view

    def _finish_on_full_board(self) -> str:
        # captures plus stones on the board; territory is not counted
        totals = {s: self.captures[s] + self.board.count(s) for s in Stone}
        self.status = GameStatus.FINISHED
        if totals[Stone.BLACK] > totals[Stone.WHITE]:
            self.winner = Stone.BLACK
        elif totals[Stone.WHITE] > totals[Stone.BLACK]:
            self.winner = Stone.WHITE
        else:
            self.winner = None
        logger.info("board full, totals B=%d W=%d, winner %s",
                    totals[Stone.BLACK], totals[Stone.WHITE],
                    self.winner.name if self.winner else "none (draw)")
        if self.winner is None:
            return "Game over! Draw."
        return f"Game over! {self.winner.title} wins!"

    def pass_turn(self) -> SessionView:
        # passing never ends the game, not even twice in a row
        if self.is_over:
            return self.view(message="The game is over.")
        passer = self.to_move
        self.to_move = passer.opponent
        self.move_number += 1
        self.message = f"{passer.title} passed their turn."
        self._push_history_snapshot()
        return self.view()

    def resign(self) -> SessionView:
        if self.is_over:
            return self.view(message="The game is over.")
        resignee = self.to_move
        self.status = GameStatus.FINISHED
        self.winner = resignee.opponent
        self.move_number += 1
        self.message = f"{resignee.title} resigned. {self.winner.title} wins!"
        logger.info("%s resigned after %d moves", resignee.name, self.move_number - 1)
        self._push_history_snapshot()
        return self.view()

    def reset(self) -> "Session":
        """Return a brand-new session of the same size; this one is left as it was."""
        fresh = Session(self.size)
        fresh.message = "The board has been reset. Black to play."
        logger.info("session reset (size %d)", self.size)
        return fresh

    def __repr__(self):
        return (f"<Session size={self.size} to_move={self.to_move.name} "
                f"status={self.status.name} move_number={self.move_number}>")


# --- functional interface for the presentation layer ---
def new_session(size: Optional[int] = None) -> Session:
    return Session(size)


def place(session: Session, row: int, col: int) -> SessionView:
    return session.place(row, col)


def pass_turn(session: Session) -> SessionView:
    return session.pass_turn()


def resign(session: Session) -> SessionView:
    return session.resign()


def reset(session: Session) -> Session:
    return session.reset()
