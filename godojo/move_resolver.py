# move_resolver.py
# One placement: put the stone down, take off dead opponent groups, then check suicide.
import logging
from typing import NamedTuple, Optional, Set

from godojo.goban_model import (
    Board, Point, Rejection, Stone, REJECTION_ERRORS, find_group,
)

logger = logging.getLogger(__name__)


class Resolution(NamedTuple):
    """
    Outcome of resolve(). On rejection board is the untouched input board
    and captured is 0.
    """
    board: Board
    captured: int = 0
    rejection: Optional[Rejection] = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None

    def raise_for_rejection(self):
        if self.rejection is not None:
            raise REJECTION_ERRORS[self.rejection]()


def resolve(board: Board, point, mover: Stone) -> Resolution:
    """Pure function of its inputs: the given board is never modified."""
    r, c = point
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in (r, c)):
        return Resolution(board, 0, Rejection.OUT_OF_BOUNDS)
    if not board.in_bounds(r, c):
        return Resolution(board, 0, Rejection.OUT_OF_BOUNDS)
    point = Point(r, c)
    if board.get(point) is not None:
        return Resolution(board, 0, Rejection.OCCUPIED_CELL)

    tentative = board.place(point, mover)

    # capture scan; a group touching the point on several sides is taken once
    enemy = mover.opponent
    dead: Set[Point] = set()
    for n in tentative.neighbors(point):
        if tentative.get(n) is not enemy or n in dead:
            continue
        stones, libs = find_group(tentative, n)
        if not libs:
            logger.debug("capturing %d %s stone(s) next to %s", len(stones), enemy.name, n)
            dead |= stones
    if dead:
        tentative = tentative.remove(dead)

    _, own_libs = find_group(tentative, point)
    if not own_libs and not dead:
        return Resolution(board, 0, Rejection.SUICIDE)

    return Resolution(tentative, len(dead))
