# goban_model.py
# Board snapshots, stones, points and the group/liberty scan.
import logging
from collections import deque, namedtuple
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple

logger = logging.getLogger(__name__)


class Stone(Enum):
    BLACK = 'B'
    WHITE = 'W'

    @property
    def opponent(self) -> "Stone":
        return Stone.WHITE if self is Stone.BLACK else Stone.BLACK

    @property
    def title(self) -> str:
        return self.name.capitalize()


class Rejection(Enum):
    """Why a placement was refused. The value is the user facing description."""
    OCCUPIED_CELL = "Point is already occupied"
    OUT_OF_BOUNDS = "Point is off the board"
    SUICIDE = "Move would be suicide"


# Exceptions
class IllegalMove(Exception):
    rejection: Optional[Rejection] = None

    def __init__(self, message=None):
        if message is None and self.rejection is not None:
            message = self.rejection.value
        super().__init__(message)


class OccupiedPoint(IllegalMove):
    rejection = Rejection.OCCUPIED_CELL


class OutOfBounds(IllegalMove):
    rejection = Rejection.OUT_OF_BOUNDS


class Suicide(IllegalMove):
    rejection = Rejection.SUICIDE


REJECTION_ERRORS = {
    Rejection.OCCUPIED_CELL: OccupiedPoint,
    Rejection.OUT_OF_BOUNDS: OutOfBounds,
    Rejection.SUICIDE: Suicide,
}

Point = namedtuple('Point', ['row', 'col'])

_TEXT_CELLS = {'.': None, 'B': Stone.BLACK, 'W': Stone.WHITE}


class Board:
    """
    Immutable N x N snapshot. Cells live in a flat tuple indexed row*size+col,
    each holding a Stone or None. Every change produces a new Board.
    """
    __slots__ = ("size", "_cells")

    def __init__(self, size: int = 19, cells: Optional[Iterable[Optional[Stone]]] = None):
        if not isinstance(size, int) or size < 1:
            raise ValueError(f"Board size must be a positive integer, got {size!r}")
        self.size = size
        if cells is None:
            self._cells: Tuple[Optional[Stone], ...] = (None,) * (size * size)
        else:
            self._cells = tuple(cells)
            if len(self._cells) != size * size:
                raise ValueError(f"Expected {size * size} cells, got {len(self._cells)}")

    # --- helpers ---
    def in_bounds(self, r, c) -> bool:
        return 0 <= r < self.size and 0 <= c < self.size

    def index(self, point) -> int:
        r, c = point
        if not self.in_bounds(r, c):
            raise OutOfBounds(f"Point {tuple(point)} is off a {self.size}x{self.size} board")
        return r * self.size + c

    def get(self, point) -> Optional[Stone]:
        return self._cells[self.index(point)]

    def neighbors(self, point) -> Iterator[Point]:
        r, c = point
        for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nr, nc = r + dr, c + dc
            if 0 <= nr < self.size and 0 <= nc < self.size:
                yield Point(nr, nc)

    def points(self) -> Iterator[Point]:
        for r in range(self.size):
            for c in range(self.size):
                yield Point(r, c)

    def empty_points(self) -> List[Point]:
        return [p for p in self.points() if self.get(p) is None]

    def count(self, stone: Stone) -> int:
        return self._cells.count(stone)

    def is_full(self) -> bool:
        return None not in self._cells

    # --- copy-on-write updates ---
    def with_stones(self, changes: Dict[Tuple[int, int], Optional[Stone]]) -> "Board":
        """Return a new board with the given points set (None clears a point)."""
        cells = list(self._cells)
        for point, stone in changes.items():
            cells[self.index(point)] = stone
        return Board(self.size, cells)

    def place(self, point, stone: Stone) -> "Board":
        return self.with_stones({point: stone})

    def remove(self, points: Iterable[Tuple[int, int]]) -> "Board":
        return self.with_stones({p: None for p in points})

    # --- text format: rows of B / W / . ---
    def to_text(self) -> str:
        rows = []
        for r in range(self.size):
            row = self._cells[r * self.size:(r + 1) * self.size]
            rows.append(''.join('.' if x is None else x.value for x in row))
        return '\n'.join(rows)

    @classmethod
    def from_text(cls, text: str) -> "Board":
        rows = [line.strip() for line in text.strip().splitlines() if line.strip()]
        size = len(rows)
        if size == 0:
            raise ValueError("Board text is empty")
        cells = []
        for r, line in enumerate(rows):
            if len(line) != size:
                raise ValueError(f"Row {r} has {len(line)} cells, expected {size}")
            for ch in line:
                if ch not in _TEXT_CELLS:
                    raise ValueError(f"Unexpected board character {ch!r} in row {r}")
                cells.append(_TEXT_CELLS[ch])
        return cls(size, cells)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self._cells == other._cells

    def __hash__(self):
        return hash((self.size, self._cells))

    def __repr__(self):
        return f"<Board size={self.size} black={self.count(Stone.BLACK)} white={self.count(Stone.WHITE)}>"


def find_group(board: Board, start) -> Tuple[Set[Point], Set[Point]]:
    """
    Return (stones, liberties) for the group containing start.
    An empty or off-board start yields two empty sets.
    """
    if not board.in_bounds(*start):
        return set(), set()
    color = board.get(start)
    if color is None:
        return set(), set()
    size = board.size
    visited = [False] * (size * size)
    stones: Set[Point] = set()
    liberties: Set[Point] = set()
    start = Point(*start)
    visited[start.row * size + start.col] = True
    queue = deque([start])
    while queue:
        p = queue.popleft()
        stones.add(p)
        for n in board.neighbors(p):
            i = n.row * size + n.col
            if visited[i]:
                continue
            occupant = board.get(n)
            if occupant is None:
                liberties.add(n)
            elif occupant is color:
                visited[i] = True
                queue.append(n)
    return stones, liberties
