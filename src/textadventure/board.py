from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from .errors import BoardError, InvalidPositionError

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Cardinal directions, valued by their command letter."""

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def from_letter(cls, letter: str) -> Optional["Direction"]:
        """Return the direction for an uppercase command letter, or None."""
        for direction in cls:
            if direction.value == letter:
                return direction
        return None

    @classmethod
    def from_delta(cls, dx: int, dy: int) -> Optional["Direction"]:
        """Return the direction a unit step points in; None for anything else."""
        for direction, delta in DIRECTION_DELTAS.items():
            if delta == (dx, dy):
                return direction
        return None


# North increases the second axis.
DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.NORTH: (0, 1),
    Direction.SOUTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}

_OPPOSITES: Dict[Direction, Direction] = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


@dataclass(frozen=True)
class Position:
    """A cell coordinate. Build checked instances with ``Position.at``."""

    x: int
    y: int

    @classmethod
    def at(cls, x: int, y: int, board: "Board") -> "Position":
        if not board.is_within(x, y):
            raise InvalidPositionError(
                f"Coordinates out of bounds: ({x}, {y}) for board {board.width}x{board.height}"
            )
        return cls(x, y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Board:
    """A bounded grid of rooms joined by openings in their walls.

    Every wall starts closed. Openings are kept symmetric: opening the north
    wall of a room also opens the south wall of the room above it. A wall on
    the edge of the board can never be opened.

    The board also carries the word configuration consulted by the item
    catalog and the teleport rules: the magic and fake words in play, the
    word that opens the teleport, and where the teleport leads.
    """

    __slots__ = ("_w", "_h", "_openings", "magic_words", "fake_words", "magic_word", "teleport_target")

    def __init__(
        self,
        width: int,
        height: int,
        *,
        magic_words: Iterable[str] = (),
        fake_words: Iterable[str] = (),
        magic_word: Optional[str] = None,
        teleport_target: Optional[Tuple[int, int]] = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise BoardError("Board dimensions must be positive")
        self._w = int(width)
        self._h = int(height)
        self._openings: Dict[Tuple[int, int], Set[Direction]] = {
            (x, y): set() for y in range(self._h) for x in range(self._w)
        }
        self.magic_words: Tuple[str, ...] = tuple(magic_words)
        self.fake_words: Tuple[str, ...] = tuple(fake_words)
        self.magic_word = magic_word
        self.teleport_target: Optional[Position] = None
        if teleport_target is not None:
            self.teleport_target = Position.at(teleport_target[0], teleport_target[1], self)
        logger.debug("Initialized Board %dx%d", self._w, self._h)

    @classmethod
    def open_grid(cls, width: int, height: int, **kwargs) -> "Board":
        """Create a board with every interior wall open."""
        board = cls(width, height, **kwargs)
        for y in range(board.height):
            for x in range(board.width):
                pos = Position(x, y)
                if x + 1 < board.width:
                    board.open_wall(pos, Direction.EAST)
                if y + 1 < board.height:
                    board.open_wall(pos, Direction.NORTH)
        return board

    @property
    def width(self) -> int:
        return self._w

    @property
    def height(self) -> int:
        return self._h

    def is_within(self, x: int, y: int) -> bool:
        """Check if coordinates are within the board bounds. Never raises."""
        return 0 <= x < self._w and 0 <= y < self._h

    def cells(self) -> List[Position]:
        """All positions on the board, row by row from the south-west corner."""
        return [Position(x, y) for y in range(self._h) for x in range(self._w)]

    def openings_at(self, pos: Position) -> FrozenSet[Direction]:
        return frozenset(self._openings.get((pos.x, pos.y), ()))

    def is_opening(self, pos: Position, direction: Direction) -> bool:
        return direction in self._openings.get((pos.x, pos.y), ())

    def open_wall(self, pos: Position, direction: Direction) -> None:
        """Open the wall between ``pos`` and its neighbour in ``direction``."""
        neighbour = self._neighbour(pos, direction)
        self._openings[(pos.x, pos.y)].add(direction)
        self._openings[(neighbour.x, neighbour.y)].add(direction.opposite)

    def close_wall(self, pos: Position, direction: Direction) -> None:
        """Close the wall between ``pos`` and its neighbour in ``direction``."""
        neighbour = self._neighbour(pos, direction)
        self._openings[(pos.x, pos.y)].discard(direction)
        self._openings[(neighbour.x, neighbour.y)].discard(direction.opposite)

    def validate(self) -> None:
        """Raise BoardError if some room has no way out.

        Random walkers rely on at least one open wall in every room they can
        reach. A single-room board is exempt since nobody can move on it.
        """
        if self._w * self._h == 1:
            return
        sealed = [Position(x, y) for (x, y), dirs in sorted(self._openings.items()) if not dirs]
        if sealed:
            rooms = ", ".join(str(p) for p in sealed)
            raise BoardError(f"Rooms without any opening: {rooms}")

    def _neighbour(self, pos: Position, direction: Direction) -> Position:
        if not self.is_within(pos.x, pos.y):
            raise InvalidPositionError(f"Room {pos} is not on the board")
        dx, dy = DIRECTION_DELTAS[direction]
        nx, ny = pos.x + dx, pos.y + dy
        if not self.is_within(nx, ny):
            raise BoardError(f"The {direction.label} wall of {pos} is on the edge of the board")
        return Position(nx, ny)

    def __repr__(self) -> str:
        return f"Board(width={self._w}, height={self._h})"


def is_opening(room: Position, wall: Direction, board: Board) -> bool:
    """Return True if ``room`` has a traversable opening in ``wall``."""
    return board.is_opening(room, wall)


def move_in_bounds(pos: Position, dx: int, dy: int, board: Board) -> bool:
    """Return True if a single cardinal step by (dx, dy) from ``pos`` is legal.

    Legal means the destination is on the board and the wall crossed has an
    opening. Diagonal, zero and multi-cell steps are never legal.
    """
    direction = Direction.from_delta(dx, dy)
    if direction is None:
        return False
    if not board.is_within(pos.x + dx, pos.y + dy):
        return False
    return board.is_opening(pos, direction)


def move_pos(pos: Position, dx: int, dy: int, board: Board) -> Position:
    """Return the position one legal step away; raises if the step is illegal."""
    if not move_in_bounds(pos, dx, dy, board):
        raise InvalidPositionError(f"Cannot step by ({dx}, {dy}) from {pos}")
    return Position(pos.x + dx, pos.y + dy)


__all__ = [
    "Board",
    "Direction",
    "DIRECTION_DELTAS",
    "Position",
    "is_opening",
    "move_in_bounds",
    "move_pos",
]
