from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence, Tuple

from .board import DIRECTION_DELTAS, Board, Direction, move_in_bounds, move_pos
from .console import Console
from .errors import BoardError
from .items import FakeWord, Item, MagicWord
from .players import ExplorerData, GnomeData, LeprechaunData, Player
from .rng import RNG

logger = logging.getLogger(__name__)

PROMPT = "Enter letter command: [N]orth [S]outh [E]ast [W]est [T]eleport"
TELEPORT_COMMAND = "T"
DIRECTIONS: Tuple[Direction, ...] = (Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST)


def dir_to_delta(direction: Direction) -> Tuple[int, int]:
    """Map a direction to its (dx, dy) step; north increases y."""
    return DIRECTION_DELTAS[direction]


def find_word(word: str, things: Sequence[Item]) -> Optional[Item]:
    """Return the first magic or fake word in ``things`` spelled ``word``."""
    for thing in things:
        if isinstance(thing, (MagicWord, FakeWord)) and thing.word == word:
            return thing
    return None


def is_magic_word(thing: Item, board: Board) -> bool:
    """True for the MagicWord that the board accepts. Fake words never are."""
    return isinstance(thing, MagicWord) and board.magic_word is not None and thing.word == board.magic_word


def open_sesame(thing: Item, board: Board) -> bool:
    """True if speaking ``thing`` opens a teleport on ``board``."""
    return is_magic_word(thing, board) and board.teleport_target is not None


def teleport_explorer(
    data: ExplorerData, board: Board, word: Optional[str] = None, cost: int = 1
) -> Optional[ExplorerData]:
    """Teleport the explorer if it holds the board's magic word.

    With ``word`` given only that word is tried, and it must be in the
    explorer's inventory. Without it every magic word carried is tried.
    Returns the moved explorer, or None when the teleport fails.
    """
    if word is not None:
        found = find_word(word, data.things)
        candidates = [found] if found is not None else []
    else:
        candidates = [thing for thing in data.things if isinstance(thing, MagicWord)]

    for thing in candidates:
        if open_sesame(thing, board):
            logger.debug("Explorer teleports from %s to %s", data.pos, board.teleport_target)
            return replace(data, pos=board.teleport_target, energy=data.energy - cost)
    logger.debug("Explorer teleport refused (word=%r, candidates=%d)", word, len(candidates))
    return None


def teleport_leprechaun(data: LeprechaunData, board: Board, rng: RNG) -> LeprechaunData:
    """Blink to a room picked uniformly from the whole board."""
    target = rng.choice(board.cells())
    logger.debug("Leprechaun blinks from %s to %s", data.pos, target)
    return replace(data, pos=target)


class MovementEngine:
    """Computes each player's state for the next turn.

    The explorer is driven by commands read from ``console``; gnomes and the
    leprechaun draw from ``rng``. A successful explorer move or teleport costs
    ``explorer_move_cost`` energy.
    """

    def __init__(self, rng: RNG, console: Console, explorer_move_cost: int = 1) -> None:
        if explorer_move_cost < 0:
            raise ValueError("explorer_move_cost must not be negative")
        self.rng = rng
        self.console = console
        self.explorer_move_cost = explorer_move_cost

    def advance(self, player: Player, board: Board) -> Player:
        """Return ``player`` as it stands after taking its turn."""
        if isinstance(player, ExplorerData):
            return self.move_explorer(player, board)
        if isinstance(player, GnomeData):
            return self.move_gnome(player, board)
        if isinstance(player, LeprechaunData):
            return self.move_leprechaun(player, board)
        raise TypeError(f"Not a player: {player!r}")

    def move_explorer(self, data: ExplorerData, board: Board) -> ExplorerData:
        """Prompt until the human enters a command that uses up the turn.

        Direction commands always use up the turn, even when a wall or the
        edge of the board stops the explorer. A refused teleport, invalid
        input and read errors are reported and the prompt repeats.
        """
        while True:
            try:
                line = self.console.read_command(PROMPT)
            except OSError as exc:
                logger.warning("Failed to read command: %s", exc)
                self.console.say(f"Failed to read line: {exc}")
                continue

            text = line.strip()
            if not text:
                self.console.say("Ignoring leading whitespace")
                continue

            command, argument = text[0], text[1:].strip()
            direction = Direction.from_letter(command)
            if direction is not None:
                return self._step_explorer(data, direction, board)
            if command == TELEPORT_COMMAND:
                moved = teleport_explorer(data, board, argument or None, self.explorer_move_cost)
                if moved is not None:
                    self.console.say(f"You teleport to {moved.pos}")
                    return moved
                self.console.say("Cannot teleport")
                continue
            self.console.say("Invalid command")

    def _step_explorer(self, data: ExplorerData, direction: Direction, board: Board) -> ExplorerData:
        dx, dy = dir_to_delta(direction)
        if move_in_bounds(data.pos, dx, dy, board):
            target = move_pos(data.pos, dx, dy, board)
            logger.debug("Explorer moves %s from %s to %s", direction.label, data.pos, target)
            return replace(data, pos=target, energy=data.energy - self.explorer_move_cost)

        if not board.is_within(data.pos.x + dx, data.pos.y + dy):
            self.console.say(f"You cannot go {direction.label}")
        else:
            self.console.say(f"There is a wall to the {direction.label}")
        logger.debug("Explorer blocked going %s from %s", direction.label, data.pos)
        return data

    def move_gnome(self, data: GnomeData, board: Board) -> GnomeData:
        """Step one room in a uniformly drawn legal direction; costs 1 energy.

        Directions are drawn from all four and redrawn until one is legal.
        A room with no legal direction is a broken board and raises BoardError.
        """
        if not any(move_in_bounds(data.pos, *dir_to_delta(d), board) for d in DIRECTIONS):
            raise BoardError(f"Gnome at {data.pos} has no legal move")

        while True:
            direction = self.rng.choice(DIRECTIONS)
            dx, dy = dir_to_delta(direction)
            if move_in_bounds(data.pos, dx, dy, board):
                break
            logger.debug("Gnome at %s rejected %s", data.pos, direction.label)

        target = move_pos(data.pos, dx, dy, board)
        logger.debug("Gnome moves %s from %s to %s", direction.label, data.pos, target)
        return GnomeData(pos=target, energy=data.energy - 1, things=data.things)

    def move_leprechaun(self, data: LeprechaunData, board: Board) -> LeprechaunData:
        return teleport_leprechaun(data, board, self.rng)


__all__ = [
    "DIRECTIONS",
    "MovementEngine",
    "PROMPT",
    "dir_to_delta",
    "find_word",
    "is_magic_word",
    "open_sesame",
    "teleport_explorer",
    "teleport_leprechaun",
]
