"""Player model: the explorer and the non-player characters sharing the board.

Players are immutable values. The movement engine never edits one in place;
it returns a replacement, and the roster slot is what carries identity from
one turn to the next.
"""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Tuple, Union

from .board import Board, Position
from .items import Item, GoldCoin, Torch, all_fake_words, all_magic_words, coins
from .rng import RNG

logger = logging.getLogger(__name__)

EXPLORER_START = (0, 0)
EXPLORER_ENERGY = 65

GNOME_A_START = (0, 4)
GNOME_A_ENERGY = 41
GNOME_B_START = (2, 2)
GNOME_B_ENERGY = 37
GNOME_PURSE_DENOM = 25
GNOME_PURSE_SIZE = 3

LEPRECHAUN_START = (4, 4)
HOARD_DENOMS = (5, 10, 25)
HOARD_REAL_PER_DENOM = 8
HOARD_FAKE_PER_DENOM = 5


@dataclass(frozen=True)
class ExplorerData:
    pos: Position
    energy: int
    things: Tuple[Item, ...] = ()


@dataclass(frozen=True)
class GnomeData:
    pos: Position
    energy: int
    things: Tuple[Item, ...] = ()


@dataclass(frozen=True)
class LeprechaunData:
    pos: Position
    things: Tuple[Item, ...] = ()


Player = Union[ExplorerData, GnomeData, LeprechaunData]
Roster = Deque[Player]


def build_roster(board: Board, rng: RNG) -> Roster:
    """Build the starting roster: explorer, two gnomes, then the leprechaun.

    The leprechaun's hoard is shuffled with ``rng`` before it is handed over,
    so a seeded RNG yields the same hoard order every time.
    """
    explorer = ExplorerData(
        pos=Position.at(*EXPLORER_START, board),
        energy=EXPLORER_ENERGY,
        things=(Torch(), GoldCoin(5), GoldCoin(10), GoldCoin(25)),
    )
    gnome_a = GnomeData(
        pos=Position.at(*GNOME_A_START, board),
        energy=GNOME_A_ENERGY,
        things=tuple(coins(GNOME_PURSE_DENOM, GNOME_PURSE_SIZE)),
    )
    gnome_b = GnomeData(
        pos=Position.at(*GNOME_B_START, board),
        energy=GNOME_B_ENERGY,
        things=tuple(coins(GNOME_PURSE_DENOM, GNOME_PURSE_SIZE)),
    )
    leprechaun = LeprechaunData(
        pos=Position.at(*LEPRECHAUN_START, board),
        things=tuple(_leprechaun_hoard(board, rng)),
    )

    roster: Roster = deque([explorer, gnome_a, gnome_b, leprechaun])
    logger.info("Built roster of %d players (hoard size %d)", len(roster), len(leprechaun.things))
    return roster


def _leprechaun_hoard(board: Board, rng: RNG) -> List[Item]:
    hoard: List[Item] = []
    for denom in HOARD_DENOMS:
        hoard.extend(coins(denom, HOARD_REAL_PER_DENOM))
    for denom in HOARD_DENOMS:
        hoard.extend(coins(denom, HOARD_FAKE_PER_DENOM, fake=True))
    hoard.extend(all_magic_words(board))
    hoard.extend(all_fake_words(board))
    rng.shuffle(hoard)
    return hoard


def position_of(player: Player) -> Position:
    if isinstance(player, (ExplorerData, GnomeData, LeprechaunData)):
        return player.pos
    raise TypeError(f"Not a player: {player!r}")


def energy_of(player: Player) -> Optional[int]:
    """Return the player's energy, or None for players that have none."""
    if isinstance(player, (ExplorerData, GnomeData)):
        return player.energy
    if isinstance(player, LeprechaunData):
        return None
    raise TypeError(f"Not a player: {player!r}")


def inventory_of(player: Player) -> Tuple[Item, ...]:
    return player.things


def is_occupant(player: Player, pos: Position) -> bool:
    return position_of(player) == pos


def is_explorer(player: Player) -> bool:
    return isinstance(player, ExplorerData)


def is_dead(player: Player) -> bool:
    """Only the explorer can die, when its energy is used up."""
    return isinstance(player, ExplorerData) and player.energy <= 0


def describe(player: Player) -> str:
    if isinstance(player, ExplorerData):
        return f"Explorer at {player.pos}, energy {player.energy}, carrying {len(player.things)}"
    if isinstance(player, GnomeData):
        return f"Gnome at {player.pos}, energy {player.energy}"
    if isinstance(player, LeprechaunData):
        return f"Leprechaun at {player.pos}"
    raise TypeError(f"Not a player: {player!r}")


__all__ = [
    "ExplorerData",
    "GnomeData",
    "LeprechaunData",
    "Player",
    "Roster",
    "build_roster",
    "describe",
    "energy_of",
    "inventory_of",
    "is_dead",
    "is_explorer",
    "is_occupant",
    "position_of",
]
