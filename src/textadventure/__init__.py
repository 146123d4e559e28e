"""
Text adventure player core.

Headless simulation of one explorer and the creatures sharing its board:
- Board topology (rooms, openings, teleport configuration)
- Item catalog (torch, coins, magic and fake words)
- Player model and the starting roster
- Movement engine with the explorer's command loop and NPC behaviour
- Game orchestrator with the game-over check

The CLI in ``textadventure.cli`` wires these to stdin/stdout.
"""
from .board import Board, Direction, Position, is_opening, move_in_bounds, move_pos
from .console import ScriptedConsole, StreamConsole
from .errors import (
    BoardError,
    InvalidPositionError,
    RosterError,
    SettingsError,
    TextAdventureError,
)
from .events import GameEvent
from .game import Game, is_game_over
from .items import FakeCoin, FakeWord, GoldCoin, MagicWord, Torch, all_fake_words, all_magic_words
from .movement import MovementEngine, dir_to_delta
from .players import (
    ExplorerData,
    GnomeData,
    LeprechaunData,
    build_roster,
    is_dead,
    is_explorer,
    is_occupant,
    position_of,
)
from .rng import RNG
from .settings import Settings

__all__ = [
    "Board",
    "Direction",
    "Position",
    "is_opening",
    "move_in_bounds",
    "move_pos",
    "ScriptedConsole",
    "StreamConsole",
    "BoardError",
    "InvalidPositionError",
    "RosterError",
    "SettingsError",
    "TextAdventureError",
    "GameEvent",
    "Game",
    "is_game_over",
    "FakeCoin",
    "FakeWord",
    "GoldCoin",
    "MagicWord",
    "Torch",
    "all_fake_words",
    "all_magic_words",
    "MovementEngine",
    "dir_to_delta",
    "ExplorerData",
    "GnomeData",
    "LeprechaunData",
    "build_roster",
    "is_dead",
    "is_explorer",
    "is_occupant",
    "position_of",
    "RNG",
    "Settings",
]
