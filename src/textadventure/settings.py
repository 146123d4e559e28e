from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from .board import Board, Direction, Position
from .errors import SettingsError, TextAdventureError

logger = logging.getLogger(__name__)


@dataclass
class WallSettings:
    x: int
    y: int
    direction: str


@dataclass
class BoardSettings:
    width: int = 5
    height: int = 5
    walls: List[WallSettings] = field(default_factory=list)
    magic_words: List[str] = field(default_factory=list)
    fake_words: List[str] = field(default_factory=list)
    magic_word: Optional[str] = None
    teleport_target: Optional[Tuple[int, int]] = None

    def build(self) -> Board:
        """Build an open grid, close the configured walls and validate it."""
        try:
            board = Board.open_grid(
                self.width,
                self.height,
                magic_words=self.magic_words,
                fake_words=self.fake_words,
                magic_word=self.magic_word,
                teleport_target=self.teleport_target,
            )
            for wall in self.walls:
                direction = Direction.from_letter(wall.direction.upper()[:1])
                if direction is None:
                    raise SettingsError(f"Unknown wall direction: {wall.direction!r}")
                board.close_wall(Position.at(wall.x, wall.y, board), direction)
            board.validate()
        except SettingsError:
            raise
        except (TextAdventureError, TypeError, ValueError) as e:
            raise SettingsError(f"Invalid board settings: {e}") from e
        logger.debug("Built board %r with %d closed walls", board, len(self.walls))
        return board


@dataclass
class Settings:
    seed: Optional[int] = None
    max_rounds: Optional[int] = None
    explorer_move_cost: int = 1
    board: BoardSettings = field(default_factory=BoardSettings)

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        try:
            board_data = dict(data.get("board") or {})
            walls = [
                WallSettings(int(w["x"]), int(w["y"]), str(w["direction"]))
                for w in board_data.pop("walls", None) or []
            ]
            target = board_data.pop("teleport_target", None)
            board = BoardSettings(
                walls=walls,
                teleport_target=(int(target[0]), int(target[1])) if target is not None else None,
                **board_data,
            )
            seed = data.get("seed")
            max_rounds = data.get("max_rounds")
            move_cost = int(data.get("explorer_move_cost", 1))
            if move_cost < 0:
                raise SettingsError(f"explorer_move_cost must not be negative, got {move_cost}")
            return cls(
                seed=int(seed) if seed is not None else None,
                max_rounds=int(max_rounds) if max_rounds is not None else None,
                explorer_move_cost=move_cost,
                board=board,
            )
        except (KeyError, TypeError, ValueError, IndexError) as e:
            raise SettingsError(f"Malformed settings: {e}") from e

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "Settings":
        """Load settings from built-in defaults and optional user override file.

        If user_path is provided and exists, overlay values onto defaults.
        """
        try:
            with resources.files("textadventure.config").joinpath("default_settings.yaml").open("r", encoding="utf-8") as f:
                default_data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            default_data = dataclasses.asdict(Settings())

        user_data = {}
        if user_path is not None:
            if user_path.exists():
                try:
                    user_data = cls._load_yaml(user_path)
                except yaml.YAMLError as e:
                    raise SettingsError(f"Could not parse {user_path}: {e}") from e
                if not isinstance(user_data, dict):
                    raise SettingsError(f"Settings file {user_path} must contain a mapping")
                logger.info("Loaded user settings from %s", user_path)
            else:
                logger.warning("User settings file not found: %s", user_path)

        merged = cls._deep_merge(default_data, user_data)
        settings = cls.from_dict(merged)
        logger.debug("Settings merged: %s", settings)
        return settings
