import argparse
import logging
from pathlib import Path

from .console import StreamConsole
from .errors import TextAdventureError
from .events import GameEvent
from .game import Game
from .logging_config import configure_logging
from .movement import MovementEngine
from .players import describe
from .rng import RNG
from .settings import Settings

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="textadventure",
        description="Guide the explorer around the board before its energy runs out.",
    )
    parser.add_argument(
        "--settings",
        dest="settings_path",
        type=Path,
        default=None,
        help="Path to a settings YAML file to load/override defaults.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random source.")
    parser.add_argument("--max-rounds", type=int, default=None, help="Stop after this many rounds.")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable verbose debug logging.",
    )
    return parser.parse_args(argv)


def main(argv=None, console=None) -> int:
    args = parse_args(argv)
    configure_logging(default_level=logging.DEBUG if args.debug else logging.WARNING)

    console = console or StreamConsole()
    try:
        settings = Settings.load(user_path=args.settings_path)
        board = settings.board.build()
        seed = args.seed if args.seed is not None else settings.seed
        engine = MovementEngine(RNG(seed), console, explorer_move_cost=settings.explorer_move_cost)
        # The starting roster needs its fixed start cells on the board.
        game = Game(board, engine)
    except TextAdventureError as e:
        logger.error("Cannot start game: %s", e)
        return 2

    max_rounds = args.max_rounds if args.max_rounds is not None else settings.max_rounds

    def report(event, g):
        if event is GameEvent.ROUND_COMPLETED:
            console.say(f"Round {g.round_number}: {describe(g.explorer)}")
        elif event is GameEvent.GAME_OVER:
            console.say("Game over")

    game.add_listener(report)
    console.say(describe(game.explorer))

    try:
        game.run(max_rounds=max_rounds)
    except EOFError:
        console.say("Goodbye")
    return 0
