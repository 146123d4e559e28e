from __future__ import annotations

import logging
from typing import Callable, List, Optional

from .board import Board
from .errors import RosterError
from .events import GameEvent
from .movement import MovementEngine
from .players import ExplorerData, Roster, build_roster, is_dead, is_explorer, position_of
from .rng import RNG

logger = logging.getLogger(__name__)

Listener = Callable[[GameEvent, "Game"], None]


def is_game_over(roster: Roster) -> bool:
    """True once every explorer in the roster is dead.

    Raises RosterError for a roster without an explorer, which correct
    construction never produces.
    """
    explorers = [player for player in roster if is_explorer(player)]
    if not explorers:
        raise RosterError("Roster has no explorer")
    return all(is_dead(explorer) for explorer in explorers)


class Game:
    """Owns the roster and plays it round by round.

    Each turn pops the player at the front of the roster, advances it and
    pushes the result on the back, so after a full round the roster is back
    in its original order.
    """

    def __init__(
        self,
        board: Board,
        engine: MovementEngine,
        roster: Optional[Roster] = None,
        rng: Optional[RNG] = None,
    ) -> None:
        self.board = board
        self.engine = engine
        self.roster: Roster = roster if roster is not None else build_roster(board, rng or engine.rng)
        self.round_number: int = 0
        self._over_announced = False
        self._listeners: List[Listener] = []

    def add_listener(self, listener: Listener) -> None:
        """Subscribe to game events (moves, completed rounds, game over)."""
        self._listeners.append(listener)

    def _emit(self, event: GameEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, self)
            except Exception as ex:
                logger.exception("Listener errored on %s: %s", event, ex)

    @property
    def explorer(self) -> ExplorerData:
        for player in self.roster:
            if isinstance(player, ExplorerData):
                return player
        raise RosterError("Roster has no explorer")

    @property
    def over(self) -> bool:
        return is_game_over(self.roster)

    def play_turn(self) -> None:
        player = self.roster.popleft()
        try:
            moved = self.engine.advance(player, self.board)
        except BaseException:
            # Keep the roster whole when input ends mid-turn.
            self.roster.appendleft(player)
            raise
        self.roster.append(moved)
        if position_of(moved) != position_of(player):
            self._emit(GameEvent.PLAYER_MOVED)

    def play_round(self) -> bool:
        """Give every player one turn. Returns True if the game is now over."""
        for _ in range(len(self.roster)):
            self.play_turn()
        self.round_number += 1
        logger.info("Round %d complete", self.round_number)
        self._emit(GameEvent.ROUND_COMPLETED)

        over = is_game_over(self.roster)
        if over and not self._over_announced:
            self._over_announced = True
            logger.info("Game over after %d rounds", self.round_number)
            self._emit(GameEvent.GAME_OVER)
        return over

    def run(self, max_rounds: Optional[int] = None) -> int:
        """Play rounds until the game is over or ``max_rounds`` were played.

        Returns the number of rounds played by this call.
        """
        played = 0
        while not is_game_over(self.roster):
            if max_rounds is not None and played >= max_rounds:
                break
            self.play_round()
            played += 1
        return played


__all__ = [
    "Game",
    "is_game_over",
]
