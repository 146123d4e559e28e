from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

from .board import Board


@dataclass(eq=True, frozen=True)
class Torch:
    """Lights the way. Carried by the explorer from the start."""

    def __str__(self) -> str:
        return "torch"


@dataclass(eq=True, frozen=True)
class GoldCoin:
    denom: int

    def __str__(self) -> str:
        return f"gold coin ({self.denom})"


@dataclass(eq=True, frozen=True)
class FakeCoin:
    """Looks like a GoldCoin of the same denomination but is worthless."""

    denom: int

    def __str__(self) -> str:
        return f"gold coin ({self.denom})"


@dataclass(eq=True, frozen=True)
class MagicWord:
    word: str

    def __str__(self) -> str:
        return f"word '{self.word}'"


@dataclass(eq=True, frozen=True)
class FakeWord:
    word: str

    def __str__(self) -> str:
        return f"word '{self.word}'"


Item = Union[Torch, GoldCoin, FakeCoin, MagicWord, FakeWord]


def coins(denom: int, count: int, *, fake: bool = False) -> List[Item]:
    """Return ``count`` identical coins of one denomination."""
    kind = FakeCoin if fake else GoldCoin
    return [kind(denom) for _ in range(count)]


def all_magic_words(board: Board) -> List[Item]:
    """Every magic word in play on ``board``, in board order."""
    return [MagicWord(word) for word in board.magic_words]


def all_fake_words(board: Board) -> List[Item]:
    """Every fake word in play on ``board``, in board order."""
    return [FakeWord(word) for word in board.fake_words]


__all__ = [
    "FakeCoin",
    "FakeWord",
    "GoldCoin",
    "Item",
    "MagicWord",
    "Torch",
    "all_fake_words",
    "all_magic_words",
    "coins",
]
