import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from textadventure.board import Board  # noqa: E402


@pytest.fixture
def open_board():
    """5x5 board with every interior wall open and a working teleport."""
    return Board.open_grid(
        5,
        5,
        magic_words=["xyzzy", "plugh"],
        fake_words=["abracadabra"],
        magic_word="xyzzy",
        teleport_target=(4, 0),
    )
