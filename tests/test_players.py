from collections import Counter

import pytest

from textadventure.board import Board, Position
from textadventure.errors import InvalidPositionError
from textadventure.items import FakeCoin, FakeWord, GoldCoin, MagicWord, Torch
from textadventure.players import (
    ExplorerData,
    GnomeData,
    LeprechaunData,
    build_roster,
    describe,
    energy_of,
    inventory_of,
    is_dead,
    is_explorer,
    is_occupant,
    position_of,
)
from textadventure.rng import RNG


def test_roster_has_one_explorer_and_starting_energies(open_board):
    roster = build_roster(open_board, RNG(1))

    assert [type(p) for p in roster] == [ExplorerData, GnomeData, GnomeData, LeprechaunData]
    assert sum(1 for p in roster if is_explorer(p)) == 1

    explorer, gnome_a, gnome_b, leprechaun = roster
    assert explorer.energy == 65
    assert gnome_a.energy == 41
    assert gnome_b.energy == 37
    assert energy_of(leprechaun) is None


def test_starting_positions(open_board):
    explorer, gnome_a, gnome_b, leprechaun = build_roster(open_board, RNG(1))
    assert position_of(explorer) == Position(0, 0)
    assert position_of(gnome_a) == Position(0, 4)
    assert position_of(gnome_b) == Position(2, 2)
    assert position_of(leprechaun) == Position(4, 4)


def test_starting_inventories(open_board):
    explorer, gnome_a, gnome_b, _ = build_roster(open_board, RNG(1))
    assert inventory_of(explorer) == (Torch(), GoldCoin(5), GoldCoin(10), GoldCoin(25))
    assert gnome_a.things == (GoldCoin(25),) * 3
    assert gnome_b.things == (GoldCoin(25),) * 3


def test_leprechaun_hoard_composition(open_board):
    leprechaun = build_roster(open_board, RNG(1))[3]
    counts = Counter(leprechaun.things)

    for denom in (5, 10, 25):
        assert counts[GoldCoin(denom)] == 8
        assert counts[FakeCoin(denom)] == 5
    assert counts[MagicWord("xyzzy")] == 1
    assert counts[MagicWord("plugh")] == 1
    assert counts[FakeWord("abracadabra")] == 1
    assert len(leprechaun.things) == 24 + 15 + 3


def test_leprechaun_hoard_is_shuffled(open_board):
    leprechaun = build_roster(open_board, RNG(1))[3]
    unshuffled = (
        [GoldCoin(5)] * 8 + [GoldCoin(10)] * 8 + [GoldCoin(25)] * 8
        + [FakeCoin(5)] * 5 + [FakeCoin(10)] * 5 + [FakeCoin(25)] * 5
        + [MagicWord("xyzzy"), MagicWord("plugh"), FakeWord("abracadabra")]
    )
    assert list(leprechaun.things) != unshuffled
    assert Counter(leprechaun.things) == Counter(unshuffled)


def test_same_seed_same_hoard(open_board):
    a = build_roster(open_board, RNG(99))[3]
    b = build_roster(open_board, RNG(99))[3]
    assert a.things == b.things


def test_small_board_cannot_hold_roster():
    with pytest.raises(InvalidPositionError):
        build_roster(Board.open_grid(3, 3), RNG(1))


def test_is_dead_only_for_spent_explorer():
    pos = Position(0, 0)
    assert is_dead(ExplorerData(pos, 0)) is True
    assert is_dead(ExplorerData(pos, -2)) is True
    assert is_dead(ExplorerData(pos, 1)) is False
    assert is_dead(GnomeData(pos, 0)) is False
    assert is_dead(GnomeData(pos, -5)) is False
    assert is_dead(LeprechaunData(pos)) is False


def test_is_occupant():
    gnome = GnomeData(Position(2, 3), 10)
    assert is_occupant(gnome, Position(2, 3)) is True
    assert is_occupant(gnome, Position(3, 2)) is False


def test_players_are_immutable():
    explorer = ExplorerData(Position(0, 0), 5)
    with pytest.raises(AttributeError):
        explorer.energy = 10  # type: ignore[misc]


def test_accessors_reject_non_players():
    with pytest.raises(TypeError):
        position_of("explorer")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        describe(42)  # type: ignore[arg-type]


def test_describe():
    explorer = ExplorerData(Position(1, 2), 30, (Torch(),))
    assert describe(explorer) == "Explorer at (1, 2), energy 30, carrying 1"
    assert describe(LeprechaunData(Position(4, 4))) == "Leprechaun at (4, 4)"
