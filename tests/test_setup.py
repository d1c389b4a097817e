"""Tests de mise en place (plateau, nobles, nouvelle partie)."""

import random

import pytest

from splendor.engine.catalog import CARD_CATALOG, NOBLE_CATALOG
from splendor.engine.engine import GameEngine
from splendor.engine.errors import InvalidArgumentError, SetupViolationError
from splendor.engine.serialize import state_to_snapshot
from splendor.engine.state import GameStatus

from .engine_test_utils import make_card, make_state


def test_catalog_sizes():
    tiers = [card.tier for card in CARD_CATALOG]
    assert len(CARD_CATALOG) == 90
    assert (tiers.count(1), tiers.count(2), tiers.count(3)) == (40, 30, 20)
    assert len(NOBLE_CATALOG) == 10
    assert len({card.id for card in CARD_CATALOG}) == 90


@pytest.mark.parametrize("players, per_gem", [(2, 4), (3, 5), (4, 7)])
def test_initialize_board_token_table(players, per_gem):
    board = GameEngine(seed=3).initialize_board(players)

    for gem in ("diamond", "sapphire", "emerald", "ruby", "onyx"):
        assert board.tokens[gem] == per_gem
    assert board.tokens["gold"] == 5


def test_initialize_board_deals_four_cards_per_tier():
    board = GameEngine(seed=3).initialize_board(2)

    assert {tier: len(cards) for tier, cards in board.available_cards.items()} == {1: 4, 2: 4, 3: 4}
    assert board.card_decks == {1: 36, 2: 26, 3: 16}
    for tier, cards in board.available_cards.items():
        assert all(card.tier == tier for card in cards)
    assert board.nobles == []


@pytest.mark.parametrize("players", [0, 1, 5])
def test_initialize_board_rejects_bad_player_count(players):
    with pytest.raises(SetupViolationError, match="Invalid player count"):
        GameEngine().initialize_board(players)


def test_initialize_board_requires_enough_cards():
    engine = GameEngine(cards=[make_card(f"c{i}") for i in range(12)])

    with pytest.raises(SetupViolationError, match="Insufficient tier 2 cards"):
        engine.initialize_board(2)


@pytest.mark.parametrize("players", [2, 3, 4])
def test_nobles_drawn_for_player_count(players):
    engine = GameEngine(seed=5)
    state = engine.new_game([f"P{i}" for i in range(players)])

    assert len(state.board.nobles) == players + 1
    assert len({noble.id for noble in state.board.nobles}) == players + 1


def test_update_nobles_returns_new_state():
    engine = GameEngine(seed=5)
    state = make_state()

    new_state = engine.update_nobles_for_player_count(state)

    assert len(new_state.board.nobles) == 3
    assert state.board.nobles == []


def test_update_nobles_requires_enough_nobles():
    engine = GameEngine(nobles=NOBLE_CATALOG[:2])

    with pytest.raises(SetupViolationError, match="Insufficient nobles"):
        engine.update_nobles_for_player_count(make_state())


def test_new_game_defaults():
    state = GameEngine(seed=11).new_game(["Alice", "Bob", "Carol"])

    assert [p.player_id for p in state.players] == ["player_0", "player_1", "player_2"]
    assert [p.name for p in state.players] == ["Alice", "Bob", "Carol"]
    assert state.status == GameStatus.IN_PROGRESS
    assert state.current_player_index == 0
    assert not state.end_triggered
    assert all(p.total_tokens == 0 for p in state.players)


def test_new_game_rejects_duplicate_ids():
    with pytest.raises(InvalidArgumentError):
        GameEngine().new_game(["A", "B"], player_ids=["x", "x"])


def test_same_seed_gives_same_board():
    first = GameEngine(seed=42).new_game(["A", "B"], game_id="g")
    second = GameEngine(seed=42).new_game(["A", "B"], game_id="g")

    assert state_to_snapshot(first)["board"] == state_to_snapshot(second)["board"]


def test_injected_random_source_is_used():
    class Identity(random.Random):
        def shuffle(self, x):
            return None

    state = GameEngine(rng=Identity()).new_game(["A", "B"])

    assert [c.id for c in state.board.available_cards[1]] == [
        "card_1_1",
        "card_1_2",
        "card_1_3",
        "card_1_4",
    ]
    assert [n.id for n in state.board.nobles] == ["noble_1", "noble_2", "noble_3"]
