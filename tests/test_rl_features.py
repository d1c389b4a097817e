"""Tests de l'encodage des observations."""

import numpy as np
import pytest

from splendor.engine.engine import GameEngine
from splendor.engine.rules import MAX_PLAYERS
from splendor.rl.features import CARD_FEATURES, NOBLE_FEATURES, build_observation


def test_observation_shapes_and_dtype():
    state = GameEngine(seed=8).new_game(["Alice", "Bob", "Carol"])

    obs = build_observation(state)

    assert obs.bank.shape == (6,)
    assert obs.tokens.shape == (MAX_PLAYERS, 6)
    assert obs.bonuses.shape == (MAX_PLAYERS, 5)
    assert obs.prestige.shape == (MAX_PLAYERS,)
    assert obs.cards.shape == (3, 4, CARD_FEATURES)
    assert obs.reserved.shape == (3, CARD_FEATURES)
    assert obs.nobles.shape == (MAX_PLAYERS + 1, NOBLE_FEATURES)
    assert obs.metadata.shape == (7,)
    for array in (obs.bank, obs.tokens, obs.cards, obs.nobles, obs.metadata):
        assert array.dtype == np.float32


def test_observation_is_ego_centric():
    engine = GameEngine(seed=8)
    state = engine.new_game(["Alice", "Bob"])
    state = engine.take_tokens(state, "player_0", {"diamond": 2})

    obs = build_observation(state)

    # Bob a la main: il est à l'index 0, Alice (2 diamants) suit
    assert obs.tokens[0].sum() == 0.0
    assert obs.tokens[1, 0] > 0.0
    assert np.all(obs.tokens[2:] == 0.0)


def test_face_up_cards_and_nobles_are_marked_present():
    state = GameEngine(seed=2).new_game(["Alice", "Bob"])

    obs = build_observation(state)

    assert np.all(obs.cards[:, :, 0] == 1.0)
    assert obs.nobles[:3, 0].tolist() == [1.0, 1.0, 1.0]
    assert obs.nobles[3:, 0].tolist() == [0.0, 0.0]
    assert obs.bank[5] == 1.0
    assert obs.bank[0] == pytest.approx(4 / 7)


def test_gold_uses_its_own_scale():
    """L'or est normalisé par les 5 jetons de la banque, pas par les gemmes colorées."""

    engine = GameEngine(seed=2)
    state = engine.new_game(["Alice", "Bob"])
    card_id = state.board.available_cards[1][0].id
    state = engine.reserve_card(state, "player_0", card_id)

    obs = build_observation(state)

    # Bob a la main: Alice (1 or) est à l'index 1
    assert obs.tokens[1, 5] == pytest.approx(1 / 5)
    assert obs.bank[5] == pytest.approx(4 / 5)
    assert obs.metadata[6] == pytest.approx(obs.bank[5])
