"""Tests de la simulation headless et des politiques de base.

Les parties aléatoires servent de vérification des invariants globaux:
conservation des jetons, prestige recalculable, unicité des cartes.
"""

import pytest

from splendor.engine.actions import PurchaseCard, TakeTokens
from splendor.engine.catalog import CARD_CATALOG
from splendor.engine.state import GameState, Player
from splendor.sim.policies import GreedyPolicy, RandomLegalPolicy
from splendor.sim.runner import HeadlessEnv, play_game

from .engine_test_utils import bank, make_card, make_state


def _all_card_ids(state: GameState) -> list:
    ids = [card.id for cards in state.board.available_cards.values() for card in cards]
    ids += [card.id for deck in state.board.decks.values() for card in deck]
    for player in state.players:
        ids += [card.id for card in player.cards]
        ids += [card.id for card in player.reserved_cards]
    return ids


def _assert_invariants(state: GameState, initial_totals) -> None:
    assert state.token_totals() == initial_totals
    assert all(count >= 0 for count in state.board.tokens.values())
    for player in state.players:
        assert all(count >= 0 for count in player.tokens.values())
        assert player.prestige == player.computed_prestige()
    ids = _all_card_ids(state)
    assert len(ids) == len(set(ids)) == len(CARD_CATALOG)
    assert 0 <= state.current_player_index < len(state.players)


def test_headless_env_reset_and_step():
    env = HeadlessEnv(seed=3)
    state = env.reset()
    initial = state.token_totals()

    for _ in range(20):
        legal = env.legal_actions()
        result = env.step(legal[0])
        _assert_invariants(result.state, initial)
        if result.done:
            break

    assert result.info["last_action"] is not None
    assert len(result.reward) == 2


def test_headless_env_requires_reset():
    with pytest.raises(RuntimeError):
        HeadlessEnv().state


@pytest.mark.parametrize("seed, players", [(1, 2), (2, 3), (3, 4)])
def test_random_games_preserve_invariants(seed, players):
    env = HeadlessEnv(seed=seed, player_names=[f"P{i}" for i in range(players)])
    state = env.reset()
    initial = state.token_totals()
    policy = RandomLegalPolicy(seed=seed)

    for _ in range(300):
        legal = env.legal_actions()
        if not legal:
            break
        result = env.step(policy.select_action(env.state, legal))
        _assert_invariants(result.state, initial)
        if result.done:
            break


def test_greedy_game_summary():
    summary = play_game([GreedyPolicy(), GreedyPolicy()], seed=17, max_turns=400)

    assert summary.turns > 0
    if summary.finished:
        assert summary.winner_id in {p.player_id for p in summary.final_state.players}
        assert any(p.prestige >= 15 for p in summary.final_state.players)


def test_play_game_respects_max_turns():
    summary = play_game([RandomLegalPolicy(seed=1), RandomLegalPolicy(seed=2)], seed=4, max_turns=5)

    assert summary.turns <= 5
    assert summary.game_id == summary.final_state.game_id


def test_play_game_rejects_invalid_player_count():
    with pytest.raises(ValueError):
        play_game([GreedyPolicy()], seed=1)


class TestGreedyPolicy:
    def test_prefers_most_prestigious_purchase(self):
        cheap = make_card("cheap", prestige=0)
        rich = make_card("rich", prestige=2)
        state = make_state(available=[cheap, rich])
        legal = [PurchaseCard(card_id="cheap"), PurchaseCard(card_id="rich")]

        assert GreedyPolicy().select_action(state, legal) == PurchaseCard(card_id="rich")

    def test_takes_tokens_toward_cheapest_card(self):
        target = make_card("target", cost={"ruby": 1, "onyx": 1, "emerald": 1})
        expensive = make_card("expensive", cost={"diamond": 5})
        alice = Player(player_id="p1", name="Alice", tokens=bank())
        state = make_state(players=[alice, Player(player_id="p2", name="Bob")], available=[target, expensive])
        legal = [
            TakeTokens(tokens={"diamond": 1, "sapphire": 1, "emerald": 1}),
            TakeTokens(tokens={"ruby": 1, "onyx": 1, "emerald": 1}),
        ]

        chosen = GreedyPolicy().select_action(state, legal)

        assert chosen == TakeTokens(tokens={"ruby": 1, "onyx": 1, "emerald": 1})

    def test_no_legal_action(self):
        with pytest.raises(ValueError):
            GreedyPolicy().select_action(make_state(), [])
