"""Tests du calcul et de la vérification des paiements."""

from splendor.engine.payment import (
    calculate_optimal_payment,
    calculate_player_bonuses,
    can_afford_card,
)
from splendor.engine.state import Player

from .engine_test_utils import bank, bonus_cards, make_card


def _player(tokens=None, cards=None) -> Player:
    return Player(player_id="p1", name="Alice", tokens=tokens or bank(), cards=cards or [])


def test_player_bonuses_count_owned_cards():
    player = _player(cards=bonus_cards("ruby", 2) + bonus_cards("onyx", 1))
    bonuses = calculate_player_bonuses(player)

    assert bonuses["ruby"] == 2
    assert bonuses["onyx"] == 1
    assert bonuses["gold"] == 0
    assert set(bonuses) == {"diamond", "sapphire", "emerald", "ruby", "onyx", "gold"}


def test_player_bonuses_and_calculator_agree():
    player = _player(cards=bonus_cards("sapphire", 3) + bonus_cards("diamond", 1))

    assert calculate_player_bonuses(player) == player.bonuses()
    assert player.bonuses() == bank(sapphire=3, diamond=1)


class TestOptimalPayment:
    """Paiement minimal: gemmes de la couleur, puis or pour le manque."""

    def test_pays_with_matching_tokens(self):
        player = _player(tokens=bank(diamond=3, sapphire=2))
        card = make_card("c", cost={"diamond": 2, "sapphire": 1})

        assert calculate_optimal_payment(player, card) == {"diamond": 2, "sapphire": 1}

    def test_bonuses_reduce_need(self):
        player = _player(tokens=bank(diamond=1), cards=bonus_cards("diamond", 2))
        card = make_card("c", cost={"diamond": 3})

        assert calculate_optimal_payment(player, card) == {"diamond": 1}

    def test_shortfall_goes_to_gold(self):
        player = _player(tokens=bank(ruby=1, gold=2))
        card = make_card("c", cost={"ruby": 2, "onyx": 1})

        assert calculate_optimal_payment(player, card) == {"ruby": 1, "gold": 2}

    def test_free_card_costs_nothing(self):
        player = _player(cards=bonus_cards("emerald", 4))
        card = make_card("c", cost={"emerald": 3})

        assert calculate_optimal_payment(player, card) == {}


class TestCanAfford:
    """payment[g] + bonus[g] >= cost[g] pour chaque gemme, jetons détenus."""

    def test_exact_payment(self):
        player = _player(tokens=bank(diamond=2, sapphire=1))
        card = make_card("c", cost={"diamond": 2, "sapphire": 1})

        assert can_afford_card(player, card, {"diamond": 2, "sapphire": 1})

    def test_cannot_spend_tokens_not_held(self):
        player = _player(tokens=bank(diamond=1))
        card = make_card("c", cost={"diamond": 2})

        assert not can_afford_card(player, card, {"diamond": 2})

    def test_insufficient_payment(self):
        player = _player(tokens=bank(diamond=5))
        card = make_card("c", cost={"diamond": 2, "onyx": 1})

        assert not can_afford_card(player, card, {"diamond": 2})

    def test_bonuses_complete_payment(self):
        player = _player(tokens=bank(diamond=1), cards=bonus_cards("onyx", 1))
        card = make_card("c", cost={"diamond": 1, "onyx": 1})

        assert can_afford_card(player, card, {"diamond": 1})

    def test_overpayment_and_bonus_pool_are_accepted(self):
        """Les montants d'une gemme peuvent dépasser son coût une fois les bonus ajoutés."""

        player = _player(tokens=bank(diamond=3, ruby=2), cards=bonus_cards("diamond", 2))
        card = make_card("c", cost={"diamond": 1, "ruby": 2})

        assert can_afford_card(player, card, {"diamond": 3, "ruby": 2})

    def test_gold_does_not_cover_cost_by_default(self):
        player = _player(tokens=bank(gold=3))
        card = make_card("c", cost={"diamond": 2})

        assert not can_afford_card(player, card, {"gold": 2})

    def test_gold_covers_shortfall_when_wildcard(self):
        player = _player(tokens=bank(diamond=1, gold=2))
        card = make_card("c", cost={"diamond": 2, "ruby": 1})

        assert can_afford_card(player, card, {"diamond": 1, "gold": 2}, gold_is_wildcard=True)
        assert not can_afford_card(player, card, {"diamond": 1, "gold": 1}, gold_is_wildcard=True)

    def test_affordability_is_pure(self):
        player = _player(tokens=bank(diamond=2))
        card = make_card("c", cost={"diamond": 2})
        payment = {"diamond": 2}

        assert can_afford_card(player, card, payment) == can_afford_card(player, card, payment)
        assert payment == {"diamond": 2}
        assert player.tokens["diamond"] == 2
