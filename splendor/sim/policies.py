"""Politiques de base pour la simulation headless."""

from __future__ import annotations

import random
from typing import Dict, List, Optional, Sequence

from splendor.engine.actions import (
    Action,
    PurchaseCard,
    PurchaseReservedCard,
    ReserveCard,
    TakeTokens,
)
from splendor.engine.board import find_card
from splendor.engine.rules import CARD_TIERS, COLORED_GEMS
from splendor.engine.state import Card, GameState, Player


class AgentPolicy:
    """Interface minimale utilisée par la simulation headless.

    `select_action` reçoit l'état courant et la liste (non vide) des actions
    légales calculée par le moteur.
    """

    def __init__(self, *, name: str | None = None) -> None:
        self._name = name or self.__class__.__name__

    @property
    def name(self) -> str:
        return self._name

    def select_action(self, state: GameState, legal: Sequence[Action]) -> Action:
        raise NotImplementedError


class RandomLegalPolicy(AgentPolicy):
    """Politique uniformément aléatoire sur les actions légales."""

    def __init__(
        self,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(name="RandomLegal")
        self._random = rng or random.Random(seed)

    def select_action(self, state: GameState, legal: Sequence[Action]) -> Action:
        if not legal:
            raise ValueError("Aucune action légale disponible pour RandomLegalPolicy")
        return self._random.choice(list(legal))


class GreedyPolicy(AgentPolicy):
    """Politique gloutonne.

    Priorités:
    1. acheter la carte (visible ou réservée) qui rapporte le plus de prestige;
    2. prendre les jetons qui comblent le mieux le manque pour la carte visible
       la moins chère;
    3. réserver une carte;
    4. à défaut, la première action légale.
    """

    def __init__(self) -> None:
        super().__init__(name="Greedy")

    def select_action(self, state: GameState, legal: Sequence[Action]) -> Action:
        if not legal:
            raise ValueError("Aucune action légale disponible pour GreedyPolicy")

        player = state.current_player
        purchase = self._best_purchase(state, player, legal)
        if purchase is not None:
            return purchase

        takes = [action for action in legal if isinstance(action, TakeTokens)]
        target = self._cheapest_target(state, player)
        if takes and target is not None:
            deficit = _deficit(player, target)
            return max(takes, key=lambda action: _coverage(action.tokens, deficit))
        if takes:
            return takes[0]

        reserves = [action for action in legal if isinstance(action, ReserveCard)]
        if reserves:
            return reserves[0]
        return legal[0]

    def _best_purchase(
        self, state: GameState, player: Player, legal: Sequence[Action]
    ) -> Optional[Action]:
        best: Optional[Action] = None
        best_prestige = -1
        for action in legal:
            if isinstance(action, PurchaseCard):
                card = find_card(state, action.card_id)
            elif isinstance(action, PurchaseReservedCard):
                card = next(
                    (c for c in player.reserved_cards if c.id == action.card_id), None
                )
            else:
                continue
            if card is not None and card.prestige > best_prestige:
                best = action
                best_prestige = card.prestige
        return best

    def _cheapest_target(self, state: GameState, player: Player) -> Optional[Card]:
        candidates: List[Card] = [
            card
            for tier in CARD_TIERS
            for card in state.board.available_cards.get(tier, [])
        ]
        if not candidates:
            return None
        return min(candidates, key=lambda card: sum(_deficit(player, card).values()))


def _deficit(player: Player, card: Card) -> Dict[str, int]:
    bonuses = player.bonuses()
    return {
        gem: max(0, card.cost_of(gem) - bonuses.get(gem, 0) - player.tokens.get(gem, 0))
        for gem in COLORED_GEMS
    }


def _coverage(tokens: Dict[str, int], deficit: Dict[str, int]) -> int:
    return sum(min(count, deficit.get(gem, 0)) for gem, count in tokens.items())


__all__ = ["AgentPolicy", "RandomLegalPolicy", "GreedyPolicy"]
