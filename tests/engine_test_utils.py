"""Constructeurs d'états minimaux pour les tests du moteur.

Les états construits ici ne passent pas par le tirage aléatoire : les cartes
et nobles sont placés explicitement pour rendre chaque scénario lisible.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from splendor.engine.rules import CARD_TIERS, GEM_TYPES, empty_bank, starting_bank
from splendor.engine.state import Card, GameBoard, GameState, Noble, Player


def bank(**counts: int) -> Dict[str, int]:
    """Banque canonique (six gemmes) avec les quantités données."""

    tokens = empty_bank()
    for gem, count in counts.items():
        assert gem in GEM_TYPES, gem
        tokens[gem] = count
    return tokens


def make_card(
    card_id: str,
    *,
    tier: int = 1,
    prestige: int = 0,
    bonus: str = "diamond",
    cost: Optional[Dict[str, int]] = None,
) -> Card:
    return Card(id=card_id, tier=tier, prestige=prestige, gem_bonus=bonus, cost=dict(cost or {}))


def make_noble(
    noble_id: str, requirements: Dict[str, int], *, prestige: int = 3
) -> Noble:
    return Noble(id=noble_id, name=noble_id.title(), prestige=prestige, requirements=requirements)


def bonus_cards(gem: str, count: int, *, prefix: str = "owned") -> List[Card]:
    """Cartes possédées donnant `count` bonus de la gemme indiquée."""

    return [make_card(f"{prefix}_{gem}_{i}", bonus=gem) for i in range(count)]


def make_state(
    *,
    players: Optional[Sequence[Player]] = None,
    available: Optional[Iterable[Card]] = None,
    decks: Optional[Dict[int, List[Card]]] = None,
    nobles: Optional[List[Noble]] = None,
    tokens: Optional[Dict[str, int]] = None,
    current_player_index: int = 0,
) -> GameState:
    """Construit un GameState à deux joueurs par défaut.

    La banque par défaut est celle d'une partie à deux, diminuée de ce que
    détiennent déjà les joueurs afin de respecter la conservation des jetons.
    """

    if players is None:
        players = [Player(player_id="p1", name="Alice"), Player(player_id="p2", name="Bob")]
    players = list(players)

    board_available: Dict[int, List[Card]] = {tier: [] for tier in CARD_TIERS}
    for card in available or []:
        board_available[card.tier].append(card)

    if tokens is None:
        tokens = starting_bank(len(players) if 2 <= len(players) <= 4 else 2)
        for player in players:
            for gem, count in player.tokens.items():
                tokens[gem] -= count

    board = GameBoard(
        available_cards=board_available,
        decks={tier: list((decks or {}).get(tier, [])) for tier in CARD_TIERS},
        nobles=list(nobles or []),
        tokens=tokens,
    )
    return GameState(
        game_id="test-game",
        players=players,
        board=board,
        current_player_index=current_player_index,
    )
