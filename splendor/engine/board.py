"""Primitives de mutation du plateau.

Ces fonctions modifient l'état *en place* et ne valident rien : elles ne sont
appelées que par `GameEngine`, sur une copie privée de l'état, après que la
commande a été validée.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from splendor.engine.payment import calculate_player_bonuses
from splendor.engine.rules import COLORED_GEMS, WINNING_PRESTIGE
from splendor.engine.state import (
    Card,
    EndReason,
    GameState,
    GameStatus,
    Noble,
    Player,
)

logger = logging.getLogger("splendor.engine")


def get_player(state: GameState, player_id: str) -> Optional[Player]:
    return next((p for p in state.players if p.player_id == player_id), None)


def find_card(state: GameState, card_id: str) -> Optional[Card]:
    """Cherche une carte parmi les cartes visibles du plateau."""

    for cards in state.board.available_cards.values():
        for card in cards:
            if card.id == card_id:
                return card
    return None


def grant_tokens(state: GameState, player: Player, tokens: Mapping[str, int]) -> None:
    """Transfère des jetons de la banque vers le joueur."""

    for gem, count in tokens.items():
        if count and count > 0:
            state.board.tokens[gem] -= count
            player.tokens[gem] = player.tokens.get(gem, 0) + count


def pay_for_card(state: GameState, player: Player, payment: Mapping[str, int]) -> None:
    """Transfère le paiement du joueur vers la banque (sans contrôle)."""

    for gem, amount in payment.items():
        if amount and amount > 0:
            player.tokens[gem] = player.tokens.get(gem, 0) - amount
            state.board.tokens[gem] = state.board.tokens.get(gem, 0) + amount


def remove_card_from_board(state: GameState, card: Card) -> None:
    """Retire une carte visible et remplit l'emplacement depuis la pioche.

    La carte suivante de la pioche du même niveau prend la place libérée;
    si la pioche est vide, la rangée garde une carte de moins.
    """

    row = state.board.available_cards.get(card.tier, [])
    index = next((i for i, c in enumerate(row) if c.id == card.id), None)
    if index is None:
        return
    row.pop(index)
    deck = state.board.decks.get(card.tier, [])
    if deck:
        row.insert(index, deck.pop(0))


def check_noble_visits(state: GameState, player: Player) -> Optional[Noble]:
    """Attribue au plus un noble: le premier éligible dans l'ordre du plateau."""

    bonuses = calculate_player_bonuses(player)
    for index, noble in enumerate(state.board.nobles):
        if all(
            bonuses[gem] >= noble.requirements.get(gem, 0) for gem in COLORED_GEMS
        ):
            state.board.nobles.pop(index)
            player.nobles.append(noble)
            player.prestige += noble.prestige
            logger.info(f"Noble {noble.id} visits player {player.player_id}")
            return noble
    return None


def determine_winner(state: GameState) -> Player:
    """Prestige maximal; à égalité, le moins de cartes; puis l'ordre des sièges."""

    winner = state.players[0]
    for player in state.players[1:]:
        if player.prestige > winner.prestige:
            winner = player
        elif player.prestige == winner.prestige and len(player.cards) < len(winner.cards):
            winner = player
    return winner


def check_win_condition(
    state: GameState, triggering_player: Optional[Player] = None
) -> None:
    """Déclenche puis conclut la fin de partie.

    Un joueur atteignant le seuil de prestige déclenche la fin à la position
    courante (avant passage de tour). Lors d'un contrôle ultérieur, quand la
    main revient à cette position, la partie se termine et le vainqueur est
    désigné: chaque joueur a alors joué le même nombre de tours.
    """

    if (
        triggering_player is not None
        and triggering_player.prestige >= WINNING_PRESTIGE
        and not state.end_triggered
    ):
        state.end_triggered = True
        state.end_trigger_player_index = state.current_player_index
        logger.info(
            f"Game {state.game_id}: end triggered by {triggering_player.player_id} "
            f"({triggering_player.prestige} prestige)"
        )
        return

    if state.end_triggered and state.current_player_index == state.end_trigger_player_index:
        state.status = GameStatus.FINISHED
        state.end_reason = EndReason.VICTORY
        state.winner_id = determine_winner(state).player_id
        logger.info(f"Game {state.game_id} finished, winner {state.winner_id}")


def next_turn(state: GameState) -> None:
    state.current_player_index = (state.current_player_index + 1) % len(state.players)


__all__ = [
    "get_player",
    "find_card",
    "grant_tokens",
    "pay_for_card",
    "remove_card_from_board",
    "check_noble_visits",
    "determine_winner",
    "check_win_condition",
    "next_turn",
]
