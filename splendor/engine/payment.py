"""Calcul et vérification des paiements de cartes."""

from __future__ import annotations

from typing import Dict, Mapping

from splendor.engine.rules import COLORED_GEMS, GOLD
from splendor.engine.state import Card, Player


def calculate_player_bonuses(player: Player) -> Dict[str, int]:
    """Banque canonique des bonus permanents du joueur (voir `Player.bonuses`)."""

    return player.bonuses()


def calculate_optimal_payment(player: Player, card: Card) -> Dict[str, int]:
    """Paiement minimal : jetons de la couleur d'abord, l'or pour le reste.

    Les entrées nulles sont omises; `gold` n'apparaît que si un manque existe.
    """

    bonuses = calculate_player_bonuses(player)
    payment: Dict[str, int] = {}
    gold = 0
    for gem in COLORED_GEMS:
        needed = max(0, card.cost_of(gem) - bonuses[gem])
        if needed == 0:
            continue
        from_gem = min(needed, player.tokens.get(gem, 0))
        if from_gem > 0:
            payment[gem] = from_gem
        gold += needed - from_gem
    if gold > 0:
        payment[GOLD] = gold
    return payment


def can_afford_card(
    player: Player,
    card: Card,
    payment: Mapping[str, int],
    *,
    gold_is_wildcard: bool = False,
) -> bool:
    """Vérifie qu'un paiement proposé couvre le coût d'une carte.

    Le joueur doit détenir chaque montant payé. Les bonus sont ensuite ajoutés
    au paiement gemme par gemme, et chaque gemme colorée doit atteindre son
    coût. Par défaut l'or payé ne couvre rien; avec `gold_is_wildcard`, il
    compense la somme des manques.

    Args:
        player: joueur qui paie
        card: carte visée
        payment: jetons proposés par gemme
        gold_is_wildcard: option de règle (voir `RuleOptions`)

    Returns:
        True si le paiement est suffisant
    """

    for gem, amount in payment.items():
        if amount and amount > 0 and player.tokens.get(gem, 0) < amount:
            return False

    bonuses = calculate_player_bonuses(player)
    effective = dict(payment)
    for gem, bonus in bonuses.items():
        effective[gem] = (effective.get(gem) or 0) + bonus

    if not gold_is_wildcard:
        return all(
            (effective.get(gem) or 0) >= card.cost_of(gem) for gem in COLORED_GEMS
        )

    shortfall = sum(
        max(0, card.cost_of(gem) - (effective.get(gem) or 0)) for gem in COLORED_GEMS
    )
    return (payment.get(GOLD) or 0) >= shortfall


__all__ = [
    "calculate_player_bonuses",
    "calculate_optimal_payment",
    "can_afford_card",
]
