"""Commandes jouables par le joueur qui a la main."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass(frozen=True)
class Action:
    """Action de base."""

    pass


@dataclass(frozen=True)
class TakeTokens(Action):
    """Prend des jetons dans la banque.

    Args:
        tokens: jetons demandés par gemme (3 différentes ou 2 identiques)
    """

    tokens: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class PurchaseCard(Action):
    """Achète une carte visible du plateau.

    Args:
        card_id: ID de la carte
        payment: paiement proposé (calculé automatiquement si absent)
    """

    card_id: str
    payment: Optional[Dict[str, int]] = None


@dataclass(frozen=True)
class ReserveCard(Action):
    """Réserve une carte visible et reçoit un jeton or si la banque en a.

    Args:
        card_id: ID de la carte
    """

    card_id: str


@dataclass(frozen=True)
class PurchaseReservedCard(Action):
    """Achète une carte parmi ses propres cartes réservées.

    Args:
        card_id: ID de la carte réservée
        payment: paiement proposé (calculé automatiquement si absent)
    """

    card_id: str
    payment: Optional[Dict[str, int]] = None


__all__ = [
    "Action",
    "TakeTokens",
    "PurchaseCard",
    "ReserveCard",
    "PurchaseReservedCard",
]
