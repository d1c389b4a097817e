"""Règles et constantes de Splendor.

Ce module expose le contrat minimal attendu par le moteur et les tests:
- types de gemmes (`GEM_TYPES`, `COLORED_GEMS`, `GOLD`)
- table de mise en place par nombre de joueurs
- seuils de fin de partie et limites par joueur
- options de règles activables (`RuleOptions`)
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping

GOLD: str = "gold"
COLORED_GEMS: tuple[str, ...] = ("diamond", "sapphire", "emerald", "ruby", "onyx")
GEM_TYPES: tuple[str, ...] = COLORED_GEMS + (GOLD,)

CARD_TIERS: tuple[int, ...] = (1, 2, 3)
FACE_UP_CARDS_PER_TIER: int = 4

MIN_PLAYERS: int = 2
MAX_PLAYERS: int = 4

# Jetons colorés par gemme selon le nombre de joueurs (règle officielle)
TOKENS_PER_PLAYER_COUNT: Dict[int, int] = {2: 4, 3: 5, 4: 7}
GOLD_TOKENS: int = 5

WINNING_PRESTIGE: int = 15

MAX_TOKENS_PER_PLAYER: int = 10
MAX_RESERVED_CARDS: int = 3

# Prendre 2 jetons identiques exige au moins 4 jetons dans la banque
TAKE_TWO_MIN_AVAILABLE: int = 4
MAX_TOKENS_PER_TAKE: int = 3


@dataclass(frozen=True)
class RuleOptions:
    """Options de règles non appliquées par défaut.

    Args:
        enforce_token_limit: refuse les prises qui dépassent 10 jetons en main
        enforce_reserve_limit: refuse une 4e carte réservée
        gold_is_wildcard: l'or d'un paiement couvre le manque des autres gemmes
    """

    enforce_token_limit: bool = False
    enforce_reserve_limit: bool = False
    gold_is_wildcard: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RuleOptions":
        """Construit les options depuis un dict (clés inconnues refusées)."""

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown rule options: {', '.join(unknown)}")
        values = {}
        for name, value in data.items():
            if not isinstance(value, bool):
                raise ValueError(f"Rule option {name!r} must be a boolean")
            values[name] = value
        return cls(**values)


def empty_bank() -> Dict[str, int]:
    """Retourne une banque canonique vide (les six gemmes à zéro)."""

    return {gem: 0 for gem in GEM_TYPES}


def starting_bank(player_count: int) -> Dict[str, int]:
    """Banque initiale pour un nombre de joueurs donné (2 à 4)."""

    per_gem = TOKENS_PER_PLAYER_COUNT[player_count]
    bank = {gem: per_gem for gem in COLORED_GEMS}
    bank[GOLD] = GOLD_TOKENS
    return bank


__all__ = [
    "GOLD",
    "COLORED_GEMS",
    "GEM_TYPES",
    "CARD_TIERS",
    "FACE_UP_CARDS_PER_TIER",
    "MIN_PLAYERS",
    "MAX_PLAYERS",
    "TOKENS_PER_PLAYER_COUNT",
    "GOLD_TOKENS",
    "WINNING_PRESTIGE",
    "MAX_TOKENS_PER_PLAYER",
    "MAX_RESERVED_CARDS",
    "TAKE_TWO_MIN_AVAILABLE",
    "MAX_TOKENS_PER_TAKE",
    "RuleOptions",
    "empty_bank",
    "starting_bank",
]
