"""État du jeu Splendor.

Ce module définit les entités de référence (`Card`, `Noble`), le plateau,
les joueurs et l'instantané de partie `GameState`. Le moteur ne modifie jamais
un `GameState` reçu : chaque commande travaille sur une copie profonde.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

from splendor.engine.rules import CARD_TIERS, empty_bank


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GameStatus(Enum):
    """Statuts d'une partie (FINISHED est terminal)."""

    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


class EndReason(Enum):
    """Raison de fin de partie."""

    VICTORY = "victory"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class Card:
    """Carte de développement (donnée de référence immuable).

    Args:
        id: identifiant unique (ex: "card_1_5")
        tier: niveau 1 à 3
        prestige: points de prestige (>= 0)
        gem_bonus: gemme colorée accordée en bonus permanent
        cost: coût par gemme colorée (jamais d'or)
    """

    id: str
    tier: int
    prestige: int
    gem_bonus: str
    cost: Dict[str, int] = field(default_factory=dict)

    def cost_of(self, gem: str) -> int:
        return self.cost.get(gem, 0)


@dataclass(frozen=True)
class Noble:
    """Noble (donnée de référence immuable)."""

    id: str
    name: str
    prestige: int
    requirements: Dict[str, int] = field(default_factory=dict)


@dataclass
class Player:
    """Représentation d'un joueur."""

    player_id: str
    name: str
    tokens: Dict[str, int] = field(default_factory=empty_bank)
    cards: List[Card] = field(default_factory=list)  # ordre d'acquisition
    reserved_cards: List[Card] = field(default_factory=list)
    nobles: List[Noble] = field(default_factory=list)
    prestige: int = 0

    @property
    def total_tokens(self) -> int:
        return sum(self.tokens.values())

    def bonuses(self) -> Dict[str, int]:
        """Banque canonique des bonus permanents (l'or reste toujours à 0)."""

        counts = empty_bank()
        for card in self.cards:
            counts[card.gem_bonus] += 1
        return counts

    def computed_prestige(self) -> int:
        """Recalcule le prestige depuis les cartes et nobles possédés."""

        return sum(card.prestige for card in self.cards) + sum(
            noble.prestige for noble in self.nobles
        )


def _empty_tiers() -> Dict[int, List[Card]]:
    return {tier: [] for tier in CARD_TIERS}


@dataclass
class GameBoard:
    """Plateau: cartes visibles, pioches ordonnées, nobles et banque."""

    available_cards: Dict[int, List[Card]] = field(default_factory=_empty_tiers)
    decks: Dict[int, List[Card]] = field(default_factory=_empty_tiers)
    nobles: List[Noble] = field(default_factory=list)
    tokens: Dict[str, int] = field(default_factory=empty_bank)

    @property
    def card_decks(self) -> Dict[int, int]:
        """Nombre de cartes restant dans chaque pioche."""

        return {tier: len(self.decks.get(tier, [])) for tier in CARD_TIERS}


@dataclass
class GameState:
    """Instantané d'une partie.

    Les commandes du moteur retournent un nouvel état; l'instance d'origine
    reste utilisable telle quelle (audit, annulation, spectateurs).
    """

    game_id: str
    players: List[Player]
    board: GameBoard
    current_player_index: int = 0
    status: GameStatus = GameStatus.IN_PROGRESS
    end_triggered: bool = False
    end_trigger_player_index: Optional[int] = None
    winner_id: Optional[str] = None
    end_reason: Optional[EndReason] = None
    ended_by: Optional[str] = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_index]

    @property
    def is_game_over(self) -> bool:
        return self.status == GameStatus.FINISHED

    @property
    def winner(self) -> Optional[Player]:
        if self.winner_id is None:
            return None
        return next((p for p in self.players if p.player_id == self.winner_id), None)

    def token_totals(self) -> Dict[str, int]:
        """Somme des jetons (banque + joueurs) par gemme."""

        totals = dict(self.board.tokens)
        for player in self.players:
            for gem, count in player.tokens.items():
                totals[gem] = totals.get(gem, 0) + count
        return totals


__all__ = [
    "Card",
    "Noble",
    "Player",
    "GameBoard",
    "GameState",
    "GameStatus",
    "EndReason",
    "utcnow",
]
