"""Évènements publiés par la couche application (`splendor.app`)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from splendor.engine.actions import Action
from splendor.engine.state import EndReason, GameState


@dataclass(frozen=True)
class GameStartedEvent:
    """Émis lorsqu'une nouvelle partie est initialisée."""

    state: GameState


@dataclass(frozen=True)
class ActionAppliedEvent:
    """Émis après qu'une commande a été acceptée par le moteur."""

    player_id: str
    action: Action
    previous_state: GameState
    new_state: GameState


@dataclass(frozen=True)
class GameEndedEvent:
    """Émis quand la partie passe à FINISHED (victoire ou abandon)."""

    state: GameState
    winner_id: Optional[str]
    end_reason: Optional[EndReason]
