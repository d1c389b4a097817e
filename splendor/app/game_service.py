"""Service d'orchestration pour une partie Splendor."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

from splendor.app.event_bus import EventBus
from splendor.app.events import ActionAppliedEvent, GameEndedEvent, GameStartedEvent
from splendor.engine.actions import Action
from splendor.engine.engine import GameEngine
from splendor.engine.errors import GameError
from splendor.engine.serialize import state_to_snapshot
from splendor.engine.state import GameState

logger = logging.getLogger("splendor.app")


class GameService:
    """Wrappe une partie `GameState` et publie les évènements associés.

    Le service détient une seule partie à la fois. Les commandes refusées par le
    moteur sont journalisées puis propagées telles quelles à l'appelant.
    """

    def __init__(
        self,
        *,
        engine: GameEngine | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self._engine = engine or GameEngine()
        self._event_bus = event_bus or EventBus()
        self._state: GameState | None = None

    @property
    def engine(self) -> GameEngine:
        return self._engine

    @property
    def event_bus(self) -> EventBus:
        """Retourne le bus d'évènements utilisé par le service."""

        return self._event_bus

    @property
    def state(self) -> GameState:
        """État courant de la partie (erreur si aucune partie lancée)."""

        if self._state is None:
            raise RuntimeError("Aucune partie initialisée. Utiliser start_new_game().")
        return self._state

    def start_new_game(
        self,
        player_names: Sequence[str],
        *,
        seed: int | None = None,
        player_ids: Sequence[str] | None = None,
    ) -> GameState:
        """Initialise une nouvelle partie et publie `GameStartedEvent`.

        Un `seed` remplace le moteur courant par un moteur déterministe qui
        conserve les mêmes options de règles.
        """

        if seed is not None:
            self._engine = GameEngine(seed=seed, options=self._engine.options)
        state = self._engine.new_game(player_names, player_ids=player_ids)
        self._state = state
        self._event_bus.publish(GameStartedEvent(state=state))
        return state

    def legal_actions(self) -> List[Action]:
        """Retourne les actions légales pour l'état courant."""

        return self._engine.legal_actions(self.state)

    def dispatch(self, player_id: str, action: Action) -> GameState:
        """Applique une action au nom d'un joueur, puis notifie les observateurs."""

        current_state = self.state
        try:
            new_state = self._engine.apply(current_state, player_id, action)
        except GameError as exc:
            logger.info(f"Game {current_state.game_id}: rejected {action} from {player_id}: {exc}")
            raise
        self._state = new_state

        self._event_bus.publish(
            ActionAppliedEvent(
                player_id=player_id,
                action=action,
                previous_state=current_state,
                new_state=new_state,
            )
        )
        self._publish_end_if_finished(current_state, new_state)
        return new_state

    def terminate(self, player_id: str) -> GameState:
        """Met fin à la partie en cours à la demande d'un joueur."""

        current_state = self.state
        try:
            new_state = self._engine.terminate_game(current_state, player_id)
        except GameError as exc:
            logger.info(f"Game {current_state.game_id}: rejected termination by {player_id}: {exc}")
            raise
        self._state = new_state
        self._publish_end_if_finished(current_state, new_state)
        return new_state

    def snapshot(self) -> Dict[str, Any]:
        """Retourne le snapshot JSON-friendly de l'état courant."""

        return state_to_snapshot(self.state)

    def _publish_end_if_finished(self, previous: GameState, new_state: GameState) -> None:
        if new_state.is_game_over and not previous.is_game_over:
            self._event_bus.publish(
                GameEndedEvent(
                    state=new_state,
                    winner_id=new_state.winner_id,
                    end_reason=new_state.end_reason,
                )
            )


__all__ = ["GameService"]
