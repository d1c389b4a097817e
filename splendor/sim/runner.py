"""Boucle headless pour le moteur Splendor.

Expose un environnement minimaliste `reset()` / `step()` au-dessus de
`GameEngine` et une fonction `play_game` qui fait s'affronter des politiques
jusqu'à la fin de la partie (ou jusqu'à `max_turns`).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from splendor.engine.actions import Action
from splendor.engine.engine import GameEngine
from splendor.engine.rules import RuleOptions
from splendor.engine.state import EndReason, GameState
from splendor.sim.policies import AgentPolicy

logger = logging.getLogger("splendor.sim")

DEFAULT_MAX_TURNS = 1000


@dataclass(frozen=True)
class StepResult:
    """Résultat d'un appel à HeadlessEnv.step()."""

    state: GameState
    reward: Tuple[float, ...]
    done: bool
    info: Dict[str, Any]


@dataclass(frozen=True)
class GameSummary:
    """Résumé d'une partie simulée."""

    game_id: str
    winner_id: Optional[str]
    end_reason: Optional[EndReason]
    turns: int
    stalled: bool
    final_state: GameState

    @property
    def finished(self) -> bool:
        return self.final_state.is_game_over


class HeadlessEnv:
    """Environnement headless léger pour le moteur Splendor."""

    def __init__(
        self,
        *,
        seed: int | None = None,
        options: RuleOptions | None = None,
        player_names: Sequence[str] = ("Alice", "Bob"),
    ) -> None:
        self._base_seed = seed
        self._options = options
        self._player_names = list(player_names)
        self._engine = GameEngine(seed=seed, options=options)
        self._state: GameState | None = None

    @property
    def engine(self) -> GameEngine:
        return self._engine

    @property
    def state(self) -> GameState:
        """Retourne l'état courant (reset doit avoir été appelé)."""

        if self._state is None:
            raise RuntimeError("reset() doit être appelé avant d'accéder à l'état")
        return self._state

    def reset(
        self,
        *,
        seed: int | None = None,
        state: GameState | None = None,
    ) -> GameState:
        """Réinitialise l'environnement et renvoie l'état initial."""

        if state is not None:
            self._state = state
            return state

        effective_seed = seed if seed is not None else self._base_seed
        self._engine = GameEngine(seed=effective_seed, options=self._options)
        self._state = self._engine.new_game(self._player_names)
        return self._state

    def legal_actions(self) -> List[Action]:
        """Retourne les actions légales de l'état courant."""

        return self._engine.legal_actions(self.state)

    def step(self, action: Action) -> StepResult:
        """Applique l'action au nom du joueur qui a la main."""

        current_state = self.state
        player_id = current_state.current_player.player_id
        new_state = self._engine.apply(current_state, player_id, action)
        self._state = new_state

        done = new_state.is_game_over
        reward = tuple(
            1.0 if done and player.player_id == new_state.winner_id else 0.0
            for player in new_state.players
        )
        info = {"last_action": action, "player_id": player_id}
        return StepResult(state=new_state, reward=reward, done=done, info=info)


def play_game(
    policies: Sequence[AgentPolicy],
    *,
    seed: int | None = None,
    max_turns: int = DEFAULT_MAX_TURNS,
    options: RuleOptions | None = None,
) -> GameSummary:
    """Joue une partie complète entre les politiques données (une par siège).

    La partie s'arrête à la victoire, lorsque le joueur qui a la main n'a
    aucune action légale (`stalled`) ou après `max_turns` actions.
    """

    if max_turns <= 0:
        raise ValueError("max_turns doit être strictement positif")

    names = [f"{policy.name}_{index}" for index, policy in enumerate(policies)]
    env = HeadlessEnv(seed=seed, options=options, player_names=names)
    state = env.reset()

    turns = 0
    stalled = False
    while not state.is_game_over and turns < max_turns:
        legal = env.legal_actions()
        if not legal:
            stalled = True
            logger.info(f"Game {state.game_id} stalled after {turns} turns")
            break
        policy = policies[state.current_player_index]
        result = env.step(policy.select_action(state, legal))
        state = result.state
        turns += 1

    return GameSummary(
        game_id=state.game_id,
        winner_id=state.winner_id,
        end_reason=state.end_reason,
        turns=turns,
        stalled=stalled,
        final_state=state,
    )


__all__ = ["HeadlessEnv", "StepResult", "GameSummary", "play_game", "DEFAULT_MAX_TURNS"]
