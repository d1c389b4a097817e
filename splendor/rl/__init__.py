"""Encodage des observations pour agents d'apprentissage.

L'encodage utilise une **perspective ego-centrée** : le joueur qui a la main
est toujours encodé en premier.

Exemple :
    >>> from splendor.engine import GameEngine
    >>> from splendor.rl.features import build_observation
    >>>
    >>> state = GameEngine(seed=42).new_game(["Alice", "Bob"])
    >>> obs = build_observation(state)
    >>> # obs.tokens[0] contient toujours les jetons du joueur actuel
"""

from .features import ObservationTensor, build_observation

__all__ = ["ObservationTensor", "build_observation"]
