"""Erreurs typées levées par le moteur.

Toutes dérivent de `GameError` (elle-même une `ValueError`) afin que les
appelants puissent filtrer finement ou attraper une commande refusée en bloc.
Une erreur signifie toujours que la commande a été rejetée avant toute
mutation : la partie reste valide et jouable.
"""

from __future__ import annotations


class GameError(ValueError):
    """Commande refusée par le moteur."""


class InvalidArgumentError(GameError):
    """Champ de commande manquant, nul ou mal formé."""


class TurnViolationError(GameError):
    """Commande d'un joueur qui n'a pas la main, ou partie terminée."""


class RuleViolationError(GameError):
    """Sélection de jetons illégale, paiement insuffisant, carte introuvable."""


class SetupViolationError(GameError):
    """Nombre de joueurs hors [2, 4] ou catalogue insuffisant."""


__all__ = [
    "GameError",
    "InvalidArgumentError",
    "TurnViolationError",
    "RuleViolationError",
    "SetupViolationError",
]
