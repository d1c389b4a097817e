"""Validation des prises de jetons.

`is_valid_token_take` est l'unique source de vérité sur la légalité d'une
prise : elle sert aussi bien au pré-contrôle d'une requête qu'au moteur.
Fonction pure, sans effet de bord.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from splendor.engine.rules import (
    GEM_TYPES,
    GOLD,
    MAX_TOKENS_PER_TAKE,
    TAKE_TWO_MIN_AVAILABLE,
)


def is_token_count(value: Any) -> bool:
    # bool est une sous-classe d'int : refusé explicitement
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _valid_request(tokens: Mapping[str, Any]) -> bool:
    for gem, count in tokens.items():
        if gem not in GEM_TYPES:
            return False
        if count is None:
            continue
        if not is_token_count(count):
            return False
    return True


def _valid_available(tokens: Mapping[str, Any]) -> bool:
    for gem in tokens:
        if gem not in GEM_TYPES:
            return False
    for gem in GEM_TYPES:
        if gem not in tokens or not is_token_count(tokens[gem]):
            return False
    return True


def is_valid_token_take(
    requested: Optional[Mapping[str, Any]],
    available: Optional[Mapping[str, Any]],
) -> bool:
    """Vérifie qu'une prise de jetons respecte les règles officielles.

    Deux formes seulement sont légales :
    - trois gemmes différentes, une de chaque, chacune disponible;
    - deux jetons d'une même gemme, si au moins 4 restent dans la banque.

    Args:
        requested: prise demandée (banque partielle, clés absentes = 0)
        available: banque complète du plateau (les six gemmes obligatoires)

    Returns:
        True si la prise est légale
    """

    if requested is None or available is None:
        return False
    if not isinstance(requested, Mapping) or not isinstance(available, Mapping):
        return False
    if not _valid_request(requested) or not _valid_available(available):
        return False

    # L'or ne se prend jamais directement
    if (requested.get(GOLD) or 0) > 0:
        return False

    selected = [(gem, count) for gem, count in requested.items() if count]
    if not selected:
        return False
    if sum(count for _, count in selected) > MAX_TOKENS_PER_TAKE:
        return False

    if len(selected) == 3:
        return all(count == 1 and available[gem] >= 1 for gem, count in selected)

    if len(selected) == 1:
        gem, count = selected[0]
        return count == 2 and available[gem] >= TAKE_TWO_MIN_AVAILABLE

    return False


__all__ = ["is_token_count", "is_valid_token_take"]
