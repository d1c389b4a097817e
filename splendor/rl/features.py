"""Encodage ObservationTensor pour agents d'apprentissage."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

import numpy as np

from splendor.engine.rules import (
    CARD_TIERS,
    COLORED_GEMS,
    FACE_UP_CARDS_PER_TIER,
    GEM_TYPES,
    GOLD,
    GOLD_TOKENS,
    MAX_PLAYERS,
    TOKENS_PER_PLAYER_COUNT,
    WINNING_PRESTIGE,
)
from splendor.engine.state import Card, GameState, Player

_GEM_TO_INDEX: Dict[str, int] = {gem: idx for idx, gem in enumerate(GEM_TYPES)}
_COLORED_TO_INDEX: Dict[str, int] = {gem: idx for idx, gem in enumerate(COLORED_GEMS)}
_TOKEN_NORMALIZER = float(max(TOKENS_PER_PLAYER_COUNT.values()))
_COST_NORMALIZER = 7.0
_BONUS_NORMALIZER = 10.0
_NOBLE_REQUIREMENT_NORMALIZER = 4.0
_MAX_NOBLES = MAX_PLAYERS + 1

# Caractéristiques d'une carte: présence, niveau, prestige, bonus (one-hot), coût
CARD_FEATURES = 3 + 2 * len(COLORED_GEMS)
# Caractéristiques d'un noble: présence, prestige, exigences
NOBLE_FEATURES = 2 + len(COLORED_GEMS)


@dataclass(frozen=True)
class ObservationTensor:
    """Structure regroupant les tenseurs d'observation."""

    bank: np.ndarray
    tokens: np.ndarray
    bonuses: np.ndarray
    prestige: np.ndarray
    cards: np.ndarray
    reserved: np.ndarray
    nobles: np.ndarray
    metadata: np.ndarray


def build_observation(state: GameState) -> ObservationTensor:
    """Construit un ObservationTensor normalisé à partir d'un GameState.

    L'encodage est ego-centré : le joueur qui a la main est toujours à
    l'index 0, les adversaires suivent dans l'ordre de jeu. Les tableaux par
    joueur ont toujours `MAX_PLAYERS` lignes (lignes vides à zéro).

    Args:
        state: état du jeu à encoder.

    Returns:
        ObservationTensor dont toutes les composantes sont en float32.
    """

    ordered = _ego_order(state)
    return ObservationTensor(
        bank=_encode_bank(state),
        tokens=_encode_tokens(ordered),
        bonuses=_encode_bonuses(ordered),
        prestige=_encode_prestige(ordered),
        cards=_encode_face_up_cards(state),
        reserved=_encode_reserved(state.current_player),
        nobles=_encode_nobles(state),
        metadata=_encode_metadata(state),
    )


def _ego_order(state: GameState) -> List[Player]:
    count = len(state.players)
    start = state.current_player_index
    return [state.players[(start + offset) % count] for offset in range(count)]


def _token_value(gem: str, count: int) -> float:
    # L'or a son propre plafond (5), les gemmes colorées celui de 4 joueurs
    if gem == GOLD:
        return count / GOLD_TOKENS
    return count / _TOKEN_NORMALIZER


def _encode_bank(state: GameState) -> np.ndarray:
    tensor = np.zeros(len(GEM_TYPES), dtype=np.float32)
    for gem, index in _GEM_TO_INDEX.items():
        tensor[index] = _token_value(gem, state.board.tokens.get(gem, 0))
    return tensor


def _encode_tokens(players: List[Player]) -> np.ndarray:
    tensor = np.zeros((MAX_PLAYERS, len(GEM_TYPES)), dtype=np.float32)
    for row, player in enumerate(players):
        for gem, index in _GEM_TO_INDEX.items():
            tensor[row, index] = _token_value(gem, player.tokens.get(gem, 0))
    return tensor


def _encode_bonuses(players: List[Player]) -> np.ndarray:
    tensor = np.zeros((MAX_PLAYERS, len(COLORED_GEMS)), dtype=np.float32)
    for row, player in enumerate(players):
        bonuses = player.bonuses()
        for gem, index in _COLORED_TO_INDEX.items():
            tensor[row, index] = bonuses[gem] / _BONUS_NORMALIZER
    return tensor


def _encode_prestige(players: List[Player]) -> np.ndarray:
    tensor = np.zeros(MAX_PLAYERS, dtype=np.float32)
    for row, player in enumerate(players):
        tensor[row] = player.prestige / WINNING_PRESTIGE
    return tensor


def _encode_card(tensor: np.ndarray, card: Card) -> None:
    tensor[0] = 1.0
    tensor[1] = card.tier / len(CARD_TIERS)
    tensor[2] = card.prestige / 5.0
    tensor[3 + _COLORED_TO_INDEX[card.gem_bonus]] = 1.0
    offset = 3 + len(COLORED_GEMS)
    for gem, index in _COLORED_TO_INDEX.items():
        tensor[offset + index] = card.cost_of(gem) / _COST_NORMALIZER


def _encode_face_up_cards(state: GameState) -> np.ndarray:
    """Shape (niveaux, 4, CARD_FEATURES); un emplacement vide reste à zéro."""

    tensor = np.zeros(
        (len(CARD_TIERS), FACE_UP_CARDS_PER_TIER, CARD_FEATURES), dtype=np.float32
    )
    for tier_index, tier in enumerate(CARD_TIERS):
        cards = state.board.available_cards.get(tier, [])
        for slot, card in enumerate(cards[:FACE_UP_CARDS_PER_TIER]):
            _encode_card(tensor[tier_index, slot], card)
    return tensor


def _encode_reserved(player: Player) -> np.ndarray:
    # Trois emplacements suffisent avec la limite de réservation; au-delà on tronque
    tensor = np.zeros((3, CARD_FEATURES), dtype=np.float32)
    for slot, card in enumerate(player.reserved_cards[:3]):
        _encode_card(tensor[slot], card)
    return tensor


def _encode_nobles(state: GameState) -> np.ndarray:
    tensor = np.zeros((_MAX_NOBLES, NOBLE_FEATURES), dtype=np.float32)
    for slot, noble in enumerate(state.board.nobles[:_MAX_NOBLES]):
        tensor[slot, 0] = 1.0
        tensor[slot, 1] = noble.prestige / 3.0
        for gem, count in noble.requirements.items():
            tensor[slot, 2 + _COLORED_TO_INDEX[gem]] = count / _NOBLE_REQUIREMENT_NORMALIZER
    return tensor


def _encode_metadata(state: GameState) -> np.ndarray:
    """Encode les métadonnées de partie.

    Indices:
        0-2: cartes restantes par pioche (normalisées par la taille initiale max)
        3: nombre de joueurs (normalisé)
        4: fin de partie déclenchée
        5: partie terminée
        6: jetons or restants (normalisés)
    """

    metadata = np.zeros(7, dtype=np.float32)
    for index, tier in enumerate(CARD_TIERS):
        metadata[index] = state.board.card_decks.get(tier, 0) / 40.0
    metadata[3] = len(state.players) / MAX_PLAYERS
    metadata[4] = 1.0 if state.end_triggered else 0.0
    metadata[5] = 1.0 if state.is_game_over else 0.0
    metadata[6] = state.board.tokens.get(GOLD, 0) / GOLD_TOKENS
    return metadata


__all__ = ["ObservationTensor", "build_observation", "CARD_FEATURES", "NOBLE_FEATURES"]
