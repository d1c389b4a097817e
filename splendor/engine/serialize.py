"""Outils de sérialisation pour GameState.

Contrat partagé avec les couches persistance/transport :
- snapshot JSON-friendly (listes/dicts primitifs, clés camelCase)
- `availableCards` / `cardDecks` par niveau (`tier1`..`tier3`)
- `decks` conserve l'ordre exact des pioches pour une restauration fidèle;
  un snapshot qui ne porte que les compteurs `cardDecks` est reconstruit à
  partir du catalogue.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Set

from splendor.engine.catalog import CARD_CATALOG
from splendor.engine.rules import CARD_TIERS, GEM_TYPES, WINNING_PRESTIGE
from splendor.engine.state import (
    Card,
    EndReason,
    GameBoard,
    GameState,
    GameStatus,
    Noble,
    Player,
)

SCHEMA_VERSION = "1.0.0"


def state_to_snapshot(state: GameState) -> Dict[str, Any]:
    """Convertit un GameState en snapshot JSON-friendly."""

    winner = state.winner
    snapshot: Dict[str, Any] = {
        "schemaVersion": SCHEMA_VERSION,
        "variant": {"winningPrestige": WINNING_PRESTIGE},
        "id": state.game_id,
        "players": [_serialize_player(player) for player in state.players],
        "board": _serialize_board(state.board),
        "currentPlayerIndex": state.current_player_index,
        "state": state.status.value,
        "endTriggered": state.end_triggered,
        "endTriggerPlayerIndex": state.end_trigger_player_index,
        "winner": _serialize_player(winner) if winner is not None else None,
        "endReason": state.end_reason.value if state.end_reason is not None else None,
        "endedBy": state.ended_by,
        "createdAt": state.created_at.isoformat(),
        "updatedAt": state.updated_at.isoformat(),
    }
    return snapshot


def snapshot_to_state(snapshot: Mapping[str, Any]) -> GameState:
    """Reconstruit un GameState à partir d'un snapshot."""

    version = snapshot.get("schemaVersion")
    if version != SCHEMA_VERSION:
        raise ValueError(f"Unsupported schemaVersion: {version!r}")

    players = [_deserialize_player(data) for data in snapshot["players"]]
    board = _deserialize_board(snapshot["board"], players)

    winner = snapshot.get("winner")
    end_reason = snapshot.get("endReason")
    return GameState(
        game_id=str(snapshot["id"]),
        players=players,
        board=board,
        current_player_index=int(snapshot["currentPlayerIndex"]),
        status=GameStatus(snapshot["state"]),
        end_triggered=bool(snapshot.get("endTriggered", False)),
        end_trigger_player_index=snapshot.get("endTriggerPlayerIndex"),
        winner_id=str(winner["id"]) if winner else None,
        end_reason=EndReason(end_reason) if end_reason else None,
        ended_by=snapshot.get("endedBy"),
        created_at=datetime.fromisoformat(snapshot["createdAt"]),
        updated_at=datetime.fromisoformat(snapshot["updatedAt"]),
    )


def card_to_dict(card: Card) -> Dict[str, Any]:
    return {
        "id": card.id,
        "tier": card.tier,
        "cost": dict(card.cost),
        "gemBonus": card.gem_bonus,
        "prestige": card.prestige,
    }


def card_from_dict(data: Mapping[str, Any]) -> Card:
    return Card(
        id=str(data["id"]),
        tier=int(data["tier"]),
        prestige=int(data.get("prestige", 0)),
        gem_bonus=str(data["gemBonus"]),
        cost={gem: int(count) for gem, count in data.get("cost", {}).items() if count},
    )


def _serialize_noble(noble: Noble) -> Dict[str, Any]:
    return {
        "id": noble.id,
        "name": noble.name,
        "requirements": dict(noble.requirements),
        "prestige": noble.prestige,
    }


def _deserialize_noble(data: Mapping[str, Any]) -> Noble:
    return Noble(
        id=str(data["id"]),
        name=str(data.get("name", "")),
        prestige=int(data.get("prestige", 0)),
        requirements={gem: int(count) for gem, count in data.get("requirements", {}).items()},
    )


def _serialize_player(player: Player) -> Dict[str, Any]:
    return {
        "id": player.player_id,
        "name": player.name,
        "tokens": dict(player.tokens),
        "cards": [card_to_dict(card) for card in player.cards],
        "reservedCards": [card_to_dict(card) for card in player.reserved_cards],
        "nobles": [_serialize_noble(noble) for noble in player.nobles],
        "prestige": player.prestige,
    }


def _deserialize_player(data: Mapping[str, Any]) -> Player:
    return Player(
        player_id=str(data["id"]),
        name=str(data.get("name", "")),
        tokens=_canonical_bank(data.get("tokens", {})),
        cards=[card_from_dict(card) for card in data.get("cards", [])],
        reserved_cards=[card_from_dict(card) for card in data.get("reservedCards", [])],
        nobles=[_deserialize_noble(noble) for noble in data.get("nobles", [])],
        prestige=int(data.get("prestige", 0)),
    )


def _serialize_board(board: GameBoard) -> Dict[str, Any]:
    return {
        "availableCards": {
            _tier_key(tier): [card_to_dict(card) for card in board.available_cards.get(tier, [])]
            for tier in CARD_TIERS
        },
        "cardDecks": {_tier_key(tier): count for tier, count in board.card_decks.items()},
        "decks": {
            _tier_key(tier): [card_to_dict(card) for card in board.decks.get(tier, [])]
            for tier in CARD_TIERS
        },
        "nobles": [_serialize_noble(noble) for noble in board.nobles],
        "tokens": dict(board.tokens),
    }


def _deserialize_board(data: Mapping[str, Any], players: List[Player]) -> GameBoard:
    available_payload = data.get("availableCards", {})
    available = {
        tier: [card_from_dict(card) for card in available_payload.get(_tier_key(tier), [])]
        for tier in CARD_TIERS
    }

    decks_payload: Optional[Mapping[str, Any]] = data.get("decks")
    if decks_payload is not None:
        decks = {
            tier: [card_from_dict(card) for card in decks_payload.get(_tier_key(tier), [])]
            for tier in CARD_TIERS
        }
    else:
        seen: Set[str] = {card.id for cards in available.values() for card in cards}
        for player in players:
            seen.update(card.id for card in player.cards)
            seen.update(card.id for card in player.reserved_cards)
        decks = _rebuild_decks(data.get("cardDecks", {}), seen)

    return GameBoard(
        available_cards=available,
        decks=decks,
        nobles=[_deserialize_noble(noble) for noble in data.get("nobles", [])],
        tokens=_canonical_bank(data.get("tokens", {})),
    )


def _rebuild_decks(counts: Mapping[str, Any], seen: Set[str]) -> Dict[int, List[Card]]:
    """Reconstitue des pioches de la bonne taille avec les cartes non vues."""

    decks: Dict[int, List[Card]] = {}
    for tier in CARD_TIERS:
        count = int(counts.get(_tier_key(tier), 0))
        unseen = [card for card in CARD_CATALOG if card.tier == tier and card.id not in seen]
        if count > len(unseen):
            raise ValueError(f"cardDecks.{_tier_key(tier)}={count} exceeds unseen catalog cards")
        decks[tier] = unseen[:count]
    return decks


def _canonical_bank(payload: Mapping[str, Any]) -> Dict[str, int]:
    return {gem: int(payload.get(gem) or 0) for gem in GEM_TYPES}


def _tier_key(tier: int) -> str:
    return f"tier{tier}"


__all__ = [
    "SCHEMA_VERSION",
    "state_to_snapshot",
    "snapshot_to_state",
    "card_to_dict",
    "card_from_dict",
]
