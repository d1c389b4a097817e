"""Moteur de règles Splendor.

`GameEngine` orchestre les commandes des joueurs. Chaque commande:
1. vérifie les paramètres et le tour du joueur;
2. valide la légalité propre à la commande (prise, paiement, carte);
3. copie profondément l'état et applique les primitives de `board`;
4. vérifie nobles et fin de partie, puis passe la main.

Une commande réussit entièrement (nouvel état) ou échoue sans aucune mutation
visible (exception typée). L'état reçu n'est jamais modifié.
"""

from __future__ import annotations

import copy
import logging
import random
import uuid
from itertools import combinations
from typing import Any, Dict, List, Mapping, MutableSequence, Optional, Protocol, Sequence

from splendor.engine import board as mutator
from splendor.engine.actions import (
    Action,
    PurchaseCard,
    PurchaseReservedCard,
    ReserveCard,
    TakeTokens,
)
from splendor.engine.catalog import CARD_CATALOG, NOBLE_CATALOG
from splendor.engine.errors import (
    InvalidArgumentError,
    RuleViolationError,
    SetupViolationError,
    TurnViolationError,
)
from splendor.engine.payment import calculate_optimal_payment, can_afford_card
from splendor.engine.rules import (
    CARD_TIERS,
    COLORED_GEMS,
    FACE_UP_CARDS_PER_TIER,
    GEM_TYPES,
    GOLD,
    MAX_PLAYERS,
    MAX_RESERVED_CARDS,
    MAX_TOKENS_PER_PLAYER,
    MIN_PLAYERS,
    TAKE_TWO_MIN_AVAILABLE,
    RuleOptions,
    starting_bank,
)
from splendor.engine.state import (
    Card,
    EndReason,
    GameBoard,
    GameState,
    GameStatus,
    Noble,
    Player,
    utcnow,
)
from splendor.engine.tokens import is_token_count, is_valid_token_take

logger = logging.getLogger("splendor.engine")


class RandomSource(Protocol):
    """Source d'aléa injectable (`random.Random` convient)."""

    def shuffle(self, x: MutableSequence[Any]) -> None: ...


class GameEngine:
    """Applique les commandes de jeu sur des instantanés `GameState`."""

    def __init__(
        self,
        *,
        seed: int | None = None,
        rng: RandomSource | None = None,
        cards: Sequence[Card] = CARD_CATALOG,
        nobles: Sequence[Noble] = NOBLE_CATALOG,
        options: RuleOptions | None = None,
    ) -> None:
        self._rng: RandomSource = rng if rng is not None else random.Random(seed)
        self._cards = tuple(cards)
        self._nobles = tuple(nobles)
        self._options = options or RuleOptions()

    @property
    def options(self) -> RuleOptions:
        return self._options

    # ------------------------------------------------------------------
    # Mise en place
    # ------------------------------------------------------------------

    def initialize_board(self, player_count: int) -> GameBoard:
        """Prépare la banque et distribue 4 cartes visibles par niveau.

        Args:
            player_count: nombre de joueurs (2, 3 ou 4)

        Returns:
            Plateau sans nobles (voir `update_nobles_for_player_count`)

        Raises:
            SetupViolationError: nombre de joueurs invalide ou catalogue trop court
        """

        _check_player_count(player_count)

        shuffled = list(self._cards)
        self._rng.shuffle(shuffled)

        available: Dict[int, List[Card]] = {}
        decks: Dict[int, List[Card]] = {}
        for tier in CARD_TIERS:
            tier_cards = [card for card in shuffled if card.tier == tier]
            if len(tier_cards) < FACE_UP_CARDS_PER_TIER:
                raise SetupViolationError(f"Insufficient tier {tier} cards for game setup")
            available[tier] = tier_cards[:FACE_UP_CARDS_PER_TIER]
            decks[tier] = tier_cards[FACE_UP_CARDS_PER_TIER:]

        return GameBoard(
            available_cards=available,
            decks=decks,
            nobles=[],
            tokens=starting_bank(player_count),
        )

    def update_nobles_for_player_count(self, state: GameState) -> GameState:
        """Tire `joueurs + 1` nobles et retourne le nouvel état."""

        new_state = _clone(state)
        self._deal_nobles(new_state)
        return new_state

    def new_game(
        self,
        player_names: Sequence[str],
        *,
        player_ids: Sequence[str] | None = None,
        game_id: str | None = None,
    ) -> GameState:
        """Crée une partie prête à jouer (plateau, nobles, premier joueur).

        Args:
            player_names: noms des joueurs, dans l'ordre des sièges
            player_ids: identifiants (par défaut "player_0", "player_1", ...)
            game_id: identifiant de partie (par défaut un uuid)
        """

        _check_player_count(len(player_names))
        if player_ids is None:
            player_ids = [f"player_{index}" for index in range(len(player_names))]
        if len(player_ids) != len(player_names):
            raise InvalidArgumentError("player_ids and player_names lengths differ")
        if len(set(player_ids)) != len(player_ids):
            raise InvalidArgumentError("Duplicate player ids")

        players = [
            Player(player_id=pid, name=name) for pid, name in zip(player_ids, player_names)
        ]
        state = GameState(
            game_id=game_id or uuid.uuid4().hex[:12],
            players=players,
            board=self.initialize_board(len(players)),
        )
        self._deal_nobles(state)
        logger.info(f"Game {state.game_id} created with {len(players)} players")
        return state

    def _deal_nobles(self, state: GameState) -> None:
        if not state.players:
            raise SetupViolationError("No players in game")
        player_count = len(state.players)
        if player_count < MIN_PLAYERS or player_count > MAX_PLAYERS:
            raise SetupViolationError("Invalid player count for noble setup")

        noble_count = player_count + 1
        shuffled = list(self._nobles)
        self._rng.shuffle(shuffled)
        if len(shuffled) < noble_count:
            raise SetupViolationError("Insufficient nobles for game setup")
        state.board.nobles = shuffled[:noble_count]

    # ------------------------------------------------------------------
    # Commandes
    # ------------------------------------------------------------------

    def take_tokens(
        self, state: GameState, player_id: str, tokens: Mapping[str, int]
    ) -> GameState:
        """Prend 3 jetons différents ou 2 identiques dans la banque."""

        if state is None or not player_id or tokens is None:
            raise InvalidArgumentError("Invalid parameters for take_tokens")
        self._require_turn(state, player_id)
        if not is_valid_token_take(tokens, state.board.tokens):
            raise RuleViolationError("Invalid token selection")

        taken = sum(count for count in tokens.values() if count)
        player = state.current_player
        if (
            self._options.enforce_token_limit
            and player.total_tokens + taken > MAX_TOKENS_PER_PLAYER
        ):
            raise RuleViolationError(
                f"Cannot exceed {MAX_TOKENS_PER_PLAYER} tokens. Must return tokens first."
            )

        new_state = _clone(state)
        new_player = new_state.current_player
        mutator.grant_tokens(new_state, new_player, tokens)
        logger.debug(f"Game {state.game_id}: {player_id} took {dict(tokens)}")
        return self._end_turn(new_state)

    def purchase_card(
        self,
        state: GameState,
        player_id: str,
        card_id: str,
        payment: Optional[Mapping[str, int]] = None,
    ) -> GameState:
        """Achète une carte visible; le paiement optimal est calculé si absent."""

        if state is None or not player_id or not card_id:
            raise InvalidArgumentError("Invalid parameters for purchase_card")
        self._require_turn(state, player_id)

        card = mutator.find_card(state, card_id)
        if card is None:
            raise RuleViolationError("Card not found")

        player = state.current_player
        payment = self._resolve_payment(player, card, payment)
        if not self._can_afford(player, card, payment):
            raise RuleViolationError("Cannot afford card with current resources")

        new_state = _clone(state)
        new_player = new_state.current_player
        new_card = mutator.find_card(new_state, card_id)
        assert new_card is not None

        mutator.pay_for_card(new_state, new_player, payment)
        new_player.cards.append(new_card)
        new_player.prestige += new_card.prestige
        mutator.remove_card_from_board(new_state, new_card)
        mutator.check_noble_visits(new_state, new_player)
        logger.debug(f"Game {state.game_id}: {player_id} purchased {card_id} with {payment}")
        return self._end_turn(new_state, triggering_player=new_player)

    def reserve_card(self, state: GameState, player_id: str, card_id: str) -> GameState:
        """Réserve une carte visible; un jeton or est donné si la banque en a."""

        if state is None or not player_id or not card_id:
            raise InvalidArgumentError("Invalid parameters for reserve_card")
        self._require_turn(state, player_id)

        if mutator.find_card(state, card_id) is None:
            raise RuleViolationError("Card not found")

        player = state.current_player
        if (
            self._options.enforce_reserve_limit
            and len(player.reserved_cards) >= MAX_RESERVED_CARDS
        ):
            raise RuleViolationError(f"Cannot reserve more than {MAX_RESERVED_CARDS} cards")
        gold_available = state.board.tokens.get(GOLD, 0) > 0
        if (
            self._options.enforce_token_limit
            and gold_available
            and player.total_tokens + 1 > MAX_TOKENS_PER_PLAYER
        ):
            raise RuleViolationError(
                f"Cannot exceed {MAX_TOKENS_PER_PLAYER} tokens. Must return tokens first."
            )

        new_state = _clone(state)
        new_player = new_state.current_player
        new_card = mutator.find_card(new_state, card_id)
        assert new_card is not None

        if gold_available:
            mutator.grant_tokens(new_state, new_player, {GOLD: 1})
        new_player.reserved_cards.append(new_card)
        mutator.remove_card_from_board(new_state, new_card)
        logger.debug(f"Game {state.game_id}: {player_id} reserved {card_id}")
        return self._end_turn(new_state)

    def purchase_reserved_card(
        self,
        state: GameState,
        player_id: str,
        card_id: str,
        payment: Optional[Mapping[str, int]] = None,
    ) -> GameState:
        """Achète une carte réservée et rend un jeton or à la banque."""

        if state is None or not player_id or not card_id:
            raise InvalidArgumentError("Invalid parameters for purchase_reserved_card")
        self._require_turn(state, player_id)

        player = state.current_player
        card = next((c for c in player.reserved_cards if c.id == card_id), None)
        if card is None:
            raise RuleViolationError("Card is not in your reserved cards")

        payment = self._resolve_payment(player, card, payment)
        if not self._can_afford(player, card, payment):
            raise RuleViolationError("Cannot afford this card")

        new_state = _clone(state)
        new_player = new_state.current_player
        index = next(i for i, c in enumerate(new_player.reserved_cards) if c.id == card_id)

        mutator.pay_for_card(new_state, new_player, payment)
        new_card = new_player.reserved_cards.pop(index)
        new_player.cards.append(new_card)
        new_player.prestige += new_card.prestige

        # Le joueur rend un or, borné à ce qu'il possède encore
        returned = min(1, new_player.tokens.get(GOLD, 0))
        new_player.tokens[GOLD] = new_player.tokens.get(GOLD, 0) - returned
        new_state.board.tokens[GOLD] = new_state.board.tokens.get(GOLD, 0) + returned

        mutator.check_noble_visits(new_state, new_player)
        logger.debug(
            f"Game {state.game_id}: {player_id} purchased reserved {card_id} with {payment}"
        )
        return self._end_turn(new_state, triggering_player=new_player)

    def terminate_game(self, state: GameState, player_id: str) -> GameState:
        """Met fin à une partie en cours à la demande d'un joueur (sans vainqueur)."""

        if state is None or not player_id:
            raise InvalidArgumentError("Invalid parameters for terminate_game")
        if state.status != GameStatus.IN_PROGRESS:
            raise TurnViolationError("Game is not in progress")
        if mutator.get_player(state, player_id) is None:
            raise InvalidArgumentError("Player not in game")

        new_state = _clone(state)
        new_state.status = GameStatus.FINISHED
        new_state.end_reason = EndReason.TERMINATED
        new_state.ended_by = player_id
        new_state.updated_at = utcnow()
        logger.info(f"Game {state.game_id} terminated by {player_id}")
        return new_state

    def apply(self, state: GameState, player_id: str, action: Action) -> GameState:
        """Applique une action (dataclass) au nom d'un joueur."""

        if isinstance(action, TakeTokens):
            return self.take_tokens(state, player_id, action.tokens)
        if isinstance(action, PurchaseCard):
            return self.purchase_card(state, player_id, action.card_id, action.payment)
        if isinstance(action, ReserveCard):
            return self.reserve_card(state, player_id, action.card_id)
        if isinstance(action, PurchaseReservedCard):
            return self.purchase_reserved_card(
                state, player_id, action.card_id, action.payment
            )
        raise InvalidArgumentError(f"Unsupported action: {action!r}")

    # ------------------------------------------------------------------
    # Requêtes
    # ------------------------------------------------------------------

    def is_player_turn(self, state: GameState, player_id: str) -> bool:
        if state.status != GameStatus.IN_PROGRESS:
            return False
        if not 0 <= state.current_player_index < len(state.players):
            return False
        return state.current_player.player_id == player_id

    def legal_actions(self, state: GameState) -> List[Action]:
        """Retourne la liste des actions légales du joueur qui a la main."""

        if state.is_game_over:
            return []

        player = state.current_player
        bank = state.board.tokens
        actions: List[Action] = []

        candidates: List[Dict[str, int]] = [
            {gem: 1 for gem in combo} for combo in combinations(COLORED_GEMS, 3)
        ]
        candidates.extend(
            {gem: 2} for gem in COLORED_GEMS if bank.get(gem, 0) >= TAKE_TWO_MIN_AVAILABLE
        )
        for tokens in candidates:
            if not is_valid_token_take(tokens, bank):
                continue
            if (
                self._options.enforce_token_limit
                and player.total_tokens + sum(tokens.values()) > MAX_TOKENS_PER_PLAYER
            ):
                continue
            actions.append(TakeTokens(tokens=tokens))

        for tier in CARD_TIERS:
            for card in state.board.available_cards.get(tier, []):
                payment = calculate_optimal_payment(player, card)
                if self._can_afford(player, card, payment):
                    actions.append(PurchaseCard(card_id=card.id))

        for card in player.reserved_cards:
            payment = calculate_optimal_payment(player, card)
            if self._can_afford(player, card, payment):
                actions.append(PurchaseReservedCard(card_id=card.id))

        can_reserve = not (
            self._options.enforce_reserve_limit
            and len(player.reserved_cards) >= MAX_RESERVED_CARDS
        )
        if (
            self._options.enforce_token_limit
            and bank.get(GOLD, 0) > 0
            and player.total_tokens + 1 > MAX_TOKENS_PER_PLAYER
        ):
            can_reserve = False
        if can_reserve:
            for tier in CARD_TIERS:
                for card in state.board.available_cards.get(tier, []):
                    actions.append(ReserveCard(card_id=card.id))

        return actions

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_turn(self, state: GameState, player_id: str) -> None:
        if state.status != GameStatus.IN_PROGRESS:
            raise TurnViolationError("Game is not in progress")
        if not self.is_player_turn(state, player_id):
            raise TurnViolationError("Not your turn")

    def _resolve_payment(
        self, player: Player, card: Card, payment: Optional[Mapping[str, int]]
    ) -> Dict[str, int]:
        if payment is None:
            return calculate_optimal_payment(player, card)
        if not isinstance(payment, Mapping):
            raise InvalidArgumentError("Payment must be a mapping of gem -> count")
        resolved: Dict[str, int] = {}
        for gem, amount in payment.items():
            if gem not in GEM_TYPES:
                raise InvalidArgumentError(f"Unknown gem in payment: {gem!r}")
            if amount is None:
                continue
            if not is_token_count(amount):
                raise InvalidArgumentError(f"Invalid payment amount for {gem}: {amount!r}")
            if amount > 0:
                resolved[gem] = amount
        return resolved

    def _can_afford(self, player: Player, card: Card, payment: Mapping[str, int]) -> bool:
        return can_afford_card(
            player, card, payment, gold_is_wildcard=self._options.gold_is_wildcard
        )

    def _end_turn(
        self, state: GameState, triggering_player: Player | None = None
    ) -> GameState:
        if triggering_player is not None:
            mutator.check_win_condition(state, triggering_player)
        mutator.next_turn(state)
        mutator.check_win_condition(state)
        state.updated_at = utcnow()
        return state


def _check_player_count(player_count: int) -> None:
    if player_count < MIN_PLAYERS or player_count > MAX_PLAYERS:
        raise SetupViolationError(
            f"Invalid player count {player_count}. Must be {MIN_PLAYERS}-{MAX_PLAYERS} players."
        )


def _clone(state: GameState) -> GameState:
    return copy.deepcopy(state)


__all__ = ["GameEngine", "RandomSource"]
