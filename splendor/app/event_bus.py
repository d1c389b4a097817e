"""Bus d'évènements de partie pour la couche application."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Type

Subscriber = Callable[[object], None]


@dataclass(frozen=True, eq=False)
class _Subscription:
    callback: Subscriber
    event_types: Optional[Tuple[Type[object], ...]]
    game_id: Optional[str]

    def accepts(self, event: object) -> bool:
        if self.event_types is not None and not isinstance(event, self.event_types):
            return False
        if self.game_id is not None and event_game_id(event) != self.game_id:
            return False
        return True


def event_game_id(event: object) -> Optional[str]:
    """Identifiant de la partie concernée par un évènement (None si inconnu)."""

    state = getattr(event, "new_state", None) or getattr(event, "state", None)
    return getattr(state, "game_id", None)


class EventBus:
    """Diffuse les évènements de partie aux abonnés, dans l'ordre d'inscription.

    Un abonné peut restreindre ce qu'il reçoit à certains types d'évènements
    (`event_types`) et/ou à une partie (`game_id`). La diffusion est synchrone;
    une exception levée par un abonné l'interrompt et remonte à l'appelant.
    """

    __slots__ = ("_subscriptions",)

    def __init__(self) -> None:
        self._subscriptions: List[_Subscription] = []

    def subscribe(
        self,
        callback: Subscriber,
        *,
        event_types: Optional[Tuple[Type[object], ...]] = None,
        game_id: Optional[str] = None,
    ) -> Callable[[], None]:
        """Enregistre un abonné et retourne une fonction de désabonnement.

        Args:
            callback: fonction appelée avec l'évènement
            event_types: classes d'évènements acceptées (toutes si None)
            game_id: ne reçoit que les évènements de cette partie
        """

        subscription = _Subscription(
            callback=callback,
            event_types=tuple(event_types) if event_types is not None else None,
            game_id=game_id,
        )
        self._subscriptions.append(subscription)

        def unsubscribe() -> None:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)

        return unsubscribe

    def publish(self, event: object) -> int:
        """Diffuse l'évènement et retourne le nombre d'abonnés notifiés."""

        delivered = 0
        # Copie: un abonné peut se désinscrire pendant la diffusion
        for subscription in list(self._subscriptions):
            if subscription.accepts(event):
                subscription.callback(event)
                delivered += 1
        return delivered


__all__ = ["EventBus", "event_game_id"]
