"""Catalogues de référence : 90 cartes de développement et 10 nobles.

Données fixes et pré-validées, fournies au moteur à l'initialisation.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from splendor.engine.state import Card, Noble

_CARD_DATA: List[Tuple[str, int, int, str, Dict[str, int]]] = [
    # Niveau 1 (40 cartes)
    ("card_1_1", 1, 0, "diamond", {"onyx": 3}),
    ("card_1_2", 1, 0, "diamond", {"onyx": 2, "ruby": 1}),
    ("card_1_3", 1, 0, "diamond", {"emerald": 1, "sapphire": 1, "onyx": 1}),
    ("card_1_4", 1, 0, "diamond", {"emerald": 1, "sapphire": 2, "ruby": 1, "onyx": 1}),
    ("card_1_5", 1, 1, "diamond", {"sapphire": 4}),
    ("card_1_6", 1, 0, "diamond", {"ruby": 2, "sapphire": 1}),
    ("card_1_7", 1, 0, "diamond", {"emerald": 2, "onyx": 2}),
    ("card_1_8", 1, 1, "diamond", {"emerald": 3, "sapphire": 1, "onyx": 1}),
    ("card_1_9", 1, 0, "sapphire", {"emerald": 3}),
    ("card_1_10", 1, 0, "sapphire", {"emerald": 2, "ruby": 1}),
    ("card_1_11", 1, 0, "sapphire", {"diamond": 1, "emerald": 1, "ruby": 1}),
    ("card_1_12", 1, 0, "sapphire", {"diamond": 1, "emerald": 2, "ruby": 1, "onyx": 1}),
    ("card_1_13", 1, 1, "sapphire", {"ruby": 4}),
    ("card_1_14", 1, 0, "sapphire", {"diamond": 2, "emerald": 1}),
    ("card_1_15", 1, 0, "sapphire", {"diamond": 2, "onyx": 2}),
    ("card_1_16", 1, 1, "sapphire", {"diamond": 3, "emerald": 1, "ruby": 1}),
    ("card_1_17", 1, 0, "emerald", {"sapphire": 3}),
    ("card_1_18", 1, 0, "emerald", {"sapphire": 2, "onyx": 1}),
    ("card_1_19", 1, 0, "emerald", {"diamond": 1, "sapphire": 1, "onyx": 1}),
    ("card_1_20", 1, 0, "emerald", {"diamond": 1, "sapphire": 1, "ruby": 2, "onyx": 1}),
    ("card_1_21", 1, 1, "emerald", {"onyx": 4}),
    ("card_1_22", 1, 0, "emerald", {"diamond": 2, "sapphire": 1}),
    ("card_1_23", 1, 0, "emerald", {"diamond": 2, "ruby": 2}),
    ("card_1_24", 1, 1, "emerald", {"diamond": 1, "sapphire": 3, "onyx": 1}),
    ("card_1_25", 1, 0, "ruby", {"diamond": 3}),
    ("card_1_26", 1, 0, "ruby", {"diamond": 2, "emerald": 1}),
    ("card_1_27", 1, 0, "ruby", {"diamond": 1, "sapphire": 1, "emerald": 1}),
    ("card_1_28", 1, 0, "ruby", {"diamond": 1, "sapphire": 1, "emerald": 2, "onyx": 1}),
    ("card_1_29", 1, 1, "ruby", {"emerald": 4}),
    ("card_1_30", 1, 0, "ruby", {"sapphire": 2, "emerald": 1}),
    ("card_1_31", 1, 0, "ruby", {"sapphire": 2, "onyx": 2}),
    ("card_1_32", 1, 1, "ruby", {"sapphire": 1, "emerald": 3, "onyx": 1}),
    ("card_1_33", 1, 0, "onyx", {"ruby": 3}),
    ("card_1_34", 1, 0, "onyx", {"ruby": 2, "diamond": 1}),
    ("card_1_35", 1, 0, "onyx", {"diamond": 1, "sapphire": 1, "ruby": 1}),
    ("card_1_36", 1, 0, "onyx", {"diamond": 1, "sapphire": 2, "emerald": 1, "ruby": 1}),
    ("card_1_37", 1, 1, "onyx", {"diamond": 4}),
    ("card_1_38", 1, 0, "onyx", {"sapphire": 2, "ruby": 1}),
    ("card_1_39", 1, 0, "onyx", {"emerald": 2, "ruby": 2}),
    ("card_1_40", 1, 1, "onyx", {"sapphire": 3, "emerald": 1, "ruby": 1}),

    # Niveau 2 (30 cartes)
    ("card_2_1", 2, 1, "diamond", {"emerald": 3, "sapphire": 2, "onyx": 2}),
    ("card_2_2", 2, 1, "diamond", {"emerald": 2, "ruby": 3, "onyx": 3}),
    ("card_2_3", 2, 2, "diamond", {"ruby": 5}),
    ("card_2_4", 2, 2, "diamond", {"emerald": 1, "ruby": 4, "onyx": 2}),
    ("card_2_5", 2, 3, "diamond", {"onyx": 6}),
    ("card_2_6", 2, 1, "diamond", {"sapphire": 3, "emerald": 2, "ruby": 2}),
    ("card_2_7", 2, 1, "sapphire", {"diamond": 2, "emerald": 1, "ruby": 4}),
    ("card_2_8", 2, 1, "sapphire", {"diamond": 3, "emerald": 2, "onyx": 3}),
    ("card_2_9", 2, 2, "sapphire", {"onyx": 5}),
    ("card_2_10", 2, 2, "sapphire", {"diamond": 2, "emerald": 1, "onyx": 4}),
    ("card_2_11", 2, 3, "sapphire", {"emerald": 6}),
    ("card_2_12", 2, 1, "sapphire", {"diamond": 2, "emerald": 3, "ruby": 2}),
    ("card_2_13", 2, 1, "emerald", {"diamond": 4, "sapphire": 2, "ruby": 1}),
    ("card_2_14", 2, 1, "emerald", {"diamond": 3, "sapphire": 3, "onyx": 2}),
    ("card_2_15", 2, 2, "emerald", {"diamond": 5}),
    ("card_2_16", 2, 2, "emerald", {"diamond": 4, "sapphire": 1, "onyx": 2}),
    ("card_2_17", 2, 3, "emerald", {"ruby": 6}),
    ("card_2_18", 2, 2, "emerald", {"diamond": 2, "sapphire": 3, "ruby": 3}),
    ("card_2_19", 2, 1, "ruby", {"diamond": 1, "sapphire": 4, "emerald": 2}),
    ("card_2_20", 2, 1, "ruby", {"diamond": 2, "sapphire": 3, "emerald": 3}),
    ("card_2_21", 2, 2, "ruby", {"sapphire": 5}),
    ("card_2_22", 2, 2, "ruby", {"sapphire": 4, "emerald": 1, "onyx": 2}),
    ("card_2_23", 2, 3, "ruby", {"diamond": 6}),
    ("card_2_24", 2, 2, "ruby", {"emerald": 5, "onyx": 3}),
    ("card_2_25", 2, 1, "onyx", {"diamond": 2, "sapphire": 1, "emerald": 4}),
    ("card_2_26", 2, 1, "onyx", {"diamond": 3, "sapphire": 2, "ruby": 3}),
    ("card_2_27", 2, 2, "onyx", {"emerald": 5}),
    ("card_2_28", 2, 2, "onyx", {"diamond": 2, "sapphire": 1, "emerald": 4}),
    ("card_2_29", 2, 3, "onyx", {"sapphire": 6}),
    ("card_2_30", 2, 2, "onyx", {"diamond": 3, "ruby": 3, "emerald": 2}),

    # Niveau 3 (20 cartes)
    ("card_3_1", 3, 3, "diamond", {"emerald": 3, "sapphire": 3, "ruby": 5, "onyx": 3}),
    ("card_3_2", 3, 4, "diamond", {"ruby": 7}),
    ("card_3_3", 3, 4, "diamond", {"emerald": 3, "ruby": 6, "onyx": 3}),
    ("card_3_4", 3, 5, "diamond", {"ruby": 7, "onyx": 3}),
    ("card_3_5", 3, 4, "sapphire", {"diamond": 3, "emerald": 6, "ruby": 3}),
    ("card_3_6", 3, 4, "sapphire", {"onyx": 7}),
    ("card_3_7", 3, 5, "sapphire", {"diamond": 3, "onyx": 7}),
    ("card_3_8", 3, 3, "sapphire", {"diamond": 3, "emerald": 3, "ruby": 3, "onyx": 5}),
    ("card_3_9", 3, 4, "emerald", {"diamond": 7}),
    ("card_3_10", 3, 4, "emerald", {"diamond": 6, "sapphire": 3, "onyx": 3}),
    ("card_3_11", 3, 5, "emerald", {"diamond": 7, "sapphire": 3}),
    ("card_3_12", 3, 3, "emerald", {"diamond": 5, "sapphire": 3, "ruby": 3, "onyx": 3}),
    ("card_3_13", 3, 5, "ruby", {"diamond": 3, "sapphire": 7}),
    ("card_3_14", 3, 4, "ruby", {"sapphire": 7}),
    ("card_3_15", 3, 4, "ruby", {"diamond": 3, "sapphire": 6, "emerald": 3}),
    ("card_3_16", 3, 3, "ruby", {"diamond": 3, "sapphire": 5, "emerald": 3, "onyx": 3}),
    ("card_3_17", 3, 5, "onyx", {"emerald": 7, "sapphire": 3}),
    ("card_3_18", 3, 4, "onyx", {"emerald": 7}),
    ("card_3_19", 3, 4, "onyx", {"diamond": 3, "emerald": 6, "sapphire": 3}),
    ("card_3_20", 3, 3, "onyx", {"diamond": 5, "sapphire": 3, "emerald": 3, "ruby": 3}),
]

_NOBLE_DATA: List[Tuple[str, str, int, Dict[str, int]]] = [
    ("noble_1", "Catherine de' Medici", 3, {"diamond": 3, "sapphire": 3, "emerald": 3}),
    ("noble_2", "Elisabeth of Austria", 3, {"sapphire": 3, "emerald": 3, "ruby": 3}),
    ("noble_3", "Isabella I of Castile", 3, {"emerald": 3, "ruby": 3, "onyx": 3}),
    ("noble_4", "Niccolò Machiavelli", 3, {"ruby": 3, "onyx": 3, "diamond": 3}),
    ("noble_5", "Suleiman the Magnificent", 3, {"onyx": 3, "diamond": 3, "sapphire": 3}),
    ("noble_6", "Anne of Brittany", 3, {"diamond": 4, "onyx": 4}),
    ("noble_7", "Charles V", 3, {"sapphire": 4, "diamond": 4}),
    ("noble_8", "Francis I of France", 3, {"emerald": 4, "sapphire": 4}),
    ("noble_9", "Henry VIII", 3, {"ruby": 4, "emerald": 4}),
    ("noble_10", "Mary Stuart", 3, {"onyx": 4, "ruby": 4}),
]

CARD_CATALOG: Tuple[Card, ...] = tuple(
    Card(id=card_id, tier=tier, prestige=prestige, gem_bonus=bonus, cost=dict(cost))
    for card_id, tier, prestige, bonus, cost in _CARD_DATA
)

NOBLE_CATALOG: Tuple[Noble, ...] = tuple(
    Noble(id=noble_id, name=name, prestige=prestige, requirements=dict(requirements))
    for noble_id, name, prestige, requirements in _NOBLE_DATA
)

__all__ = ["CARD_CATALOG", "NOBLE_CATALOG"]
