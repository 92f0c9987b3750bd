"""Card pools -- supply the roster of member cards for a side (circle).

The engine only needs "the cards of side S".  Where they come from is up
to the ``CardPool`` implementation: an in-memory mapping, a JSON export of
the collection, or (outside this package) the document store.  Mock
rosters with generated stats stand in when a real pool is unavailable.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Mapping, Sequence

from circle_battle.core.entities import Combatant
from circle_battle.mechanics.stats import generate_battle_stats

logger = logging.getLogger(__name__)

# Cards fetched per side; larger circles are truncated.
MAX_ROSTER_SIZE = 20


class RosterUnavailableError(LookupError):
    """Raised when a card pool cannot produce a roster or name for a side."""

    def __init__(self, side_id: str, detail: str = "no cards found") -> None:
        super().__init__(f"side {side_id!r}: {detail}")
        self.side_id = side_id


class CardPool(ABC):
    """Source of rosters and display names, keyed by side id."""

    @abstractmethod
    def get_roster(self, side_id: str) -> list[Combatant]:
        """Return the member cards of *side_id* (non-empty).

        Raises ``RosterUnavailableError`` if the side is unknown or empty.
        """

    @abstractmethod
    def get_side_name(self, side_id: str) -> str:
        """Return the display name of *side_id*.

        Raises ``RosterUnavailableError`` if the side is unknown.
        """


# ---------------------------------------------------------------------------
# In-memory pool
# ---------------------------------------------------------------------------

class InMemoryCardPool(CardPool):
    """Card pool backed by plain dictionaries."""

    def __init__(
        self,
        rosters: Mapping[str, Sequence[Combatant]],
        names: Mapping[str, str] | None = None,
    ) -> None:
        self._rosters = {side: list(cards) for side, cards in rosters.items()}
        self._names = dict(names or {})

    def get_roster(self, side_id: str) -> list[Combatant]:
        cards = self._rosters.get(side_id)
        if not cards:
            raise RosterUnavailableError(side_id)
        return list(cards[:MAX_ROSTER_SIZE])

    def get_side_name(self, side_id: str) -> str:
        try:
            return self._names[side_id]
        except KeyError:
            raise RosterUnavailableError(side_id, "no name recorded") from None


# ---------------------------------------------------------------------------
# JSON pool
# ---------------------------------------------------------------------------

def _parse_card(raw: dict[str, Any], side_id: str) -> Combatant:
    """Parse a raw card dict, generating battle stats it does not carry."""
    card_id = raw.get("id")
    grade = int(raw.get("grade", 1))
    data = dict(raw)
    data.setdefault("side_id", side_id)
    data["grade"] = grade
    # Without an id there is nothing to derive stats from; validation reports it.
    if card_id is not None and ("max_hp" not in data or "attack" not in data):
        stats = generate_battle_stats(card_id, grade)
        data.setdefault("max_hp", stats.max_hp)
        data.setdefault("attack", stats.attack)
        data.setdefault("flavor", stats.flavor)
    return Combatant.model_validate(data)


class JsonCardPool(InMemoryCardPool):
    """Card pool loaded from a JSON export of the collection.

    Expected layout::

        {"sides": {"<side_id>": {"name": "...", "cards": [{"id": ..., "name": ...,
                                                           "grade": 2}, ...]}}}

    Cards without ``max_hp``/``attack`` get generated stats.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        with self.path.open(encoding="utf-8") as fh:
            raw = json.load(fh)

        rosters: dict[str, list[Combatant]] = {}
        names: dict[str, str] = {}
        for side_id, side in raw.get("sides", {}).items():
            rosters[side_id] = [_parse_card(c, side_id) for c in side.get("cards", [])]
            if "name" in side:
                names[side_id] = side["name"]
        logger.debug("Loaded %d sides from %s", len(rosters), self.path)
        super().__init__(rosters, names)


# ---------------------------------------------------------------------------
# Mock rosters
# ---------------------------------------------------------------------------

def generate_mock_roster(side_id: str, count: int) -> list[Combatant]:
    """Generate *count* grade-1 cards for *side_id* with derived stats."""
    cards: list[Combatant] = []
    for i in range(count):
        card_id = f"{side_id}-card-{i}"
        stats = generate_battle_stats(card_id, 1)
        cards.append(
            Combatant(
                id=card_id,
                name=f"Card {i}",
                max_hp=stats.max_hp,
                attack=stats.attack,
                flavor=stats.flavor,
                side_id=side_id,
            )
        )
    return cards
