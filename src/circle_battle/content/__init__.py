"""Card pool adapters."""

from circle_battle.content.card_pool import (
    MAX_ROSTER_SIZE,
    CardPool,
    InMemoryCardPool,
    JsonCardPool,
    RosterUnavailableError,
    generate_mock_roster,
)

__all__ = [
    "MAX_ROSTER_SIZE",
    "CardPool",
    "InMemoryCardPool",
    "JsonCardPool",
    "RosterUnavailableError",
    "generate_mock_roster",
]
