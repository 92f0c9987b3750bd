"""Battle state for a circle-vs-circle card battle.

``BattleState`` is the aggregate root of one battle.  It is frozen: every
transition in :mod:`circle_battle.engine` returns a fresh value, so callers
can keep the previous state around (for diffing, broadcasting or an
optimistic-concurrency check) without defensive copies.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from circle_battle.core.entities import Combatant


class Winner(str, Enum):
    """Terminal marker of a battle."""

    NONE = "none"
    MINE = "mine"
    OPPONENT = "opponent"


class Side(str, Enum):
    """One of the two parties of a battle, seen from the local player."""

    MINE = "mine"
    OPPONENT = "opponent"

    @property
    def other(self) -> Side:
        return Side.OPPONENT if self is Side.MINE else Side.MINE

    @property
    def as_winner(self) -> Winner:
        return Winner.MINE if self is Side.MINE else Winner.OPPONENT


# ---------------------------------------------------------------------------
# BattleState
# ---------------------------------------------------------------------------

class BattleState(BaseModel):
    """Full state of a single battle.

    Decks are ordered: index 0 is the active combatant, the rest is the
    bench in promotion order.
    """

    model_config = {"frozen": True}

    my_side_name: str
    opponent_side_name: str
    my_deck: tuple[Combatant, ...]
    opponent_deck: tuple[Combatant, ...]
    my_lives: int = Field(ge=0)
    opponent_lives: int = Field(ge=0)
    turn: int = Field(default=1, ge=1)
    logs: tuple[str, ...] = ()
    """Human-readable event log, newest entry first."""

    winner: Winner = Winner.NONE

    # -- queries -------------------------------------------------------------

    @property
    def is_over(self) -> bool:
        return self.winner is not Winner.NONE

    @property
    def my_active(self) -> Combatant | None:
        return self.my_deck[0] if self.my_deck else None

    @property
    def opponent_active(self) -> Combatant | None:
        return self.opponent_deck[0] if self.opponent_deck else None

    @property
    def my_bench(self) -> tuple[Combatant, ...]:
        return self.my_deck[1:]

    @property
    def opponent_bench(self) -> tuple[Combatant, ...]:
        return self.opponent_deck[1:]

    # -- per-side access -----------------------------------------------------

    def deck_of(self, side: Side) -> tuple[Combatant, ...]:
        return self.my_deck if side is Side.MINE else self.opponent_deck

    def lives_of(self, side: Side) -> int:
        return self.my_lives if side is Side.MINE else self.opponent_lives

    def name_of(self, side: Side) -> str:
        return self.my_side_name if side is Side.MINE else self.opponent_side_name

    # -- copy helpers --------------------------------------------------------

    def with_side(
        self,
        side: Side,
        *,
        deck: tuple[Combatant, ...] | None = None,
        lives: int | None = None,
    ) -> BattleState:
        """Return a copy with *side*'s deck and/or lives replaced."""
        prefix = "my" if side is Side.MINE else "opponent"
        update: dict[str, object] = {}
        if deck is not None:
            update[f"{prefix}_deck"] = deck
        if lives is not None:
            update[f"{prefix}_lives"] = lives
        return self.model_copy(update=update)

    def with_log(self, *lines: str) -> BattleState:
        """Return a copy with *lines* prepended in order, so the last line
        given becomes the newest entry."""
        return self.model_copy(
            update={"logs": tuple(reversed(lines)) + self.logs}
        )
