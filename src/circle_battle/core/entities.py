"""Combatant model: the battle-relevant subset of a circle member card.

All data classes use Pydantic v2 BaseModel for validation and
serialization.  Combatants are frozen; damage produces a new instance.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator


class Combatant(BaseModel):
    """A card fighting in a battle deck."""

    model_config = {"frozen": True}

    id: str
    """Stable identifier for the whole battle."""

    name: str
    max_hp: int = Field(ge=0)
    """HP ceiling.  Never changes during a battle."""

    current_hp: int = Field(ge=0)
    """Remaining HP.  Filled from ``max_hp`` when omitted; only ever goes
    down during a battle."""

    attack: int = Field(ge=0)
    grade: int = 1
    flavor: str = ""
    side_id: str | None = None
    """Circle the card belongs to, if known."""

    @model_validator(mode="before")
    @classmethod
    def _default_current_hp(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("current_hp") is None:
            data = dict(data)
            data["current_hp"] = data.get("max_hp")
        return data

    @model_validator(mode="after")
    def _check_hp_ceiling(self) -> Combatant:
        if self.current_hp > self.max_hp:
            raise ValueError(
                f"current_hp ({self.current_hp}) exceeds max_hp ({self.max_hp})"
            )
        return self

    # -- HP queries ----------------------------------------------------------

    @property
    def is_knocked_out(self) -> bool:
        return self.current_hp == 0

    # -- damage --------------------------------------------------------------

    def take_damage(self, amount: int) -> Combatant:
        """Return a copy with *amount* damage applied, clamped at 0 HP."""
        if amount <= 0:
            return self
        return self.model_copy(
            update={"current_hp": max(0, self.current_hp - amount)}
        )
