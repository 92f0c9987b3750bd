"""Tunable battle rules.

``BattleConfig`` carries every constant of the battle rules so that the
engine, deck builder and card pools agree on them.  The defaults are the
production values; individual fields can be overridden from
``CIRCLE_BATTLE_<FIELD>`` environment variables via :meth:`from_env`.
"""

from __future__ import annotations

import os
from typing import Mapping

from pydantic import BaseModel, Field, model_validator

_ENV_PREFIX = "CIRCLE_BATTLE_"


class BattleConfig(BaseModel):
    """Rule constants for deck construction, damage and lives."""

    model_config = {"frozen": True}

    deck_size: int = Field(default=5, ge=1)
    starting_lives: int = Field(default=3, ge=1)

    damage_variance_low: float = Field(default=0.9, ge=0.0)
    damage_variance_high: float = Field(default=1.1, ge=0.0)
    """Each hit deals ``floor(attack * v)`` with ``v`` drawn uniformly from
    ``[damage_variance_low, damage_variance_high]``."""

    placeholder_name: str = "勧誘中..."
    """Name shared by every filler card ("recruit in progress")."""
    placeholder_max_hp: int = Field(default=600, ge=0)
    placeholder_attack: int = Field(default=150, ge=0)
    placeholder_flavor: str = "これから期待の新人。"

    mock_roster_size: int = Field(default=5, ge=0)
    enable_mock_fallback: bool = False
    """Substitute generated rosters when a card pool cannot supply one."""

    @model_validator(mode="after")
    def _check_variance(self) -> BattleConfig:
        if self.damage_variance_low > self.damage_variance_high:
            raise ValueError(
                "damage_variance_low must not exceed damage_variance_high "
                f"({self.damage_variance_low} > {self.damage_variance_high})"
            )
        return self

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> BattleConfig:
        """Build a config, overriding defaults from ``CIRCLE_BATTLE_*``
        variables (e.g. ``CIRCLE_BATTLE_STARTING_LIVES=5``).

        Values are passed to pydantic as strings, so malformed values raise
        ``pydantic.ValidationError``.
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, str] = {}
        for name in cls.model_fields:
            key = _ENV_PREFIX + name.upper()
            if key in env:
                overrides[name] = env[key]
        return cls.model_validate(overrides)


DEFAULT_CONFIG = BattleConfig()
