"""Base classes for the two kinds of decision makers in a battle.

``OpponentPolicy`` is the engine's extension point: the engine calls it
once per accepted player action to resolve the opponent's response inside
the same transition.  ``PlayAgent`` drives the *player* side and is only
used by the batch simulator (a real player sends commands instead).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, model_validator

if TYPE_CHECKING:
    from circle_battle.core.battle_state import BattleState
    from circle_battle.core.rng import BattleRNG


class OpponentPolicy(ABC):
    """Strategy deciding how the opponent answers a player action."""

    @abstractmethod
    def resolve_counter(self, state: BattleState, rng: BattleRNG) -> BattleState:
        """Return the state after the opponent's response.

        Parameters
        ----------
        state:
            The state right after the player's action.  Never concluded when
            the engine calls this.
        rng:
            The engine's random source, for damage rolls.

        Returns
        -------
        BattleState
            A new state, or *state* itself if the policy had nothing to do.
            Implementations must not raise for a well-formed state.
        """


class ActionKind(str, Enum):
    ATTACK = "attack"
    RETREAT = "retreat"


class PlayerAction(BaseModel):
    """A command chosen by a ``PlayAgent``."""

    model_config = {"frozen": True}

    kind: ActionKind
    bench_index: int | None = None
    """Bench slot to swap in; required for ``RETREAT``."""

    @model_validator(mode="after")
    def _check_bench_index(self) -> PlayerAction:
        if self.kind is ActionKind.RETREAT and self.bench_index is None:
            raise ValueError("retreat actions need a bench_index")
        return self

    @classmethod
    def attack(cls) -> PlayerAction:
        return cls(kind=ActionKind.ATTACK)

    @classmethod
    def retreat(cls, bench_index: int) -> PlayerAction:
        return cls(kind=ActionKind.RETREAT, bench_index=bench_index)


class PlayAgent(ABC):
    """Base class for agents that play the player side of a battle."""

    @abstractmethod
    def choose_action(self, state: BattleState) -> PlayerAction:
        """Choose the next player command for an ongoing battle.

        Parameters
        ----------
        state:
            The current battle state, giving the agent full observability.

        Returns
        -------
        PlayerAction
            ``PlayerAction.attack()`` or ``PlayerAction.retreat(i)``.
        """
