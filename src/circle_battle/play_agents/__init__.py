"""Opponent policies and player agents.

Re-exports the base classes and all concrete implementations so consumers
can do::

    from circle_battle.play_agents import AlwaysAttackPolicy, RandomAgent
"""

from .base import ActionKind, OpponentPolicy, PlayAgent, PlayerAction
from .opponent_policies import AlwaysAttackPolicy, CautiousPolicy
from .random_agent import AlwaysAttackAgent, RandomAgent

__all__ = [
    "ActionKind",
    "OpponentPolicy",
    "PlayAgent",
    "PlayerAction",
    "AlwaysAttackPolicy",
    "CautiousPolicy",
    "AlwaysAttackAgent",
    "RandomAgent",
]
