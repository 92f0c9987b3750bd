"""Tests for opponent policies and player agents."""

import pytest
from pydantic import ValidationError

from circle_battle.core.battle_state import BattleState, Winner
from circle_battle.core.entities import Combatant
from circle_battle.core.rng import BattleRNG
from circle_battle.play_agents import (
    ActionKind,
    AlwaysAttackAgent,
    AlwaysAttackPolicy,
    CautiousPolicy,
    PlayerAction,
    RandomAgent,
)


def _make_combatant(cid: str, hp: int = 300, attack: int = 100, current_hp: int | None = None):
    return Combatant(id=cid, name=cid, max_hp=hp, attack=attack, current_hp=current_hp)


def _make_state(**kwargs) -> BattleState:
    defaults = dict(
        my_side_name="Mine",
        opponent_side_name="Them",
        my_deck=tuple(_make_combatant(f"m{i}") for i in range(5)),
        opponent_deck=tuple(_make_combatant(f"o{i}") for i in range(5)),
        my_lives=3,
        opponent_lives=3,
    )
    defaults.update(kwargs)
    return BattleState(**defaults)


# ---------------------------------------------------------------------------
# AlwaysAttackPolicy
# ---------------------------------------------------------------------------

class TestAlwaysAttackPolicy:
    def test_hits_my_active(self, scripted_rng):
        state = AlwaysAttackPolicy().resolve_counter(_make_state(), scripted_rng(1.0))

        assert state.my_deck[0].current_hp == 200
        assert state.opponent_deck[0].current_hp == 300
        assert state.logs[0] == "o0 attacked m0 for 100 damage."

    def test_concluded_state_untouched(self, scripted_rng):
        state = _make_state(winner=Winner.MINE)
        assert AlwaysAttackPolicy().resolve_counter(state, scripted_rng()) is state

    def test_never_retreats(self, scripted_rng):
        state = _make_state(
            opponent_deck=(_make_combatant("weak", current_hp=5),)
            + tuple(_make_combatant(f"o{i}") for i in range(1, 5)),
        )
        state = AlwaysAttackPolicy().resolve_counter(state, scripted_rng(1.0))
        assert state.opponent_deck[0].id == "weak"


# ---------------------------------------------------------------------------
# CautiousPolicy
# ---------------------------------------------------------------------------

class TestCautiousPolicy:
    def test_retreats_endangered_active(self, scripted_rng):
        state = _make_state(
            opponent_deck=(
                _make_combatant("o0", current_hp=50),
                _make_combatant("o1", current_hp=120),
                _make_combatant("o2", current_hp=280),
            ),
        )
        new = CautiousPolicy().resolve_counter(state, scripted_rng(1.0))

        assert [c.id for c in new.opponent_deck] == ["o2", "o1", "o0"]
        assert new.my_deck == state.my_deck
        assert new.logs[0] == "o0 swapped out for o2."

    def test_attacks_when_safe(self, scripted_rng):
        new = CautiousPolicy().resolve_counter(_make_state(), scripted_rng(1.0))
        assert new.my_deck[0].current_hp == 200

    def test_attacks_when_bench_is_weaker(self, scripted_rng):
        state = _make_state(
            opponent_deck=(
                _make_combatant("o0", current_hp=50),
                _make_combatant("o1", current_hp=40),
            ),
        )
        new = CautiousPolicy().resolve_counter(state, scripted_rng(1.0))

        assert new.opponent_deck[0].id == "o0"
        assert new.my_deck[0].current_hp == 200


# ---------------------------------------------------------------------------
# Player agents
# ---------------------------------------------------------------------------

class TestPlayerAction:
    def test_retreat_requires_bench_index(self):
        with pytest.raises(ValidationError):
            PlayerAction(kind=ActionKind.RETREAT)

    def test_constructors(self):
        assert PlayerAction.attack().kind is ActionKind.ATTACK
        assert PlayerAction.retreat(2).bench_index == 2


class TestAgents:
    def test_always_attack_agent(self):
        assert AlwaysAttackAgent().choose_action(_make_state()) == PlayerAction.attack()

    def test_random_agent_never_retreats_without_bench(self):
        agent = RandomAgent(rng=BattleRNG(1), retreat_chance=1.0)
        state = _make_state(my_deck=(_make_combatant("solo"),))
        assert agent.choose_action(state).kind is ActionKind.ATTACK

    def test_random_agent_retreats_to_valid_slot(self):
        agent = RandomAgent(rng=BattleRNG(1), retreat_chance=1.0)
        state = _make_state()
        for _ in range(50):
            action = agent.choose_action(state)
            assert action.kind is ActionKind.RETREAT
            assert 0 <= action.bench_index < 4

    def test_random_agent_zero_chance_attacks(self):
        agent = RandomAgent(rng=BattleRNG(1), retreat_chance=0.0)
        assert all(
            agent.choose_action(_make_state()).kind is ActionKind.ATTACK
            for _ in range(20)
        )
