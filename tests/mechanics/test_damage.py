"""Tests for damage calculation and application."""

import math

import pytest

from circle_battle.core.config import BattleConfig
from circle_battle.core.entities import Combatant
from circle_battle.core.rng import BattleRNG
from circle_battle.mechanics.damage import apply_damage, calculate_damage, damage_bounds


def _make_combatant(attack: int = 100, hp: int = 300, **kwargs) -> Combatant:
    defaults = dict(id="c", name="Aki", max_hp=hp, attack=attack)
    defaults.update(kwargs)
    return Combatant(**defaults)


class TestCalculateDamage:
    def test_neutral_roll(self, scripted_rng):
        assert calculate_damage(_make_combatant(100), scripted_rng(1.0)) == 100

    def test_floors_result(self, scripted_rng):
        assert calculate_damage(_make_combatant(7), scripted_rng(1.1)) == 7
        assert calculate_damage(_make_combatant(7), scripted_rng(0.9)) == 6

    def test_requests_configured_band(self, scripted_rng):
        rng = scripted_rng()
        calculate_damage(_make_combatant(), rng, BattleConfig(
            damage_variance_low=0.5, damage_variance_high=1.5,
        ))
        assert rng.uniform_calls == [(0.5, 1.5)]

    def test_zero_attack_deals_zero(self):
        assert calculate_damage(_make_combatant(0), BattleRNG(1)) == 0

    @pytest.mark.parametrize("attack", [1, 7, 100, 150, 999])
    def test_damage_bound(self, attack):
        rng = BattleRNG(attack)
        attacker = _make_combatant(attack)
        low, high = math.floor(0.9 * attack), math.floor(1.1 * attack)
        for _ in range(500):
            assert low <= calculate_damage(attacker, rng) <= high

    def test_damage_bounds_helper(self):
        assert damage_bounds(_make_combatant(100)) == (90, 110)


class TestApplyDamage:
    def test_hits_active_only(self):
        deck = (_make_combatant(id="a"), _make_combatant(id="b"))
        hit = apply_damage(deck, 50)

        assert hit[0].current_hp == 250
        assert hit[1] is deck[1]
        assert deck[0].current_hp == 300

    def test_clamps_at_zero(self):
        deck = (_make_combatant(hp=30),)
        assert apply_damage(deck, 100)[0].current_hp == 0

    def test_empty_deck(self):
        assert apply_damage((), 10) == ()
