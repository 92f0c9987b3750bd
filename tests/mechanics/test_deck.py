"""Tests for deck construction."""

from collections import Counter

import pytest

from circle_battle.core.config import BattleConfig
from circle_battle.core.entities import Combatant
from circle_battle.core.rng import BattleRNG
from circle_battle.mechanics.deck import (
    build_deck,
    create_placeholder,
    is_placeholder,
    swap_active,
)


def _make_roster(n: int) -> list[Combatant]:
    return [
        Combatant(id=f"card-{i}", name=f"Member {i}", max_hp=400, attack=120)
        for i in range(n)
    ]


class TestBuildDeckSize:
    @pytest.mark.parametrize("roster_size", [0, 1, 3, 4, 5, 6, 12])
    def test_always_five(self, roster_size):
        deck = build_deck(_make_roster(roster_size), BattleRNG(roster_size))
        assert len(deck) == 5

    @pytest.mark.parametrize("roster_size", [0, 2, 4])
    def test_short_roster_padded_with_placeholders(self, roster_size):
        deck = build_deck(_make_roster(roster_size), BattleRNG(1))

        placeholders = [c for c in deck if is_placeholder(c)]
        assert len(placeholders) == 5 - roster_size
        # Real cards come first, placeholders fill the tail.
        assert all(not is_placeholder(c) for c in deck[:roster_size])

    def test_full_roster_has_no_placeholders(self):
        deck = build_deck(_make_roster(8), BattleRNG(1))
        assert not any(is_placeholder(c) for c in deck)
        assert len({c.id for c in deck}) == 5

    def test_custom_deck_size(self):
        deck = build_deck(_make_roster(1), BattleRNG(1), BattleConfig(deck_size=3))
        assert len(deck) == 3


class TestBuildDeckShuffle:
    def test_roster_not_reordered(self):
        roster = _make_roster(6)
        original_ids = [c.id for c in roster]
        build_deck(roster, BattleRNG(9))
        assert [c.id for c in roster] == original_ids

    def test_uses_injected_shuffle(self, scripted_rng):
        rng = scripted_rng()
        deck = build_deck(_make_roster(7), rng)

        assert rng.shuffle_calls == 1
        assert [c.id for c in deck] == [f"card-{i}" for i in range(5)]

    def test_shuffle_is_unbiased(self):
        rng = BattleRNG(2024)
        roster = _make_roster(3)
        counts = Counter(build_deck(roster, rng)[0].id for _ in range(6000))

        for card_id in ("card-0", "card-1", "card-2"):
            assert counts[card_id] / 6000 == pytest.approx(1 / 3, abs=0.03)


class TestPlaceholders:
    def test_baseline_stats(self):
        p = create_placeholder(0)
        assert p.max_hp == 600
        assert p.current_hp == 600
        assert p.attack == 150
        assert p.name == "勧誘中..."

    def test_ids_unique_within_deck(self):
        deck = build_deck([], BattleRNG(0))
        assert len({c.id for c in deck}) == 5

    def test_ids_skip_roster_ids(self):
        roster = [Combatant(id="placeholder-1", name="Aki", max_hp=400, attack=120)]
        deck = build_deck(roster, BattleRNG(0))

        ids = [c.id for c in deck]
        assert len(set(ids)) == 5
        assert ids.count("placeholder-1") == 1

    def test_ids_skip_reserved_ids(self):
        deck = build_deck(
            [], BattleRNG(0), id_prefix="filler", reserved_ids={"filler-0", "filler-2"},
        )
        assert [c.id for c in deck] == [
            "filler-1", "filler-3", "filler-4", "filler-5", "filler-6",
        ]

    def test_real_card_not_placeholder(self):
        assert not is_placeholder(_make_roster(1)[0])

    def test_recognised_by_name_only(self):
        impostor = Combatant(id="x", name="勧誘中...", max_hp=1, attack=1)
        assert is_placeholder(impostor)


class TestSwapActive:
    def test_swap(self):
        deck = tuple(_make_roster(5))
        swapped = swap_active(deck, 2)

        assert swapped[0].id == "card-3"
        assert swapped[3].id == "card-0"
        assert [c.id for c in swapped[1:3]] == ["card-1", "card-2"]

    @pytest.mark.parametrize("bench_index", [-1, 4, 10])
    def test_out_of_range(self, bench_index):
        with pytest.raises(IndexError):
            swap_active(tuple(_make_roster(5)), bench_index)
