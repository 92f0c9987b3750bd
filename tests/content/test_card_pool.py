"""Tests for card pools and mock rosters."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from circle_battle.content.card_pool import (
    MAX_ROSTER_SIZE,
    InMemoryCardPool,
    JsonCardPool,
    RosterUnavailableError,
    generate_mock_roster,
)
from circle_battle.core.entities import Combatant
from circle_battle.mechanics.stats import generate_battle_stats


def _make_roster(n: int) -> list[Combatant]:
    return [
        Combatant(id=f"card-{i}", name=f"Member {i}", max_hp=400, attack=120)
        for i in range(n)
    ]


class TestInMemoryCardPool:
    def test_roster_and_name(self):
        pool = InMemoryCardPool({"c1": _make_roster(3)}, names={"c1": "Tennis"})
        assert len(pool.get_roster("c1")) == 3
        assert pool.get_side_name("c1") == "Tennis"

    def test_returns_copy(self):
        pool = InMemoryCardPool({"c1": _make_roster(3)})
        pool.get_roster("c1").clear()
        assert len(pool.get_roster("c1")) == 3

    def test_unknown_side(self):
        pool = InMemoryCardPool({})
        with pytest.raises(RosterUnavailableError) as exc_info:
            pool.get_roster("nope")
        assert exc_info.value.side_id == "nope"
        with pytest.raises(LookupError):
            pool.get_side_name("nope")

    def test_empty_roster_is_unavailable(self):
        with pytest.raises(RosterUnavailableError):
            InMemoryCardPool({"c1": []}).get_roster("c1")

    def test_truncated(self):
        pool = InMemoryCardPool({"c1": _make_roster(MAX_ROSTER_SIZE + 5)})
        assert len(pool.get_roster("c1")) == MAX_ROSTER_SIZE


class TestJsonCardPool:
    def _write(self, tmp_path, payload) -> str:
        path = tmp_path / "pool.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        return str(path)

    def test_generated_stats(self, tmp_path):
        path = self._write(tmp_path, {
            "sides": {
                "c1": {
                    "name": "Tennis",
                    "cards": [{"id": "k1", "name": "Aki", "grade": 2, "hobby": "naps"}],
                },
            },
        })
        pool = JsonCardPool(path)
        card = pool.get_roster("c1")[0]
        expected = generate_battle_stats("k1", 2)

        assert pool.get_side_name("c1") == "Tennis"
        assert card.max_hp == expected.max_hp
        assert card.current_hp == expected.max_hp
        assert card.attack == expected.attack
        assert card.side_id == "c1"

    def test_explicit_stats_kept(self, tmp_path):
        path = self._write(tmp_path, {
            "sides": {"c1": {"cards": [{"id": "k1", "name": "Aki", "max_hp": 10, "attack": 3}]}},
        })
        card = JsonCardPool(path).get_roster("c1")[0]
        assert (card.max_hp, card.attack, card.grade) == (10, 3, 1)

    def test_card_without_id_is_a_validation_error(self, tmp_path):
        path = self._write(tmp_path, {"sides": {"c1": {"cards": [{"name": "Aki", "grade": 2}]}}})
        with pytest.raises(ValidationError):
            JsonCardPool(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            JsonCardPool(tmp_path / "absent.json")


class TestMockRoster:
    def test_shape(self):
        roster = generate_mock_roster("c9", 5)
        assert [c.id for c in roster] == [f"c9-card-{i}" for i in range(5)]
        assert [c.name for c in roster] == [f"Card {i}" for i in range(5)]
        assert all(c.current_hp == c.max_hp for c in roster)

    def test_deterministic(self):
        assert generate_mock_roster("c9", 3) == generate_mock_roster("c9", 3)
