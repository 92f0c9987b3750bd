"""Deterministic battle stats for member cards.

Member cards in the collection have no HP or attack of their own; the
battle stats are derived from the card id and the member's grade so that a
card always fights with the same numbers.
"""

from __future__ import annotations

import hashlib
import random

from pydantic import BaseModel

_BASE_HP = 500
_HP_PER_GRADE = 50
_HP_VARIANCE = 100

_BASE_ATTACK = 100
_ATTACK_PER_GRADE = 20
_ATTACK_VARIANCE = 50

DEFAULT_FLAVOR = "今日も元気にお布団から出られない。"


class BattleStats(BaseModel):
    """Generated stats for one card."""

    max_hp: int
    attack: int
    flavor: str = DEFAULT_FLAVOR


def generate_battle_stats(card_id: str, grade: int) -> BattleStats:
    """Derive stats from *card_id* and *grade*.

    ``max_hp = 500 + 50*grade + [0, 100)`` and
    ``attack = 100 + 20*grade + [0, 50)``, with the random parts drawn from
    a generator seeded by a hash of the card id.
    """
    digest = hashlib.sha256(card_id.encode()).digest()
    rng = random.Random(int.from_bytes(digest[:8], "big"))

    max_hp = _BASE_HP + grade * _HP_PER_GRADE + rng.randrange(_HP_VARIANCE)
    attack = _BASE_ATTACK + grade * _ATTACK_PER_GRADE + rng.randrange(_ATTACK_VARIANCE)
    return BattleStats(max_hp=max_hp, attack=attack)
