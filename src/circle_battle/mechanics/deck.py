"""Deck construction.

Turns a circle's roster into a fixed-size battle deck: shuffle, take the
first ``deck_size`` cards, pad the rest with placeholder recruits.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Collection, Sequence

from circle_battle.core.config import DEFAULT_CONFIG, BattleConfig
from circle_battle.core.entities import Combatant

if TYPE_CHECKING:
    from circle_battle.core.rng import BattleRNG

PLACEHOLDER_ID_PREFIX = "placeholder"


def build_deck(
    roster: Sequence[Combatant],
    rng: BattleRNG,
    config: BattleConfig = DEFAULT_CONFIG,
    *,
    id_prefix: str = PLACEHOLDER_ID_PREFIX,
    reserved_ids: Collection[str] = (),
) -> tuple[Combatant, ...]:
    """Build a deck of exactly ``config.deck_size`` combatants.

    The roster is copied before shuffling, so the caller's sequence keeps
    its order.  Missing slots are filled with placeholders whose ids start
    with *id_prefix* and never repeat an id already in the deck or in
    *reserved_ids*.
    """
    shuffled = list(roster)
    rng.shuffle(shuffled)

    deck = shuffled[: config.deck_size]
    taken = set(reserved_ids) | {c.id for c in deck}
    slot = len(deck)
    while len(deck) < config.deck_size:
        placeholder = create_placeholder(slot, config, id_prefix=id_prefix)
        slot += 1
        if placeholder.id in taken:
            continue
        taken.add(placeholder.id)
        deck.append(placeholder)
    return tuple(deck)


def create_placeholder(
    index: int,
    config: BattleConfig = DEFAULT_CONFIG,
    *,
    id_prefix: str = PLACEHOLDER_ID_PREFIX,
) -> Combatant:
    """Create the filler combatant for deck slot *index*."""
    return Combatant(
        id=f"{id_prefix}-{index}",
        name=config.placeholder_name,
        max_hp=config.placeholder_max_hp,
        attack=config.placeholder_attack,
        flavor=config.placeholder_flavor,
    )


def is_placeholder(combatant: Combatant, config: BattleConfig = DEFAULT_CONFIG) -> bool:
    """Placeholders carry no type tag; they are recognised by name only."""
    return combatant.name == config.placeholder_name


def swap_active(
    deck: tuple[Combatant, ...],
    bench_index: int,
) -> tuple[Combatant, ...]:
    """Swap the active combatant with bench slot *bench_index* (0-based,
    i.e. deck position ``bench_index + 1``).  HP is untouched."""
    position = bench_index + 1
    if bench_index < 0 or position >= len(deck):
        raise IndexError(f"bench index {bench_index} out of range")
    swapped = list(deck)
    swapped[0], swapped[position] = swapped[position], swapped[0]
    return tuple(swapped)
