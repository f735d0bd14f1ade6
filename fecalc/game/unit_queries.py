"""Queries joining a unit's weapon names against the armory."""

from typing import Optional

from ..core.data.data_structures import Armory, GameUnit, Weapon


def usable_weapons(unit: GameUnit, armory: Armory) -> list[Weapon]:
    """All armory weapons named in the unit's weapon list, in armory order.

    Names the armory does not know are dropped silently.
    """
    names = set(unit.weapons)
    return [weapon for weapon in armory if weapon.name in names]


def primary_weapon(unit: GameUnit, armory: Armory) -> Optional[Weapon]:
    """First weapon in the unit's own list order that resolves in the armory."""
    for name in unit.weapons:
        weapon = armory.find(name)
        if weapon is not None:
            return weapon
    return None


def attack_speed(unit: GameUnit, weapon: Weapon) -> int:
    """Unit speed minus weapon weight. Not floored, may be negative."""
    return unit.speed - weapon.weight
