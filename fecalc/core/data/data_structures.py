"""Immutable records for weapons and units.

Data Flow:
1. YAML mapping (data files) -> Weapon / GameUnit records (this module)
2. Records + Armory -> usable weapons (game.unit_queries)
3. Weapons + units -> forecasts (game.combat)

Units refer to weapons by name only. The join against the Armory happens in
the query functions, so these records stay plain and serializable.
"""

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

from ..errors import DataFileError


def _require(data: dict[str, Any], key: str, record: str) -> Any:
    """Fetch a required key from a parsed mapping."""
    if key not in data or data[key] is None:
        name = data.get("name", "<unnamed>")
        raise DataFileError(f"{record} '{name}' is missing required field '{key}'")
    return data[key]


def _require_int(data: dict[str, Any], key: str, record: str) -> int:
    value = _require(data, key, record)
    # bool is an int subclass; `might: yes` is a data error, not 1
    if isinstance(value, bool) or not isinstance(value, int):
        name = data.get("name", "<unnamed>")
        raise DataFileError(
            f"{record} '{name}' field '{key}' must be an integer, got {value!r}"
        )
    return value


def _optional_bool(data: dict[str, Any], key: str, record: str) -> bool:
    value = data.get(key, False)
    if value is None:
        return False
    # "false" in quotes is a string; only YAML booleans are accepted
    if not isinstance(value, bool):
        name = data.get("name", "<unnamed>")
        raise DataFileError(
            f"{record} '{name}' field '{key}' must be true or false, got {value!r}"
        )
    return value


def _string_tuple(data: dict[str, Any], key: str, record: str) -> tuple[str, ...]:
    value = data.get(key)
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        name = data.get("name", "<unnamed>")
        raise DataFileError(f"{record} '{name}' field '{key}' must be a list")
    return tuple(str(item) for item in value)


@dataclass(frozen=True)
class Weapon:
    """A weapon definition from the armory file.

    Attributes:
        name: Unique identifier, referenced by units
        might: Base power
        weight: Attack speed penalty for the wielder
        hit: Base accuracy
        effective_against: Unit type tags that triple the weapon's might
        magic: Selects the magic damage and accuracy formulas
    """
    name: str
    might: int
    weight: int
    hit: int
    effective_against: frozenset[str] = field(default_factory=frozenset)
    magic: bool = False

    def is_effective_against(self, unit_type: Optional[str]) -> bool:
        """Check whether a unit type tag triggers this weapon's bonus."""
        return unit_type is not None and unit_type in self.effective_against

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Weapon":
        """Create a weapon from YAML data. Unknown keys are ignored."""
        return cls(
            name=str(_require(data, "name", "Weapon")),
            might=_require_int(data, "might", "Weapon"),
            weight=_require_int(data, "weight", "Weapon"),
            hit=_require_int(data, "hit", "Weapon"),
            effective_against=frozenset(_string_tuple(data, "effectiveAgainst", "Weapon")),
            magic=_optional_bool(data, "magic", "Weapon"),
        )


@dataclass(frozen=True)
class Armory:
    """Ordered catalog of every known weapon."""
    weapons: tuple[Weapon, ...] = ()

    def __iter__(self) -> Iterator[Weapon]:
        return iter(self.weapons)

    def __len__(self) -> int:
        return len(self.weapons)

    def find(self, name: str) -> Optional[Weapon]:
        """Look up a weapon by exact name. First match wins on duplicates."""
        for weapon in self.weapons:
            if weapon.name == name:
                return weapon
        return None


@dataclass(frozen=True)
class GameUnit:
    """A unit definition from the roster file.

    `weapons` holds weapon names, which may include names the armory does
    not know. `weapon_level` is loaded but takes no part in combat math.
    """
    name: str
    hp: int
    strength: int
    skill: int
    speed: int
    luck: int
    defense: int
    resistance: int
    weapon_level: int
    unit_type: Optional[str] = None
    weapons: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GameUnit":
        """Create a unit from YAML data. Unknown keys are ignored."""
        unit_type = data.get("unitType")
        return cls(
            name=str(_require(data, "name", "Unit")),
            hp=_require_int(data, "hp", "Unit"),
            strength=_require_int(data, "strength", "Unit"),
            skill=_require_int(data, "skill", "Unit"),
            speed=_require_int(data, "speed", "Unit"),
            luck=_require_int(data, "luck", "Unit"),
            defense=_require_int(data, "defense", "Unit"),
            resistance=_require_int(data, "resistance", "Unit"),
            weapon_level=_require_int(data, "weaponLevel", "Unit"),
            unit_type=str(unit_type) if unit_type is not None else None,
            weapons=_string_tuple(data, "weapons", "Unit"),
        )


@dataclass(frozen=True)
class GameUnits:
    """The full unit roster."""
    units: tuple[GameUnit, ...] = ()

    def __iter__(self) -> Iterator[GameUnit]:
        return iter(self.units)

    def __len__(self) -> int:
        return len(self.units)

    def find(self, name: str) -> Optional[GameUnit]:
        """Look up a unit by exact, case-sensitive name. First match wins."""
        for unit in self.units:
            if unit.name == name:
                return unit
        return None
