"""Core data structures and definitions.

This package contains the read-only records loaded from the data files:
- data_structures.py: Weapon, Armory, GameUnit and GameUnits
- game_enums.py: double-attack status
"""

from .data_structures import Armory, GameUnit, GameUnits, Weapon
from .game_enums import RepeatedAttackStatus

__all__ = [
    "Armory",
    "GameUnit",
    "GameUnits",
    "Weapon",
    "RepeatedAttackStatus",
]
