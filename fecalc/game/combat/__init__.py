"""Combat system components.

This package contains the combat logic with clear separation of concerns:
- battle_calculator.py: Pure damage, accuracy and double-attack formulas
- combat_resolver.py: Unit lookup and pairing of weapons across defenders
"""

from .battle_calculator import BattleCalculator, BattleForecast
from .combat_resolver import CombatResolver, DefenderReport, ResolutionReport

__all__ = [
    "BattleCalculator",
    "BattleForecast",
    "CombatResolver",
    "DefenderReport",
    "ResolutionReport",
]
