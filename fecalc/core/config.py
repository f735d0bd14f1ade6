"""Run configuration built once from the command line."""

from dataclasses import dataclass, field
from typing import Optional

from .log_manager import LogLevel


@dataclass
class CalculatorConfig:
    """Everything a single forecast run needs to know.

    The first entry of `unit_names` is the attacker, the rest are defenders.
    """
    units_file: str = "units.yaml"
    weapons_file: str = "weapons.yaml"
    attacker_terrain_bonus: int = 0
    defender_terrain_bonus: int = 0
    unit_names: list[str] = field(default_factory=list)
    abort_on_missing_weapon: bool = True
    log_level: LogLevel = LogLevel.WARNING
    log_file: Optional[str] = None
