"""
Combat resolution for one attacker against a list of defenders.

This module picks the units out of the roster, pairs every usable attacker
weapon with each defender's primary weapon, and collects the forecasts.
Printing is left to the renderer.
"""
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ...core.config import CalculatorConfig
from ...core.data.data_structures import Armory, GameUnit, GameUnits, Weapon
from ...core.errors import InvalidArguments, UnresolvedEntity, UnresolvedWeapon
from ...core.log_manager import LogManager
from ..unit_queries import primary_weapon, usable_weapons
from .battle_calculator import BattleCalculator, BattleForecast


@dataclass
class DefenderReport:
    """All forecasts against a single defender, in attacker weapon order.

    `defender_weapon` is None for a defender skipped without a usable weapon.
    """
    defender: GameUnit
    defender_weapon: Optional[Weapon] = None
    forecasts: list[BattleForecast] = field(default_factory=list)


@dataclass
class ResolutionReport:
    """Result of resolving one attacker against its defenders."""
    attacker: GameUnit
    attacker_weapons: list[Weapon]
    # One entry per defender, in command-line order
    defenders: list[DefenderReport] = field(default_factory=list)

    @property
    def skipped(self) -> list[GameUnit]:
        """Defenders left out for lack of a usable weapon."""
        return [d.defender for d in self.defenders if d.defender_weapon is None]

    @property
    def complete(self) -> bool:
        return not self.skipped


class CombatResolver:
    """Resolves forecasts between units of a roster."""

    def __init__(
        self,
        roster: GameUnits,
        armory: Armory,
        config: Optional[CalculatorConfig] = None,
        log_manager: Optional[LogManager] = None,
    ):
        self.roster = roster
        self.armory = armory
        self.config = config or CalculatorConfig()
        self.log_manager = log_manager

    def _emit_log(self, text: str, debug: bool = False) -> None:
        if self.log_manager is None:
            return
        if debug:
            self.log_manager.debug(text)
        else:
            self.log_manager.battle(text)

    def resolve(self, unit_names: Sequence[str]) -> ResolutionReport:
        """Resolve forecasts for `unit_names[0]` against every other name.

        A defender named more than once is resolved once, at its first
        position.

        Raises:
            InvalidArguments: fewer than two names
            UnresolvedEntity: a name is not in the roster, or the attacker
                has no usable weapon
            UnresolvedWeapon: a defender has no usable weapon and the run is
                configured to abort on it
        """
        if len(unit_names) < 2:
            raise InvalidArguments("An attacker and at least one defender are required")

        attacker_name = unit_names[0]
        defender_names = list(dict.fromkeys(unit_names[1:]))
        attacker = self.roster.find(attacker_name)

        defenders: list[GameUnit] = []
        missing: list[str] = []
        for name in defender_names:
            defender = self.roster.find(name)
            if defender is None:
                missing.append(name)
            else:
                defenders.append(defender)

        if attacker is None:
            missing.insert(0, attacker_name)
            raise UnresolvedEntity(
                f"Units not found in roster: {', '.join(missing)}",
                defenders=defenders,
                missing_names=missing,
            )

        attacker_weapons = usable_weapons(attacker, self.armory)
        if missing or not attacker_weapons:
            if missing:
                message = f"Units not found in roster: {', '.join(missing)}"
            else:
                message = f"No usable weapons for attacker: {attacker_name}"
            raise UnresolvedEntity(
                message,
                attacker=attacker,
                attacker_weapons=attacker_weapons,
                defenders=defenders,
                missing_names=missing,
            )

        self._emit_log(
            f"{attacker.name} attacks with {', '.join(w.name for w in attacker_weapons)}"
        )

        report = ResolutionReport(attacker=attacker, attacker_weapons=attacker_weapons)
        for defender in defenders:
            defender_weapon = primary_weapon(defender, self.armory)
            if defender_weapon is None:
                if self.config.abort_on_missing_weapon:
                    raise UnresolvedWeapon(defender, partial_report=report)
                self._emit_log(f"Skipping {defender.name}: no usable weapon")
                report.defenders.append(DefenderReport(defender=defender))
                continue

            report.defenders.append(self._resolve_defender(attacker, attacker_weapons,
                                                           defender, defender_weapon))
        return report

    def _resolve_defender(self, attacker: GameUnit, attacker_weapons: list[Weapon],
                          defender: GameUnit, defender_weapon: Weapon) -> DefenderReport:
        """Forecast every attacker weapon against one armed defender."""
        self._emit_log(f"{defender.name} counters with {defender_weapon.name}")
        defender_report = DefenderReport(defender=defender, defender_weapon=defender_weapon)

        for weapon in attacker_weapons:
            forecast = BattleCalculator.calculate_forecast(
                attacker,
                weapon,
                defender,
                defender_weapon,
                attacker_terrain_bonus=self.config.attacker_terrain_bonus,
                defender_terrain_bonus=self.config.defender_terrain_bonus,
            )
            self._emit_log(
                f"{weapon.name} vs {defender.name}: hit {forecast.accuracy}, "
                f"dmg {forecast.damage}, counter {forecast.return_damage}/{forecast.return_accuracy}",
                debug=True,
            )
            defender_report.forecasts.append(forecast)

        return defender_report
