"""
Battle calculation formulas for combat forecasts.

All methods are pure: they read unit and weapon records and return numbers.
Nothing is clamped. Damage can be negative and accuracy can fall outside
0-100; presenting those values is up to the caller.
"""
from dataclasses import dataclass

from ...core.data.data_structures import GameUnit, Weapon
from ...core.data.game_enums import RepeatedAttackStatus
from ..unit_queries import attack_speed

EFFECTIVE_MIGHT_MULTIPLIER = 3


@dataclass(frozen=True)
class BattleForecast:
    """Forecast for one attacker weapon against one armed defender."""
    weapon: Weapon
    accuracy: int
    damage: int
    repeated_attack: RepeatedAttackStatus
    return_damage: int
    return_accuracy: int


class BattleCalculator:
    """Calculates damage, accuracy and double-attack forecasts."""

    @staticmethod
    def repeated_attack_status(attacker: GameUnit, attacker_weapon: Weapon,
                               defender: GameUnit, defender_weapon: Weapon) -> RepeatedAttackStatus:
        """Compare attack speeds to decide who strikes twice.

        The attacker only doubles with a positive attack speed of its own.
        Equal attack speeds never double, even when both are negative.
        """
        attacker_speed = attack_speed(attacker, attacker_weapon)
        difference = attacker_speed - attack_speed(defender, defender_weapon)

        if difference > 0 and attacker_speed > 0:
            return RepeatedAttackStatus.WILL_DOUBLE_ATTACK
        if difference < 0:
            return RepeatedAttackStatus.WILL_BE_DOUBLE_ATTACKED
        return RepeatedAttackStatus.NO_DOUBLE_ATTACK

    @staticmethod
    def effectiveness_multiplier(weapon: Weapon, defender: GameUnit) -> int:
        """Might multiplier: 3 when the weapon is effective against the defender's type."""
        if weapon.is_effective_against(defender.unit_type):
            return EFFECTIVE_MIGHT_MULTIPLIER
        return 1

    @staticmethod
    def damage(attacker: GameUnit, weapon: Weapon, defender: GameUnit) -> int:
        """Damage of one hit.

        Magic: might * multiplier - resistance.
        Physical: strength + might * multiplier - defense.
        """
        might = weapon.might * BattleCalculator.effectiveness_multiplier(weapon, defender)
        if weapon.magic:
            return might - defender.resistance
        return attacker.strength + might - defender.defense

    @staticmethod
    def accuracy(attacker: GameUnit, attacker_weapon: Weapon,
                 defender: GameUnit, defender_weapon: Weapon,
                 defender_terrain_bonus: int) -> int:
        """Hit rate minus evade rate.

        Magic hit rate is the weapon's hit alone and is evaded with luck.
        Physical hit rate adds skill and is evaded with the defender's
        attack speed plus the terrain bonus of the defender's tile.
        """
        if attacker_weapon.magic:
            hit_rate = attacker_weapon.hit
            evade_rate = defender.luck
        else:
            hit_rate = attacker.skill + attacker_weapon.hit
            evade_rate = attack_speed(defender, defender_weapon) + defender_terrain_bonus
        return hit_rate - evade_rate

    @staticmethod
    def calculate_forecast(attacker: GameUnit, attacker_weapon: Weapon,
                           defender: GameUnit, defender_weapon: Weapon,
                           attacker_terrain_bonus: int = 0,
                           defender_terrain_bonus: int = 0) -> BattleForecast:
        """
        Calculate the complete forecast for one weapon pairing.

        Args:
            attacker: The attacking unit
            attacker_weapon: Weapon the attacker uses
            defender: The defending unit
            defender_weapon: Weapon the defender counters with
            attacker_terrain_bonus: Evasion bonus of the attacker's tile
            defender_terrain_bonus: Evasion bonus of the defender's tile

        Returns:
            BattleForecast with both directions of the exchange
        """
        return BattleForecast(
            weapon=attacker_weapon,
            accuracy=BattleCalculator.accuracy(
                attacker, attacker_weapon, defender, defender_weapon, defender_terrain_bonus
            ),
            damage=BattleCalculator.damage(attacker, attacker_weapon, defender),
            repeated_attack=BattleCalculator.repeated_attack_status(
                attacker, attacker_weapon, defender, defender_weapon
            ),
            return_damage=BattleCalculator.damage(defender, defender_weapon, attacker),
            return_accuracy=BattleCalculator.accuracy(
                defender, defender_weapon, attacker, attacker_weapon, attacker_terrain_bonus
            ),
        )
