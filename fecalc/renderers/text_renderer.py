import sys
from typing import Iterable, Optional, Sequence, TextIO

from ..core.errors import UnresolvedEntity, UnresolvedWeapon
from ..game.combat.battle_calculator import BattleForecast
from ..game.combat.combat_resolver import ResolutionReport


def _names(items: Sequence) -> str:
    return "[" + ", ".join(item.name for item in items) + "]"


class TextRenderer:
    """Formats forecast reports and diagnostics as plain text lines."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def write(self, lines: Iterable[str]) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        for line in lines:
            print(line, file=stream)

    @staticmethod
    def format_forecast(forecast: BattleForecast) -> str:
        """One line per attacker weapon against one defender."""
        return (
            f"Weapon: {forecast.weapon.name}, "
            f"Accuracy: {forecast.accuracy}, "
            f"Attack Damage: {forecast.damage}, "
            f"{forecast.repeated_attack.text}, "
            f"Damage Receive: {forecast.return_damage}, "
            f"Accuracy: {forecast.return_accuracy}"
        )

    @staticmethod
    def format_missing_weapon(defender_name: str) -> str:
        return f"Weapon not found for attackee: {defender_name}"

    def render_report(self, report: ResolutionReport) -> list[str]:
        """Defender header and pairing lines, or a missing-weapon line, per defender."""
        lines = []
        for defender_report in report.defenders:
            defender_name = defender_report.defender.name
            if defender_report.defender_weapon is None:
                lines.append(self.format_missing_weapon(defender_name))
                continue
            lines.append(f"Attackee: {defender_name}")
            lines.extend(self.format_forecast(f) for f in defender_report.forecasts)
        return lines

    def render_unresolved_entity(self, error: UnresolvedEntity) -> list[str]:
        """Diagnostic dump of what could be resolved before giving up."""
        attacker = error.attacker.name if error.attacker else "None"
        lines = [
            "One of the arguments was not found",
            f"Attacker: {attacker}",
            f"Attacker Weapon: {_names(error.attacker_weapons)}",
            f"Attackees: {_names(error.defenders)}",
        ]
        if error.missing_names:
            lines.append(f"Missing: [{', '.join(error.missing_names)}]")
        return lines

    def render_unresolved_weapon(self, error: UnresolvedWeapon) -> list[str]:
        lines = []
        if error.partial_report is not None:
            lines.extend(self.render_report(error.partial_report))
        lines.append(self.format_missing_weapon(error.defender.name))
        return lines
