"""
Tests for CombatResolver unit lookup and weapon pairing.
"""
import pytest

from fecalc.core.config import CalculatorConfig
from fecalc.core.data import Armory, GameUnits, RepeatedAttackStatus
from fecalc.core.errors import ErrorKind, InvalidArguments, UnresolvedEntity, UnresolvedWeapon
from fecalc.game.combat import CombatResolver
from tests.conftest import TestDataBuilder as build


@pytest.fixture
def resolver(sample_roster, sample_armory, log_manager):
    return CombatResolver(sample_roster, sample_armory, CalculatorConfig(), log_manager)


class TestResolution:
    """Test successful resolutions."""

    def test_single_defender(self, resolver):
        report = resolver.resolve(["Marth", "Cain"])

        assert report.attacker.name == "Marth"
        assert [w.name for w in report.attacker_weapons] == ["Iron Sword", "Rapier"]
        assert report.complete

        (cain_report,) = report.defenders
        assert cain_report.defender.name == "Cain"
        assert cain_report.defender_weapon.name == "Iron Lance"
        assert [f.weapon.name for f in cain_report.forecasts] == ["Iron Sword", "Rapier"]

        sword, rapier = cain_report.forecasts
        assert (sword.accuracy, sword.damage) == (103, 3)
        assert (rapier.accuracy, rapier.damage) == (103, 19)
        assert sword.repeated_attack == RepeatedAttackStatus.WILL_DOUBLE_ATTACK
        assert (sword.return_damage, sword.return_accuracy) == (7, 80)
        assert (rapier.return_damage, rapier.return_accuracy) == (7, 79)

    def test_defenders_keep_command_line_order(self, resolver):
        report = resolver.resolve(["Cain", "Merric", "Marth"])

        assert [d.defender.name for d in report.defenders] == ["Merric", "Marth"]

    def test_terrain_bonuses_from_config(self, sample_roster, sample_armory):
        config = CalculatorConfig(attacker_terrain_bonus=10, defender_terrain_bonus=20)
        resolver = CombatResolver(sample_roster, sample_armory, config)

        sword = resolver.resolve(["Marth", "Cain"]).defenders[0].forecasts[0]

        assert sword.accuracy == 83
        assert sword.return_accuracy == 70

    def test_repeated_defender_resolved_once(self, resolver):
        report = resolver.resolve(["Marth", "Cain", "Merric", "Cain"])

        assert [d.defender.name for d in report.defenders] == ["Cain", "Merric"]

    def test_attacker_may_fight_itself(self, resolver):
        report = resolver.resolve(["Marth", "Marth"])

        assert report.defenders[0].defender_weapon.name == "Rapier"

    def test_logs_battle_and_debug(self, resolver, log_manager):
        resolver.resolve(["Marth", "Cain"])

        output = log_manager.stream.getvalue()
        assert "[BTL] Marth attacks with Iron Sword, Rapier" in output
        assert "[BTL] Cain counters with Iron Lance" in output
        assert "[DBG] Rapier vs Cain: hit 103, dmg 19" in output


class TestResolutionErrors:
    """Test the run-terminating conditions."""

    def test_too_few_names(self, resolver):
        with pytest.raises(InvalidArguments) as exc_info:
            resolver.resolve(["Marth"])

        assert exc_info.value.kind == ErrorKind.INVALID_ARGUMENTS
        assert exc_info.value.exit_code != 0

    def test_unknown_attacker(self, resolver):
        with pytest.raises(UnresolvedEntity) as exc_info:
            resolver.resolve(["Roy", "Cain"])

        error = exc_info.value
        assert error.attacker is None
        assert error.missing_names == ["Roy"]
        assert [d.name for d in error.defenders] == ["Cain"]

    def test_unknown_defender(self, resolver):
        with pytest.raises(UnresolvedEntity) as exc_info:
            resolver.resolve(["Marth", "Cain", "cain"])

        error = exc_info.value
        assert error.attacker.name == "Marth"
        assert [w.name for w in error.attacker_weapons] == ["Iron Sword", "Rapier"]
        assert error.missing_names == ["cain"]

    def test_unarmed_attacker(self, resolver):
        with pytest.raises(UnresolvedEntity, match="No usable weapons for attacker: Jagen"):
            resolver.resolve(["Jagen", "Marth"])

    def test_unresolved_defender_weapon_aborts(self):
        """An armed attacker against a defender with no usable weapon."""
        attacker = build.unit("Ogma", strength=6, speed=8, weapons=("Killing Edge",))
        defender = build.unit("Thief", defense=2, weapons=("Lockpick",))
        armory = Armory((build.weapon("Killing Edge", might=10, weight=3),))
        resolver = CombatResolver(GameUnits((attacker, defender)), armory)

        with pytest.raises(UnresolvedWeapon) as exc_info:
            resolver.resolve(["Ogma", "Thief"])

        error = exc_info.value
        assert error.kind == ErrorKind.UNRESOLVED_WEAPON
        assert error.exit_code != 0
        assert error.defender is defender
        assert error.partial_report.defenders == []

    def test_abort_keeps_earlier_defenders(self, resolver):
        with pytest.raises(UnresolvedWeapon) as exc_info:
            resolver.resolve(["Marth", "Cain", "Jagen", "Merric"])

        partial = exc_info.value.partial_report
        assert [d.defender.name for d in partial.defenders] == ["Cain"]

    def test_skip_missing_weapon_continues(self, sample_roster, sample_armory):
        config = CalculatorConfig(abort_on_missing_weapon=False)
        resolver = CombatResolver(sample_roster, sample_armory, config)

        report = resolver.resolve(["Marth", "Cain", "Jagen", "Merric"])

        assert [d.defender.name for d in report.defenders] == ["Cain", "Jagen", "Merric"]
        assert [d.name for d in report.skipped] == ["Jagen"]
        jagen_report = report.defenders[1]
        assert jagen_report.defender_weapon is None
        assert jagen_report.forecasts == []
        assert not report.complete
