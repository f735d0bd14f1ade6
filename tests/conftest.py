"""
Basic test fixtures for the fecalc test suite.

Provides builders for weapons and units plus small sample collections.
"""

import io
import sys
import os
import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from fecalc.core.data.data_structures import Armory, GameUnit, GameUnits, Weapon
from fecalc.core.log_manager import LogLevel, LogManager


class TestDataBuilder:
    """Builder helpers with neutral defaults so tests only set what matters."""

    @staticmethod
    def weapon(name="Iron Sword", might=5, weight=0, hit=0,
               effective_against=(), magic=False) -> Weapon:
        return Weapon(
            name=name,
            might=might,
            weight=weight,
            hit=hit,
            effective_against=frozenset(effective_against),
            magic=magic,
        )

    @staticmethod
    def unit(name="Unit", hp=20, strength=0, skill=0, speed=0, luck=0,
             defense=0, resistance=0, weapon_level=1, unit_type=None,
             weapons=()) -> GameUnit:
        return GameUnit(
            name=name,
            hp=hp,
            strength=strength,
            skill=skill,
            speed=speed,
            luck=luck,
            defense=defense,
            resistance=resistance,
            weapon_level=weapon_level,
            unit_type=unit_type,
            weapons=tuple(weapons),
        )


@pytest.fixture
def builder():
    """Access to TestDataBuilder from tests."""
    return TestDataBuilder


@pytest.fixture
def sample_armory():
    """Armory with a physical, an effective and a magic weapon."""
    return Armory((
        TestDataBuilder.weapon("Iron Sword", might=5, weight=2, hit=100),
        TestDataBuilder.weapon("Rapier", might=7, weight=1, hit=100,
                               effective_against=("cavalry",)),
        TestDataBuilder.weapon("Iron Lance", might=7, weight=6, hit=80),
        TestDataBuilder.weapon("Fire", might=5, weight=4, hit=90, magic=True),
    ))


@pytest.fixture
def sample_roster():
    """Roster covering armed, multi-weapon and unarmed units."""
    return GameUnits((
        TestDataBuilder.unit("Marth", strength=5, skill=3, speed=7, luck=7,
                             defense=7, weapons=("Rapier", "Iron Sword")),
        TestDataBuilder.unit("Cain", strength=7, skill=5, speed=6, luck=3,
                             defense=7, unit_type="cavalry",
                             weapons=("Iron Lance", "Iron Sword")),
        TestDataBuilder.unit("Merric", strength=1, skill=6, speed=7, luck=4,
                             defense=2, resistance=5, weapons=("Fire",)),
        TestDataBuilder.unit("Jagen", strength=7, skill=10, speed=8, luck=1,
                             defense=9, weapons=("Silver Lance",)),
    ))


@pytest.fixture
def log_manager():
    """Log manager that shows every level into an in-memory stream."""
    return LogManager(default_level=LogLevel.DEBUG, stream=io.StringIO())
