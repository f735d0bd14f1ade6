"""
Error types raised by the calculator.

Every failure that should end a run is a CombatCalcError subclass. They
propagate up to the command-line entry point, which turns them into a
message and an exit code.
"""
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from ..game.combat.combat_resolver import ResolutionReport
    from .data.data_structures import GameUnit, Weapon


class ErrorKind(Enum):
    """Kinds of run-terminating errors."""
    INVALID_ARGUMENTS = auto()
    UNRESOLVED_ENTITY = auto()
    UNRESOLVED_WEAPON = auto()
    DATA_FILE = auto()


class CombatCalcError(Exception):
    """Base class for all calculator errors."""

    kind: ErrorKind = ErrorKind.DATA_FILE
    exit_code: int = 1


class InvalidArguments(CombatCalcError):
    """Fewer than two unit names were given."""

    kind = ErrorKind.INVALID_ARGUMENTS
    exit_code = 2


class DataFileError(CombatCalcError):
    """A units or weapons file is missing or malformed."""

    kind = ErrorKind.DATA_FILE


class UnresolvedEntity(CombatCalcError):
    """Attacker or defender missing from the roster, or attacker unarmed.

    Carries whatever was resolved so the caller can print a diagnostic dump.
    """

    kind = ErrorKind.UNRESOLVED_ENTITY

    def __init__(
        self,
        message: str,
        attacker: Optional["GameUnit"] = None,
        attacker_weapons: Sequence["Weapon"] = (),
        defenders: Sequence["GameUnit"] = (),
        missing_names: Sequence[str] = (),
    ):
        super().__init__(message)
        self.attacker = attacker
        self.attacker_weapons = list(attacker_weapons)
        self.defenders = list(defenders)
        self.missing_names = list(missing_names)


class UnresolvedWeapon(CombatCalcError):
    """A defender has no weapon that resolves in the armory."""

    kind = ErrorKind.UNRESOLVED_WEAPON

    def __init__(self, defender: "GameUnit", partial_report: Optional["ResolutionReport"] = None):
        super().__init__(f"Weapon not found for attackee: {defender.name}")
        self.defender = defender
        # Defenders resolved before the failing one, still worth printing
        self.partial_report = partial_report
