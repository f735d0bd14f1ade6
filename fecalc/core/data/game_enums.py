"""Centralized enums shared by the combat and output modules."""

from enum import Enum


class RepeatedAttackStatus(Enum):
    """Outcome of the attack speed comparison between two armed units."""
    WILL_DOUBLE_ATTACK = "Will double attack"
    WILL_BE_DOUBLE_ATTACKED = "Will be double attacked"
    NO_DOUBLE_ATTACK = "No double attack"

    @property
    def text(self) -> str:
        """Human-readable status used in forecast lines."""
        return self.value
