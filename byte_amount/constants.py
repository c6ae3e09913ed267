"""
Constants and configuration for byte_amount.

Defines the unit ladder, its labels and the default display precision.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Dict, Tuple

from byte_amount.errors import InvalidAmount


# --- Scale -------------------------------------------------------------------

BASE: int = 1024

# Decimal places used by Amount.to_string() and human_size()
DEFAULT_PRECISION: int = 1


# --- Unit Ladder -------------------------------------------------------------

class Unit(IntEnum):
    """Byte-magnitude units, valued by their exponent of BASE."""
    BYTE = 0
    KILO = 1
    MEGA = 2
    GIGA = 3
    TERA = 4

    @property
    def magnitude(self) -> int:
        """Number of bytes in one of this unit."""
        return BASE ** self.value

    @property
    def label(self) -> str:
        """Canonical abbreviation (e.g. "Kb")."""
        return UNIT_LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> 'Unit':
        """Look up a unit by its exact canonical label.

        Raises:
            InvalidAmount: If no unit carries the label
        """
        for unit in UNIT_LADDER:
            if UNIT_LABELS[unit] == label:
                return unit
        raise InvalidAmount(f'Unknown unit label: {label!r}')

    def __str__(self) -> str:
        return self.label


UNIT_LABELS: Dict[Unit, str] = {
    Unit.BYTE: 'b',
    Unit.KILO: 'Kb',
    Unit.MEGA: 'Mb',
    Unit.GIGA: 'Gb',
    Unit.TERA: 'Tb',
}

# Smallest first
UNIT_LADDER: Tuple[Unit, ...] = tuple(sorted(Unit))
