"""
The Amount value type.

An Amount pairs a raw byte count with a display unit picked from the unit
ladder, and exposes the quantity scaled to that unit.
"""
from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, Dict

from byte_amount.constants import DEFAULT_PRECISION, UNIT_LADDER, Unit
from byte_amount.errors import InvalidAmount
from byte_amount.logging import logger


def _validate_bytes(value: Any) -> float:
    """Return value as a float, or raise InvalidAmount.

    Accepts any real number that is finite and non-negative.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        logger.warning(f'Rejected non-numeric byte count: {value!r}')
        raise InvalidAmount(f'Byte count must be a real number, got {type(value).__name__}')

    value = float(value)
    if not math.isfinite(value):
        logger.warning(f'Rejected non-finite byte count: {value}')
        raise InvalidAmount(f'Byte count must be finite, got {value}')
    if value < 0:
        logger.warning(f'Rejected negative byte count: {value}')
        raise InvalidAmount(f'Byte count must not be negative, got {value}')
    # -0.0 would render as "-0.0 b"
    return value if value else 0.0


def select_unit(byte_count: float) -> Unit:
    """Pick the largest unit whose magnitude fits in byte_count.

    Falls back to Unit.BYTE for anything below one kilobyte, zero included.
    """
    for unit in reversed(UNIT_LADDER):
        if byte_count >= unit.magnitude:
            return unit
    return Unit.BYTE


@dataclass(frozen=True)
class Amount:
    """A quantity of bytes with its display unit.

    Attributes:
        bytes: Raw byte count (non-negative, finite)
        unit: Unit the quantity is expressed in
    """
    bytes: float
    unit: Unit = Unit.BYTE

    def __post_init__(self) -> None:
        object.__setattr__(self, 'bytes', _validate_bytes(self.bytes))
        if not isinstance(self.unit, Unit):
            raise TypeError(f'unit must be a Unit, got {type(self.unit).__name__}')

    @classmethod
    def auto_detect(cls, byte_count: float) -> 'Amount':
        """Create an Amount in the most readable unit.

        Args:
            byte_count: Size in bytes

        Returns:
            Amount whose quantity is >= 1.0, unless byte_count is below 1 Kb

        Raises:
            InvalidAmount: For negative, non-finite or non-numeric input

        Examples:
            >>> Amount.auto_detect(32 * 1024).to_string()
            '32.0 Kb'
        """
        byte_count = _validate_bytes(byte_count)
        unit = select_unit(byte_count)
        logger.debug(f'Selected {unit.label} for {byte_count} bytes')
        return cls(byte_count, unit)

    @property
    def quantity(self) -> float:
        """Byte count scaled to the unit."""
        return self.bytes / self.unit.magnitude

    def to_string(self, precision: int = DEFAULT_PRECISION) -> str:
        """Render as "<quantity> <unit>".

        Args:
            precision: Decimal places for the quantity

        Returns:
            Human-readable string (e.g., "32.0 Kb")
        """
        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
            raise ValueError(f'precision must be a non-negative integer, got {precision!r}')
        return f'{self.quantity:.{precision}f} {self.unit.label}'

    def __str__(self) -> str:
        return self.to_string()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'bytes': self.bytes,
            'quantity': self.quantity,
            'unit': self.unit.label,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Amount':
        """Create Amount from dictionary, auto-detecting the unit if absent."""
        label = data.get('unit')
        if label is None:
            return cls.auto_detect(data['bytes'])
        return cls(data['bytes'], Unit.from_label(label))


def auto_detect(byte_count: float) -> Amount:
    """Create an Amount in the most readable unit for byte_count."""
    return Amount.auto_detect(byte_count)
