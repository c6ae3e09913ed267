"""
Utility functions for byte_amount.

Common helper functions built on Amount.
"""
from __future__ import annotations

from byte_amount.constants import DEFAULT_PRECISION
from byte_amount.models import Amount


def human_size(n: float, precision: int = DEFAULT_PRECISION) -> str:
    """Convert bytes to human-readable size string.

    Unlike Amount, negative sizes are accepted and keep their sign.

    Args:
        n: Size in bytes
        precision: Decimal places for the quantity

    Returns:
        Human-readable string (e.g., "1.2 Gb")

    Examples:
        >>> human_size(1024)
        '1.0 Kb'
        >>> human_size(1536, precision=2)
        '1.50 Kb'
        >>> human_size(-2048)
        '-2.0 Kb'
    """
    if n < 0:
        return f"-{human_size(-n, precision)}"

    return Amount.auto_detect(n).to_string(precision)
