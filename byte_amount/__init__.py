"""
byte_amount - Human-readable byte quantities

A small value type that picks the most readable unit for a byte count.
"""
from __future__ import annotations

__version__ = "0.1.0"

# Re-export main components for convenient imports
from byte_amount.constants import (
    BASE,
    DEFAULT_PRECISION,
    UNIT_LABELS,
    UNIT_LADDER,
    Unit,
)
from byte_amount.errors import (
    ByteAmountError,
    InvalidAmount,
)
from byte_amount.models import (
    Amount,
    auto_detect,
    select_unit,
)
from byte_amount.logging import setup_logging
from byte_amount.utils import human_size

__all__ = [
    # Version info
    "__version__",
    # Unit ladder
    "BASE",
    "DEFAULT_PRECISION",
    "UNIT_LABELS",
    "UNIT_LADDER",
    "Unit",
    # Errors
    "ByteAmountError",
    "InvalidAmount",
    # Models
    "Amount",
    "auto_detect",
    "select_unit",
    # Logging
    "setup_logging",
    # Utils
    "human_size",
]
