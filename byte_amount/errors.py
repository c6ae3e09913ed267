"""
Exceptions raised by byte_amount.
"""
from __future__ import annotations


class ByteAmountError(Exception):
    """Base class for all byte_amount errors."""


class InvalidAmount(ByteAmountError, ValueError):
    """A byte count (or unit label) that cannot form an Amount.

    Raised for negative, NaN, infinite or non-numeric byte counts.
    """
