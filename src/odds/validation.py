"""
validation.py
-------------

Boundary checks for seeds and bounds.

Everything past these checks assumes a plain Python int in [0, 2**64).
"""

from __future__ import annotations

__all__ = ["as_uint64",]

from numbers import Integral


def as_uint64(value: int, name: str = "value") -> int:
    """Return `value` as a Python int in [0, 2**64) or raise.

    Raises:
        TypeError: `value` is not an integral number (float, str, None, ...).
        ValueError: `value` is negative or does not fit in 64 bits.
    """
    if not isinstance(value, Integral):
        raise TypeError(f"{name} must be an integer, not {type(value).__name__}")
    value = int(value)
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    if value >> 64:
        raise ValueError(f"{name} must fit in 64 bits, got {value}")
    return value
