"""
bounded.py
----------

Unbiased bounded sampling and "1 in N" checks.

Maps raw 64-bit draws onto [0, bound) with no modulo bias:
- power-of-two bounds mask the low bits of a single draw;
- other bounds use Lemire's multiply-shift with rejection ("multiply"),
  or the classic largest-multiple rejection ("portable").

Both methods give every value exactly probability 1/bound. They do not
consume draws identically, so their output sequences differ.

`rng` is anything with a `next64()` method returning an int in [0, 2**64).
"""

from __future__ import annotations

__all__ = ["uniform_bounded", "one_in", "is_power_of_two", "rejection_threshold",]

from typing import Optional

from .config import SAMPLERS, get_config
from .splitmix import MASK64
from .validation import as_uint64


def is_power_of_two(bound: int) -> bool:
    return bound > 0 and (bound & (bound - 1)) == 0


def rejection_threshold(bound: int) -> int:
    """(2**64 - bound) % bound, i.e. 2**64 mod bound."""
    return ((0 - bound) & MASK64) % bound


# -----------------------------------------------------------------------------
# Rejection loops (bound > 0, not a power of two)
# -----------------------------------------------------------------------------
def _multiply_shift(rng, bound: int, threshold: int) -> int:
    while True:
        m = rng.next64() * bound
        if (m & MASK64) >= threshold:
            return m >> 64


def _largest_multiple(rng, bound: int) -> int:
    limit = (MASK64 // bound) * bound
    while True:
        x = rng.next64()
        if x < limit:
            return x % bound


def _resolve_method(method: Optional[str]) -> str:
    if method is None:
        return get_config().sampler
    if method not in SAMPLERS:
        raise ValueError(f"method must be one of {SAMPLERS}, got {method!r}")
    return method


def _draw_below(rng, bound: int, threshold: int, method: str) -> int:
    if method == "portable":
        return _largest_multiple(rng, bound)
    return _multiply_shift(rng, bound, threshold)


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------
def uniform_bounded(rng, bound: int, method: Optional[str] = None) -> int:
    """Return an unbiased integer in [0, bound).

    Args:
        rng: Stream providing `next64()`.
        bound: Exclusive upper limit, 0 <= bound < 2**64.
            `bound == 0` returns 0 without drawing.
        method: "multiply" or "portable"; defaults to the active config.

    Raises:
        TypeError: `bound` is not an integer.
        ValueError: `bound` is out of range or `method` is unknown.
    """
    bound = as_uint64(bound, "bound")
    method = _resolve_method(method)
    if bound == 0:
        return 0
    if (bound & (bound - 1)) == 0:
        return rng.next64() & (bound - 1)
    return _draw_below(rng, bound, rejection_threshold(bound), method)


def one_in(rng, bound: int, method: Optional[str] = None) -> bool:
    """True with probability exactly 1/bound; `bound <= 1` is always True and draws nothing."""
    bound = as_uint64(bound, "bound")
    if bound <= 1:
        return True
    return uniform_bounded(rng, bound, method) == 0
