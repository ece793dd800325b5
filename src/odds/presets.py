"""
presets.py
----------

Fixed-denominator "1 in N" checks as first-class callables.

`OneIn(N)` resolves the power-of-two branch and the rejection threshold
once at construction; calls behave exactly like `bounded.one_in(rng, N)`
for the same draw sequence.

    >>> from odds import p100, OneIn
    >>> crit = OneIn(20)
    >>> crit() or p100()          # thread's default stream
    >>> crit(my_stream)           # explicit stream
"""

from __future__ import annotations

__all__ = [
    "OneIn", "PRESETS",
    "p2", "p3", "p4", "p5", "p6", "p8", "p10", "p12", "p16", "p20",
    "p25", "p30", "p50", "p60", "p100", "p128", "p256",
    "one_in_2", "one_in_5", "one_in_10", "one_in_25", "one_in_50", "one_in_100",
]

from typing import Dict, Optional

from .bounded import _draw_below, _resolve_method, is_power_of_two, rejection_threshold
from .rng import thread_rng
from .validation import as_uint64


class OneIn:
    """Immutable check that is True with probability exactly 1/N."""

    __slots__ = ("_bound", "_mask", "_threshold",)

    def __init__(self, bound: int) -> None:
        bound = as_uint64(bound, "bound")
        if bound < 1:
            raise ValueError("OneIn(N): N must be >= 1")
        object.__setattr__(self, "_bound", bound)
        object.__setattr__(self, "_mask", bound - 1 if is_power_of_two(bound) else None)
        object.__setattr__(self, "_threshold", rejection_threshold(bound))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (OneIn, (self._bound,))

    @property
    def bound(self) -> int:
        return self._bound

    @property
    def probability(self) -> float:
        return 1.0 / self._bound

    def __call__(self, rng=None, method: Optional[str] = None) -> bool:
        method = _resolve_method(method)
        if self._bound == 1:
            return True
        if rng is None:
            rng = thread_rng()
        if self._mask is not None:
            return (rng.next64() & self._mask) == 0
        return _draw_below(rng, self._bound, self._threshold, method) == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OneIn):
            return NotImplemented
        return self._bound == other._bound

    def __hash__(self) -> int:
        return hash((OneIn, self._bound))

    def __repr__(self) -> str:
        return f"OneIn({self._bound})"


# =============================================================================
# Presets / common denominators
# =============================================================================
p2 = OneIn(2)
p3 = OneIn(3)
p4 = OneIn(4)
p5 = OneIn(5)
p6 = OneIn(6)
p8 = OneIn(8)
p10 = OneIn(10)
p12 = OneIn(12)
p16 = OneIn(16)
p20 = OneIn(20)
p25 = OneIn(25)
p30 = OneIn(30)
p50 = OneIn(50)
p60 = OneIn(60)
p100 = OneIn(100)
p128 = OneIn(128)
p256 = OneIn(256)

PRESETS: Dict[int, OneIn] = {
    check.bound: check
    for check in (p2, p3, p4, p5, p6, p8, p10, p12, p16, p20, p25, p30, p50, p60, p100, p128, p256)
}


# Named wrappers.
def one_in_2() -> bool: return p2()
def one_in_5() -> bool: return p5()
def one_in_10() -> bool: return p10()
def one_in_25() -> bool: return p25()
def one_in_50() -> bool: return p50()
def one_in_100() -> bool: return p100()
