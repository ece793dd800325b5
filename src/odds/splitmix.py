"""
splitmix.py
-----------

SplitMix64 seed mixer.

Expands a single 64-bit seed into well-distributed words for seeding
xoshiro256** state. Pure, total over all 64-bit inputs.
"""

from __future__ import annotations

__all__ = ["MASK64", "GOLDEN_GAMMA", "rotl64", "splitmix64", "SplitMix64", "expand_seed",]

from typing import Tuple

# =============================================================================
# Constants
# =============================================================================
MASK64 = 0xFFFFFFFFFFFFFFFF
GOLDEN_GAMMA = 0x9E3779B97F4A7C15
_MIX1 = 0xBF58476D1CE4E5B9
_MIX2 = 0x94D049BB133111EB


def rotl64(x: int, k: int) -> int:
    return ((x << k) & MASK64) | (x >> (64 - k))


def _avalanche(z: int) -> int:
    z = ((z ^ (z >> 30)) * _MIX1) & MASK64
    z = ((z ^ (z >> 27)) * _MIX2) & MASK64
    return z ^ (z >> 31)


def splitmix64(x: int) -> int:
    """Single stateless SplitMix64 step: increment by the gamma, then avalanche."""
    return _avalanche((x + GOLDEN_GAMMA) & MASK64)


class SplitMix64:
    """Stateful SplitMix64 stream.

    Each call to `next64` adds the golden-ratio gamma to the counter and
    returns the avalanche of the new counter value.
    """

    __slots__ = ("state",)

    def __init__(self, seed: int) -> None:
        self.state = seed & MASK64

    def next64(self) -> int:
        self.state = (self.state + GOLDEN_GAMMA) & MASK64
        return _avalanche(self.state)

    def __repr__(self) -> str:
        return f"<SplitMix64 state=0x{self.state:016X}>"


def expand_seed(seed: int, n: int = 4) -> Tuple[int, ...]:
    """Return `n` successive SplitMix64 outputs for `seed`."""
    sm = SplitMix64(seed)
    return tuple(sm.next64() for _ in range(n))
