"""
xoshiro.py
----------

xoshiro256** generator (Blackman & Vigna).

256 bits of state, 64-bit output, period 2**256 - 1. Seeded through
SplitMix64. Not cryptographically secure, and not internally
synchronized: one instance per thread (see `odds.rng`).
"""

from __future__ import annotations

__all__ = ["DEFAULT_STATE", "FALLBACK_STATE", "Xoshiro256ss",]

import logging
from typing import Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from .bounded import one_in as _one_in
from .bounded import uniform_bounded as _uniform_bounded
from .splitmix import MASK64, expand_seed, rotl64
from .validation import as_uint64

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================
DEFAULT_STATE = (0x123456789ABCDEF0, 0xCAFEBABEDEADC0DE, 0x0F1E2D3C4B5A6978, 0x1122334455667788)
FALLBACK_STATE = (0x9E3779B97F4A7C15, 0xBF58476D1CE4E5B9, 0x94D049BB133111EB, 0xD1B54A32D192ED03)

_JUMP = (0x180EC6D33CFD0ABA, 0xD5A61266F0C9392C, 0xA9582618E03FC9AA, 0x39ABDC4529B1661C)
_LONG_JUMP = (0x76E15D3EFEFDCBBF, 0xC5004E441C522FB3, 0x77710069854EE241, 0x39109BB02ACBE635)


class Xoshiro256ss:
    """xoshiro256** stream.

    Attributes:
        s: Four 64-bit state words; never all zero.

    Notes:
        - `Xoshiro256ss()` starts from a fixed default state.
        - `Xoshiro256ss(seed)` mixes `seed` with SplitMix64.
    """

    __slots__ = ("s",)

    def __init__(self, seed: Optional[int] = None) -> None:
        self.s = list(DEFAULT_STATE)
        if seed is not None:
            self.reseed(seed)

    # -----------------------------------------------------------------
    # Seeding
    # -----------------------------------------------------------------
    def reseed(self, seed: int) -> None:
        """Replace the whole state with the SplitMix64 expansion of `seed`."""
        s = list(expand_seed(as_uint64(seed, "seed")))
        if not any(s):
            logger.debug(f"Seed {seed} mixed to all-zero state; using fallback state.")
            s = list(FALLBACK_STATE)
        self.s = s

    seed_with = reseed

    # -----------------------------------------------------------------
    # Draws
    # -----------------------------------------------------------------
    def next64(self) -> int:
        s0, s1, s2, s3 = self.s
        result = (rotl64((s1 * 5) & MASK64, 7) * 9) & MASK64
        t = (s1 << 17) & MASK64

        s2 ^= s0
        s3 ^= s1
        s1 ^= s2
        s0 ^= s3

        s2 ^= t
        s3 = rotl64(s3, 45)

        self.s = [s0, s1, s2, s3]
        return result

    def next32(self) -> int:
        return self.next64() >> 32

    def next64_array(self, n: int) -> NDArray[np.uint64]:
        """Return `n` consecutive `next64()` draws as a uint64 array."""
        out = np.empty(int(n), dtype=np.uint64)
        for i in range(out.size):
            out[i] = self.next64()
        return out

    def uniform_bounded(self, bound: int, method: Optional[str] = None) -> int:
        return _uniform_bounded(self, bound, method)

    def one_in(self, bound: int, method: Optional[str] = None) -> bool:
        return _one_in(self, bound, method)

    # -----------------------------------------------------------------
    # Jumps
    # -----------------------------------------------------------------
    def _apply_jump(self, poly: Sequence[int]) -> None:
        acc = [0, 0, 0, 0]
        for word in poly:
            for b in range(64):
                if word & (1 << b):
                    for i in range(4):
                        acc[i] ^= self.s[i]
                self.next64()
        self.s = acc

    def jump(self) -> None:
        """Advance by 2**128 draws; yields 2**128 non-overlapping sub-streams."""
        self._apply_jump(_JUMP)

    def long_jump(self) -> None:
        """Advance by 2**192 draws."""
        self._apply_jump(_LONG_JUMP)

    # -----------------------------------------------------------------
    # Utility & Introspection
    # -----------------------------------------------------------------
    def getstate(self) -> Tuple[int, int, int, int]:
        return tuple(self.s)

    def setstate(self, state: Sequence[int]) -> None:
        words = [as_uint64(w, "state word") for w in state]
        if len(words) != 4:
            raise ValueError(f"state must have 4 words, got {len(words)}")
        if not any(words):
            raise ValueError("state must not be all zero")
        self.s = words

    def __copy__(self) -> Xoshiro256ss:
        clone = Xoshiro256ss.__new__(Xoshiro256ss)
        clone.s = list(self.s)
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Xoshiro256ss):
            return NotImplemented
        return self.s == other.s

    __hash__ = None

    def __repr__(self) -> str:
        return f"<Xoshiro256ss id={id(self)}>"
