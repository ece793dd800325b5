"""
rng.py
------

Thread-local default streams and the entropy bootstrap.

Every thread gets its own lazily created `Xoshiro256ss`, seeded from
system entropy (or from `config.seed` when one is set). Streams are never
shared between threads, so no locking is needed. Re-seeding one thread's
stream has no effect on any other stream.
"""

from __future__ import annotations

__all__ = [
    "entropy_seed", "thread_rng", "default_stream", "seed_thread", "seed_stream",
    "next64", "next32", "uniform_bounded", "one_in",
]

import os
import logging
import threading
from typing import Optional

from . import bounded
from .config import get_config
from .splitmix import MASK64, rotl64
from .xoshiro import Xoshiro256ss

logger = logging.getLogger(__name__)

_ENTROPY_SALT = 0xD6E8FEB86659FD93


def entropy_seed() -> int:
    """Return a fresh 64-bit seed mixed from three OS entropy pulls."""
    raw = os.urandom(24)
    a = int.from_bytes(raw[0:8], "little")
    b = int.from_bytes(raw[8:16], "little")
    c = int.from_bytes(raw[16:24], "little")
    return (a ^ rotl64(b, 21) ^ rotl64(c, 43) ^ _ENTROPY_SALT) & MASK64


# =============================================================================
# THREAD-LOCAL ACCESSORS
# =============================================================================
_thread_local = threading.local()


def thread_rng() -> Xoshiro256ss:
    """Return the calling thread's default stream, creating it on first use."""
    rng = getattr(_thread_local, "rng", None)
    if rng is None:
        seed = get_config().seed
        if seed is None:
            seed = entropy_seed()
            logger.debug(f"Default stream for thread {threading.get_ident()} seeded from entropy.")
        else:
            logger.debug(f"Default stream for thread {threading.get_ident()} seeded from config: {seed}")
        rng = _thread_local.rng = Xoshiro256ss(seed)
    return rng


default_stream = thread_rng


def seed_thread(seed: int) -> None:
    """Re-seed the calling thread's default stream (deterministic replay)."""
    thread_rng().reseed(seed)


seed_stream = seed_thread


def _reset_after_fork() -> None:
    global _thread_local
    _thread_local = threading.local()
    logger.debug(f"Dropped inherited default streams in child PID {os.getpid()}.")


if hasattr(os, "register_at_fork"):
    os.register_at_fork(after_in_child=_reset_after_fork)


# =============================================================================
# Stream-level conveniences
# =============================================================================
def next64(rng: Optional[Xoshiro256ss] = None) -> int:
    return (rng if rng is not None else thread_rng()).next64()


def next32(rng: Optional[Xoshiro256ss] = None) -> int:
    return (rng if rng is not None else thread_rng()).next32()


def uniform_bounded(rng: Optional[Xoshiro256ss], bound: int, method: Optional[str] = None) -> int:
    """Unbiased draw in [0, bound) from `rng`, or the thread's stream when `rng` is None."""
    return bounded.uniform_bounded(rng if rng is not None else thread_rng(), bound, method)


def one_in(stream_or_bound, bound: Optional[int] = None, method: Optional[str] = None) -> bool:
    """True with probability exactly 1/bound.

    Call forms:
        one_in(bound)           uses the calling thread's default stream
        one_in(stream, bound)   uses an explicit stream

    `bound <= 1` is always True and consumes no draw.
    """
    is_stream = hasattr(stream_or_bound, "next64")
    if bound is None:
        if is_stream:
            raise TypeError("one_in(stream, bound) requires a bound")
        return bounded.one_in(thread_rng(), stream_or_bound, method)
    if not is_stream:
        raise TypeError(f"stream must provide next64(), not {type(stream_or_bound).__name__}")
    return bounded.one_in(stream_or_bound, bound, method)
