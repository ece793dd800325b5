"""
odds
----

Deterministic xoshiro256** streams and unbiased "1 in N" checks.

    >>> import odds
    >>> odds.seed_stream(1337)
    >>> odds.one_in(37)
    >>> odds.p100()
"""

from .config import OddsConfig, configure, get_config, set_config
from .splitmix import SplitMix64, expand_seed, splitmix64
from .xoshiro import Xoshiro256ss
from .rng import (
    default_stream, entropy_seed, next32, next64, one_in,
    seed_stream, seed_thread, thread_rng, uniform_bounded,
)
from .presets import (
    PRESETS, OneIn,
    p2, p3, p4, p5, p6, p8, p10, p12, p16, p20, p25, p30, p50, p60, p100, p128, p256,
    one_in_2, one_in_5, one_in_10, one_in_25, one_in_50, one_in_100,
)

__version__ = "0.1.0"

__all__ = [
    "OddsConfig", "configure", "get_config", "set_config",
    "SplitMix64", "expand_seed", "splitmix64",
    "Xoshiro256ss",
    "default_stream", "entropy_seed", "next32", "next64", "one_in",
    "seed_stream", "seed_thread", "thread_rng", "uniform_bounded",
    "PRESETS", "OneIn",
    "p2", "p3", "p4", "p5", "p6", "p8", "p10", "p12", "p16", "p20",
    "p25", "p30", "p50", "p60", "p100", "p128", "p256",
    "one_in_2", "one_in_5", "one_in_10", "one_in_25", "one_in_50", "one_in_100",
]
