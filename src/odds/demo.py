"""
demo.py - Reference example: seed a stream, count "1 in 100" hits.

With `workers > 1` the trials are split across a multiprocessing pool.
Chunk i runs on a fresh stream seeded with `(seed + i) mod 2**64`, so the total is
reproducible for a given (trials, seed, workers).
"""

import os
import logging
import multiprocessing as mp
from dataclasses import dataclass
from typing import List, Tuple

from .presets import p100
from .rng import one_in, seed_thread, thread_rng
from .splitmix import MASK64
from .xoshiro import Xoshiro256ss

LOGGER_NAME = "odds.demo"


@dataclass(frozen=True)
class DemoResult:
    trials: int
    hits: int
    lucky_37: bool

    @property
    def rate(self) -> float:
        return self.hits / self.trials if self.trials else 0.0


def _count_hits(job: Tuple[int, int]) -> int:
    """Pool task: count p100 hits over `trials` draws from a stream seeded with `seed`."""
    seed, trials = job
    rng = Xoshiro256ss(seed)
    return sum(1 for _ in range(trials) if p100(rng))


def _split(trials: int, workers: int) -> List[int]:
    base, extra = divmod(trials, workers)
    return [base + (1 if i < extra else 0) for i in range(workers)]


def main(trials: int = 1_000_000, seed: int = 1337, workers: int = 1) -> DemoResult:
    """Run the demo and log the results."""
    logger = logging.getLogger(LOGGER_NAME)
    if trials < 0:
        raise ValueError(f"trials must be non-negative, got {trials}")
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")

    seed_thread(seed)
    logger.info(f"Seeded default stream with {seed}; running {trials} trials on {workers} worker(s)")

    if workers == 1:
        rng = thread_rng()
        hits = sum(1 for _ in range(trials) if p100(rng))
    else:
        jobs = [((seed + i) & MASK64, n) for i, n in enumerate(_split(trials, workers))]
        with mp.Pool(processes=min(workers, os.cpu_count() or 1)) as pool:
            hits = sum(pool.map(_count_hits, jobs))

    logger.info(f"1 in 100 hits: {hits}")

    lucky = one_in(37)
    if lucky:
        logger.info("Lucky 37 triggered.")

    return DemoResult(trials=trials, hits=hits, lucky_37=lucky)
