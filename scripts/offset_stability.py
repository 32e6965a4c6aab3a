"""Compare the streaming estimator with naive sum-of-squares under large offsets.

Both estimators see the same unit-variance samples shifted by increasing
constants; the streaming variance should stay near 1.0 while the naive one
drifts and eventually collapses.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from streaming_moments.covariance import PairwiseMomentAccumulator


@dataclass
class StabilityResult:
    offset: float
    streaming_variance: float
    naive_variance: float


def _naive_variance(values: list[float]) -> float:
    n = len(values)
    total = sum(values)
    total_sq = sum(value * value for value in values)
    return (total_sq - total * total / n) / (n - 1)


def _simulate(offset: float, samples: int = 10_000, seed: int = 1) -> StabilityResult:
    rng = random.Random(seed)
    values = [offset + rng.gauss(0.0, 1.0) for _ in range(samples)]
    accumulator = PairwiseMomentAccumulator.from_pairs((value, value) for value in values)
    return StabilityResult(offset, accumulator.sample_variance_x(), _naive_variance(values))


def run() -> list[StabilityResult]:
    return [_simulate(offset) for offset in (0.0, 1e4, 1e6, 1e8, 1e10)]


if __name__ == "__main__":
    for result in run():
        print(
            f"offset={result.offset:.0e} streaming={result.streaming_variance:.6f} "
            f"naive={result.naive_variance:.6f}"
        )
