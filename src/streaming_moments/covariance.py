"""Streaming covariance of two paired variables.

The estimator follows Welford's single-pass update generalized to two
variables: it never forms ``sum(x)`` or ``sum(x * x)``, so the result stays
accurate when the mean is large compared to the spread of the samples.

See https://en.wikipedia.org/wiki/Algorithms_for_calculating_variance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple

from .mean import RunningMean
from .models import MomentSnapshot


@dataclass
class PairwiseMomentAccumulator:
    """Running means, variances and covariance of ``(x, y)`` observations.

    Attributes:
        co_moment: Sum of deviation cross-products for the covariance.
        sq_dev_x: Sum of squared deviations of X.
        sq_dev_y: Sum of squared deviations of Y.

    Instances are not synchronized; share one between threads only behind a
    lock held by the caller.
    """

    _mean_x: RunningMean = field(init=False, default_factory=RunningMean)
    _mean_y: RunningMean = field(init=False, default_factory=RunningMean)
    co_moment: float = field(init=False, default=0.0)
    sq_dev_x: float = field(init=False, default=0.0)
    sq_dev_y: float = field(init=False, default=0.0)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[float, float]]) -> "PairwiseMomentAccumulator":
        """Build an accumulator from an iterable of ``(x, y)`` pairs."""

        accumulator = cls()
        accumulator.extend(pairs)
        return accumulator

    def add(self, sample_x: float, sample_y: float) -> None:
        """Fold one joint observation into the running moments."""

        self._increment()
        n = float(self._mean_x.count)
        # Means are still the pre-update values here.
        delta_x = (sample_x - self._mean_x.mean()) / n
        delta_y = (sample_y - self._mean_y.mean()) / n
        self._add_inner(delta_x, delta_y)

    def extend(self, pairs: Iterable[Tuple[float, float]]) -> None:
        for sample_x, sample_y in pairs:
            self.add(sample_x, sample_y)

    def _increment(self) -> None:
        self._mean_x._increment()
        self._mean_y._increment()

    def _add_inner(self, delta_x: float, delta_y: float) -> None:
        # Deltas are already divided by the incremented count, which saves a
        # division per accumulated sum.
        n = float(self._mean_x.count)
        self._mean_x._add_inner(delta_x)
        self._mean_y._add_inner(delta_y)

        n1 = n * (n - 1.0)
        self.co_moment += delta_x * delta_y * n1
        self.sq_dev_x += delta_x * delta_x * n1
        self.sq_dev_y += delta_y * delta_y * n1

    def is_empty(self) -> bool:
        return self._mean_x.is_empty() or self._mean_y.is_empty()

    def len(self) -> int:
        """Return the sample size."""

        return self._mean_x.count

    def __len__(self) -> int:
        return self._mean_x.count

    def mean_x(self) -> float:
        """Estimate the mean of the X population, 0.0 for an empty sample."""

        return self._mean_x.mean()

    def mean_y(self) -> float:
        """Estimate the mean of the Y population, 0.0 for an empty sample."""

        return self._mean_y.mean()

    def sample_covariance(self) -> float:
        """Unbiased estimate of the population covariance.

        Returns 0.0 with fewer than two samples.
        """

        n = self._mean_x.count
        if n < 2:
            return 0.0
        return self.co_moment / float(n - 1)

    def sample_variance_x(self) -> float:
        """Unbiased estimate of the X population variance."""

        n = self._mean_x.count
        if n < 2:
            return 0.0
        return self.sq_dev_x / float(n - 1)

    def sample_variance_y(self) -> float:
        """Unbiased estimate of the Y population variance."""

        n = self._mean_y.count
        if n < 2:
            return 0.0
        return self.sq_dev_y / float(n - 1)

    def snapshot(self) -> MomentSnapshot:
        """Return the current derived statistics as an immutable record."""

        return MomentSnapshot(
            count=self.len(),
            mean_x=self.mean_x(),
            mean_y=self.mean_y(),
            sample_covariance=self.sample_covariance(),
            sample_variance_x=self.sample_variance_x(),
            sample_variance_y=self.sample_variance_y(),
        )
