"""Single-variable streaming mean estimator."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class RunningMean:
    """Online mean estimator.

    The count and the mean are updated in two steps so that a composite
    estimator can bump the count first and then fold in a delta it has
    already divided by the new count.
    """

    count: int = field(init=False, default=0)
    _mean: float = field(init=False, default=0.0)

    def add(self, value: float) -> None:
        self._increment()
        delta = (value - self._mean) / float(self.count)
        self._add_inner(delta)

    def _increment(self) -> None:
        # Only the sample size changes here.
        self.count += 1

    def _add_inner(self, delta: float) -> None:
        # delta == (value - old_mean) / count, with count already incremented.
        self._mean += delta

    def mean(self) -> float:
        """Return the current mean, 0.0 for an empty sample."""

        return self._mean

    def is_empty(self) -> bool:
        return self.count == 0

    def len(self) -> int:
        return self.count

    def __len__(self) -> int:
        return self.count
