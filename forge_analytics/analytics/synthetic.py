"""
Synthetic data generators for the analytics view.

Projects only store current-state metrics, so every chart that needs a time
axis is fed a plausible series synthesized from one baseline value. The
handful of values with no stored source at all (budget utilization,
engagement, retention, ...) come from PlaceholderMetrics.

All randomness is drawn from an injected random.Random so a seeded generator
gives reproducible output.
"""

import random
from datetime import date, timedelta
from typing import List, Optional


MONTH_LABELS = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"
]

DEFAULT_VARIANCE = 0.3


def generate_date_labels(days: int, today: Optional[date] = None) -> List[str]:
    """
    Generate daily labels ending today, oldest first.

    Args:
        days: Number of labels
        today: Last day of the range (defaults to date.today())

    Returns:
        Labels like "Oct 18"
    """
    if today is None:
        today = date.today()

    labels = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        labels.append(f"{day.strftime('%b')} {day.day}")
    return labels


class TrendSynthesizer:
    """Synthesizes an upward-trending noisy series from a baseline value"""

    START_RATIO = 0.7
    RAMP = 0.6  # 70% -> 130% of baseline across the series

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    @classmethod
    def envelope(cls, baseline: float, points: int) -> List[float]:
        """Return the noise-free trend component of a synthesized series"""
        if points < 1:
            raise ValueError(f"points must be at least 1, got {points}")
        return [
            baseline * (cls.START_RATIO + (i / points) * cls.RAMP)
            for i in range(points)
        ]

    def synthesize(
        self,
        baseline: float,
        points: int,
        variance: float = DEFAULT_VARIANCE
    ) -> List[float]:
        """
        Generate a series of `points` values around a ramping trend.

        Args:
            baseline: Value the trend is scaled from
            points: Number of values to produce (>= 1)
            variance: Noise amplitude as a fraction of baseline

        Returns:
            List of non-negative floats
        """
        series = []
        for trend in self.envelope(baseline, points):
            noise = (self.rng.random() - 0.5) * variance * baseline
            series.append(max(0.0, trend + noise))
        return series


class PlaceholderMetrics:
    """
    Bounded random stand-ins for metrics that projects do not record.

    Each range is half-open [low, high) except active_today, which is an
    integer in [1, 5].
    """

    BUDGET_UTILIZATION = (20.0, 90.0)
    ENGAGEMENT = (60.0, 100.0)
    RETENTION = (70.0, 100.0)
    GROWTH = (50.0, 100.0)
    POLAR_ENGAGEMENT = (50.0, 100.0)
    ACTIVE_TODAY = (1, 5)

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def _draw(self, bounds) -> float:
        low, high = bounds
        return low + self.rng.random() * (high - low)

    def budget_utilization(self) -> float:
        return self._draw(self.BUDGET_UTILIZATION)

    def active_today(self) -> int:
        return self.rng.randint(*self.ACTIVE_TODAY)

    def engagement(self) -> float:
        return self._draw(self.ENGAGEMENT)

    def retention(self) -> float:
        return self._draw(self.RETENTION)

    def growth(self) -> float:
        return self._draw(self.GROWTH)

    def polar_engagement(self) -> float:
        return self._draw(self.POLAR_ENGAGEMENT)
