"""
Session Statistics

Running min / max / mean of sound levels over a measurement session,
broadband and per frequency band.

Technical assumptions:
- The mean is the ARITHMETIC mean of dB values (no energetic averaging)
- -inf dB (silence) is a valid observation: it lowers the minimum but is
  excluded from the mean so that a single silent block cannot drag the
  session mean to -inf
- NaN and +inf are rejected
- One lock per aggregator; observe() and snapshot() may be called from
  different threads
"""

from dataclasses import dataclass
from typing import Iterable, Mapping
import math
import threading

from .errors import InvalidConfiguration, InvalidSample


@dataclass(frozen=True)
class SplStatistics:
    """
    Summary of a set of sound levels.

    Attributes:
        min: Lowest level in dB
        max: Highest level in dB
        mean: Arithmetic mean of the levels in dB
    """
    min: float
    max: float
    mean: float


class StatisticsAggregator:
    """
    Thread-safe running statistics of decibel values.

    Usage:
        stats = StatisticsAggregator()
        stats.observe_many(get_leq_fast(samples, 44100))
        print(stats.snapshot().mean)
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._reset_state()

    def _reset_state(self) -> None:
        self._count = 0
        self._finite_count = 0
        self._sum = 0.0
        self._min = math.inf
        self._max = -math.inf

    @property
    def count(self) -> int:
        """Number of accepted observations (including silent ones)."""
        with self._lock:
            return self._count

    def observe(self, value: float) -> None:
        """
        Add one level.

        Raises:
            InvalidSample: value is NaN or +inf
        """
        value = _checked(value)
        with self._lock:
            self._add(value)

    def observe_many(self, values: Iterable[float]) -> None:
        """
        Add several levels in order, e.g. a whole Leq sequence.

        The batch is validated first; an invalid value leaves the
        aggregator unchanged.
        """
        checked = [_checked(value) for value in values]
        with self._lock:
            for value in checked:
                self._add(value)

    def snapshot(self) -> SplStatistics:
        """
        Current statistics, without resetting.

        Raises:
            InvalidConfiguration: Nothing has been observed yet
        """
        with self._lock:
            if self._count == 0:
                raise InvalidConfiguration("No levels observed in this session")
            if self._finite_count == 0:
                return SplStatistics(min=-math.inf, max=-math.inf, mean=-math.inf)
            return SplStatistics(
                min=self._min,
                max=self._max,
                mean=self._sum / self._finite_count,
            )

    def reset(self) -> None:
        """Start a new session."""
        with self._lock:
            self._reset_state()

    def _add(self, value: float) -> None:
        # Caller holds the lock
        self._count += 1
        if value < self._min:
            self._min = value
        if value == -math.inf:
            return
        self._finite_count += 1
        self._sum += value
        if value > self._max:
            self._max = value


class BandStatisticsAggregator:
    """
    Running statistics per frequency band.

    Feeds the Min / current / Max spectrum display: one
    StatisticsAggregator per band center frequency, created on first use.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._bands: dict[float, StatisticsAggregator] = {}

    @property
    def bands(self) -> list[float]:
        """Center frequencies seen so far, ascending."""
        with self._lock:
            return sorted(self._bands)

    def observe(self, band_levels: Mapping[float, float]) -> None:
        """
        Add one level per band.

        Args:
            band_levels: Center frequency in Hz -> level in dB

        Raises:
            InvalidSample: Any level is NaN or +inf (nothing is recorded)
        """
        checked = {float(freq): _checked(level) for freq, level in band_levels.items()}
        with self._lock:
            for freq, level in checked.items():
                aggregator = self._bands.get(freq)
                if aggregator is None:
                    aggregator = self._bands[freq] = StatisticsAggregator()
                aggregator.observe(level)

    def snapshot(self) -> dict[float, SplStatistics]:
        """
        Statistics of every band, ordered by center frequency.

        Raises:
            InvalidConfiguration: Nothing has been observed yet
        """
        with self._lock:
            if not self._bands:
                raise InvalidConfiguration("No band levels observed in this session")
            return {freq: self._bands[freq].snapshot() for freq in sorted(self._bands)}

    def reset(self) -> None:
        with self._lock:
            self._bands.clear()


def _checked(value: float) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidSample(f"Level must be a number, got: {value!r}") from e
    if math.isnan(value) or value == math.inf:
        raise InvalidSample(f"Level must be finite or -inf, got: {value}")
    return value
