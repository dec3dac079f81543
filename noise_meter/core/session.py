"""
Measurement Session

Ties the engine together for one measurement:

    capture -> (Hann window) -> Leq / Leq(T) -> session statistics

The session owns no queue and no thread. The capture side calls
process_block() for every block it delivers, the display side polls
statistics(). Blocks that fail validation are logged and the error is
re-raised; the caller decides whether to skip the block or stop.
"""

from dataclasses import dataclass
from typing import Mapping, Optional
import logging
import threading

import numpy as np

from .constants import EngineConfig
from .errors import NoiseMeterError
from .levels import get_leq, get_leq_t
from .sample_block import SampleBlock
from .statistics import BandStatisticsAggregator, SplStatistics, StatisticsAggregator
from .windowing import hann_window

logger = logging.getLogger(__name__)


@dataclass
class BlockResult:
    """
    Levels computed from one sample block.

    Attributes:
        leq: Leq of the whole block in dB
        levels: Leq per time period in dB, chronological
        windowed: Hann-windowed copy of the samples for the spectral
            path (None unless EngineConfig.apply_window is set)
    """
    leq: float
    levels: np.ndarray
    windowed: Optional[np.ndarray] = None


class MeasurementSession:
    """
    Level computation and statistics for one measurement.

    Usage:
        session = MeasurementSession(EngineConfig(time_period=TimePeriod.SLOW))
        for block in blocks:
            session.process_block(block)
        print(session.statistics())
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config if config is not None else EngineConfig()
        self._broadband = StatisticsAggregator()
        self._bands = BandStatisticsAggregator()
        self._blocks_processed = 0
        self._counter_lock = threading.Lock()

    @property
    def blocks_processed(self) -> int:
        with self._counter_lock:
            return self._blocks_processed

    def process_block(self, block: SampleBlock) -> BlockResult:
        """
        Compute the levels of a block and add them to the session.

        Raises:
            NoiseMeterError: The block cannot be processed with this
                configuration (nothing is added to the statistics)
        """
        reference = self.config.reference_pressure
        try:
            leq = get_leq(block.samples, reference)
            levels = get_leq_t(
                block.samples,
                block.sample_rate,
                self.config.time_period,
                reference,
            )
            self._broadband.observe_many(levels)
        except NoiseMeterError as e:
            logger.warning("Rejected block of %d samples: %s", block.num_samples, e)
            raise

        windowed = None
        if self.config.apply_window:
            windowed = hann_window(block.samples.copy())

        with self._counter_lock:
            self._blocks_processed += 1
            index = self._blocks_processed

        logger.debug(
            "Block %d: %d samples, Leq %.1f dB, %d levels",
            index, block.num_samples, leq, len(levels),
        )
        return BlockResult(leq=leq, levels=levels, windowed=windowed)

    def process_band_levels(self, band_levels: Mapping[float, float]) -> None:
        """Add per-band levels (center frequency -> dB) from the filter bank."""
        self._bands.observe(band_levels)

    def statistics(self) -> SplStatistics:
        """Broadband min / max / mean of all levels so far."""
        return self._broadband.snapshot()

    def band_statistics(self) -> dict[float, SplStatistics]:
        """Min / max / mean per band, ordered by center frequency."""
        return self._bands.snapshot()

    def reset(self) -> None:
        """Clear all statistics and start a new measurement."""
        self._broadband.reset()
        self._bands.reset()
        with self._counter_lock:
            self._blocks_processed = 0
        logger.info("Measurement session reset")
