"""
Core level engine - fully testable without capture or display.

This module contains the acoustic indicator logic:
- Equivalent sound pressure level (Leq, Fast/Slow streams)
- Hann analysis window
- Session statistics (min / max / mean)
- Measurement session tying these together
"""

from .constants import (
    REF_SOUND_PRESSURE,
    TIMEPERIOD_FAST,
    TIMEPERIOD_SLOW,
    EngineConfig,
    TimePeriod,
)
from .errors import InvalidConfiguration, InvalidInput, InvalidSample, NoiseMeterError
from .sample_block import SampleBlock
from .levels import get_leq, get_leq_t, get_leq_fast, get_leq_slow, sub_block_length
from .windowing import hann_window
from .statistics import SplStatistics, StatisticsAggregator, BandStatisticsAggregator
from .session import BlockResult, MeasurementSession
from .audio_io import load_sample_block

__all__ = [
    "REF_SOUND_PRESSURE",
    "TIMEPERIOD_FAST",
    "TIMEPERIOD_SLOW",
    "EngineConfig",
    "TimePeriod",
    "NoiseMeterError",
    "InvalidInput",
    "InvalidConfiguration",
    "InvalidSample",
    "SampleBlock",
    "get_leq",
    "get_leq_t",
    "get_leq_fast",
    "get_leq_slow",
    "sub_block_length",
    "hann_window",
    "SplStatistics",
    "StatisticsAggregator",
    "BandStatisticsAggregator",
    "BlockResult",
    "MeasurementSession",
    "load_sample_block",
]
