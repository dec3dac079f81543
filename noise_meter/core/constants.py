"""
Measurement Constants and Engine Configuration

Fixed values of a sound level meter:
- Reference sound pressure 20 µPa (threshold of hearing)
- Fast time period 125 ms, Slow time period 1 s

The constants are read-only module values. They are passed into the
level functions as arguments, never mutated at runtime.
"""

from dataclasses import dataclass
from enum import Enum

from .errors import InvalidConfiguration


# Time periods (in s) for the Slow and Fast equivalent sound pressure levels
TIMEPERIOD_SLOW = 1.0
TIMEPERIOD_FAST = 0.125

# Reference sound pressure [Pa]
REF_SOUND_PRESSURE = 0.00002


class TimePeriod(float, Enum):
    """Standard integration periods of a sound level meter."""
    FAST = TIMEPERIOD_FAST
    SLOW = TIMEPERIOD_SLOW


@dataclass(frozen=True)
class EngineConfig:
    """
    Configuration of a measurement session.
    
    Attributes:
        reference_pressure: Reference pressure in Pa for the dB conversion
        time_period: Sub-block duration in seconds for the level stream
        apply_window: Also produce a Hann-windowed copy of every block
            for the (external) spectral path
    """
    reference_pressure: float = REF_SOUND_PRESSURE
    time_period: float = TimePeriod.FAST
    apply_window: bool = False
    
    def __post_init__(self):
        """Validate parameters."""
        if not self.reference_pressure > 0:
            raise InvalidConfiguration(
                f"Reference pressure must be positive, got: {self.reference_pressure}"
            )
        if not self.time_period > 0:
            raise InvalidConfiguration(
                f"Time period must be positive, got: {self.time_period}"
            )
