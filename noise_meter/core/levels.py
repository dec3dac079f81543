"""
Equivalent Sound Pressure Level (Leq)

Computes calibrated sound levels from pressure samples.

Technical assumptions:
- Input samples are sound pressures in Pa
- Leq = 10·log10(mean square / p_ref²)
- The energy sum starts at the SECOND sample of a block, while the full
  block length is used as divisor. This reproduces the reference meter
  and is part of the tested contract.
- Silence (zero energy) yields -inf dB, not an error
- All functions are pure, they never modify their input
"""

import math

import numpy as np

from .constants import REF_SOUND_PRESSURE, TIMEPERIOD_FAST, TIMEPERIOD_SLOW
from .errors import InvalidConfiguration, InvalidInput


def get_leq(
    signal: np.ndarray,
    reference_pressure: float = REF_SOUND_PRESSURE,
) -> float:
    """
    Compute the equivalent sound pressure level of a block.

    Args:
        signal: Time signal in Pa (1D, float32 or float64)
        reference_pressure: Reference pressure in Pa

    Returns:
        Leq in dB re reference_pressure (-inf for a silent block)

    Raises:
        InvalidInput: Empty or non-finite signal, reference pressure <= 0
    """
    data = _validate_signal(signal)
    _validate_reference_pressure(reference_pressure)
    return _leq(data, reference_pressure)


def get_leq_t(
    signal: np.ndarray,
    sample_rate: int,
    time_period: float,
    reference_pressure: float = REF_SOUND_PRESSURE,
) -> np.ndarray:
    """
    Compute the sequence of Leq values over consecutive time periods.

    The signal is split into non-overlapping sub-blocks of
    int(time_period * sample_rate) samples. A trailing remainder shorter
    than one sub-block is discarded, never padded.

    Args:
        signal: Time signal in Pa
        sample_rate: Sample rate in Hz
        time_period: Duration of one sub-block in seconds
        reference_pressure: Reference pressure in Pa

    Returns:
        Leq values in dB in chronological order,
        Shape: (len(signal) // sub_block_length,)

    Raises:
        InvalidInput: Empty or non-finite signal, reference pressure <= 0
        InvalidConfiguration: Sub-block length would be zero
    """
    data = _validate_signal(signal)
    _validate_reference_pressure(reference_pressure)
    length = sub_block_length(sample_rate, time_period)

    num_sub_blocks = len(data) // length
    leq_t = np.empty(num_sub_blocks, dtype=np.float64)
    for index in range(num_sub_blocks):
        start = index * length
        leq_t[index] = _leq(data[start:start + length], reference_pressure)

    return leq_t


def get_leq_fast(
    signal: np.ndarray,
    sample_rate: int,
    reference_pressure: float = REF_SOUND_PRESSURE,
) -> np.ndarray:
    """Leq sequence with the Fast time period (125 ms)."""
    return get_leq_t(signal, sample_rate, TIMEPERIOD_FAST, reference_pressure)


def get_leq_slow(
    signal: np.ndarray,
    sample_rate: int,
    reference_pressure: float = REF_SOUND_PRESSURE,
) -> np.ndarray:
    """Leq sequence with the Slow time period (1 s)."""
    return get_leq_t(signal, sample_rate, TIMEPERIOD_SLOW, reference_pressure)


def sub_block_length(sample_rate: int, time_period: float) -> int:
    """
    Number of samples per sub-block (truncated, not rounded).

    Raises:
        InvalidConfiguration: Non-positive rate/period or length < 1
    """
    time_period = float(time_period)
    if not (math.isfinite(time_period) and time_period > 0):
        raise InvalidConfiguration(f"Time period must be positive, got: {time_period}")
    if not sample_rate > 0:
        raise InvalidConfiguration(f"Sample rate must be positive, got: {sample_rate}")

    length = int(time_period * sample_rate)
    if length < 1:
        raise InvalidConfiguration(
            f"Time period {time_period} s at {sample_rate} Hz "
            "gives an empty sub-block"
        )
    return length


def _leq(data: np.ndarray, reference_pressure: float) -> float:
    """Leq of a validated float64 block."""
    # Sample 0 is excluded from the sum, the divisor keeps the full length
    tail = data[1:]
    peak = np.max(np.abs(tail)) if len(tail) else 0.0
    if peak == 0:
        return -np.inf
    # Normalised by the peak so that squaring cannot overflow
    mean_square = np.sum((tail / peak) ** 2) / len(data)
    return float(
        10 * np.log10(mean_square)
        + 20 * np.log10(peak)
        - 20 * np.log10(reference_pressure)
    )


def _validate_signal(signal: np.ndarray) -> np.ndarray:
    """Return the signal as 1D float64 array or raise InvalidInput."""
    try:
        data = np.asarray(signal, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"Malformed signal: {e}") from e
    if data.ndim != 1:
        raise InvalidInput(f"Signal must be 1D, got shape: {data.shape}")
    if len(data) == 0:
        raise InvalidInput("Signal must not be empty")
    if not np.all(np.isfinite(data)):
        raise InvalidInput("Signal contains non-finite values")
    return data


def _validate_reference_pressure(reference_pressure: float) -> None:
    if not reference_pressure > 0:
        raise InvalidInput(
            f"Reference pressure must be positive, got: {reference_pressure}"
        )
