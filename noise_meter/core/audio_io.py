"""
Recorded Audio Input

Loads a recording as a calibrated SampleBlock. This is the offline
stand-in for live capture: the level engine itself never touches files.

Technical assumptions:
- Files are read with soundfile (libsndfile) as float64 in [-1.0, 1.0]
- calibration_gain converts digital full scale to pascals
  (Pa per 1.0 FS), obtained from a calibrator reading
- Multi-channel files are NOT downmixed; one channel is selected
"""

from pathlib import Path
import logging

import numpy as np
import soundfile as sf

from .errors import InvalidConfiguration, InvalidInput
from .sample_block import SampleBlock

logger = logging.getLogger(__name__)


def load_sample_block(
    file_path: str | Path,
    calibration_gain: float = 1.0,
    channel: int = 0,
) -> SampleBlock:
    """
    Load one channel of an audio file as sound pressure samples.

    Args:
        file_path: Path to a WAV/FLAC file
        calibration_gain: Pa per digital full scale
        channel: Channel index (0 = left/mono)

    Returns:
        SampleBlock in Pa at the file's sample rate

    Raises:
        FileNotFoundError: File does not exist
        InvalidInput: File cannot be decoded, is empty, or lacks the channel
        InvalidConfiguration: calibration_gain <= 0
    """
    path = Path(file_path)

    if not path.exists():
        raise FileNotFoundError(f"Audio file not found: {path}")
    if not calibration_gain > 0:
        raise InvalidConfiguration(
            f"Calibration gain must be positive, got: {calibration_gain}"
        )

    try:
        data, sample_rate = sf.read(path, dtype="float64", always_2d=True)
    except (sf.LibsndfileError, RuntimeError) as e:
        raise InvalidInput(f"Cannot read audio file {path}: {e}") from e

    num_samples, channels = data.shape
    if not 0 <= channel < channels:
        raise InvalidInput(f"File has {channels} channel(s), requested channel {channel}")

    samples = np.ascontiguousarray(data[:, channel]) * calibration_gain

    logger.info(
        "Loaded %s: %d samples at %d Hz, channel %d of %d",
        path.name, num_samples, sample_rate, channel, channels,
    )
    return SampleBlock(samples=samples, sample_rate=sample_rate)
