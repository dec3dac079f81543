"""
Sample Block

Data carrier between the capture collaborator and the level engine.

Technical assumptions:
- Samples are sound pressures in pascals (already calibrated)
- One block = one mono channel, 1D float array
- The engine consumes a block once and does not retain it
"""

from dataclasses import dataclass
from typing import Iterator
import numpy as np

from .errors import InvalidInput
from .levels import sub_block_length


@dataclass
class SampleBlock:
    """
    Ordered block of pressure samples with its sample rate.

    Attributes:
        samples: Sound pressure in Pa, Shape: (samples,)
        sample_rate: Sample rate in Hz
    """
    samples: np.ndarray
    sample_rate: int

    def __post_init__(self):
        """Validate block invariants."""
        try:
            self.samples = np.asarray(self.samples)
            if not np.issubdtype(self.samples.dtype, np.floating):
                self.samples = self.samples.astype(np.float64)
        except (TypeError, ValueError) as e:
            raise InvalidInput(f"Malformed sample block: {e}") from e
        if self.samples.ndim != 1:
            raise InvalidInput(f"Sample block must be 1D, got shape: {self.samples.shape}")
        if len(self.samples) == 0:
            raise InvalidInput("Sample block must not be empty")
        if not np.all(np.isfinite(self.samples)):
            raise InvalidInput("Sample block contains non-finite values")
        if self.sample_rate <= 0:
            raise InvalidInput(f"Sample rate must be positive, got: {self.sample_rate}")

    @property
    def num_samples(self) -> int:
        return len(self.samples)

    @property
    def duration_seconds(self) -> float:
        return self.num_samples / self.sample_rate

    def sub_blocks(self, time_period: float) -> Iterator[np.ndarray]:
        """
        Iterate over consecutive, non-overlapping sub-blocks.

        The sub-block length is int(time_period * sample_rate).
        A trailing remainder shorter than one sub-block is skipped.

        Yields:
            Views into the sample array (no copies)
        """
        length = sub_block_length(self.sample_rate, time_period)
        for start in range(0, self.num_samples - length + 1, length):
            yield self.samples[start:start + length]
