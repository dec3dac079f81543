"""
Analysis Window

Hann taper applied before the (external) third-octave / spectral path.

Technical assumptions:
- Symmetric Hann window: w[n] = 0.5·(1 - cos(2πn / (N-1)))
- The first sample is NOT tapered (stays unscaled instead of being
  set to zero). This matches the reference meter and is part of the
  tested contract.
- Floating arrays are modified IN PLACE and returned; float32 input stays
  float32. The window itself is always evaluated in float64.
"""

import numpy as np
from scipy import signal as sp_signal


def hann_window(signal: np.ndarray) -> np.ndarray:
    """
    Apply a Hann window to a signal.

    Args:
        signal: Time signal, Shape: (samples,) or (samples, channels).
            Float arrays are tapered in place; any other input is
            converted to a new float64 array first.

    Returns:
        The windowed signal (the same object for float array input)
    """
    if not (isinstance(signal, np.ndarray) and np.issubdtype(signal.dtype, np.floating)):
        signal = np.asarray(signal, dtype=np.float64)

    n = signal.shape[0] if signal.ndim > 0 else 0
    if n < 2:
        return signal

    window = sp_signal.windows.hann(n, sym=True)

    # Index 0 keeps its value
    if signal.ndim == 1:
        signal[1:] *= window[1:]
    else:
        signal[1:] *= window[1:, np.newaxis]

    return signal
