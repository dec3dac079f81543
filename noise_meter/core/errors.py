"""
Error taxonomy of the level engine.

All errors are local, synchronous validation failures. There is no
retryable class because the core performs no I/O of its own.
Every error derives from ValueError so callers that already guard
numeric code with ``except ValueError`` keep working.
"""


class NoiseMeterError(ValueError):
    """Base class for all level engine errors."""


class InvalidInput(NoiseMeterError):
    """Empty or malformed sample data, or a non-positive reference pressure."""


class InvalidConfiguration(NoiseMeterError):
    """Parameters that cannot produce a result (e.g. a zero-length sub-block)."""


class InvalidSample(NoiseMeterError):
    """A non-finite level value offered to a statistics aggregator."""
