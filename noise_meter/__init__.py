"""
Noise Meter - acoustic indicator engine of a citizen-science noise meter.
"""

__version__ = "1.0.0"
