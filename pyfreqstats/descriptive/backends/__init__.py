"""Computational backends for frequency statistics."""

from pyfreqstats.descriptive.backends.cpu import CPUFrequencyBackend

__all__ = ["CPUFrequencyBackend"]
