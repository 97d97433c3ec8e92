"""Data records, a constant field map and MUSIC calibration steps for FRS analysis."""

__version__ = "0.1.0"