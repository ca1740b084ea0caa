"""Syncmer sketching, read error models, match thresholds, xor filters and reference genome handling."""

__version__ = "0.2.0"