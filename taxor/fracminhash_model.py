"""Containment index statistics for FracMinHash sketches."""

import math

from taxor.gaussian import normal_cdf_inverse
from taxor.kmer_model import (
    expected_nmut_kmer,
    expected_nmut_kmer_squared,
    variance_nmut_kmer,
)


def expected_containment_index(r: float, kmer_size: int) -> float:
    """Expected containment index for error rate ``r``."""
    return (1.0 - r) ** kmer_size


def variance_containment_index(
    r: float, kmer_size: int, kmer_count: int, scaling_factor: float
) -> float:
    """Variance of the containment index of a scaled sketch."""
    n = float(kmer_count)
    term3 = variance_nmut_kmer(r, kmer_size, kmer_count) / n**2
    term2 = n * expected_nmut_kmer(r, kmer_size, kmer_count) - expected_nmut_kmer_squared(
        r, kmer_size, kmer_count
    )
    denominator = scaling_factor * n**3 * (1.0 - (1.0 - scaling_factor) ** kmer_count) ** 2
    term1 = (1.0 - scaling_factor) / denominator
    return term1 * term2 + term3


def containment_index_ci(
    r: float,
    kmer_size: int,
    kmer_count: int,
    scaling_factor: float,
    confidence: float,
) -> tuple[float, float]:
    """Confidence interval (low, high) of the containment index.

    Bounds are NaN when the computed variance is negative.
    """
    z_alpha = normal_cdf_inverse(1.0 - (1.0 - confidence) / 2.0)
    variance = variance_containment_index(r, kmer_size, kmer_count, scaling_factor)
    spread = z_alpha * math.sqrt(variance) if variance >= 0 else math.nan
    expected = expected_containment_index(r, kmer_size)
    return expected - spread, expected + spread