"""Statistics of k-mers from a sequence under a simple mutation process."""

import math

from taxor.gaussian import normal_cdf_inverse


def _mutation_probability(r: float, kmer_size: int) -> float:
    return 1.0 - (1.0 - r) ** kmer_size


def expected_nmut_kmer(r: float, kmer_size: int, kmer_count: int) -> float:
    """Expected number of mutated k-mers among ``kmer_count`` k-mers."""
    return kmer_count * _mutation_probability(r, kmer_size)


def variance_nmut_kmer(r: float, kmer_size: int, kmer_count: int) -> float:
    """Variance of the number of mutated k-mers."""
    q = _mutation_probability(r, kmer_size)
    k = float(kmer_size)
    n = float(kmer_count)
    return (
        n * (1.0 - q) * (q * (2.0 * k + (2.0 / r) - 1.0) - 2.0 * k)
        + k * (k - 1.0) * (1.0 - q) ** 2
        + (2.0 * (1.0 - q) / r**2) * ((1.0 + (k - 1.0) * (1.0 - q)) * r - q)
    )


def expected_nmut_kmer_squared(r: float, kmer_size: int, kmer_count: int) -> float:
    """Second moment of the number of mutated k-mers."""
    return expected_nmut_kmer(r, kmer_size, kmer_count) ** 2 + variance_nmut_kmer(
        r, kmer_size, kmer_count
    )


def nmut_kmer_ci(
    r: float, kmer_size: int, kmer_count: int, confidence: float
) -> tuple[int, int]:
    """Confidence interval (low, high) for the number of mutated k-mers.

    The lower bound is clipped at zero.
    """
    q = _mutation_probability(r, kmer_size)
    variance = variance_nmut_kmer(r, kmer_size, kmer_count)
    if variance < 0:
        raise ValueError("variance of mutated k-mer count is negative")
    z = normal_cdf_inverse(1.0 - (1.0 - confidence) / 2.0)
    spread = z * math.sqrt(variance)
    low = max(0, math.floor(kmer_count * q - spread))
    high = max(0, math.ceil(kmer_count * q + spread))
    return low, high