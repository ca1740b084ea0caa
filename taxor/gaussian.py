"""Approximation of the inverse normal cumulative distribution function."""

import math

_C = (2.515517, 0.802853, 0.010328)
_D = (1.432788, 0.189269, 0.001308)


def rational_approximation(t: float) -> float:
    """Abramowitz and Stegun formula 26.2.23 (absolute error below 4.5e-4)."""
    c0, c1, c2 = _C
    d0, d1, d2 = _D
    return t - ((c2 * t + c1) * t + c0) / (((d2 * t + d1) * t + d0) * t + 1.0)


def normal_cdf_inverse(p: float) -> float:
    """Return the z score whose standard normal CDF value is ``p``.

    Raises ValueError unless 0 < p < 1.
    """
    if p <= 0.0 or p >= 1.0:
        raise ValueError(
            f"Invalid input argument ({p}); must be larger than 0 but less than 1."
        )
    if p < 0.5:
        return -rational_approximation(math.sqrt(-2.0 * math.log(p)))
    return rational_approximation(math.sqrt(-2.0 * math.log(1.0 - p)))