import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from taxor.gaussian import normal_cdf_inverse, rational_approximation


def test_known_quantile_within_documented_error():
    assert abs(normal_cdf_inverse(0.975) - 1.959964) < 4.5e-4


def test_median_is_near_zero():
    assert abs(normal_cdf_inverse(0.5)) < 4.5e-4


@pytest.mark.parametrize("p", [0.001, 0.05, 0.2, 0.4, 0.49])
def test_symmetry(p):
    assert normal_cdf_inverse(p) == pytest.approx(-normal_cdf_inverse(1.0 - p))


@pytest.mark.parametrize("p", [0.6, 0.9, 0.99])
def test_upper_half_uses_rational_approximation(p):
    t = math.sqrt(-2.0 * math.log(1.0 - p))
    assert normal_cdf_inverse(p) == rational_approximation(t)


@pytest.mark.parametrize("p", [0.0, 1.0, -0.5, 1.5])
def test_out_of_range_raises(p):
    with pytest.raises(ValueError):
        normal_cdf_inverse(p)


@given(
    st.floats(min_value=1e-6, max_value=1 - 1e-6),
    st.floats(min_value=1e-6, max_value=1 - 1e-6),
)
def test_monotonic(a, b):
    lo, hi = sorted((a, b))
    assert normal_cdf_inverse(lo) <= normal_cdf_inverse(hi) + 1e-12


@given(st.floats(min_value=0.51, max_value=1 - 1e-9))
def test_sign_upper_half(p):
    assert normal_cdf_inverse(p) > 0.0