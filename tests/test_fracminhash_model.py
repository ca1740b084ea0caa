import pytest

from taxor.fracminhash_model import (
    containment_index_ci,
    expected_containment_index,
    variance_containment_index,
)
from taxor.kmer_model import variance_nmut_kmer


def test_expected_without_errors_is_one():
    assert expected_containment_index(0.0, 20) == 1.0


def test_expected_decreases_with_kmer_size():
    assert expected_containment_index(0.04, 25) < expected_containment_index(0.04, 15)


def test_expected_decreases_with_error_rate():
    assert expected_containment_index(0.1, 20) < expected_containment_index(0.02, 20)


def test_full_scaling_reduces_to_kmer_variance():
    r, k, n = 0.04, 20, 1000
    assert variance_containment_index(r, k, n, 1.0) == pytest.approx(
        variance_nmut_kmer(r, k, n) / n**2
    )


def test_smaller_scaling_increases_variance():
    r, k, n = 0.04, 20, 1000
    assert variance_containment_index(r, k, n, 0.1) > variance_containment_index(
        r, k, n, 0.5
    )


@pytest.mark.parametrize("scaling", [0.01, 0.1, 0.5, 1.0])
def test_ci_symmetric_around_expectation(scaling):
    r, k, n = 0.04, 20, 1000
    low, high = containment_index_ci(r, k, n, scaling, 0.95)
    expected = expected_containment_index(r, k)
    assert low < expected < high
    assert expected - low == pytest.approx(high - expected)


def test_ci_wider_for_smaller_scaling():
    low_a, high_a = containment_index_ci(0.04, 20, 1000, 0.05, 0.95)
    low_b, high_b = containment_index_ci(0.04, 20, 1000, 0.5, 0.95)
    assert high_a - low_a > high_b - low_b


def test_ci_invalid_confidence_raises():
    with pytest.raises(ValueError):
        containment_index_ci(0.04, 20, 1000, 0.1, 1.0)