import pytest

from taxor.syncmer_model import min_syncmer_match_ratio

KMER_SIZES = list(range(12, 31, 2))


def test_perfect_reads_match_fully():
    assert min_syncmer_match_ratio(12, 0.0) == 1.0


def test_table_corner_lowest_accuracy_smallest_k():
    assert min_syncmer_match_ratio(12, 0.2) == 0.552077


def test_table_corner_lowest_accuracy_largest_k():
    assert min_syncmer_match_ratio(30, 0.2) == 0.0252911


@pytest.mark.parametrize("k", KMER_SIZES)
def test_ratio_grows_with_accuracy(k):
    rates = [0.2, 0.15, 0.1, 0.05, 0.01, 0.0]
    ratios = [min_syncmer_match_ratio(k, r) for r in rates]
    assert ratios == sorted(ratios)
    assert ratios[-1] == 1.0


@pytest.mark.parametrize("rate", [0.2, 0.1, 0.04, 0.01])
def test_ratio_shrinks_with_kmer_size(rate):
    ratios = [min_syncmer_match_ratio(k, rate) for k in KMER_SIZES]
    assert ratios == sorted(ratios, reverse=True)
    assert all(0.0 < v <= 1.0 for v in ratios)


@pytest.mark.parametrize("k", [11, 13, 29])
def test_odd_kmer_size_raises(k):
    with pytest.raises(ValueError):
        min_syncmer_match_ratio(k, 0.05)


@pytest.mark.parametrize("k", [8, 10, 32])
def test_kmer_size_out_of_range_raises(k):
    with pytest.raises(ValueError):
        min_syncmer_match_ratio(k, 0.05)


@pytest.mark.parametrize("rate", [-0.01, 0.21, 1.0])
def test_error_rate_out_of_range_raises(rate):
    with pytest.raises(ValueError):
        min_syncmer_match_ratio(20, rate)