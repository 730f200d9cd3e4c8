import pytest

from loan_ledger.services.interest import compute_interest


def test_full_year_interest():
    interest, total = compute_interest(1000, 12, 0.02)
    assert interest == 20.0
    assert total == 1020.0


def test_fractional_year_uses_true_division():
    # 6 months is half a year, not zero years.
    interest, total = compute_interest(1200, 6, 0.02)
    assert interest == 12.0
    assert total == 1212.0


def test_multi_year_interest():
    interest, total = compute_interest(2000, 24, 0.02)
    assert interest == 80.0
    assert total == 2080.0


@pytest.mark.parametrize("duration", [1, 5, 7, 13])
def test_odd_month_terms_are_not_truncated(duration):
    interest, _ = compute_interest(1200, duration, 0.02)
    assert interest == pytest.approx(1200 * 0.02 * duration / 12)
    assert interest > 0


def test_rate_is_a_parameter():
    interest, total = compute_interest(1000, 12, 0.05)
    assert interest == pytest.approx(50.0)
    assert total == pytest.approx(1050.0)
