import logging
import math

import pytest

from fincalc.domain.types import ErrorCode
from fincalc.engine.tvm import compound_interest
from fincalc.engine.tvm import compute_compound_interest
from fincalc.engine.tvm import compute_future_value
from fincalc.engine.tvm import compute_present_value
from fincalc.engine.tvm import compute_simple_interest
from fincalc.engine.tvm import future_value
from fincalc.engine.tvm import present_value
from fincalc.engine.tvm import simple_interest


class TestFutureValue:
  """Tests for future value."""

  def test_ten_years_at_five_percent(self):
    """FV = 1000 * 1.05^10 = 1628.89"""
    assert future_value(1000.0, 0.05, 10) == pytest.approx(1628.89, abs=0.01)

  def test_zero_periods(self):
    """No growth over zero periods."""
    assert future_value(1000.0, 0.05, 0) == 1000.0

  def test_negative_rate(self):
    """Shrinking value."""
    assert future_value(1000.0, -0.10, 2) == pytest.approx(810.0)

  def test_integral_float_periods(self):
    """5.0 periods is accepted as 5."""
    assert future_value(100.0, 0.10, 5.0) == pytest.approx(161.051)

  def test_negative_periods(self):
    """Negative periods fail with the zero sentinel."""
    result = compute_future_value(1000.0, 0.05, -1)

    assert result.error == ErrorCode.INVALID_PERIODS
    assert result.value == 0.0

  def test_fractional_periods(self):
    """Periods must be whole."""
    assert compute_future_value(1000.0, 0.05,
                                2.5).error == ErrorCode.INVALID_PERIODS

  def test_overflow_saturates(self):
    """Growth beyond float range reports inf instead of raising."""
    assert future_value(1.0, 1e10, 100) == float('inf')

  @pytest.mark.parametrize('rate,expected', [
      (0.05, float('inf')),
      (0.0, 1.0),
      (-0.5, 0.0),
  ])
  def test_periods_beyond_float_range(self, rate, expected):
    """Whole-number periods too large for float saturate instead of raising."""
    result = compute_future_value(1.0, rate, 10**400)

    assert result.ok
    assert result.value == expected


class TestPresentValue:
  """Tests for present value."""

  def test_five_years_at_eight_percent(self):
    """PV = 2000 / 1.08^5 = 2000 / 1.469328 = 1361.17"""
    assert present_value(2000.0, 0.08, 5) == pytest.approx(1361.17, abs=0.01)

  def test_zero_periods(self):
    """No discounting over zero periods."""
    assert present_value(2000.0, 0.08, 0) == 2000.0

  def test_negative_periods(self):
    """Periods checked first."""
    result = compute_present_value(2000.0, -2.0, -1)

    assert result.error == ErrorCode.INVALID_PERIODS
    assert result.value == 0.0

  def test_rate_minus_one(self):
    """Rate of -100% is rejected."""
    result = compute_present_value(2000.0, -1.0, 5)

    assert result.error == ErrorCode.INVALID_RATE
    assert result.value == 0.0

  def test_discount_factor_underflow(self):
    """(1+r)^n underflowing to zero fails instead of dividing by zero."""
    result = compute_present_value(1.0, -1.0 + 1e-12, 40)

    assert result.error == ErrorCode.DEGENERATE_BASE
    assert result.value == 0.0

  def test_periods_beyond_float_range(self):
    assert present_value(1.0, 0.05, 10**400) == 0.0

  @pytest.mark.parametrize('pv,rate,periods', [
      (1000.0, 0.05, 10),
      (2500.0, 0.0, 3),
      (-400.0, 0.12, 7),
      (1.0, -0.5, 4),
  ])
  def test_round_trip_with_future_value(self, pv, rate, periods):
    """Discounting a compounded amount returns the original."""
    fv = future_value(pv, rate, periods)

    assert present_value(fv, rate, periods) == pytest.approx(pv)


class TestSimpleInterest:
  """Tests for simple interest."""

  def test_three_years_at_six_percent(self):
    """I = 5000 * 0.06 * 3 = 900"""
    assert simple_interest(5000.0, 0.06, 3.0) == pytest.approx(900.0)

  def test_zero_inputs_allowed(self):
    """Zero is not negative."""
    assert simple_interest(0.0, 0.0, 0.0) == 0.0

  @pytest.mark.parametrize('principal,rate,years', [
      (-1.0, 0.06, 3.0),
      (5000.0, -0.06, 3.0),
      (5000.0, 0.06, -3.0),
  ])
  def test_negative_inputs(self, principal, rate, years):
    """Any negative input fails with the zero sentinel."""
    result = compute_simple_interest(principal, rate, years)

    assert result.error == ErrorCode.INVALID_PRINCIPAL_OR_RATE
    assert result.value == 0.0


class TestCompoundInterest:
  """Tests for compound interest."""

  def test_monthly_for_five_years(self):
    """A = 1000 * (1 + 0.07/12)^60 = 1417.63"""
    assert compound_interest(1000.0, 0.07, 12,
                             5.0) == pytest.approx(1417.63, abs=0.01)

  def test_annual_matches_future_value(self):
    """Annual compounding over whole years equals FV."""
    assert compound_interest(1000.0, 0.05, 1, 10.0) == pytest.approx(
        future_value(1000.0, 0.05, 10))

  def test_fractional_years(self):
    """Half a year, compounded quarterly: 1000 * 1.02^2."""
    assert compound_interest(1000.0, 0.08, 4, 0.5) == pytest.approx(1040.4)

  def test_returns_total_amount(self):
    """Zero rate returns the principal, not zero interest."""
    assert compound_interest(1000.0, 0.0, 12, 5.0) == 1000.0

  def test_frequency_beyond_float_range(self):
    """Unbounded frequency approaches continuous compounding."""
    result = compute_compound_interest(1000.0, 0.05, 10**400, 2.0)

    assert result.ok
    assert result.value == pytest.approx(1000.0 * math.exp(0.10))

  @pytest.mark.parametrize('principal,rate,frequency,years', [
      (-1.0, 0.07, 12, 5.0),
      (1000.0, -0.07, 12, 5.0),
      (1000.0, 0.07, 0, 5.0),
      (1000.0, 0.07, -12, 5.0),
      (1000.0, 0.07, 12, -5.0),
      (1000.0, 0.07, 2.5, 5.0),
  ])
  def test_invalid_inputs(self, principal, rate, frequency, years):
    """Each constraint violation fails with the zero sentinel."""
    result = compute_compound_interest(principal, rate, frequency, years)

    assert result.error == ErrorCode.INVALID_PRINCIPAL_OR_RATE
    assert result.value == 0.0

  def test_diagnostic_logged(self, caplog):
    """Invalid input writes one error line."""
    with caplog.at_level(logging.WARNING, logger='fincalc'):
      compound_interest(1000.0, 0.07, 0, 5.0)

    assert len(caplog.records) == 1
    assert 'compound interest' in caplog.records[0].getMessage()
