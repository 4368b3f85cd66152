"""
Closed-form time-value-of-money formulas.

Formulas:
  future value:       FV = PV * (1 + r)^n
  present value:      PV = FV / (1 + r)^n
  simple interest:    I  = P * r * t
  compound interest:  A  = P * (1 + r/m)^(m*t)   (total amount, not interest)

Each formula has a compute_* form returning CalcResult and a plain float
form that returns 0.0 when the inputs are rejected.
"""

import logging
import math

from fincalc.domain.types import CalcResult, ErrorCode, success
from fincalc.engine.common import is_integral, reject, safe_pow

logger = logging.getLogger(__name__)


def compute_future_value(present_value: float, rate: float,
                         periods: int) -> CalcResult[float]:
  """
  Future value of a single amount.

  Args:
    present_value: Amount today
    rate: Per-period growth rate (0.05 = 5%)
    periods: Number of whole periods, must be >= 0

  Returns:
    CalcResult with FV, or 0.0 with INVALID_PERIODS
  """
  if periods < 0 or not is_integral(periods):
    return reject(logger, logging.ERROR, ErrorCode.INVALID_PERIODS, 0.0,
                  f'Number of periods must be a non-negative whole number '
                  f'for future value, got {periods!r}',
                  periods=periods)
  fv = present_value * safe_pow(1.0 + rate, int(periods))
  return success(fv, rate=rate, periods=int(periods))


def compute_present_value(future_value: float, rate: float,
                          periods: int) -> CalcResult[float]:
  """
  Present value of a single future amount.

  Args:
    future_value: Amount received after `periods` periods
    rate: Per-period discount rate, must be > -1
    periods: Number of whole periods, must be >= 0

  Returns:
    CalcResult with PV, or 0.0 with INVALID_PERIODS / INVALID_RATE
  """
  if periods < 0 or not is_integral(periods):
    return reject(logger, logging.ERROR, ErrorCode.INVALID_PERIODS, 0.0,
                  f'Number of periods must be a non-negative whole number '
                  f'for present value, got {periods!r}',
                  periods=periods)
  if rate <= -1.0:
    return reject(logger, logging.ERROR, ErrorCode.INVALID_RATE, 0.0,
                  f'Discount rate must be greater than -100%, got '
                  f'{rate * 100:.2f}%',
                  rate=rate)

  denominator = safe_pow(1.0 + rate, int(periods))
  if denominator == 0.0:
    return reject(logger, logging.ERROR, ErrorCode.DEGENERATE_BASE, 0.0,
                  f'Discount factor underflowed to zero at rate {rate!r} '
                  f'over {periods} periods',
                  rate=rate,
                  periods=periods)
  return success(future_value / denominator, rate=rate, periods=int(periods))


def compute_simple_interest(principal: float, rate: float,
                            years: float) -> CalcResult[float]:
  """Simple interest P * r * t; all inputs must be non-negative."""
  if principal < 0 or rate < 0 or years < 0:
    return reject(logger, logging.ERROR, ErrorCode.INVALID_PRINCIPAL_OR_RATE,
                  0.0,
                  'Principal, interest rate, and time cannot be negative for '
                  'simple interest',
                  principal=principal,
                  rate=rate,
                  years=years)
  return success(principal * rate * years)


def compute_compound_interest(principal: float, rate: float, frequency: int,
                              years: float) -> CalcResult[float]:
  """
  Total amount after compounding.

  Args:
    principal: Initial amount, >= 0
    rate: Nominal annual rate, >= 0
    frequency: Compounding periods per year (12 = monthly), positive integer
    years: Time in years, >= 0

  Returns:
    CalcResult with the accumulated amount (principal plus interest), or
    0.0 with INVALID_PRINCIPAL_OR_RATE
  """
  if (principal < 0 or rate < 0 or years < 0 or frequency <= 0 or
      not is_integral(frequency)):
    return reject(logger, logging.ERROR, ErrorCode.INVALID_PRINCIPAL_OR_RATE,
                  0.0,
                  'Invalid input for compound interest; check principal, '
                  'rate, frequency, and time',
                  principal=principal,
                  rate=rate,
                  frequency=frequency,
                  years=years)
  m = int(frequency)
  try:
    base, exponent = 1.0 + rate / m, m * years
  except OverflowError:
    # Frequency beyond float range: continuous compounding, e^(r*t).
    base, exponent = math.e, rate * years
  amount = principal * safe_pow(base, exponent)
  return success(amount, frequency=m)


def future_value(present_value: float, rate: float, periods: int) -> float:
  return compute_future_value(present_value, rate, periods).value


def present_value(future_value: float, rate: float, periods: int) -> float:
  return compute_present_value(future_value, rate, periods).value


def simple_interest(principal: float, rate: float, years: float) -> float:
  return compute_simple_interest(principal, rate, years).value


def compound_interest(principal: float, rate: float, frequency: int,
                      years: float) -> float:
  return compute_compound_interest(principal, rate, frequency, years).value
