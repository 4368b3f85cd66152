"""
Net present value.

  NPV(r) = sum_{t=0..n-1} CF[t] / (1+r)^t

Period 0 is discounted by (1+r)^0 = 1 like every other period, so the
initial outlay enters the sum at face value without a special case.
"""

import logging

from fincalc.domain.types import CalcResult, CashFlowSeries, ErrorCode, success
from fincalc.engine.common import discount_denominators, reject

logger = logging.getLogger(__name__)


def compute_npv(rate: float, cash_flows: CashFlowSeries) -> CalcResult[float]:
  """
  Compute the net present value of a cash-flow series.

  Args:
    rate: Per-period discount rate as a fraction, must be > -1
    cash_flows: Amounts indexed by period (index 0 = today)

  Returns:
    CalcResult with the NPV. An empty series yields 0.0. An invalid rate
    yields NaN with error INVALID_RATE.
  """
  if rate <= -1.0:
    return reject(logger, logging.ERROR, ErrorCode.INVALID_RATE, float('nan'),
                  f'Discount rate must be greater than -100% for NPV, got '
                  f'{rate * 100:.2f}%',
                  rate=rate)

  n = len(cash_flows)
  denominators = discount_denominators(rate, n)[:n]
  if 0.0 in denominators:
    return reject(logger, logging.ERROR, ErrorCode.DEGENERATE_BASE,
                  float('nan'),
                  f'Discount factor underflowed to zero at rate {rate!r}',
                  rate=rate)

  total = 0.0
  for cf, den in zip(cash_flows, denominators):
    total += cf / den
  return success(total, rate=rate, periods=n)


def npv(rate: float, cash_flows: CashFlowSeries) -> float:
  """NPV as a plain float; NaN if the rate is invalid."""
  return compute_npv(rate, cash_flows).value
