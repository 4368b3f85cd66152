"""
Internal rate of return by Newton-Raphson.

Finds r such that NPV(r) = 0, starting from a caller-supplied guess:

  NPV(r)  = sum CF[t] / (1+r)^t
  NPV'(r) = sum -t * CF[t] / (1+r)^(t+1)
  r_next  = r - NPV(r) / NPV'(r)

Both sums are accumulated in one pass over the cached denominators. The
solver is deliberately simple: a zero denominator, a zero derivative or
running out of iterations ends the search. There is no retry with a
different guess and no bracketing fallback, so series with several sign
changes (several real roots) may converge to any of them or not at all.
"""

import logging

from fincalc.domain.types import CalcResult, CashFlowSeries, ErrorCode, success
from fincalc.engine.common import discount_denominators, has_sign_change
from fincalc.engine.common import reject

logger = logging.getLogger(__name__)

DEFAULT_GUESS = 0.1
DEFAULT_TOLERANCE = 1e-6
DEFAULT_MAX_ITERATIONS = 1000


def solve_irr(
    cash_flows: CashFlowSeries,
    guess: float = DEFAULT_GUESS,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> CalcResult[float]:
  """
  Solve for the internal rate of return of a cash-flow series.

  Args:
    cash_flows: Amounts indexed by period (index 0 = today)
    guess: Starting rate for the iteration
    tolerance: Converged once |NPV| falls below this
    max_iterations: Cap on Newton steps

  Returns:
    CalcResult with the rate on success. On failure the value is NaN and
    error is one of EMPTY_SERIES, NO_SIGN_CHANGE, DEGENERATE_BASE,
    STATIONARY_DERIVATIVE or DID_NOT_CONVERGE.
  """
  if len(cash_flows) == 0:
    return reject(logger, logging.ERROR, ErrorCode.EMPTY_SERIES, float('nan'),
                  'Cash flow series cannot be empty for IRR calculation')

  if not has_sign_change(cash_flows):
    return reject(logger, logging.WARNING, ErrorCode.NO_SIGN_CHANGE,
                  float('nan'),
                  'IRR requires at least one negative and one positive '
                  'cash flow')

  n = len(cash_flows)
  rate = guess
  for i in range(max_iterations):
    denominators = discount_denominators(rate, n)
    if 0.0 in denominators:
      return reject(logger, logging.ERROR, ErrorCode.DEGENERATE_BASE,
                    float('nan'),
                    f'Division by zero at rate {rate!r} during IRR '
                    f'calculation; try a different guess',
                    iterations=i,
                    rate=rate)

    value = 0.0
    derivative = 0.0
    for t, cf in enumerate(cash_flows):
      value += cf / denominators[t]
      derivative -= t * cf / denominators[t + 1]

    if abs(value) < tolerance:
      logger.debug('IRR converged to %.6f after %d iterations', rate, i + 1)
      return success(rate,
                     iterations=i + 1,
                     guess=guess,
                     tolerance=tolerance,
                     npv=value)

    if derivative == 0.0:
      return reject(logger, logging.WARNING, ErrorCode.STATIONARY_DERIVATIVE,
                    float('nan'),
                    f'NPV derivative is zero at rate {rate!r}; IRR cannot '
                    f'converge',
                    iterations=i + 1,
                    rate=rate)

    rate = rate - value / derivative

  return reject(logger, logging.WARNING, ErrorCode.DID_NOT_CONVERGE,
                float('nan'),
                f'IRR did not converge within {max_iterations} iterations',
                iterations=max(max_iterations, 0),
                max_iterations=max_iterations,
                rate=rate)


def irr(
    cash_flows: CashFlowSeries,
    guess: float = DEFAULT_GUESS,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> float:
  """IRR as a plain float; NaN when no rate was found."""
  return solve_irr(cash_flows, guess, tolerance, max_iterations).value
